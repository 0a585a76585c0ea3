"""Domain models for authentication."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class Identity:
    """An authenticated user."""

    user_id: UUID
    email: str | None


@dataclass(frozen=True)
class AuthSession:
    """Tokens issued for an identity at sign-in."""

    identity: Identity
    access_token: str
    refresh_token: str | None
    expires_at: datetime | None


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a sign-up or sign-in call."""

    identity: Identity
    session: AuthSession | None
