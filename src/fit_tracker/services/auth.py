"""Authentication service over an external identity provider."""

import logging
from dataclasses import dataclass
from typing import Protocol

from fit_tracker.domain.auth import AuthResult, AuthSession, Identity

_logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    """Raised when credentials or tokens are rejected."""


class IdentityProvider(Protocol):
    """Interface for the hosted identity provider."""

    def sign_up(self, email: str, password: str, full_name: str | None) -> AuthResult:
        """Register a user and return the identity and optional session."""

    def sign_in(self, email: str, password: str) -> AuthResult:
        """Authenticate with email and password."""

    def sign_out(self, access_token: str) -> None:
        """Revoke the session behind an access token."""

    def get_identity(self, access_token: str) -> Identity | None:
        """Return the identity for an access token, if it is valid."""


@dataclass
class AuthService:
    """Application service for sign-up, sign-in and token checks."""

    provider: IdentityProvider

    def sign_up(
        self, email: str, password: str, full_name: str | None = None
    ) -> AuthResult:
        """Register a new user."""
        result = self.provider.sign_up(email.strip(), password, full_name)
        _logger.info("User signed up: user_id=%s", result.identity.user_id)
        return result

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Sign in and return the session tokens."""
        result = self.provider.sign_in(email.strip(), password)
        if result.session is None:
            raise AuthenticationError("Sign-in did not return a session")
        return result.session

    def sign_out(self, session: AuthSession) -> None:
        """End a session."""
        self.provider.sign_out(session.access_token)

    def authenticate(self, access_token: str | None) -> Identity:
        """Resolve an access token to an identity or raise."""
        if not access_token:
            raise AuthenticationError("Missing access token")
        identity = self.provider.get_identity(access_token)
        if identity is None:
            raise AuthenticationError("Invalid access token")
        return identity
