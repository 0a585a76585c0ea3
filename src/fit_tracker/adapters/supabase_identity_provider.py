"""Supabase Auth identity provider."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import AuthError, Client, create_client
from supabase.client import ClientOptions

from fit_tracker.domain.auth import AuthResult, AuthSession, Identity
from fit_tracker.services.auth import AuthenticationError, IdentityProvider


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Identity provider backed by Supabase Auth.

    Each call gets a fresh client so no session state is shared between users.
    """

    client_factory: Callable[[], Client]

    @classmethod
    def create(cls, supabase_url: str, anon_key: str) -> "SupabaseIdentityProvider":
        """Create a provider that builds stateless anon-key clients."""

        def factory() -> Client:
            return create_client(
                supabase_url,
                anon_key,
                options=ClientOptions(persist_session=False, auto_refresh_token=False),
            )

        return cls(client_factory=factory)

    def sign_up(self, email: str, password: str, full_name: str | None) -> AuthResult:
        """Register a user with optional display name metadata."""
        client = self.client_factory()
        try:
            response = client.auth.sign_up(
                {
                    "email": email,
                    "password": password,
                    "options": {"data": {"full_name": full_name}},
                }
            )
        except AuthError as exc:
            raise AuthenticationError(str(exc)) from exc
        if response.user is None:
            raise AuthenticationError("Sign-up did not return a user")
        return _to_result(response.user, response.session)

    def sign_in(self, email: str, password: str) -> AuthResult:
        """Sign in with email and password."""
        client = self.client_factory()
        try:
            response = client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as exc:
            raise AuthenticationError(str(exc)) from exc
        if response.user is None:
            raise AuthenticationError("Sign-in did not return a user")
        return _to_result(response.user, response.session)

    def sign_out(self, access_token: str) -> None:
        """Revoke all refresh tokens for the token's user."""
        client = self.client_factory()
        try:
            client.auth.admin.sign_out(access_token)
        except AuthError as exc:
            raise AuthenticationError(str(exc)) from exc

    def get_identity(self, access_token: str) -> Identity | None:
        """Return the identity for a valid access token."""
        client = self.client_factory()
        try:
            response = client.auth.get_user(access_token)
        except AuthError:
            return None
        if response is None or response.user is None:
            return None
        return _to_identity(response.user)


def _to_identity(user: object) -> Identity:
    return Identity(user_id=UUID(str(user.id)), email=getattr(user, "email", None))


def _to_result(user: object, session: object | None) -> AuthResult:
    identity = _to_identity(user)
    if session is None:
        return AuthResult(identity=identity, session=None)
    expires_at_raw = getattr(session, "expires_at", None)
    expires_at = (
        datetime.fromtimestamp(expires_at_raw, tz=UTC) if expires_at_raw else None
    )
    return AuthResult(
        identity=identity,
        session=AuthSession(
            identity=identity,
            access_token=session.access_token,
            refresh_token=getattr(session, "refresh_token", None),
            expires_at=expires_at,
        ),
    )
