"""Authentication endpoints and the bearer-token dependency."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from fit_tracker.api.models import (
    SessionResponse,
    SignInRequest,
    SignUpRequest,
    SignUpResponse,
)
from fit_tracker.domain.auth import AuthSession, Identity
from fit_tracker.services.auth import AuthenticationError, AuthService

if TYPE_CHECKING:
    from fit_tracker.containers import AppContainer

_logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _get_auth_service(request: Request) -> AuthService:
    container: AppContainer = request.app.state.container
    return container.auth_service


def bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Return the token from an `Authorization: Bearer` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def require_identity(
    token: str | None = Depends(bearer_token),
    auth_service: AuthService = Depends(_get_auth_service),
) -> Identity:
    """Resolve the caller's identity or reject the request."""
    try:
        return auth_service.authenticate(token)
    except AuthenticationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


@router.post("/sign-up", status_code=status.HTTP_201_CREATED)
async def sign_up(
    payload: SignUpRequest,
    auth_service: AuthService = Depends(_get_auth_service),
) -> SignUpResponse:
    """Register a new account."""
    try:
        result = auth_service.sign_up(
            payload.email, payload.password, payload.full_name
        )
    except AuthenticationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    session = (
        SessionResponse.from_session(result.session) if result.session else None
    )
    return SignUpResponse(
        user_id=result.identity.user_id,
        email=result.identity.email,
        session=session,
    )


@router.post("/sign-in")
async def sign_in(
    payload: SignInRequest,
    auth_service: AuthService = Depends(_get_auth_service),
) -> SessionResponse:
    """Exchange email and password for session tokens."""
    try:
        session = auth_service.sign_in(payload.email, payload.password)
    except AuthenticationError as exc:
        _logger.info("Sign-in rejected: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        ) from exc
    return SessionResponse.from_session(session)


@router.post("/sign-out")
async def sign_out(
    identity: Identity = Depends(require_identity),
    token: str | None = Depends(bearer_token),
    auth_service: AuthService = Depends(_get_auth_service),
) -> dict[str, str]:
    """Revoke the caller's session."""
    session = AuthSession(
        identity=identity,
        access_token=token or "",
        refresh_token=None,
        expires_at=None,
    )
    try:
        auth_service.sign_out(session)
    except AuthenticationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)
        ) from exc
    return {"status": "ok"}
