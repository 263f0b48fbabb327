"""Registration, login and the bearer-token guard."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, Request, status

from tastetrail.api.models import LoginRequest, RegisterRequest
from tastetrail.api.serializers import serialize_user, serialize_user_summary
from tastetrail.domain.errors import AuthenticationError, InvalidTokenError

if TYPE_CHECKING:
    from tastetrail.containers import AppContainer

router = APIRouter(tags=["auth"])


def require_user_id(
    request: Request, authorization: str | None = Header(default=None)
) -> UUID:
    """Resolve the caller's identity from an ``Authorization: Bearer`` header."""
    if not authorization:
        raise AuthenticationError("No token")
    parts = authorization.split()
    if len(parts) < 2:  # noqa: PLR2004
        raise InvalidTokenError("Invalid token")
    container: AppContainer = request.app.state.container
    return container.token_service.decode(parts[1]).user_id


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, request: Request) -> dict[str, object]:
    """Create an account and return a token."""
    container: AppContainer = request.app.state.container
    result = container.user_service.register(
        name=payload.name,
        email=payload.email,
        password=payload.password,
        profile_picture=payload.profile_picture,
    )
    return {"token": result.token, "user": serialize_user_summary(result.user)}


@router.post("/login")
def login(payload: LoginRequest, request: Request) -> dict[str, object]:
    """Exchange credentials for a token."""
    container: AppContainer = request.app.state.container
    result = container.user_service.login(payload.email, payload.password)
    return {
        "token": result.token,
        "id": str(result.user.id),
        "user": serialize_user_summary(result.user),
    }


@router.get("/users/me")
def current_user(
    request: Request, user_id: UUID = Depends(require_user_id)
) -> dict[str, object]:
    """Return the authenticated user's profile."""
    container: AppContainer = request.app.state.container
    return serialize_user(container.user_service.get_profile(user_id))
