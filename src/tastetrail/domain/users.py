"""Domain models for users and authentication."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

DEFAULT_ROLE = "user"


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    name: str
    email: str
    password_hash: str
    role: str = DEFAULT_ROLE
    profile_picture: str = ""
    created_at: datetime | None = None


@dataclass(frozen=True)
class TokenClaims:
    """Identity claims carried by a bearer token."""

    user_id: UUID
    role: str


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful registration or login."""

    token: str
    user: UserRecord
