"""User registration, login and profile lookups."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from tastetrail.domain.errors import (
    AlreadyExistsError,
    DuplicateRecordError,
    InvalidCredentialsError,
    NotFoundError,
)
from tastetrail.domain.users import AuthResult, UserRecord
from tastetrail.services.passwords import PasswordHasher
from tastetrail.services.tokens import TokenService

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user with an exact email match, if present."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        """Create and return a new user record."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository
    token_service: TokenService
    password_hasher: PasswordHasher

    def register(
        self, name: str, email: str, password: str, profile_picture: str = ""
    ) -> AuthResult:
        """Create an account and issue a token for it."""
        if self.repository.get_by_email(email):
            raise AlreadyExistsError("Email already exists")
        try:
            user = self.repository.create_user(
                {
                    "name": name,
                    "email": email,
                    "password": self.password_hasher.hash(password),
                    "profile_picture": profile_picture,
                }
            )
        except DuplicateRecordError as exc:
            raise AlreadyExistsError("Email already exists") from exc
        logger.info("Registered user", extra={"user_id": str(user.id)})
        return AuthResult(token=self._issue(user), user=user)

    def login(self, email: str, password: str) -> AuthResult:
        """Check credentials and issue a token."""
        user = self.repository.get_by_email(email)
        if user is None:
            raise NotFoundError("User not found")
        if not self.password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError("Invalid credentials")
        logger.info("Logged in user", extra={"user_id": str(user.id)})
        return AuthResult(token=self._issue(user), user=user)

    def get_profile(self, user_id: UUID) -> UserRecord:
        """Return the user behind an authenticated identity."""
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def _issue(self, user: UserRecord) -> str:
        return self.token_service.issue(user.id, user.role)
