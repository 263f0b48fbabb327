"""Error taxonomy shared by services and the HTTP layer."""

from http import HTTPStatus


class TasteTrailError(Exception):
    """Base class for errors reported to API clients."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(TasteTrailError):
    """Malformed id, missing required field or invalid enum value."""

    status_code = HTTPStatus.BAD_REQUEST


class AlreadyExistsError(BadRequestError):
    """Duplicate email or duplicate save, reported as a bad request."""


class InvalidCredentialsError(BadRequestError):
    """Password did not match the stored hash."""


class AuthenticationError(TasteTrailError):
    """Missing bearer credential."""

    status_code = HTTPStatus.UNAUTHORIZED


class InvalidTokenError(AuthenticationError):
    """Bearer credential failed verification."""


class NotFoundError(TasteTrailError):
    """Entity is absent or not owned by the caller."""

    status_code = HTTPStatus.NOT_FOUND


class ConflictError(TasteTrailError):
    """Entity clashes with existing state."""

    status_code = HTTPStatus.CONFLICT


class DuplicateRecordError(Exception):
    """Raised by adapters when the store rejects a unique-key violation."""
