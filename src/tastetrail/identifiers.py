"""Helpers for parsing client-supplied identifiers."""

from uuid import UUID

from tastetrail.domain.errors import BadRequestError


def parse_id(raw: object, label: str) -> UUID:
    """Parse an entity id or raise a bad request naming the entity."""
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw))
    except ValueError as exc:
        raise BadRequestError(f"Invalid {label} ID") from exc
