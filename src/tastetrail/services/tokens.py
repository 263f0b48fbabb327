"""Bearer token issuance and verification."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import JWTError, jwt

from tastetrail.domain.errors import InvalidTokenError
from tastetrail.domain.users import TokenClaims


@dataclass
class TokenService:
    """Issues signed, time-bounded identity tokens."""

    secret: str
    algorithm: str = "HS256"
    expires_in: timedelta = timedelta(days=1)

    def issue(self, user_id: UUID, role: str) -> str:
        """Create a signed token embedding the user's id and role."""
        now = datetime.now(tz=UTC)
        claims = {
            "id": str(user_id),
            "role": role,
            "iat": now,
            "exp": now + self.expires_in,
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> TokenClaims:
        """Verify a token and return its claims.

        Expired, tampered and malformed tokens all raise ``InvalidTokenError``.
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as exc:
            raise InvalidTokenError("Invalid token") from exc
        try:
            user_id = UUID(str(payload["id"]))
        except (KeyError, ValueError) as exc:
            raise InvalidTokenError("Invalid token") from exc
        return TokenClaims(user_id=user_id, role=str(payload.get("role", "")))
