"""Password hashing helpers."""

from dataclasses import dataclass

import bcrypt

# bcrypt only considers the first 72 bytes of input.
MAX_PASSWORD_BYTES = 72


@dataclass
class PasswordHasher:
    """Salted bcrypt hashing."""

    rounds: int = 10

    def hash(self, password: str) -> str:
        """Hash a password with a fresh salt."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        """Return true when the password matches the stored hash."""
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            return False
