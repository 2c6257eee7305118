"""bcrypt password hashing."""

import bcrypt

from ..domain.errors import InvalidArgumentError

# bcrypt only looks at the first 72 bytes of the secret.
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """Hashes user passwords with bcrypt."""

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """
        Hash a plain text password. An empty password is hashed like any other.

        Raises:
            InvalidArgumentError: If the password is longer than bcrypt accepts
        """
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise InvalidArgumentError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes long"
            )
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")
