"""Password hashing domain service."""

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError

from .base import Service


class PasswordService(Service):
    """Hashes and checks local account passwords with argon2id."""

    def __init__(self, hasher: PasswordHasher | None = None) -> None:
        self._hasher = hasher or PasswordHasher(type=Type.ID)

    def hash(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify(self, password_hash: str, password: str) -> bool:
        """Check a password against a stored hash.

        Args:
            password_hash: Encoded argon2 hash
            password: Plain text candidate

        Returns:
            True if the password matches, False otherwise
        """
        try:
            return self._hasher.verify(password_hash, password)
        except (InvalidHashError, VerificationError):
            return False
