"""
Password hashing.

Wraps bcrypt so the rest of the code never touches raw hashes directly.
Both operations are CPU-bound; async callers should dispatch them to the
threadpool.
"""

from typing import Optional

import bcrypt

from config.settings import settings

# bcrypt only reads the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


def password_fits(raw_password: str) -> bool:
    """True if the UTF-8 encoded password is within bcrypt's input limit."""
    return len(raw_password.encode("utf-8")) <= MAX_PASSWORD_BYTES


class CredentialStore:
    """Salted one-way hashing and verification of passwords."""

    def __init__(self, rounds: Optional[int] = None):
        self.rounds = settings.BCRYPT_ROUNDS if rounds is None else rounds
        self._dummy_hash = None

    def hash(self, raw_password: str) -> str:
        """
        Hash a password with a fresh salt.

        Raises:
            ValueError: If the password exceeds MAX_PASSWORD_BYTES
        """
        if not password_fits(raw_password):
            raise ValueError(f"Password longer than {MAX_PASSWORD_BYTES} bytes")
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(raw_password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, raw_password: str, hashed_password: str) -> bool:
        """
        Check a password against a stored hash.

        Returns False on mismatch, on a password that could never have been
        hashed (over MAX_PASSWORD_BYTES), and on a malformed stored hash.
        """
        if not password_fits(raw_password):
            return False
        try:
            return bcrypt.checkpw(
                raw_password.encode("utf-8"),
                hashed_password.encode("utf-8"),
            )
        except ValueError:
            return False

    def dummy_hash(self) -> str:
        """Hash of a throwaway password, for equalizing work on unknown accounts."""
        if self._dummy_hash is None:
            self._dummy_hash = self.hash("timing-equalizer")
        return self._dummy_hash
