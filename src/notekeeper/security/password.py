"""Password hashing utilities."""

from passlib.context import CryptContext


class PasswordHasher:
    """One-way salted password hashing.

    Uses bcrypt_sha256 to avoid bcrypt's 72-byte truncation issue on long
    passwords: the secret is pre-hashed with SHA-256 before bcrypt runs.
    """

    def __init__(self, rounds: int = 12):
        if rounds < 10:
            raise ValueError("bcrypt cost must be at least 10 rounds")
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt_sha256"],
            deprecated="auto",
            bcrypt_sha256__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """Hash a password."""
        return self._context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        try:
            return self._context.verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            # unrecognized or corrupt digest
            return False
