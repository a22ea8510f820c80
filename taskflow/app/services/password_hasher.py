"""
Password Hasher

bcrypt hashing for user credentials.
"""

import bcrypt

BCRYPT_ROUNDS = 12
BCRYPT_MAX_BYTES = 72

_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(BCRYPT_ROUNDS))


class PasswordHasher:
    """
    Salted, slow one-way password hashing.

    Each hash embeds its own random salt. Inputs are truncated to bcrypt's
    72-byte limit, which newer bcrypt releases enforce with a ValueError.
    """

    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(_encode(password), bcrypt.gensalt(self.rounds)).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Constant-time check. A malformed digest is a mismatch, not an error."""
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            return False

    def burn_time(self) -> None:
        """Spend one verification's worth of CPU (unknown-user login path)."""
        bcrypt.checkpw(b"not_the_dummy_password", _DUMMY_HASH)


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]
