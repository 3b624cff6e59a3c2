"""
Password Hasher Implementation
bcrypt with a fixed work factor; every hash gets a fresh salt
"""
import bcrypt
from loguru import logger

from core.config import settings
from core.exceptions import CryptoException
from application.services.auth.interfaces import IPasswordHasher

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt-based password hasher"""

    def __init__(self, rounds: int = None):
        self.rounds = rounds or settings.BCRYPT_ROUNDS

    def hash_password(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """
        Check a plain password against a stored hash

        A mismatch returns False. A hash bcrypt cannot parse raises
        CryptoException.
        """
        try:
            return bcrypt.checkpw(
                _encode(plain_password),
                hashed_password.encode("utf-8")
            )
        except (ValueError, TypeError) as e:
            logger.error(f"Malformed password hash: {e}")
            raise CryptoException("Stored password hash is malformed") from e
