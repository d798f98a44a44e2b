"""
bcrypt password hashing for user accounts.
"""

import logging

import bcrypt

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """
    Salted bcrypt hashes with a configurable work factor.

    Tests lower ``rounds`` to the minimum to keep account fixtures fast.
    """

    DEFAULT_ROUNDS = 12
    MIN_ROUNDS = 4
    MAX_ROUNDS = 31

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        if not (self.MIN_ROUNDS <= rounds <= self.MAX_ROUNDS):
            raise ValueError(
                f"bcrypt rounds must be in [{self.MIN_ROUNDS}, {self.MAX_ROUNDS}], got {rounds}"
            )
        self.rounds = rounds

    @staticmethod
    def _encode(password: str) -> bytes:
        if not isinstance(password, str):
            raise TypeError("Password must be a string")
        encoded = password.encode("utf-8")
        if not encoded:
            raise ValueError("Password cannot be empty")
        if len(encoded) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password cannot exceed {BCRYPT_MAX_BYTES} bytes")
        return encoded

    def hash(self, password: str) -> str:
        """
        Hash ``password`` with a fresh salt.

        Raises:
            ValueError: empty password or one longer than 72 bytes
            TypeError: password is not a string
        """
        hashed = bcrypt.hashpw(self._encode(password), bcrypt.gensalt(rounds=self.rounds))
        return hashed.decode("utf-8")

    def verify(self, password: str, hashed_password: str) -> bool:
        """True when ``password`` matches ``hashed_password``; never raises."""
        if not hashed_password:
            return False
        try:
            return bcrypt.checkpw(self._encode(password), hashed_password.encode("utf-8"))
        except (TypeError, ValueError) as e:
            logger.warning(f"Password check rejected: {e}")
            return False
