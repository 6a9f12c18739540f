"""Bcrypt Password Hasher Implementation"""

import bcrypt
from src.app.services.password_hasher import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):
    """
    bcrypt implementation of PasswordHasher

    Digests embed their own salt and work factor, so verify() does not
    depend on the rounds configured at hashing time.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, plain: str) -> str:
        return bcrypt.hashpw(
            plain.encode("utf-8"),
            bcrypt.gensalt(rounds=self.rounds)
        ).decode("utf-8")

    def verify(self, plain: str, digest: str) -> bool:
        try:
            return bcrypt.checkpw(plain.encode("utf-8"), digest.encode("utf-8"))
        except ValueError:
            # Malformed digest
            return False
