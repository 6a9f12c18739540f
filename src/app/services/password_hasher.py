"""Password Hashing Service Interface

One-way password hashing used for registration and authentication.
"""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """
    Service interface for password hashing

    Implementations must never return the plaintext as the digest.
    """

    @abstractmethod
    def hash(self, plain: str) -> str:
        """
        Hash a plaintext password

        Args:
            plain: Plaintext password

        Returns:
            Digest suitable for storage
        """
        pass

    @abstractmethod
    def verify(self, plain: str, digest: str) -> bool:
        """
        Check a plaintext password against a stored digest

        Returns:
            True if the password matches, False otherwise
        """
        pass
