"""Abstract interface (port) for one-way password hashing."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Salted, deliberately slow password hashing."""

    @abstractmethod
    async def hash(self, password: str) -> str:
        """Derive a storable hash from a plaintext password."""
        ...

    @abstractmethod
    async def verify(self, password: str, password_hash: str) -> bool:
        """Return True if ``password`` matches ``password_hash``."""
        ...
