"""Abstract interface (port) for signed, time-limited access tokens."""

from abc import ABC, abstractmethod

from flore.domain.entities import Identity


class TokenService(ABC):
    """Issues and validates bearer tokens."""

    @abstractmethod
    def issue(self, username: str) -> str:
        """Sign a token for ``username`` with an absolute expiry."""
        ...

    @abstractmethod
    def decode(self, token: str) -> Identity:
        """Validate signature and expiry. Raises InvalidOrExpiredToken."""
        ...
