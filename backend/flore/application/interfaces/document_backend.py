"""Abstract storage interface (port) for the JSON document."""

from abc import ABC, abstractmethod
from typing import Any


class DocumentBackend(ABC):
    """Port for durable storage of the whole document — implemented in the infrastructure layer."""

    @abstractmethod
    async def read(self) -> dict[str, Any] | None:
        """Return the stored document, or None if nothing has been stored yet.

        Raises PersistenceFailure if the storage exists but cannot be read
        or does not hold a JSON object.
        """
        ...

    @abstractmethod
    async def write(self, document: dict[str, Any]) -> None:
        """Replace the stored document in full. Raises PersistenceFailure."""
        ...
