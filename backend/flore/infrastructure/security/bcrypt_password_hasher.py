"""bcrypt implementation of the PasswordHasher port."""

import asyncio

import bcrypt

from flore.application.interfaces import PasswordHasher
from flore.domain.exceptions import ConfigurationError

# bcrypt only looks at the first 72 bytes of a password.
_MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    """Salted bcrypt hashing; the CPU-bound work runs in a worker thread."""

    def __init__(self, rounds: int = 10):
        if not 4 <= rounds <= 31:
            raise ConfigurationError(f"bcrypt rounds must be between 4 and 31, got {rounds}")
        self._rounds = rounds

    async def hash(self, password: str) -> str:
        encoded = password.encode("utf-8")
        if len(encoded) > _MAX_PASSWORD_BYTES:
            raise ConfigurationError("Admin password must be at most 72 bytes")
        hashed = await asyncio.to_thread(bcrypt.hashpw, encoded, bcrypt.gensalt(self._rounds))
        return hashed.decode("utf-8")

    async def verify(self, password: str, password_hash: str) -> bool:
        encoded = password.encode("utf-8")
        if len(encoded) > _MAX_PASSWORD_BYTES:
            return False
        try:
            return await asyncio.to_thread(
                bcrypt.checkpw, encoded, password_hash.encode("utf-8")
            )
        except ValueError:
            # Stored value is not a bcrypt hash.
            return False
