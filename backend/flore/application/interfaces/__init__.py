from .document_backend import DocumentBackend
from .password_hasher import PasswordHasher
from .token_service import TokenService

__all__ = [
    "DocumentBackend",
    "PasswordHasher",
    "TokenService",
]
