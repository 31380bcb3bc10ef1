from .bcrypt_password_hasher import BcryptPasswordHasher
from .jwt_token_service import JwtTokenService

__all__ = ["BcryptPasswordHasher", "JwtTokenService"]
