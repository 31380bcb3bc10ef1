"""PyJWT implementation of the TokenService port."""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import jwt

from flore.application.interfaces import TokenService
from flore.domain.entities import Identity
from flore.domain.exceptions import ConfigurationError, InvalidOrExpiredToken

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JwtTokenService(TokenService):
    """HMAC-signed JWTs carrying a ``username`` claim and an absolute ``exp``.

    No refresh and no revocation: once issued, a token is accepted until
    ``exp`` passes.
    """

    def __init__(
        self,
        secret: str,
        ttl: timedelta = timedelta(hours=8),
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = _utcnow,
    ):
        if not secret:
            raise ConfigurationError("JWT_SECRET is not configured")
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm
        self._clock = clock

    def issue(self, username: str) -> str:
        issued_at = self._clock()
        claims = {
            "username": username,
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> Identity:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "username"]},
            )
        except jwt.ExpiredSignatureError as exc:
            logger.debug("Token rejected: expired")
            raise InvalidOrExpiredToken("Token expired") from exc
        except jwt.InvalidTokenError as exc:
            logger.debug("Token rejected: %s", exc)
            raise InvalidOrExpiredToken() from exc

        return Identity(
            username=str(claims["username"]),
            expires_at=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
        )
