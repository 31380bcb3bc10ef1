"""Application service (use case) for the admin authentication gateway."""

import logging

from flore.application.interfaces import PasswordHasher, TokenService
from flore.application.services.document_store import DocumentStore
from flore.domain.default_document import ADMIN
from flore.domain.entities import ADMIN_USERNAME, Identity
from flore.domain.exceptions import (
    InvalidCredential,
    InvalidOrExpiredToken,
    Unauthenticated,
)

logger = logging.getLogger(__name__)


class AuthService:
    """Verifies the single admin credential and validates access tokens.

    There is no revocation: a token stays valid until its absolute expiry,
    even if the stored password hash changes in the meantime.
    """

    def __init__(
        self,
        store: DocumentStore,
        hasher: PasswordHasher,
        tokens: TokenService,
    ):
        self._store = store
        self._hasher = hasher
        self._tokens = tokens

    async def verify_credential(self, password: str) -> bool:
        """Compare ``password`` against the stored admin hash."""
        password_hash = self._store.read(ADMIN).get("passwordHash")
        if not isinstance(password_hash, str) or not password_hash:
            logger.error("No admin password hash stored — login is impossible")
            return False
        return await self._hasher.verify(password, password_hash)

    async def login(self, password: str) -> str:
        """Return a signed admin token, or raise InvalidCredential."""
        if not await self.verify_credential(password):
            logger.info("Admin login rejected")
            raise InvalidCredential()
        logger.info("Admin login succeeded")
        return self._tokens.issue(ADMIN_USERNAME)

    def authorize(self, token: str | None) -> Identity:
        """Validate a bearer token and return the identity it carries."""
        if not token:
            raise Unauthenticated()
        identity = self._tokens.decode(token)
        if not identity.is_admin:
            logger.debug("Token rejected: unexpected identity %r", identity.username)
            raise InvalidOrExpiredToken("Token does not carry the admin identity")
        return identity
