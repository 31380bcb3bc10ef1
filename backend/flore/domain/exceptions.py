"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class DomainValidationError(Exception):
    """Raised when a payload would put malformed data into the document."""


class PersistenceFailure(Exception):
    """Raised when the durable document cannot be read or written."""


class ConfigurationError(Exception):
    """Raised when a required secret (admin password, signing key) is missing."""


# ── Authentication ──────────────────────────────────────────────────


class AuthenticationError(Exception):
    """Base class for the gateway's rejections."""


class Unauthenticated(AuthenticationError):
    """No access token was presented."""

    def __init__(self) -> None:
        super().__init__("No access token presented")


class InvalidOrExpiredToken(AuthenticationError):
    """The presented token has a bad signature, a bad claim or is expired."""

    def __init__(self, reason: str = "Invalid or expired token"):
        self.reason = reason
        super().__init__(reason)


class InvalidCredential(AuthenticationError):
    """The supplied admin password did not match.

    The message is deliberately generic.
    """

    def __init__(self) -> None:
        super().__init__("Senha incorreta")
