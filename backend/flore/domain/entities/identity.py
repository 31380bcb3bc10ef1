"""Authenticated identity carried by an access token."""

from dataclasses import dataclass
from datetime import datetime

ADMIN_USERNAME = "admin"


@dataclass(frozen=True)
class Identity:
    """The only identity the gateway knows about is the administrator."""

    username: str
    expires_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.username == ADMIN_USERNAME
