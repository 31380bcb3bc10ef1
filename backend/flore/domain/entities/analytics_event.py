"""Analytics event entity — client payload stamped by the server."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def _utc_iso() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class AnalyticsEvent:
    """An append-only analytics record.

    ``id`` and ``timestamp`` are always generated here; any values the
    client put in the payload under those keys are overwritten.
    """

    payload: dict[str, Any]
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(default_factory=_utc_iso)

    def to_document(self) -> dict[str, Any]:
        return {**self.payload, "timestamp": self.timestamp, "id": self.id}
