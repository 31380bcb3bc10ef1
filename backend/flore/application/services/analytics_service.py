"""Application service for analytics ingestion (public, append-only)."""

import logging
from collections.abc import Mapping
from typing import Any

from flore.application.services.document_store import DocumentStore
from flore.domain.default_document import ANALYTICS
from flore.domain.entities import AnalyticsEvent
from flore.domain.exceptions import DomainValidationError

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Records client-submitted events and applies the retention bound.

    ``max_events`` caps the collection; the oldest events are dropped in the
    same mutation that appends the new one. ``0`` disables the cap.
    """

    def __init__(self, store: DocumentStore, max_events: int = 0):
        if max_events < 0:
            raise ValueError("max_events must be >= 0")
        self._store = store
        self._max_events = max_events

    async def record_event(self, payload: Mapping[str, Any]) -> AnalyticsEvent:
        if not isinstance(payload, Mapping):
            raise DomainValidationError("Analytics payload must be an object")
        event = AnalyticsEvent(payload=dict(payload))
        document = event.to_document()

        def _append(doc: dict[str, Any]) -> int:
            events = doc[ANALYTICS]
            events.append(document)
            overflow = len(events) - self._max_events if self._max_events else 0
            if overflow > 0:
                del events[:overflow]
            return max(overflow, 0)

        dropped = await self._store.mutate(_append)
        if dropped:
            logger.debug("Analytics retention dropped %d old event(s)", dropped)
        return event

    def list_events(self) -> list[dict[str, Any]]:
        return self._store.read(ANALYTICS)
