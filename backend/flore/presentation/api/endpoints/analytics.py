"""Public analytics ingestion endpoint — open to unauthenticated clients."""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from flore.application.schemas import AnalyticsAck
from flore.application.services import AnalyticsService
from flore.infrastructure.dependencies import get_analytics_service

router = APIRouter(tags=["Analytics"])


@router.post("/analytics", response_model=AnalyticsAck, status_code=status.HTTP_201_CREATED)
async def record_event(
    payload: dict[str, Any] | None = Body(None),
    service: AnalyticsService = Depends(get_analytics_service),
) -> AnalyticsAck:
    """Append a client event. Any ``id``/``timestamp`` in the payload is replaced.

    A request without a body records a bare, server-stamped event.
    """
    await service.record_event(payload or {})
    return AnalyticsAck()
