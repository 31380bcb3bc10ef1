"""Pydantic DTOs for analytics ingestion and the admin dashboard."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AnalyticsAck(BaseModel):
    """Minimal acknowledgement returned to the client."""

    status: str = "ok"


class DashboardResponse(BaseModel):
    """Schema returned to the admin dashboard (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    total_revenue: float
    total_orders: int
    total_products: int
    total_categories: int
    total_analytics_events: int
    orders_by_status: dict[str, int]
    recent_orders: list[dict[str, Any]]
