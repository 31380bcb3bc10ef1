"""Dashboard aggregate computed from the order collection."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class DashboardSummary:
    total_revenue: float = 0
    total_orders: int = 0
    total_products: int = 0
    total_categories: int = 0
    total_analytics_events: int = 0
    orders_by_status: dict[str, int] = field(default_factory=dict)
    recent_orders: list[dict[str, Any]] = field(default_factory=list)
