"""Application service computing the admin dashboard aggregate."""

import numbers
from collections import Counter
from typing import Any

from flore.application.services.document_store import DocumentStore
from flore.domain.default_document import ANALYTICS, CATEGORIES, ORDERS, PRODUCTS
from flore.domain.entities import DashboardSummary

RECENT_ORDERS_LIMIT = 5


def _order_total(order: dict[str, Any]) -> float:
    total = order.get("total")
    if isinstance(total, numbers.Real) and not isinstance(total, bool):
        return total
    return 0


class DashboardService:
    """Full scan of the order collection on every call — no caching."""

    def __init__(self, store: DocumentStore):
        self._store = store

    def compute_dashboard(self) -> DashboardSummary:
        document = self._store.snapshot()
        orders: list[dict[str, Any]] = [o for o in document[ORDERS] if isinstance(o, dict)]

        by_status = Counter(
            str(order["status"]) for order in orders if order.get("status") is not None
        )

        return DashboardSummary(
            total_revenue=sum(_order_total(order) for order in orders),
            total_orders=len(orders),
            total_products=len(document[PRODUCTS]),
            total_categories=len(document[CATEGORIES]),
            total_analytics_events=len(document[ANALYTICS]),
            orders_by_status=dict(by_status),
            recent_orders=orders[-RECENT_ORDERS_LIMIT:],
        )
