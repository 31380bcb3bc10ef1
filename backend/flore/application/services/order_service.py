"""Application service for reading orders (admin only)."""

from typing import Any

from flore.application.services.document_store import DocumentStore
from flore.domain.default_document import ORDERS
from flore.domain.exceptions import EntityNotFoundError


class OrderService:
    def __init__(self, store: DocumentStore):
        self._store = store

    def list_orders(self) -> list[dict[str, Any]]:
        return self._store.read(ORDERS)

    def get_order(self, order_id: str) -> dict[str, Any]:
        for order in self.list_orders():
            if isinstance(order, dict) and str(order.get("id")) == order_id:
                return order
        raise EntityNotFoundError("Order", order_id)
