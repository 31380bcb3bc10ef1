from .analytics_event import AnalyticsEvent
from .catalog import Category, Product
from .dashboard import DashboardSummary
from .identity import ADMIN_USERNAME, Identity

__all__ = [
    "ADMIN_USERNAME",
    "AnalyticsEvent",
    "Category",
    "DashboardSummary",
    "Identity",
    "Product",
]
