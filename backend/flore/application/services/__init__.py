from .document_store import DocumentStore
from .auth_service import AuthService
from .catalog_service import CatalogService
from .settings_service import SettingsService
from .analytics_service import AnalyticsService
from .order_service import OrderService
from .dashboard_service import DashboardService

__all__ = [
    "DocumentStore",
    "AuthService",
    "CatalogService",
    "SettingsService",
    "AnalyticsService",
    "OrderService",
    "DashboardService",
]
