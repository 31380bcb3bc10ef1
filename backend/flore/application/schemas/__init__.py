from .analytics import AnalyticsAck, DashboardResponse
from .auth import LoginRequest, TokenResponse
from .catalog import CategoryCreate, CategoryUpdate, ProductCreate, ProductUpdate

__all__ = [
    "AnalyticsAck",
    "DashboardResponse",
    "LoginRequest",
    "TokenResponse",
    "CategoryCreate",
    "CategoryUpdate",
    "ProductCreate",
    "ProductUpdate",
]
