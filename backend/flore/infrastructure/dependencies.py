"""FastAPI dependency injection — wires infrastructure to application layer.

The store and the auth gateway are built once in the application lifespan
and kept on ``app.state``; services are cheap wrappers built per request.
"""

import logging
from collections.abc import AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from flore.config import Settings
from flore.application.services import (
    AnalyticsService,
    AuthService,
    CatalogService,
    DashboardService,
    DocumentStore,
    OrderService,
    SettingsService,
)
from flore.domain.entities import Identity
from flore.domain.exceptions import InvalidOrExpiredToken, Unauthenticated

logger = logging.getLogger(__name__)

_bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_document_store(request: Request) -> DocumentStore:
    return request.app.state.store


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


async def get_catalog_service(
    store: DocumentStore = Depends(get_document_store),
) -> AsyncGenerator[CatalogService, None]:
    """Provides a CatalogService bound to the shared store."""
    yield CatalogService(store)


async def get_settings_service(
    store: DocumentStore = Depends(get_document_store),
) -> AsyncGenerator[SettingsService, None]:
    yield SettingsService(store)


async def get_analytics_service(
    store: DocumentStore = Depends(get_document_store),
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[AnalyticsService, None]:
    """Provides an AnalyticsService with the configured retention bound."""
    yield AnalyticsService(store, max_events=settings.analytics_max_events)


async def get_order_service(
    store: DocumentStore = Depends(get_document_store),
) -> AsyncGenerator[OrderService, None]:
    yield OrderService(store)


async def get_dashboard_service(
    store: DocumentStore = Depends(get_document_store),
) -> AsyncGenerator[DashboardService, None]:
    yield DashboardService(store)


def require_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
    auth: AuthService = Depends(get_auth_service),
) -> Identity:
    """Gate for every administrative route.

    401 when no bearer token is presented, 403 when the token is invalid or
    expired, so clients can tell the two apart.
    """
    token = credentials.credentials if credentials else None
    try:
        return auth.authorize(token)
    except Unauthenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except InvalidOrExpiredToken as e:
        logger.info("Rejected admin request: %s", e.reason)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid or expired token")
