"""Top-level API router — aggregates all /api endpoint routers."""

from fastapi import APIRouter

from flore.presentation.api.endpoints.auth import router as auth_router
from flore.presentation.api.endpoints.catalog import router as catalog_router
from flore.presentation.api.endpoints.analytics import router as analytics_router
from flore.presentation.api.endpoints.admin import router as admin_router

router = APIRouter(prefix="/api")
router.include_router(auth_router)
router.include_router(catalog_router)
router.include_router(analytics_router)
router.include_router(admin_router)
