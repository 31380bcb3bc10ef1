"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from datetime import timedelta

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from flore.config import Settings, get_settings
from flore.application.interfaces import PasswordHasher
from flore.application.services import AuthService, DocumentStore
from flore.domain.default_document import build_default_document
from flore.domain.exceptions import ConfigurationError, PersistenceFailure
from flore.infrastructure.logging.log_config import setup_logging
from flore.infrastructure.security import BcryptPasswordHasher, JwtTokenService
from flore.infrastructure.storage import JsonFileBackend
from flore.presentation.api.endpoints.health import router as health_router
from flore.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def _default_document_factory(settings: Settings, hasher: PasswordHasher):
    """Build the bootstrap callback used when the data file is empty.

    ADMIN_PASSWORD is only needed here; once a document exists the stored
    hash is authoritative.
    """

    async def _factory() -> dict:
        if not settings.admin_password:
            raise ConfigurationError(
                "ADMIN_PASSWORD must be set to initialise an empty data file"
            )
        password_hash = await hasher.hash(settings.admin_password)
        return build_default_document(password_hash)

    return _factory


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — load (or bootstrap) the store and wire the auth gateway."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    # 1. Signing key must exist before any token can be issued
    tokens = JwtTokenService(
        secret=settings.jwt_secret,
        ttl=timedelta(hours=settings.token_ttl_hours),
        algorithm=settings.jwt_algorithm,
    )
    hasher = BcryptPasswordHasher(rounds=settings.bcrypt_rounds)

    # 2. Load the document; an unloadable store must not serve traffic
    backend = JsonFileBackend(settings.data_file)
    store = DocumentStore(backend, _default_document_factory(settings, hasher))
    try:
        await store.load()
    except (PersistenceFailure, ConfigurationError):
        logger.critical("Could not load document store from %s", backend.path)
        raise

    app.state.store = store
    app.state.auth_service = AuthService(store, hasher, tokens)
    logger.info("🚀 %s ready — data file %s", settings.app_title, backend.path)

    yield


async def _persistence_failure_handler(request: Request, exc: PersistenceFailure) -> JSONResponse:
    logger.error("Persistence failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal Server Error"},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PersistenceFailure, _persistence_failure_handler)

    # Mount routes
    app.include_router(health_router)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "flore.main:app",
        host=_settings.host,
        port=_settings.port,
        reload=_settings.app_env == "development",
    )
