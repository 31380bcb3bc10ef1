"""Administrative endpoints — every route requires a valid admin bearer token."""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from flore.application.schemas import (
    CategoryCreate,
    CategoryUpdate,
    DashboardResponse,
    ProductCreate,
    ProductUpdate,
)
from flore.application.services import (
    AnalyticsService,
    CatalogService,
    DashboardService,
    OrderService,
    SettingsService,
)
from flore.domain.exceptions import (
    DomainValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
)
from flore.infrastructure.dependencies import (
    get_analytics_service,
    get_catalog_service,
    get_dashboard_service,
    get_order_service,
    get_settings_service,
    require_admin,
)

router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(require_admin)])


def _http_error(e: Exception) -> HTTPException:
    """Map a domain exception onto the matching HTTP error."""
    if isinstance(e, EntityNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if isinstance(e, DuplicateEntityError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


# ── Products ─────────────────────────────────────────────────────────

@router.get("/products")
async def list_products(
    service: CatalogService = Depends(get_catalog_service),
) -> list[dict[str, Any]]:
    """All products, including inactive ones."""
    return service.list_products(include_inactive=True)


@router.get("/products/{product_id}")
async def get_product(
    product_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> dict[str, Any]:
    try:
        return service.get_product(product_id, include_inactive=True)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/products", status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate,
    service: CatalogService = Depends(get_catalog_service),
) -> dict[str, Any]:
    try:
        return await service.create_product(data)
    except (DuplicateEntityError, DomainValidationError) as e:
        raise _http_error(e)


@router.put("/products/{product_id}")
async def update_product(
    product_id: str,
    data: ProductUpdate,
    service: CatalogService = Depends(get_catalog_service),
) -> dict[str, Any]:
    try:
        return await service.update_product(product_id, data)
    except (EntityNotFoundError, DomainValidationError) as e:
        raise _http_error(e)


@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> None:
    try:
        await service.delete_product(product_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


# ── Categories ───────────────────────────────────────────────────────

@router.get("/categories")
async def list_categories(
    service: CatalogService = Depends(get_catalog_service),
) -> list[dict[str, Any]]:
    return service.list_categories()


@router.post("/categories", status_code=status.HTTP_201_CREATED)
async def create_category(
    data: CategoryCreate,
    service: CatalogService = Depends(get_catalog_service),
) -> dict[str, Any]:
    try:
        return await service.create_category(data)
    except (DuplicateEntityError, DomainValidationError) as e:
        raise _http_error(e)


@router.put("/categories/{category_id}")
async def update_category(
    category_id: str,
    data: CategoryUpdate,
    service: CatalogService = Depends(get_catalog_service),
) -> dict[str, Any]:
    try:
        return await service.update_category(category_id, data)
    except (EntityNotFoundError, DomainValidationError) as e:
        raise _http_error(e)


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> None:
    """Delete a category. Products that reference it keep their category id."""
    try:
        await service.delete_category(category_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


# ── Settings ─────────────────────────────────────────────────────────

@router.post("/settings")
async def update_settings(
    patch: dict[str, Any] = Body(...),
    service: SettingsService = Depends(get_settings_service),
) -> dict[str, Any]:
    """Shallow-merge the given fields into the site settings."""
    try:
        return await service.update_settings(patch)
    except DomainValidationError as e:
        raise _http_error(e)


# ── Orders & analytics ───────────────────────────────────────────────

@router.get("/orders")
async def list_orders(
    service: OrderService = Depends(get_order_service),
) -> list[dict[str, Any]]:
    return service.list_orders()


@router.get("/orders/{order_id}")
async def get_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),
) -> dict[str, Any]:
    try:
        return service.get_order(order_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/analytics")
async def list_analytics_events(
    service: AnalyticsService = Depends(get_analytics_service),
) -> list[dict[str, Any]]:
    return service.list_events()


@router.get("/analytics/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardResponse:
    """Revenue, counts and the five most recent orders, computed on demand."""
    summary = service.compute_dashboard()
    return DashboardResponse.model_validate(asdict(summary))
