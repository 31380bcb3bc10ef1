"""Integration tests for the administrative surface and its auth gate."""

import asyncio
import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from flore.domain.exceptions import PersistenceFailure
from flore.infrastructure.security import JwtTokenService
from flore.main import create_app

ADMIN_ROUTES = [
    ("GET", "/api/admin/products"),
    ("GET", "/api/admin/categories"),
    ("POST", "/api/admin/settings"),
    ("GET", "/api/admin/orders"),
    ("GET", "/api/admin/analytics"),
    ("GET", "/api/admin/analytics/dashboard"),
    ("POST", "/api/admin/products"),
    ("DELETE", "/api/admin/categories/buques"),
]


def _stored(settings) -> dict:
    return json.loads(Path(settings.data_file).read_text(encoding="utf-8"))


# ── Auth gate ────────────────────────────────────────────────────────

@pytest.mark.parametrize("method,path", ADMIN_ROUTES)
async def test_missing_token_is_401(client, method, path):
    response = await client.request(method, path, json={})
    assert response.status_code == 401


@pytest.mark.parametrize("method,path", ADMIN_ROUTES)
async def test_bad_token_is_403(client, method, path):
    response = await client.request(method, path, json={}, headers={"Authorization": "Bearer nonsense"})
    assert response.status_code == 403


async def test_expired_token_is_403(client, settings):
    issued = datetime.now(timezone.utc) - timedelta(hours=8, minutes=1)
    stale = JwtTokenService(secret=settings.jwt_secret, clock=lambda: issued).issue("admin")

    response = await client.get("/api/admin/products", headers={"Authorization": f"Bearer {stale}"})

    assert response.status_code == 403


async def test_non_bearer_scheme_is_401(client):
    response = await client.get("/api/admin/products", headers={"Authorization": "Basic YWRtaW46eA=="})
    assert response.status_code == 401


# ── Settings ─────────────────────────────────────────────────────────

async def test_settings_patch_is_merged_and_durable(client, admin_headers, settings):
    response = await client.post("/api/admin/settings", json={"whatsapp": "5511988887777"}, headers=admin_headers)

    assert response.status_code == 200
    merged = response.json()
    assert merged["whatsapp"] == "5511988887777"
    assert merged["siteName"] == "Florê"
    assert _stored(settings)["settings"] == merged
    assert (await client.get("/api/settings")).json() == merged


# ── Products & categories ────────────────────────────────────────────

async def test_product_crud(client, admin_headers, settings):
    created = await client.post(
        "/api/admin/products",
        json={"name": "Orquídea", "price": 150, "category": "arranjos", "imageUrl": "https://x/o.jpg"},
        headers=admin_headers,
    )
    assert created.status_code == 201
    product = created.json()
    assert product["imageUrl"] == "https://x/o.jpg"
    assert product["views"] == 0

    path = f"/api/admin/products/{product['id']}"
    updated = await client.put(path, json={"featured": True, "tags": ["luxo"]}, headers=admin_headers)
    assert updated.json()["featured"] is True
    assert updated.json()["name"] == "Orquídea"

    assert (await client.get(path, headers=admin_headers)).json() == updated.json()
    assert _stored(settings)["products"][-1] == updated.json()

    assert (await client.delete(path, headers=admin_headers)).status_code == 204
    assert (await client.get(path, headers=admin_headers)).status_code == 404
    assert (await client.delete(path, headers=admin_headers)).status_code == 404


async def test_product_validation(client, admin_headers):
    negative = await client.post("/api/admin/products", json={"name": "X", "price": -5}, headers=admin_headers)
    assert negative.status_code == 422

    duplicate = await client.post("/api/admin/products", json={"id": "1", "name": "X", "price": 5}, headers=admin_headers)
    assert duplicate.status_code == 409

    bad_update = await client.put("/api/admin/products/1", json={"views": -1}, headers=admin_headers)
    assert bad_update.status_code == 422


async def test_category_crud(client, admin_headers):
    created = await client.post(
        "/api/admin/categories", json={"id": "cestas", "name": "Cestas"}, headers=admin_headers
    )
    assert created.status_code == 201

    updated = await client.put(
        "/api/admin/categories/cestas", json={"description": "Cestas de café da manhã"}, headers=admin_headers
    )
    assert updated.json()["description"] == "Cestas de café da manhã"

    public = await client.get("/api/categories")
    assert [c["id"] for c in public.json()] == ["buques", "arranjos", "cestas"]

    assert (await client.delete("/api/admin/categories/cestas", headers=admin_headers)).status_code == 204
    assert (await client.put("/api/admin/categories/cestas", json={}, headers=admin_headers)).status_code == 404


# ── Orders & dashboard ───────────────────────────────────────────────

async def test_dashboard_over_orders(app, client, admin_headers):
    await app.state.store.mutate(
        lambda doc: doc["orders"].extend(
            [
                {"id": "a", "total": 10, "status": "paid"},
                {"id": "b", "total": 20, "status": "paid"},
                {"id": "c", "total": 30, "status": "pending"},
            ]
        )
    )

    response = await client.get("/api/admin/analytics/dashboard", headers=admin_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["totalRevenue"] == 60
    assert data["totalOrders"] == 3
    assert data["totalProducts"] == 2
    assert data["ordersByStatus"] == {"paid": 2, "pending": 1}
    assert [o["id"] for o in data["recentOrders"]] == ["a", "b", "c"]

    orders = await client.get("/api/admin/orders", headers=admin_headers)
    assert len(orders.json()) == 3
    assert (await client.get("/api/admin/orders/b", headers=admin_headers)).json()["total"] == 20
    assert (await client.get("/api/admin/orders/zzz", headers=admin_headers)).status_code == 404


# ── Persistence & concurrency ────────────────────────────────────────

async def test_concurrent_analytics_posts_are_all_recorded(client, settings):
    responses = await asyncio.gather(
        *(client.post("/api/analytics", json={"n": n}) for n in range(20))
    )

    assert all(r.status_code == 201 for r in responses)
    stored = _stored(settings)["analytics"]
    assert sorted(e["n"] for e in stored) == list(range(20))
    assert len({e["id"] for e in stored}) == 20


async def test_write_failure_is_generic_500(app, client, admin_headers, monkeypatch):
    async def _fail(document):
        raise PersistenceFailure("/secret/path/db.json: read-only file system")

    monkeypatch.setattr(app.state.store._backend, "write", _fail)

    response = await client.post("/api/admin/settings", json={"siteName": "X"}, headers=admin_headers)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}
    assert app.state.store.diverged is True


async def test_state_survives_restart(settings, client, admin_headers):
    await client.post("/api/admin/settings", json={"tagline": "Novo"}, headers=admin_headers)
    await client.post("/api/analytics", json={"event": "click"})

    restarted = create_app(settings)
    async with restarted.router.lifespan_context(restarted):
        store = restarted.state.store
        assert store.read("settings")["tagline"] == "Novo"
        assert [e["event"] for e in store.read("analytics")] == ["click"]


async def test_corrupt_store_aborts_startup(settings):
    path = Path(settings.data_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("{broken", encoding="utf-8")

    app = create_app(settings)
    with pytest.raises(PersistenceFailure):
        async with app.router.lifespan_context(app):
            pass


async def test_bootstrap_without_admin_password_aborts_startup(settings):
    from flore.domain.exceptions import ConfigurationError

    app = create_app(settings.model_copy(update={"admin_password": ""}))
    with pytest.raises(ConfigurationError):
        async with app.router.lifespan_context(app):
            pass
