"""Shared fixtures: a fully wired app backed by a JSON file in tmp_path."""

import pytest
from httpx import ASGITransport, AsyncClient

from flore.config import Settings
from flore.main import create_app

from tests.fakes import ADMIN_PASSWORD


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        data_file=str(tmp_path / "data" / "db.json"),
        admin_password=ADMIN_PASSWORD,
        jwt_secret="integration-test-secret-0123456789abcdef",
        bcrypt_rounds=4,
        analytics_max_events=100,
    )


@pytest.fixture
async def app(settings):
    app = create_app(settings)
    async with app.router.lifespan_context(app):
        yield app


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def admin_headers(client) -> dict[str, str]:
    response = await client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
