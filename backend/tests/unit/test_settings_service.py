"""Unit tests for the SettingsService shallow merge."""

import pytest

from flore.application.services import DocumentStore, SettingsService
from flore.domain.exceptions import DomainValidationError
from tests.fakes import InMemoryDocumentBackend, default_factory, make_document


@pytest.fixture
def backend() -> InMemoryDocumentBackend:
    return InMemoryDocumentBackend(make_document(settings={"siteName": "Florê", "whatsapp": "X"}))


@pytest.fixture
async def service(backend) -> SettingsService:
    store = DocumentStore(backend, default_factory())
    await store.load()
    return SettingsService(store)


async def test_unpatched_fields_survive(service):
    result = await service.update_settings({"whatsapp": "Y"})
    assert result == {"siteName": "Florê", "whatsapp": "Y"}


async def test_update_is_durable_across_reload(service, backend):
    await service.update_settings({"heroTitle": "Novo título"})

    reloaded = DocumentStore(backend, default_factory())
    await reloaded.load()

    assert reloaded.read("settings") == {"siteName": "Florê", "whatsapp": "X", "heroTitle": "Novo título"}


async def test_empty_patch_changes_nothing(service):
    assert await service.update_settings({}) == {"siteName": "Florê", "whatsapp": "X"}


async def test_non_object_patch_is_rejected(service, backend):
    with pytest.raises(DomainValidationError):
        await service.update_settings(["whatsapp", "Y"])
    assert backend.writes == 0


async def test_read_settings_returns_a_copy(service):
    settings = service.read_settings()
    settings["siteName"] = "mutated"
    assert service.read_settings()["siteName"] == "Florê"
