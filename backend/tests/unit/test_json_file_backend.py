"""Unit tests for the JSON file backend."""

import json

import pytest

from flore.application.services import DocumentStore
from flore.domain.exceptions import PersistenceFailure
from flore.infrastructure.storage import JsonFileBackend
from tests.fakes import default_factory


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "db.json"


async def test_missing_file_reads_as_none(data_file):
    assert await JsonFileBackend(data_file).read() is None


@pytest.mark.parametrize("content", ["", "   \n", "null"])
async def test_blank_file_reads_as_none(data_file, content):
    data_file.parent.mkdir(parents=True)
    data_file.write_text(content, encoding="utf-8")

    assert await JsonFileBackend(data_file).read() is None


async def test_write_creates_parent_directory(data_file):
    backend = JsonFileBackend(data_file)

    await backend.write({"settings": {"siteName": "Florê"}})

    assert data_file.exists()
    assert list(data_file.parent.iterdir()) == [data_file]
    assert await backend.read() == {"settings": {"siteName": "Florê"}}


async def test_write_keeps_non_ascii_and_indents(data_file):
    await JsonFileBackend(data_file).write({"name": "Buquê"})

    text = data_file.read_text(encoding="utf-8")
    assert "Buquê" in text
    assert text == json.dumps({"name": "Buquê"}, indent=2, ensure_ascii=False)


async def test_corrupt_json_is_a_persistence_failure(data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text("{not json", encoding="utf-8")

    with pytest.raises(PersistenceFailure):
        await JsonFileBackend(data_file).read()


async def test_invalid_utf8_is_a_persistence_failure(data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_bytes(b'{"products": ["\xff\xfe"]}')

    with pytest.raises(PersistenceFailure):
        await JsonFileBackend(data_file).read()


async def test_non_object_document_is_a_persistence_failure(data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text("[1, 2, 3]", encoding="utf-8")

    with pytest.raises(PersistenceFailure):
        await JsonFileBackend(data_file).read()


async def test_unwritable_location_is_a_persistence_failure(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")

    with pytest.raises(PersistenceFailure):
        await JsonFileBackend(blocker / "db.json").write({"a": 1})


async def test_bootstrap_twice_yields_identical_bytes(data_file):
    await DocumentStore(JsonFileBackend(data_file), default_factory()).load()
    first = data_file.read_bytes()

    await DocumentStore(JsonFileBackend(data_file), default_factory()).load()

    assert data_file.read_bytes() == first


async def test_bootstrap_is_deterministic_for_a_fixed_hash(tmp_path):
    a = tmp_path / "a" / "db.json"
    b = tmp_path / "b" / "db.json"

    await DocumentStore(JsonFileBackend(a), default_factory()).load()
    await DocumentStore(JsonFileBackend(b), default_factory()).load()

    assert a.read_bytes() == b.read_bytes()
