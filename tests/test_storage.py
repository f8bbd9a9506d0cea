import json

import pytest

from placement_portal.core.config import Settings
from placement_portal.core.storage import (
    FileStorage,
    MemoryStorage,
    RedisStorage,
    build_storage,
)


async def test_memory_storage_get_put_delete():
    storage = MemoryStorage()
    assert await storage.get("cs_jobs") is None

    await storage.put("cs_jobs", "[]")
    assert await storage.get("cs_jobs") == "[]"

    await storage.delete("cs_jobs")
    await storage.delete("cs_jobs")
    assert await storage.get("cs_jobs") is None


async def test_file_storage_round_trip(tmp_path):
    storage = FileStorage(str(tmp_path / "data"))
    assert await storage.get("cs_mentorships") is None

    payload = json.dumps([{"id": 1}])
    await storage.put("cs_mentorships", payload)

    assert (tmp_path / "data" / "cs_mentorships.json").read_text() == payload
    assert await FileStorage(str(tmp_path / "data")).get("cs_mentorships") == payload


async def test_file_storage_delete_is_idempotent(tmp_path):
    storage = FileStorage(str(tmp_path))
    await storage.put("k", "1")
    await storage.delete("k")
    await storage.delete("k")
    assert await storage.get("k") is None


async def test_file_storage_sanitizes_keys(tmp_path):
    storage = FileStorage(str(tmp_path))
    await storage.put("../escape/key", "x")

    assert list(tmp_path.iterdir()) == [tmp_path / ".._escape_key.json"]
    assert await storage.get("../escape/key") == "x"


@pytest.mark.parametrize(
    "backend,expected",
    [("memory", MemoryStorage), ("file", FileStorage), ("redis", RedisStorage)],
)
def test_build_storage_picks_backend(backend, expected, tmp_path):
    config = Settings(storage_backend=backend, storage_dir=str(tmp_path))
    assert isinstance(build_storage(config), expected)


def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError):
        Settings(storage_backend="sqlite")
