"""
Key/value storage media for the store's collections.

Every collection is kept as one JSON document under one key, the same shape
browser local storage gives a client-side app. The medium is chosen at
startup and injected into the store:

  - MemoryStorage  process lifetime; also the default for tests
  - FileStorage    one <key>.json file per key in a directory
  - RedisStorage   one Redis string per key (shared across workers)

Values cross the boundary as text, so callers never share mutable
state with the medium.
"""
import asyncio
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

import redis.asyncio as redis

from placement_portal.core.config import Settings


class KeyValueStorage(ABC):
    """Minimal async get/put/delete contract over string values."""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the stored text, or None when the key is absent."""

    @abstractmethod
    async def put(self, key: str, value: str) -> None:
        """Store text under key, replacing any previous value."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove key. Silently succeeds if the key doesn't exist."""

    async def close(self) -> None:
        """Release connections held by the medium."""


class MemoryStorage(KeyValueStorage):
    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def put(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)


class FileStorage(KeyValueStorage):
    """
    Directory of JSON files, one per key.

    Writes go to a temp file then replace the target, so a crash mid-write
    leaves the previous collection intact. Blocking file I/O runs in a
    worker thread.
    """

    def __init__(self, directory: str) -> None:
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        safe = re.sub(r"[^\w\-.]", "_", key, flags=re.ASCII)
        return self.directory / f"{safe}.json"

    async def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        return await asyncio.to_thread(self._read, path)

    async def put(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._write, self._path(key), value)

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self._path(key).unlink, missing_ok=True)

    @staticmethod
    def _read(path: Path) -> Optional[str]:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def _write(self, path: Path, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(path)


class RedisStorage(KeyValueStorage):
    def __init__(self, url: str) -> None:
        self.url = url
        self._client = redis.from_url(url, decode_responses=True)

    async def get(self, key: str) -> Optional[str]:
        return await self._client.get(key)

    async def put(self, key: str, value: str) -> None:
        await self._client.set(key, value)

    async def delete(self, key: str) -> None:
        await self._client.delete(key)

    async def ping(self) -> bool:
        return bool(await self._client.ping())

    async def close(self) -> None:
        await self._client.aclose()


def build_storage(config: Settings) -> KeyValueStorage:
    """Create the durable medium named by settings.storage_backend."""
    if config.storage_backend == "file":
        return FileStorage(config.storage_dir)
    if config.storage_backend == "redis":
        return RedisStorage(config.redis_url)
    return MemoryStorage()
