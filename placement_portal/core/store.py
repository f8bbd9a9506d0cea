"""
The portal store: one Collection per entity over a key/value medium.

A PortalStore is built once per process (see main.lifespan) and passed to
repositories the way a database session would be. Each collection is a
single JSON array under one key; every mutation rewrites the whole array.

Writers are serialized per collection with an asyncio.Lock, so the
read-modify-write in Collection.transaction() stays atomic even when the
medium awaits real I/O between the read and the write.
"""
import asyncio
import json
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Iterable, List, Optional

from placement_portal.core.config import Settings
from placement_portal.core.fixtures import FixtureLoader
from placement_portal.core.latency import Latency
from placement_portal.core.logging import get_logger
from placement_portal.core.storage import KeyValueStorage, MemoryStorage, build_storage

logger = get_logger(__name__)

COLLECTIONS = (
    "jobs",
    "applications",
    "companies",
    "users",
    "mentorships",
    "referrals",
)

Rows = List[Dict[str, Any]]


class Collection:
    """Records of one entity, persisted under a single storage key."""

    def __init__(
        self,
        name: str,
        key: str,
        storage: KeyValueStorage,
        fixtures: FixtureLoader,
    ):
        self.name = name
        self.key = key
        self.storage = storage
        self.fixtures = fixtures
        self.lock = asyncio.Lock()

    async def read(self) -> Rows:
        """Current records; seeds the key from fixtures on first access."""
        raw = await self.storage.get(self.key)
        if raw is not None:
            try:
                return self._decode(raw)
            except ValueError:
                pass  # handled under the lock below
        async with self.lock:
            return await self._load()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Rows]:
        """
        Yield the records for in-place mutation and write them back on exit.

        Nothing is written if the block raises.
        """
        async with self.lock:
            rows = await self._load()
            yield rows
            await self._write(rows)

    async def seed(self) -> Rows:
        """Replace the stored records with the fixture data."""
        async with self.lock:
            return await self._seed()

    async def _load(self) -> Rows:
        raw = await self.storage.get(self.key)
        if raw is None:
            return await self._seed()
        try:
            return self._decode(raw)
        except ValueError as e:
            logger.warning("collection_corrupt", collection=self.name, key=self.key, reason=str(e))
            return await self._seed()

    async def _seed(self) -> Rows:
        rows = self.fixtures.load(self.name)
        await self._write(rows)
        logger.info("collection_seeded", collection=self.name, key=self.key, records=len(rows))
        return rows

    async def _write(self, rows: Rows) -> None:
        await self.storage.put(self.key, json.dumps(rows))

    @staticmethod
    def _decode(raw: str) -> Rows:
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError("stored collection is not a JSON array")
        return data


class PortalStore:
    """
    Owns every collection of the portal.

    Collections named in `persistent` live in `storage` (the configured
    durable medium); the others live in `session_storage`, a memory
    medium that ends with the process.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        fixtures: Optional[FixtureLoader] = None,
        latency: Optional[Latency] = None,
        persistent: Iterable[str] = ("mentorships",),
        key_prefix: str = "cs_",
        session_storage: Optional[KeyValueStorage] = None,
    ):
        self.storage = storage
        self.session_storage = session_storage or MemoryStorage()
        self.fixtures = fixtures or FixtureLoader()
        self.latency = latency or Latency()
        self.persistent = frozenset(persistent)

        unknown = self.persistent - set(COLLECTIONS)
        if unknown:
            raise ValueError(f"Unknown collections: {', '.join(sorted(unknown))}")

        self._collections = {
            name: Collection(
                name,
                f"{key_prefix}{name}",
                self.storage if name in self.persistent else self.session_storage,
                self.fixtures,
            )
            for name in COLLECTIONS
        }

    @classmethod
    def from_settings(cls, config: Settings) -> "PortalStore":
        return cls(
            build_storage(config),
            fixtures=FixtureLoader(config.fixtures_dir),
            latency=Latency(config.latency_scale),
            persistent=config.persistent_collections,
            key_prefix=config.storage_key_prefix,
        )

    def collection(self, name: str) -> Collection:
        return self._collections[name]

    async def initialize(self) -> None:
        """Load (and seed where absent) every collection."""
        for collection in self._collections.values():
            await collection.read()

    async def reset(self) -> None:
        """Re-seed every collection from fixtures, discarding changes."""
        for collection in self._collections.values():
            await collection.seed()

    async def close(self) -> None:
        await self.storage.close()
        await self.session_storage.close()
