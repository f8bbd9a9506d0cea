"""
Shared fixtures: a store over in-memory media, seeded from the bundled
fixtures, with simulated latency switched off.
"""
import asyncio

import pytest

from placement_portal.core.latency import Latency
from placement_portal.core.storage import MemoryStorage
from placement_portal.core.store import PortalStore


class SlowStorage(MemoryStorage):
    """Yields to the event loop on every call, like a networked medium."""

    async def get(self, key):
        await asyncio.sleep(0)
        return await super().get(key)

    async def put(self, key, value):
        await asyncio.sleep(0)
        await super().put(key, value)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
async def store(storage):
    portal_store = PortalStore(storage, latency=Latency(0))
    await portal_store.initialize()
    yield portal_store
    await portal_store.close()


@pytest.fixture
async def slow_store():
    """Store whose media yield between read and write, so writers interleave."""
    portal_store = PortalStore(SlowStorage(), session_storage=SlowStorage(), latency=Latency(0))
    yield portal_store
    await portal_store.close()
