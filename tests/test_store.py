import asyncio
import json

import pytest

from placement_portal.core.latency import Latency
from placement_portal.core.storage import FileStorage
from placement_portal.core.store import COLLECTIONS, PortalStore
from placement_portal.repositories.company_repository import CompanyRepository
from placement_portal.services.job_service import JobService
from placement_portal.services.mentorship_service import MentorshipService


async def test_first_read_seeds_persistent_key(store, storage):
    raw = await storage.get("cs_mentorships")
    assert [m["id"] for m in json.loads(raw)] == [1, 2, 3]


async def test_session_collections_stay_out_of_durable_medium(store, storage):
    assert await storage.get("cs_jobs") is None
    assert await store.session_storage.get("cs_jobs") is not None


async def test_mentorships_survive_restart(tmp_path):
    first = PortalStore(FileStorage(str(tmp_path)), latency=Latency(0))
    created = await MentorshipService().create_mentorship(
        first, {"mentorId": 302, "menteeId": 105, "goals": ["Learn cloud basics"]}
    )
    await first.close()

    second = PortalStore(FileStorage(str(tmp_path)), latency=Latency(0))
    reloaded = await MentorshipService().get_mentorship(second, created.id)

    assert reloaded == created


async def test_session_collections_reset_on_restart(tmp_path):
    first = PortalStore(FileStorage(str(tmp_path)), latency=Latency(0))
    job = await JobService().create_job(first, {"title": "Temp", "postedBy": 201})

    second = PortalStore(FileStorage(str(tmp_path)), latency=Latency(0))
    assert await JobService().get_job(second, job.id) is None


async def test_every_collection_can_persist(storage):
    first = PortalStore(storage, latency=Latency(0), persistent=COLLECTIONS)
    job = await JobService().create_job(first, {"title": "Kept", "postedBy": 201})

    second = PortalStore(storage, latency=Latency(0), persistent=COLLECTIONS)
    assert await JobService().get_job(second, job.id) == job


def test_unknown_persistent_collection_rejected(storage):
    with pytest.raises(ValueError):
        PortalStore(storage, persistent=["jobs", "invoices"])


async def test_corrupt_collection_is_reseeded(storage):
    await storage.put("cs_mentorships", "{broken")
    store = PortalStore(storage, latency=Latency(0))

    rows = await store.collection("mentorships").read()

    assert [m["id"] for m in rows] == [1, 2, 3]


async def test_transaction_discards_changes_on_error(store):
    collection = store.collection("companies")

    with pytest.raises(RuntimeError):
        async with collection.transaction() as rows:
            rows.clear()
            raise RuntimeError("boom")

    assert len(await collection.read()) == 5


async def test_reset_restores_fixture_data(store):
    await JobService().delete_job(store, 1)
    await store.reset()
    assert await JobService().get_job(store, 1) is not None


async def test_concurrent_creates_get_unique_ids(slow_store):
    repo = CompanyRepository()

    created = await asyncio.gather(
        *(repo.create(slow_store, name=f"Company {i}") for i in range(10))
    )

    ids = sorted(c.id for c in created)
    assert ids == list(range(6, 16))
    assert len(await repo.get_all(slow_store)) == 15
