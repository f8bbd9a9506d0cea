import pytest

from placement_portal.core.exceptions import (
    ApplicationNotFoundException,
    CompanyNotFoundException,
    NotFoundException,
    ValidationException,
)
from placement_portal.core.fixtures import FixtureLoader
from placement_portal.core.latency import Latency
from placement_portal.core.store import PortalStore
from placement_portal.models.application import ApplicationStatus
from placement_portal.repositories import (
    ApplicationRepository,
    CompanyRepository,
    JobRepository,
    coerce_id,
)


@pytest.mark.parametrize(
    "value,expected",
    [(7, 7), ("7", 7), (" 7 ", 7), (7.0, 7), ("abc", None), (None, None), (True, None), (7.5, None)],
)
def test_coerce_id(value, expected):
    assert coerce_id(value) == expected


async def test_find_preserves_collection_order(store):
    apps = await ApplicationRepository().find(store, job_id=7)
    assert [a.id for a in apps] == [1, 3, 5]


async def test_find_accepts_camel_case_and_string_ids(store):
    apps = await ApplicationRepository().find(store, jobId="7", userId=103)
    assert [a.id for a in apps] == [3]


async def test_find_unmatched_filter_is_empty(store):
    repo = ApplicationRepository()
    assert await repo.find(store, job_id=999) == []
    assert await repo.find(store, salary=100) == []


async def test_find_without_filters_returns_everything(store):
    repo = JobRepository()
    assert await repo.find(store, approved=None) == await repo.get_all(store)


async def test_status_partitions_cover_whole_collection(store):
    repo = ApplicationRepository()
    everything = await repo.get_all(store)

    seen = []
    for status in ApplicationStatus:
        matched = await repo.find(store, status=status)
        assert all(a.status == status for a in matched)
        seen.extend(matched)

    assert sorted(a.id for a in seen) == [a.id for a in everything]


async def test_get_by_id_coerces_and_never_raises(store):
    repo = JobRepository()
    assert (await repo.get_by_id(store, "7")).title == "Backend Developer"
    assert await repo.get_by_id(store, 999) is None
    assert await repo.get_by_id(store, "not-an-id") is None


async def test_create_assigns_max_plus_one(store):
    company = await CompanyRepository().create(store, name="Orbit Systems")
    assert company.id == 6


async def test_create_after_delete_never_reuses_higher_ids(store):
    repo = JobRepository()
    await repo.delete(store, 3)
    job = await repo.create(store, title="New", posted_by=201)
    assert job.id == 9


async def test_create_in_empty_collection_starts_at_one(tmp_path, storage):
    store = PortalStore(storage, fixtures=FixtureLoader(str(tmp_path)), latency=Latency(0))
    company = await CompanyRepository().create(store, name="First")
    assert company.id == 1


async def test_create_rejects_invalid_record(store):
    with pytest.raises(ValidationException) as exc_info:
        await CompanyRepository().create(store)
    assert exc_info.value.details


async def test_update_shallow_merges(store):
    repo = CompanyRepository()
    updated = await repo.update(store, 2, website="https://quantiva.example.org")

    assert updated.website == "https://quantiva.example.org"
    assert updated.name == "Quantiva Analytics"
    assert await repo.get_by_id(store, 2) == updated


async def test_update_ignores_id_changes(store):
    updated = await CompanyRepository().update(store, 2, id=99, location="Chennai")
    assert updated.id == 2


async def test_update_missing_raises_entity_not_found(store):
    with pytest.raises(CompanyNotFoundException):
        await CompanyRepository().update(store, 999, name="Ghost")
    with pytest.raises(ApplicationNotFoundException):
        await ApplicationRepository().update(store, 999, status=ApplicationStatus.HIRED)
    with pytest.raises(NotFoundException):
        await ApplicationRepository().update(store, "abc", status=ApplicationStatus.HIRED)


async def test_update_invalid_value_leaves_record_unchanged(store):
    repo = ApplicationRepository()
    with pytest.raises(ValidationException):
        await repo.update(store, 1, status="Ghosted")
    assert (await repo.get_by_id(store, 1)).status == ApplicationStatus.PENDING


async def test_delete_is_idempotent(store):
    repo = JobRepository()
    assert await repo.delete(store, 8) is True
    assert await repo.delete(store, 8) is False
    assert await repo.get_by_id(store, 8) is None
    assert await repo.count(store) == 7


async def test_count_matches_parsed_records(store):
    async with store.collection("companies").transaction() as rows:
        rows.append({"id": 99, "location": "Nowhere"})  # no name: not a valid Company

    repo = CompanyRepository()
    assert len(await repo.get_all(store)) == 5
    assert await repo.count(store) == 5
