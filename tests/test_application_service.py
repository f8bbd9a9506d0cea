import pytest

from placement_portal.core.exceptions import (
    ApplicationNotFoundException,
    DuplicateApplicationException,
    ValidationException,
)
from placement_portal.models.application import ApplicationStatus
from placement_portal.services.application_service import ApplicationService
from placement_portal.services.job_service import JobService


@pytest.fixture
def service():
    return ApplicationService()


async def test_applicants_for_job_in_order(store, service):
    applications = await service.list_by_job(store, 7)
    assert [a.id for a in applications] == [1, 3, 5]


async def test_list_applications_by_status(store, service):
    hired = await service.list_applications(store, status=ApplicationStatus.HIRED)
    assert [a.id for a in hired] == [2, 5]


async def test_apply_starts_pending(store, service):
    application = await service.create_application(
        store, {"jobId": 1, "userId": 105, "coverLetter": "Keen to learn React."}
    )
    assert application.id == 6
    assert application.status == ApplicationStatus.PENDING
    assert application.cover_letter == "Keen to learn React."
    assert application.applied_at is not None


async def test_apply_twice_conflicts(store, service):
    with pytest.raises(DuplicateApplicationException):
        await service.create_application(store, {"jobId": 7, "userId": 101})


@pytest.mark.parametrize(
    "payload",
    [
        {"jobId": 404, "userId": 101},
        {"jobId": 1, "userId": 404},
        {"jobId": 1},
    ],
)
async def test_apply_requires_existing_job_and_user(store, service, payload):
    with pytest.raises(ValidationException):
        await service.create_application(store, payload)


async def test_patch_status(store, service):
    application = await service.patch_status(store, 1, "Shortlisted")
    assert application.status == ApplicationStatus.SHORTLISTED
    assert (await service.get_application(store, 1)).status == ApplicationStatus.SHORTLISTED


async def test_patch_status_unknown_stage(store, service):
    with pytest.raises(ValidationException):
        await service.patch_status(store, 1, "Ghosted")


async def test_patch_status_missing_application(store, service):
    with pytest.raises(ApplicationNotFoundException):
        await service.patch_status(store, 404, ApplicationStatus.HIRED)


async def test_student_view_resolves_job_and_company(store, service):
    applications = await service.list_for_student(store, 101)

    assert [(a.id, a.job_title, a.company_name) for a in applications] == [
        (1, "Backend Developer", "Quantiva Analytics"),
        (4, "Cloud Support Associate", "Stratus Cloud"),
    ]


async def test_student_view_survives_deleted_job(store, service):
    await JobService().delete_job(store, 7)

    applications = await service.list_for_student(store, 101)

    assert applications[0].job_title == "Unknown Job"
    assert applications[0].company_name == "Unknown Company"
    assert applications[1].job_title == "Cloud Support Associate"
