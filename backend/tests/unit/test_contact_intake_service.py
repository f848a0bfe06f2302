"""Unit tests for the ContactIntakeService."""

import logging

import pytest
from pydantic import ValidationError

from business_site.application.interfaces import ContactSubmissionRepository
from business_site.application.schemas import ContactSubmissionCreate
from business_site.application.services import ContactIntakeService
from business_site.domain.entities import ContactStatus, ContactSubmission


class FakeContactSubmissionRepository(ContactSubmissionRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._submissions: list[ContactSubmission] = []
        self._next_id = 1

    async def create(self, submission: ContactSubmission) -> ContactSubmission:
        submission.id = self._next_id
        self._next_id += 1
        self._submissions.append(submission)
        return submission

    async def get_all(self) -> list[ContactSubmission]:
        return sorted(
            self._submissions,
            key=lambda s: (s.is_emergency, s.created_at),
            reverse=True,
        )


def _payload(**overrides) -> dict:
    payload = {
        "name": "John Smith",
        "email": "john@example.com",
        "phone": "(555) 010-2030",
        "service_type": "Water Heater",
        "message": "Water heater is leaking.",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def service() -> ContactIntakeService:
    return ContactIntakeService(FakeContactSubmissionRepository())


@pytest.mark.asyncio
async def test_submit_contact_form_sets_new_status(service: ContactIntakeService):
    created = await service.submit_contact_form(ContactSubmissionCreate(**_payload()))

    assert created.id is not None
    assert created.status == ContactStatus.NEW
    assert created.name == "John Smith"
    assert created.email == "john@example.com"
    assert created.phone == "(555) 010-2030"
    assert created.service_type == "Water Heater"
    assert created.message == "Water heater is leaking."
    assert created.is_emergency is False


@pytest.mark.asyncio
async def test_caller_supplied_status_is_ignored(service: ContactIntakeService):
    data = ContactSubmissionCreate.model_validate(_payload(status="completed"))
    created = await service.submit_contact_form(data)

    assert created.status == ContactStatus.NEW
    assert not hasattr(data, "status")


@pytest.mark.asyncio
async def test_null_service_type_is_preserved(service: ContactIntakeService):
    created = await service.submit_contact_form(
        ContactSubmissionCreate(**_payload(service_type=None))
    )
    assert created.service_type is None


@pytest.mark.asyncio
async def test_emergency_submission_logged_as_warning(
    service: ContactIntakeService, caplog: pytest.LogCaptureFixture
):
    with caplog.at_level(logging.INFO):
        await service.submit_contact_form(ContactSubmissionCreate(**_payload(is_emergency=True)))

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "EMERGENCY" in warnings[0].getMessage()


@pytest.mark.asyncio
async def test_routine_submission_logged_as_info(
    service: ContactIntakeService, caplog: pytest.LogCaptureFixture
):
    with caplog.at_level(logging.INFO):
        await service.submit_contact_form(ContactSubmissionCreate(**_payload()))

    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


@pytest.mark.parametrize("email", ["not-an-email", "missing@", ""])
def test_malformed_email_rejected(email: str):
    with pytest.raises(ValidationError):
        ContactSubmissionCreate(**_payload(email=email))
