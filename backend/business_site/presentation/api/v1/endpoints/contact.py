"""Contact form endpoints."""

from fastapi import APIRouter, Depends, status

from business_site.application.schemas import (
    ContactSubmissionCreate,
    ContactSubmissionResponse,
)
from business_site.application.services import ContactIntakeService
from business_site.infrastructure.dependencies import get_contact_intake_service

router = APIRouter(prefix="/contact", tags=["Contact"])


@router.post(
    "",
    response_model=ContactSubmissionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_contact_form(
    data: ContactSubmissionCreate,
    service: ContactIntakeService = Depends(get_contact_intake_service),
) -> ContactSubmissionResponse:
    """Submit the contact form. New submissions always start with status 'new'."""
    submission = await service.submit_contact_form(data)
    return ContactSubmissionResponse.model_validate(submission, from_attributes=True)


@router.get("", response_model=list[ContactSubmissionResponse])
async def list_contact_submissions(
    service: ContactIntakeService = Depends(get_contact_intake_service),
) -> list[ContactSubmissionResponse]:
    """List submissions for triage: emergencies first, then newest first."""
    submissions = await service.list_contact_submissions()
    return [
        ContactSubmissionResponse.model_validate(s, from_attributes=True) for s in submissions
    ]
