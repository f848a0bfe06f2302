"""Application service (use case) for contact form intake."""

import logging

from business_site.application.interfaces import ContactSubmissionRepository
from business_site.application.schemas import ContactSubmissionCreate
from business_site.domain.entities import ContactStatus, ContactSubmission

logger = logging.getLogger(__name__)


class ContactIntakeService:
    """Records contact form leads and lists them for triage."""

    def __init__(self, repository: ContactSubmissionRepository):
        self._repository = repository

    async def submit_contact_form(self, data: ContactSubmissionCreate) -> ContactSubmission:
        """Persist a new lead. The status is always ``new``."""
        submission = ContactSubmission(
            name=data.name,
            email=str(data.email),
            phone=data.phone,
            service_type=data.service_type,
            message=data.message,
            is_emergency=data.is_emergency,
            status=ContactStatus.NEW,
        )
        created = await self._repository.create(submission)

        if created.is_emergency:
            logger.warning(
                "EMERGENCY contact submission #%s from %s (%s)",
                created.id, created.name, created.phone,
            )
        else:
            logger.info("Contact submission #%s from %s", created.id, created.name)
        return created

    async def list_contact_submissions(self) -> list[ContactSubmission]:
        """All leads, emergencies first regardless of age, then newest first."""
        return await self._repository.get_all()
