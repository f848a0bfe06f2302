"""Abstract repository interface (port) for ContactSubmission persistence."""

from abc import ABC, abstractmethod

from business_site.domain.entities import ContactSubmission


class ContactSubmissionRepository(ABC):
    """Port for contact submission persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def create(self, submission: ContactSubmission) -> ContactSubmission:
        """Persist a new submission and return it."""
        ...

    @abstractmethod
    async def get_all(self) -> list[ContactSubmission]:
        """Retrieve all submissions, emergencies first, then newest first."""
        ...
