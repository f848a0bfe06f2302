"""Abstract repository interface (port) for the BusinessInfo singleton."""

from abc import ABC, abstractmethod

from business_site.domain.entities import BusinessInfo


class BusinessInfoRepository(ABC):
    """Port for business profile persistence — implemented in the infrastructure layer.

    Several physical rows may exist. Readers use ``get_latest`` (max
    ``updated_at``), writers use ``get_first`` (lowest id).
    """

    @abstractmethod
    async def get_latest(self) -> BusinessInfo | None:
        """Retrieve the most recently updated profile, or None if there is none."""
        ...

    @abstractmethod
    async def get_first(self) -> BusinessInfo | None:
        """Retrieve the profile with the lowest ID, or None if there is none."""
        ...

    @abstractmethod
    async def create_if_absent(self, info: BusinessInfo) -> BusinessInfo | None:
        """Atomically insert the singleton profile.

        Returns the created profile, or None when a profile with the same
        singleton key already exists.
        """
        ...

    @abstractmethod
    async def update(self, info: BusinessInfo) -> BusinessInfo:
        """Update an existing profile."""
        ...
