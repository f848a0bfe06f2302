"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from business_site.domain.entities import Service


class ServiceRepository(ABC):
    """Port for service catalog persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def create(self, service: Service) -> Service:
        """Persist a new service and return it with the generated ID and timestamp."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Service]:
        """Retrieve every service, emergency services first, then newest first."""
        ...
