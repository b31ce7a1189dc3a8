from __future__ import annotations

from abc import abstractmethod
from typing import List, Protocol

from amcore.domain.shared.port import Port
from amcore.domain.uma.model.aggregate import ResourceSet


class ResourceSetRepository(Port, Protocol):
    @abstractmethod
    async def list_by_owner(self, domain: str, client_id: str, user_id: str) -> List[ResourceSet]: ...

    @abstractmethod
    async def get(
        self, domain: str, client_id: str, user_id: str, resource_id: str
    ) -> ResourceSet | None: ...

    @abstractmethod
    async def create(self, resource_set: ResourceSet) -> ResourceSet: ...

    @abstractmethod
    async def update(self, resource_set: ResourceSet) -> ResourceSet: ...

    @abstractmethod
    async def delete(
        self, domain: str, client_id: str, user_id: str, resource_id: str
    ) -> None: ...
