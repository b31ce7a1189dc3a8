from __future__ import annotations

from abc import abstractmethod
from typing import List, Protocol

from amcore.domain.idp.model.aggregate import IdentityProvider
from amcore.domain.shared.port import Port


class IdentityProviderRepository(Port, Protocol):
    @abstractmethod
    async def get(self, identity_provider_id: str) -> IdentityProvider | None: ...

    @abstractmethod
    async def list_by_domain(self, domain: str) -> List[IdentityProvider]: ...

    @abstractmethod
    async def create(self, identity_provider: IdentityProvider) -> IdentityProvider: ...

    @abstractmethod
    async def update(self, identity_provider: IdentityProvider) -> IdentityProvider: ...

    @abstractmethod
    async def delete(self, identity_provider_id: str) -> None: ...
