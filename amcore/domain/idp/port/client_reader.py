"""Read-only view of clients, used to guard identity provider deletion."""

from abc import abstractmethod
from typing import Protocol

from amcore.domain.shared.port import Port


class ClientReader(Port, Protocol):
    @abstractmethod
    async def count_by_identity_provider(self, identity_provider_id: str) -> int:
        """Number of clients that still reference the identity provider."""
        ...
