from abc import abstractmethod
from typing import Protocol

from amcore.domain.shared.port import Port


class DomainNotifier(Port, Protocol):
    """Tells dependent subsystems that a security domain must be reloaded."""

    @abstractmethod
    async def notify_domain_changed(self, domain_id: str) -> None: ...
