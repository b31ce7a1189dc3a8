from abc import abstractmethod
from typing import Protocol

from amcore.domain.shared.port import Port


class UnitOfWork(Port, Protocol):
    """Transaction shared by the repositories of one unit of work."""

    @abstractmethod
    async def commit(self) -> None:
        """Make every write staged so far durable."""
        ...
