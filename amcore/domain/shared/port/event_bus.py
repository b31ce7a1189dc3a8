from abc import abstractmethod
from collections.abc import Awaitable, Callable
from typing import Protocol

from amcore.domain.shared.event import Event
from amcore.domain.shared.port import Port

EventHandlerFunc = Callable[[Event], Awaitable[None]]


class EventBus(Port, Protocol):
    @abstractmethod
    def subscribe(self, event_type: type[Event], handler: EventHandlerFunc) -> None: ...

    @abstractmethod
    async def publish(self, event: Event) -> None: ...
