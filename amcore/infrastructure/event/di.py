"""Dependency injection provider for domain reload notifications."""

import logging
from typing import AsyncIterable

import httpx
from dishka import provide

from amcore.config import Config
from amcore.domain.secdomain.port.notifier import DomainNotifier
from amcore.domain.secdomain.service.reloader import DomainReloader
from amcore.domain.shared.port.event_bus import EventBus
from amcore.infrastructure.event.memory_bus import InMemoryEventBus
from amcore.infrastructure.event.notifier import EventBusDomainNotifier, HttpDomainNotifier
from amcore.util.di.base import Provider
from amcore.util.di.scope import Scope

logger = logging.getLogger(__name__)


class EventProvider(Provider):
    """Everything here lives for the whole application."""

    scope = Scope.APP

    event_bus = provide(InMemoryEventBus, provides=EventBus)

    @provide
    async def get_domain_notifier(
        self, config: Config, bus: EventBus
    ) -> AsyncIterable[DomainNotifier]:
        if not config.notifier.reload_url:
            yield EventBusDomainNotifier(bus)
            return

        logger.info("Domain reloads will be posted to %s", config.notifier.reload_url)
        async with httpx.AsyncClient(timeout=config.notifier.timeout_seconds) as client:
            yield HttpDomainNotifier(client, config.notifier.reload_url)

    @provide
    async def get_domain_reloader(self, notifier: DomainNotifier) -> AsyncIterable[DomainReloader]:
        reloader = DomainReloader(notifier=notifier)
        yield reloader
        # let in-flight notifications finish before the notifier is released
        await reloader.drain()
