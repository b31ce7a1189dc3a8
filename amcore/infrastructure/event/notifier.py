"""DomainNotifier adapters."""

from uuid import uuid4

import httpx

from amcore.domain.secdomain.event.domain_changed import DomainChanged
from amcore.domain.secdomain.port.notifier import DomainNotifier
from amcore.domain.shared.error import ConfigurationError
from amcore.domain.shared.event import EventId
from amcore.domain.shared.port.event_bus import EventBus


class EventBusDomainNotifier(DomainNotifier):
    """Publishes DomainChanged to in-process subscribers."""

    def __init__(self, bus: EventBus) -> None:
        self._bus = bus

    async def notify_domain_changed(self, domain_id: str) -> None:
        await self._bus.publish(DomainChanged(id=EventId(uuid4()), domain_id=domain_id))


class HttpDomainNotifier(DomainNotifier):
    """POSTs the domain id to a gateway reload webhook."""

    def __init__(self, client: httpx.AsyncClient, reload_url: str) -> None:
        try:
            url = httpx.URL(reload_url)
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"Invalid notifier reload URL: {reload_url!r}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ConfigurationError(f"Reload URL must be absolute http(s): {reload_url!r}")

        self._client = client
        self._reload_url = reload_url

    async def notify_domain_changed(self, domain_id: str) -> None:
        response = await self._client.post(self._reload_url, json={"domain": domain_id})
        response.raise_for_status()
