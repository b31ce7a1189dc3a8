import asyncio
from collections.abc import Callable
from dataclasses import field

import logfire

from amcore.domain.secdomain.port.notifier import DomainNotifier
from amcore.domain.shared.service import Service

ErrorCallback = Callable[[str, Exception], None]


class DomainReloader(Service):
    """Fire-and-forget dispatch of domain reload notifications.

    ``reload`` returns as soon as the notification is scheduled. Failures are
    reported on this object's own channel (log, ``failures`` counter and the
    optional ``on_error`` callback) and never reach the caller that triggered
    the reload.

    Must live for the whole application: pending tasks are held here until
    they finish.
    """

    notifier: DomainNotifier
    on_error: ErrorCallback | None = None
    failures: int = 0
    _pending: set[asyncio.Task[None]] = field(default_factory=set, init=False, repr=False)

    def reload(self, domain_id: str) -> asyncio.Task[None]:
        task = asyncio.create_task(self._notify(domain_id), name=f"domain-reload-{domain_id}")
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for every scheduled notification to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def _notify(self, domain_id: str) -> None:
        try:
            await self.notifier.notify_domain_changed(domain_id)
        except Exception as e:
            self.failures += 1
            self.logger.exception("Domain reload notification failed for domain %s", domain_id)
            logfire.error("Domain reload failed", domain=domain_id, error=str(e))
            if self.on_error is not None:
                try:
                    self.on_error(domain_id, e)
                except Exception:
                    self.logger.exception("Reload error callback failed for domain %s", domain_id)
        else:
            logfire.info("Domain reload notified", domain=domain_id)
