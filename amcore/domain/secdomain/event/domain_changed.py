from amcore.domain.shared.event import Event


class DomainChanged(Event):
    """A security domain's configuration changed; runtime caches should reload."""

    domain_id: str
