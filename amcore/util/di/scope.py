"""Custom Dishka scopes for amcore."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """Hierarchy: APP -> UOW

    - APP: Application lifetime (engine, event bus, domain reloader)
    - UOW: One lifecycle operation; owns the session, committed on scope exit
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
