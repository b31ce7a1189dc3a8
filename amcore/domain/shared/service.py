import logging
from dataclasses import dataclass
from typing import ClassVar, dataclass_transform


@dataclass_transform(kw_only_default=True)
class _ServiceMeta(type):
    """Turns every Service subclass into a keyword-only dataclass with its own logger."""

    def __new__(mcs, name: str, bases: tuple, namespace: dict):
        cls = super().__new__(mcs, name, bases, namespace)
        if not any(isinstance(b, mcs) for b in bases):
            return cls
        cls.logger = logging.getLogger(f"{cls.__module__}.{name}")
        return dataclass(kw_only=True)(cls)


class Service(metaclass=_ServiceMeta):
    """Base class for lifecycle services.

    Collaborators are declared as annotated fields and passed by keyword:

        class ThingService(Service):
            thing_repo: ThingRepository
    """

    logger: ClassVar[logging.Logger] = logging.getLogger(__name__)
