from typing import Protocol


class Port(Protocol):
    """Marker base for interfaces implemented outside the domain layer."""
