from typing import Protocol


class Port(Protocol):
    """Marker base for repository and adapter ports."""
