"""Domain Events for the Page Model Context.

Pages and applications collect these while they are being assembled and
used. They are drained with ``get_events()`` and are mainly useful for
debugging page definitions (e.g. spotting alias collisions).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True)
class ElementRegistered:
    """Emitted when an element is registered under its name and aliases.

    ``kind`` is "region", "control" or "page"; ``keys`` lists every key the
    element is now reachable by.
    """
    owner: str
    kind: str
    element_name: str
    keys: Tuple[str, ...]
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return (
            f"ElementRegistered(owner={self.owner}, kind={self.kind}, "
            f"element={self.element_name}, keys={list(self.keys)})"
        )


@dataclass(frozen=True)
class RegistryKeyOverwritten:
    """Emitted when a registration replaces a different element under a key.

    Last write wins; other keys of the previous element are left alone.
    """
    owner: str
    kind: str
    key: str
    previous_name: str
    new_name: str
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return (
            f"RegistryKeyOverwritten(owner={self.owner}, kind={self.kind}, "
            f"key={self.key}, {self.previous_name} -> {self.new_name})"
        )


@dataclass(frozen=True)
class PresenceCheckFailed:
    """Emitted when a region/control lookup is refused by the presence check."""
    artifact: str
    requested: str
    message: str
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return (
            f"PresenceCheckFailed(artifact={self.artifact}, "
            f"requested={self.requested})"
        )
