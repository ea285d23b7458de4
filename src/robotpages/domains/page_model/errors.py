"""Error taxonomy for the Page Model Context.

Every error derives from PageModelError and from the closest builtin
exception, so callers can catch either the domain family or the familiar
Python type. PresenceError is an AssertionError so a failed presence check
surfaces as an ordinary test failure in Robot Framework.
"""

from __future__ import annotations


class PageModelError(Exception):
    """Base class for all page model errors."""


class ValidationError(PageModelError, ValueError):
    """Malformed construction input (missing or wrong-typed name/aliases)."""


class InvalidArgumentError(PageModelError, TypeError):
    """None or wrong-typed argument passed to a registration operation."""


class ElementLookupError(PageModelError, LookupError):
    """Requested name or alias is not registered.

    Attributes:
        kind: Registry that was searched ("region", "control", "page")
        requested: The name or alias that was requested
    """

    def __init__(self, kind: str, requested: str) -> None:
        self.kind = kind
        self.requested = requested
        super().__init__(f'Invalid {kind} name requested: "{requested}"')


class PresenceError(PageModelError, AssertionError):
    """The artifact could not be confirmed present in the current UI."""


class NotConfiguredError(PageModelError, RuntimeError):
    """A deferred hook was invoked before it was set."""


class RegionError(PageModelError):
    """A region could not be scoped with the given filter value."""
