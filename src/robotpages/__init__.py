"""Robot Framework page objects - pages, regions and controls by name or alias."""

from robotpages.domains.page_model import (  # noqa: F401
    Application,
    Control,
    ElementLookupError,
    InvalidArgumentError,
    NotConfiguredError,
    Page,
    PageModelError,
    PresenceError,
    Region,
    RegionError,
    ValidationError,
)

__all__ = [
    "Application",
    "Control",
    "ElementLookupError",
    "InvalidArgumentError",
    "NotConfiguredError",
    "Page",
    "PageModelError",
    "PresenceError",
    "Region",
    "RegionError",
    "ValidationError",
]

__version__ = "0.1.0"
