"""Domain-Driven Design bounded contexts for rf-pages.

- Page Model Context: applications, pages, regions and controls
"""

from robotpages.domains.page_model import (
    Application,
    Control,
    Page,
    Region,
)

__all__ = [
    "Application",
    "Control",
    "Page",
    "Region",
]
