"""Page Model Context - Pages, regions and controls of an application under test.

This bounded context manages:
- Name + alias identity of every artifact
- Multi-key registration of regions and controls on a page
- Presence-verified lookup of regions and controls
- Deferred navigation and page-test hooks
- Binding of pages to applications
"""

# Errors
from robotpages.domains.page_model.errors import (
    ElementLookupError,
    InvalidArgumentError,
    NotConfiguredError,
    PageModelError,
    PresenceError,
    RegionError,
    ValidationError,
)

# Value Objects
from robotpages.domains.page_model.value_objects import (
    ArtifactIdentity,
    NamedArtifact,
)

# Entities
from robotpages.domains.page_model.entities import (
    Control,
    Region,
)

# Aggregates
from robotpages.domains.page_model.aggregates import (
    Application,
    Page,
)

# Domain Events
from robotpages.domains.page_model.events import (
    ElementRegistered,
    PresenceCheckFailed,
    RegistryKeyOverwritten,
)

# Repository
from robotpages.domains.page_model.repository import (
    ApplicationRegistry,
    InMemoryApplicationRegistry,
    default_registry,
)

__all__ = [
    # Errors
    "ElementLookupError",
    "InvalidArgumentError",
    "NotConfiguredError",
    "PageModelError",
    "PresenceError",
    "RegionError",
    "ValidationError",
    # Value Objects
    "ArtifactIdentity",
    "NamedArtifact",
    # Entities
    "Control",
    "Region",
    # Aggregates
    "Application",
    "Page",
    # Events
    "ElementRegistered",
    "PresenceCheckFailed",
    "RegistryKeyOverwritten",
    # Repository
    "ApplicationRegistry",
    "InMemoryApplicationRegistry",
    "default_registry",
]
