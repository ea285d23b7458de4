"""Repository for Application aggregates.

Pages bind themselves to applications by name through an
ApplicationRegistry. The in-memory implementation is process-wide by
default (see default_registry()), which is what Robot Framework suites
share across test files.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Protocol, runtime_checkable

from robotpages.domains.page_model.aggregates import Application
from robotpages.domains.page_model.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


@runtime_checkable
class ApplicationRegistry(Protocol):
    """Registry protocol consumed by Page.add_to_application()."""

    def find(self, name: str) -> Optional[Application]:
        """Return the application registered under name or alias, or None."""
        ...

    def register(self, application: Application) -> None:
        """Register an application under its name and aliases."""
        ...


class InMemoryApplicationRegistry:
    """Dictionary-backed ApplicationRegistry.

    Thread Safety: Uses a simple dict, not thread-safe.
    """

    def __init__(self) -> None:
        self._applications: Dict[str, Application] = {}

    def find(self, name: str) -> Optional[Application]:
        return self._applications.get(name)

    def register(self, application: Application) -> None:
        if not isinstance(application, Application):
            raise InvalidArgumentError(
                f"Only Application objects can be registered, "
                f"got {type(application).__name__}"
            )
        for key in application.identity.keys():
            previous = self._applications.get(key)
            if previous is not None and previous is not application:
                logger.warning(
                    "Application key '%s' now refers to '%s' (was '%s')",
                    key, application.name, previous.name,
                )
            self._applications[key] = application

    def find_or_create(self, name: str) -> Application:
        """Return the named application, creating and registering it if needed."""
        application = self.find(name)
        if application is None:
            application = Application(name=name)
            self.register(application)
        return application

    def remove(self, name: str) -> None:
        """Remove an application and every key it is registered under."""
        application = self._applications.get(name)
        if application is None:
            return
        for key in [k for k, v in self._applications.items() if v is application]:
            del self._applications[key]

    def names(self) -> List[str]:
        """Return the canonical names of all registered applications."""
        seen: List[str] = []
        for application in self._applications.values():
            if application.name not in seen:
                seen.append(application.name)
        return seen

    def clear(self) -> None:
        self._applications.clear()

    def __len__(self) -> int:
        return len(self.names())


_default_registry = InMemoryApplicationRegistry()


def default_registry() -> InMemoryApplicationRegistry:
    """Return the process-wide application registry."""
    return _default_registry
