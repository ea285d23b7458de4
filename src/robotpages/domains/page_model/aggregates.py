"""Aggregates for the Page Model Context.

Page is the aggregate root for everything a test needs to interact with a
single screen of an application: its regions, its controls, how to get
there (navigation) and how to check it (page test). Application groups
pages by name and alias.

Invariants:
- Every registration is reachable by its name and each of its aliases;
  all keys reference the same instance
- A key collision replaces the previous mapping for that key only
- A region or control is never handed out before the page presence check
  has passed
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Sequence, Tuple

from robotpages.domains.page_model.entities import Control, Region
from robotpages.domains.page_model.errors import (
    ElementLookupError,
    InvalidArgumentError,
    NotConfiguredError,
    PresenceError,
)
from robotpages.domains.page_model.events import (
    ElementRegistered,
    PresenceCheckFailed,
    RegistryKeyOverwritten,
)
from robotpages.domains.page_model.value_objects import NamedArtifact, PresenceCheck

if TYPE_CHECKING:
    from robotpages.domains.page_model.repository import ApplicationRegistry

logger = logging.getLogger(__name__)


class _MultiKeyRegistryMixin:
    """Shared registration logic for name + alias keyed registries."""

    name: str
    warn_on_key_collision: bool = True
    _events: List[object]

    def _register(
        self,
        registry: Dict[str, NamedArtifact],
        element: NamedArtifact,
    ) -> None:
        keys = element.identity.keys()
        for key in keys:
            previous = registry.get(key)
            if previous is not None and previous is not element:
                self._events.append(
                    RegistryKeyOverwritten(
                        owner=self.name,
                        kind=element.kind,
                        key=key,
                        previous_name=previous.name,
                        new_name=element.name,
                    )
                )
                log = logger.warning if self.warn_on_key_collision else logger.debug
                log(
                    "%s key '%s' on '%s' now refers to '%s' (was '%s')",
                    element.kind.capitalize(), key, self.name,
                    element.name, previous.name,
                )
            registry[key] = element

        self._events.append(
            ElementRegistered(
                owner=self.name,
                kind=element.kind,
                element_name=element.name,
                keys=keys,
            )
        )

    def get_events(self) -> List[object]:
        """Get and clear collected domain events.

        Returns:
            List of domain events that occurred during operations
        """
        events = self._events.copy()
        self._events.clear()
        return events


class Page(_MultiKeyRegistryMixin, NamedArtifact):
    """A single addressable screen of the application under test.

    Example:
        >>> page = Page(name="Prescription New",
        ...             aliases=["New Prescription", "New Rx"])
        >>> page.add_control(Control(name="Prescriber Name", locator="id=prescriber"))
        >>> page.add_region(Region(name="User List", locator="css=tr:has-text('{value}')"))
        >>> page.add_to_application("Pharmacy")
        >>> page.control("Prescriber Name").locator
        'id=prescriber'
    """

    kind = "page"

    def __init__(
        self,
        name: Any = None,
        aliases: Optional[Sequence[str]] = None,
        presence: Optional[PresenceCheck] = None,
    ) -> None:
        super().__init__(name=name, aliases=aliases, presence=presence)
        self.regions: Dict[str, Region] = {}
        self.controls: Dict[str, Control] = {}
        self._page_test: Optional[Callable[[], Any]] = None
        self._navigation: Optional[Callable[[Dict[str, Any]], Any]] = None
        self._events: List[object] = []

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_to_application(
        self,
        application: Any,
        registry: Optional["ApplicationRegistry"] = None,
    ) -> "Page":
        """Add this page to an application.

        If the application is given by name and does not exist yet, it is
        created and registered.

        Args:
            application: An Application or the name of one
            registry: Registry used to resolve names (default: process-wide)

        Returns:
            This page

        Raises:
            InvalidArgumentError: If application is None or of another type
        """
        if application is None:
            raise InvalidArgumentError(
                "Input value cannot be None when adding this Page to an Application"
            )
        if isinstance(application, str):
            if registry is None:
                from robotpages.domains.page_model.repository import default_registry

                registry = default_registry()
            app = registry.find(application)
            if app is None:
                app = Application(name=application)
                registry.register(app)
                logger.debug("Created application '%s'", application)
            app.add_page(self)
        elif isinstance(application, Application):
            application.add_page(self)
        else:
            raise InvalidArgumentError(
                "Input value must be a string or an Application when adding "
                f"this Page to an Application, got {type(application).__name__}"
            )
        return self

    def add_region(self, region: Region) -> "Page":
        """Register a region under its name and each of its aliases.

        Raises:
            InvalidArgumentError: If region is None or not a Region
        """
        if region is None:
            raise InvalidArgumentError("Region must be specified when adding a Region to a Page")
        if not isinstance(region, Region):
            raise InvalidArgumentError(
                f"Region must be a Region when being added to a Page, "
                f"got {type(region).__name__}"
            )
        self._register(self.regions, region)
        return self

    def add_control(self, control: Control) -> "Page":
        """Register a control under its name and each of its aliases.

        Raises:
            InvalidArgumentError: If control is None or not a Control
        """
        if control is None:
            raise InvalidArgumentError("Control must be specified when adding a Control to a Page")
        if not isinstance(control, Control):
            raise InvalidArgumentError(
                f"Control must be a Control when being added to a Page, "
                f"got {type(control).__name__}"
            )
        self._register(self.controls, control)
        return self

    def region_names(self) -> List[str]:
        return list(self.regions)

    def control_names(self) -> List[str]:
        return list(self.controls)

    # ------------------------------------------------------------------
    # Verified lookups
    # ------------------------------------------------------------------

    def region(self, lookup: Any) -> Region:
        """Resolve a region by name or alias and scope it.

        Args:
            lookup: A single ``{name: filter_value}`` pair, as a one-entry
                mapping or a ``(name, filter_value)`` tuple

        Returns:
            The region, after its filter has been applied

        Raises:
            InvalidArgumentError: If lookup is not exactly one pair
            ElementLookupError: If no region is registered under the name
            PresenceError: If the page presence check fails; the filter is
                not applied in that case

        Example:
            >>> page.region({"User List": "jdoe"})
        """
        requested, value = self._split_lookup(lookup)
        region = self.regions.get(requested)
        if region is None:
            raise ElementLookupError("region", requested)

        self._verify_for(
            requested,
            f'Cannot navigate to region "{requested}" because page presence check failed',
        )

        region.filter(value)
        return region

    def control(self, requested_name: str) -> Control:
        """Resolve a control by name or alias.

        Raises:
            ElementLookupError: If no control is registered under the name
            PresenceError: If the page presence check fails
        """
        control = self.controls.get(requested_name)
        if control is None:
            raise ElementLookupError("control", requested_name)

        self._verify_for(
            requested_name,
            f'Cannot navigate to control "{requested_name}" because page presence check failed',
        )
        return control

    def _verify_for(self, requested: str, message: str) -> None:
        try:
            self.verify_presence(message)
        except PresenceError:
            self._events.append(
                PresenceCheckFailed(artifact=self.name, requested=requested, message=message)
            )
            raise

    @staticmethod
    def _split_lookup(lookup: Any) -> Tuple[str, Any]:
        if isinstance(lookup, Mapping):
            if len(lookup) != 1:
                raise InvalidArgumentError(
                    f"Region lookup must contain exactly one name, got {len(lookup)}"
                )
            return next(iter(lookup.items()))
        if isinstance(lookup, tuple) and len(lookup) == 2:
            return lookup[0], lookup[1]
        raise InvalidArgumentError(
            "Region lookup must be a single {name: value} pair, "
            f"got {type(lookup).__name__}"
        )

    # ------------------------------------------------------------------
    # Deferred hooks
    # ------------------------------------------------------------------

    @property
    def page_test_hook(self) -> Optional[Callable[[], Any]]:
        return self._page_test

    @property
    def navigation_hook(self) -> Optional[Callable[[Dict[str, Any]], Any]]:
        return self._navigation

    @property
    def has_page_test(self) -> bool:
        return self._page_test is not None

    @property
    def has_navigation(self) -> bool:
        return self._navigation is not None

    def add_page_test(self, page_test: Callable[[], Any]) -> "Page":
        """Store the page test, replacing any previous one.

        Args:
            page_test: Callable taking no arguments
        """
        if not callable(page_test):
            raise InvalidArgumentError(f"Page test of '{self.name}' must be callable")
        self._page_test = page_test
        return self

    def page_test(self) -> Any:
        """Run the stored page test and return its result.

        Raises:
            NotConfiguredError: If no page test was added
        """
        if self._page_test is None:
            raise NotConfiguredError(f"No page test defined for page '{self.name}'")
        return self._page_test()

    def add_navigation(self, navigation: Callable[[Dict[str, Any]], Any]) -> "Page":
        """Store the navigation procedure, replacing any previous one.

        Args:
            navigation: Callable taking a single options dictionary
        """
        if not callable(navigation):
            raise InvalidArgumentError(f"Navigation of '{self.name}' must be callable")
        self._navigation = navigation
        return self

    def navigate(self, options: Optional[Mapping] = None, **kwargs: Any) -> Any:
        """Run the stored navigation procedure.

        Args:
            options: Options passed to the procedure
            **kwargs: Additional options, overriding entries of ``options``

        Returns:
            Whatever the navigation procedure returns

        Raises:
            NotConfiguredError: If no navigation was added
        """
        if self._navigation is None:
            raise NotConfiguredError(f"No navigation defined for page '{self.name}'")
        if options is not None and not isinstance(options, Mapping):
            raise InvalidArgumentError(
                f"Navigation options must be a mapping, got {type(options).__name__}"
            )
        merged: Dict[str, Any] = dict(options or {})
        merged.update(kwargs)
        logger.debug("Navigating to page '%s' with options %s", self.name, merged)
        return self._navigation(merged)


class Application(_MultiKeyRegistryMixin, NamedArtifact):
    """An application under test: a registry of pages by name and alias."""

    kind = "application"

    def __init__(
        self,
        name: Any = None,
        aliases: Optional[Sequence[str]] = None,
        presence: Optional[PresenceCheck] = None,
    ) -> None:
        super().__init__(name=name, aliases=aliases, presence=presence)
        self.pages: Dict[str, Page] = {}
        self._events: List[object] = []

    def add_page(self, page: Page) -> "Application":
        """Register a page under its name and each of its aliases.

        Raises:
            InvalidArgumentError: If page is None or not a Page
        """
        if not isinstance(page, Page):
            raise InvalidArgumentError(
                f"Page must be a Page when being added to an Application, "
                f"got {type(page).__name__}"
            )
        self._register(self.pages, page)
        return self

    def page(self, requested_name: str) -> Page:
        """Resolve a page by name or alias.

        Raises:
            ElementLookupError: If no page is registered under the name
        """
        page = self.pages.get(requested_name)
        if page is None:
            raise ElementLookupError("page", requested_name)
        return page

    def page_names(self) -> List[str]:
        return list(self.pages)
