"""Entities for the Page Model Context.

Regions and controls are the named sub-elements a page registers. Both may
be shared between several pages; neither tracks which page owns it.
"""

from __future__ import annotations

import logging
import re
import string
from typing import Any, Callable, Optional, Sequence, Set

from robotpages.domains.page_model.errors import RegionError, ValidationError
from robotpages.domains.page_model.value_objects import NamedArtifact, PresenceCheck

logger = logging.getLogger(__name__)

# Sentinel for "filter() has not been called yet"; None is a valid filter value
_UNSET = object()


def _template_fields(template: str) -> Set[str]:
    """Return the top-level replacement field names used in a locator template."""
    return {
        re.split(r"[.\[]", field, maxsplit=1)[0]
        for _, field, _, _ in string.Formatter().parse(template)
        if field is not None
    }


class Control(NamedArtifact):
    """A named leaf element of a page.

    Example:
        >>> Control(name="Prescriber Name", aliases=["Prescriber"],
        ...         locator="id=prescriber")
    """

    kind = "control"

    def __init__(
        self,
        name: Any = None,
        aliases: Optional[Sequence[str]] = None,
        locator: Optional[str] = None,
        presence: Optional[PresenceCheck] = None,
    ) -> None:
        super().__init__(name=name, aliases=aliases, presence=presence)
        if locator is not None and not isinstance(locator, str):
            raise ValidationError(f"Locator of control '{self.name}' must be a string")
        self.locator = locator


class Region(NamedArtifact):
    """A sub-area of a page that is scoped by a filter value.

    How a value scopes the region is pluggable: an ``on_filter`` callable
    receives the value (e.g. to select a table row by key), and a
    ``locator`` template containing ``{value}`` is formatted with it.
    Either, both or neither may be given; with neither the value is only
    recorded.

    Example:
        >>> users = Region(name="User List", locator="css=tr:has-text('{value}')")
        >>> users.filter("jdoe")
        >>> users.scoped_locator
        "css=tr:has-text('jdoe')"
    """

    kind = "region"

    def __init__(
        self,
        name: Any = None,
        aliases: Optional[Sequence[str]] = None,
        locator: Optional[str] = None,
        on_filter: Optional[Callable[[Any], Any]] = None,
        presence: Optional[PresenceCheck] = None,
    ) -> None:
        super().__init__(name=name, aliases=aliases, presence=presence)
        if locator is not None and not isinstance(locator, str):
            raise ValidationError(f"Locator of region '{self.name}' must be a string")
        if on_filter is not None and not callable(on_filter):
            raise ValidationError(f"Filter of region '{self.name}' must be callable")
        self.locator = locator
        self._on_filter = on_filter
        self._filter_value: Any = _UNSET
        self._scoped_locator: Optional[str] = locator

    @property
    def is_filtered(self) -> bool:
        return self._filter_value is not _UNSET

    @property
    def filter_value(self) -> Any:
        """The value passed to the last successful filter() call, or None."""
        return None if self._filter_value is _UNSET else self._filter_value

    @property
    def scoped_locator(self) -> Optional[str]:
        return self._scoped_locator

    def filter(self, value: Any) -> None:
        """Scope this region with the given value.

        Args:
            value: Scoping parameter, passed to ``on_filter`` and substituted
                for ``{value}`` in the locator template

        Raises:
            RegionError: If the locator template cannot take the value or
                the filter callable rejects it; the region keeps its
                previous scope
        """
        scoped = self.locator
        if self.locator is not None:
            try:
                needs_value = "value" in _template_fields(self.locator)
            except ValueError as e:
                raise RegionError(
                    f"Locator template of region \"{self.name}\" is invalid: {e}"
                ) from e
            if needs_value and value is None:
                raise RegionError(
                    f"Region \"{self.name}\" requires a filter value for "
                    f"locator template \"{self.locator}\""
                )
            try:
                scoped = self.locator.format(value=value)
            except (KeyError, IndexError, AttributeError, TypeError, ValueError) as e:
                raise RegionError(
                    f"Locator template of region \"{self.name}\" is invalid: {e}"
                ) from e

        if self._on_filter is not None:
            try:
                self._on_filter(value)
            except RegionError:
                raise
            except Exception as e:
                raise RegionError(
                    f"Cannot filter region \"{self.name}\" by {value!r}: {e}"
                ) from e

        self._filter_value = value
        self._scoped_locator = scoped
        logger.debug("Region '%s' filtered by %r", self.name, value)
