"""Presence verifiers backed by Robot Framework browser libraries.

A presence verifier is the zero-argument callable a page (or any other
artifact) runs before it hands out one of its elements. The verifiers
here delegate to Browser Library or SeleniumLibrary keywords through
BuiltIn, so they only work inside a running Robot Framework suite.

Usage:
    from robotpages.adapters import create_presence_verifier

    page.set_presence(create_presence_verifier(locator="id=login-form"))
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Optional, Protocol, Tuple, runtime_checkable

from robot.libraries.BuiltIn import BuiltIn
from robot.utils import secs_to_timestr, timestr_to_secs

logger = logging.getLogger(__name__)


class WebLibrary(Enum):
    """Browser automation libraries a verifier can drive."""

    BROWSER = "Browser"
    SELENIUM = "SeleniumLibrary"

    @classmethod
    def from_string(cls, value: str) -> "WebLibrary":
        """Create a WebLibrary from its Robot Framework library name.

        Raises:
            ValueError: If the library name is not supported
        """
        normalized = value.strip().lower()
        for library in cls:
            if library.value.lower() == normalized:
                return library
        if normalized in ("selenium", "seleniumlibrary"):
            return cls.SELENIUM
        raise ValueError(
            f"Unsupported web library: '{value}'. "
            f"Supported libraries: {[lib.value for lib in cls]}"
        )


@runtime_checkable
class PresenceVerifier(Protocol):
    """Zero-argument callable returning True when the artifact is displayed."""

    def __call__(self) -> bool:
        ...


class KeywordPresenceVerifier:
    """Runs an arbitrary keyword; the artifact is present if it passes."""

    def __init__(self, keyword: str, *args: Any) -> None:
        if not keyword or not keyword.strip():
            raise ValueError("Presence keyword cannot be empty")
        self.keyword = keyword
        self.args: Tuple[Any, ...] = args
        self._builtin: Optional[BuiltIn] = None

    @property
    def builtin(self) -> BuiltIn:
        """Get BuiltIn library instance (lazy initialization)."""
        if self._builtin is None:
            self._builtin = BuiltIn()
        return self._builtin

    def __call__(self) -> bool:
        status = self.builtin.run_keyword_and_return_status(self.keyword, *self.args)
        logger.debug("Presence keyword '%s' %s returned %s", self.keyword, self.args, status)
        return bool(status)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keyword={self.keyword!r}, args={self.args!r})"


class LocatorPresenceVerifier(KeywordPresenceVerifier):
    """Waits for an element that identifies the page to become visible."""

    WAIT_KEYWORDS: Dict[WebLibrary, str] = {
        WebLibrary.BROWSER: "Wait For Elements State",
        WebLibrary.SELENIUM: "Wait Until Element Is Visible",
    }

    def __init__(
        self,
        locator: str,
        library: str = "Browser",
        timeout: Any = 5.0,
    ) -> None:
        if not locator or not locator.strip():
            raise ValueError("Presence locator cannot be empty")
        self.locator = locator
        self.library = WebLibrary.from_string(library)
        self.timeout = secs_to_timestr(timestr_to_secs(timeout))

        if self.library is WebLibrary.BROWSER:
            args: Tuple[Any, ...] = (locator, "visible", f"timeout={self.timeout}")
        else:
            args = (locator, f"timeout={self.timeout}")
        super().__init__(self.WAIT_KEYWORDS[self.library], *args)


class TitlePresenceVerifier(KeywordPresenceVerifier):
    """Checks the title of the current browser page."""

    def __init__(self, title: str, library: str = "Browser") -> None:
        self.title = title
        self.library = WebLibrary.from_string(library)
        if self.library is WebLibrary.BROWSER:
            # Browser Library assertion syntax: Get Title    ==    expected
            super().__init__("Get Title", "==", title)
        else:
            super().__init__("Title Should Be", title)


def create_presence_verifier(
    locator: Optional[str] = None,
    keyword: Optional[str] = None,
    title: Optional[str] = None,
    library: str = "Browser",
    timeout: Any = 5.0,
    keyword_args: Tuple[Any, ...] = (),
) -> Optional[KeywordPresenceVerifier]:
    """Create the verifier matching the given presence directive.

    Exactly one of ``locator``, ``keyword`` or ``title`` may be given.

    Returns:
        The verifier, or None when no directive was given

    Raises:
        ValueError: If more than one directive is given, if keyword
            arguments come without a keyword, or if the library is not
            supported
    """
    directives = [d for d in (locator, keyword, title) if d]
    if len(directives) > 1:
        raise ValueError("Only one of locator, keyword or title can define presence")
    if keyword_args and not keyword:
        raise ValueError("Presence keyword arguments require a presence keyword")
    if locator:
        return LocatorPresenceVerifier(locator, library=library, timeout=timeout)
    if keyword:
        return KeywordPresenceVerifier(keyword, *keyword_args)
    if title:
        return TitlePresenceVerifier(title, library=library)
    return None
