"""Presence Adapters - bridge between pages and browser libraries.

Pages only know about zero-argument presence callables; this package
provides implementations that drive Browser Library (Playwright) or
SeleniumLibrary through Robot Framework's BuiltIn library.

Key Components:
    PresenceVerifier: Protocol every presence check satisfies
    KeywordPresenceVerifier: Presence decided by any keyword's status
    LocatorPresenceVerifier: Presence decided by a visible element
    TitlePresenceVerifier: Presence decided by the page title
    create_presence_verifier: Factory used by PageLibrary
"""

from robotpages.adapters.presence_adapter import (
    KeywordPresenceVerifier,
    LocatorPresenceVerifier,
    PresenceVerifier,
    TitlePresenceVerifier,
    WebLibrary,
    create_presence_verifier,
)

__all__ = [
    "KeywordPresenceVerifier",
    "LocatorPresenceVerifier",
    "PresenceVerifier",
    "TitlePresenceVerifier",
    "WebLibrary",
    "create_presence_verifier",
]
