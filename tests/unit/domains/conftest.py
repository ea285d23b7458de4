"""Pytest fixtures for page model domain tests."""

from __future__ import annotations

from typing import List

import pytest

from robotpages.domains.page_model import InMemoryApplicationRegistry, Page


class PresenceStub:
    """Presence check with a switchable result that counts its calls."""

    def __init__(self, present: bool = True) -> None:
        self.present = present
        self.calls = 0

    def __call__(self) -> bool:
        self.calls += 1
        return self.present


class FilterSpy:
    """Region filter callable that records every value it receives."""

    def __init__(self) -> None:
        self.values: List[object] = []

    def __call__(self, value: object) -> None:
        self.values.append(value)


@pytest.fixture
def presence() -> PresenceStub:
    return PresenceStub(present=True)


@pytest.fixture
def filter_spy() -> FilterSpy:
    return FilterSpy()


@pytest.fixture
def page(presence: PresenceStub) -> Page:
    """A login page whose presence check passes."""
    return Page(name="Login", aliases=["Sign In"], presence=presence)


@pytest.fixture
def registry() -> InMemoryApplicationRegistry:
    return InMemoryApplicationRegistry()
