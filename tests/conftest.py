"""Pytest configuration for the rf-pages test suite."""

from __future__ import annotations

import pytest

from robotpages.domains.page_model import default_registry


@pytest.fixture
def clean_default_registry():
    """Clear the process-wide application registry around a test."""
    default_registry().clear()
    yield default_registry()
    default_registry().clear()
