"""Fixtures for browser-free page object tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from tests.unit.fakes import LocatorRegistry


@pytest.fixture
def locators() -> LocatorRegistry:
    return LocatorRegistry()


@pytest.fixture
def fake_page(locators: LocatorRegistry) -> MagicMock:
    return locators.page
