"""
Shared pytest fixtures for the Automation Exercise test suite.

This module contains fixtures that are shared across all test modules:
the active configuration and test data factories. Factories hand out
fresh, uniquely stamped records so tests never collide on the live site.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Environment-selected configuration
- Test data factories
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from config import Config, get_config
from shared.factories import ContactData, UserData, build_contact, build_user


# -----------------------------------------------------------------------------
# Configuration Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def settings() -> type[Config]:
    """
    Configuration class for this run.

    Selected by the E2E_ENV environment variable (local, ci).
    """
    return get_config()


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def user_factory() -> Callable[..., UserData]:
    """
    Factory for unique registration data.

    Example:
        def test_something(user_factory):
            user = user_factory("Existing User")
            assert "existinguser" in user.email
    """
    return build_user


@pytest.fixture
def contact_factory() -> Callable[..., ContactData]:
    """Factory for unique contact form data."""
    return build_contact
