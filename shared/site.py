"""Target-site reachability helpers for the browser test suites."""

from __future__ import annotations

import logging
import time

import pytest
import requests

logger = logging.getLogger(__name__)


def is_site_ready(url: str, timeout: int = 5) -> bool:
    """Return True when the site answers with anything below a server error."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code < 500


def wait_for_site(url: str, timeout: int = 60, interval: int = 1) -> None:
    """Poll the site root until it answers or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_site_ready(url, timeout=min(timeout, 5)):
            return
        time.sleep(interval)
    raise RuntimeError(f"Site at {url} not reachable after {timeout}s")


def resolve_site_url(*, base_url: str, require: bool, timeout: int) -> str:
    """
    Return a reachable base URL for the E2E suite.

    Priority:
    1. When `require` is set, wait up to `timeout` seconds and fail hard.
    2. Otherwise probe once and skip the suite when the site is down.
    """
    base_url = base_url.rstrip("/")
    if require:
        wait_for_site(base_url, timeout=timeout)
        logger.info("Target site %s is reachable", base_url)
        return base_url

    if not is_site_ready(base_url, timeout=timeout):
        pytest.skip(
            f"{base_url} is not reachable; set E2E_REQUIRE_SITE=1 to fail instead"
        )
    logger.info("Target site %s is reachable", base_url)
    return base_url
