"""Shared live-site helpers for smoke and E2E test suites."""

from __future__ import annotations

import time

import pytest
import requests

from config import get_config


def is_site_reachable(url: str, timeout: int = 5) -> bool:
    """Return True when the shop home page responds with 200."""
    try:
        response = requests.get(f"{url}/", timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def wait_for_site(url: str, timeout: int = 30, interval: int = 2) -> None:
    """Poll the shop home page until it responds or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_site_reachable(url):
            return
        time.sleep(interval)
    raise RuntimeError(f"Jupiter Toys at {url} not reachable after {timeout}s")


def live_site_url(*, suite_name: str, base_url: str | None = None) -> str:
    """
    Return a reachable shop URL for a live test suite.

    Priority:
    1. When REQUIRE_LIVE_SITE is set, wait for the site and fail if it
       never answers.
    2. Otherwise skip the suite when the site cannot be reached.
    """
    settings = get_config()
    url = (base_url or settings.BASE_URL).rstrip("/")

    if settings.REQUIRE_LIVE_SITE:
        wait_for_site(url)
        return url

    if not is_site_reachable(url):
        pytest.skip(
            f"{url} is not reachable; set JUPITER_REQUIRE_SITE=1 to fail {suite_name} tests instead"
        )
    return url
