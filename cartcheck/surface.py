"""
The browser capability consumed by the cart verification core.

The core never talks to Playwright directly. It asks a ``Surface`` to
count matches, read text or input values, and narrow a scope to one
row. ``PlaywrightSurface`` implements that over the sync Playwright API;
unit tests use an in-memory fake instead.

A scope is whatever the surface hands back from ``scope_for_row``; for
Playwright it is a ``Locator``, and ``None`` stands for the whole page.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

logger = logging.getLogger(__name__)


class Surface(Protocol):
    """Read-only view of the rendered page."""

    def count_matches(self, scope: Any, selector: str) -> int:
        ...

    def get_text(self, scope: Any, selector: str) -> str | None:
        ...

    def get_input_value(self, scope: Any, selector: str) -> str | None:
        ...

    def get_attribute(self, scope: Any, name: str) -> str | None:
        ...

    def scope_for_row(self, scope: Any, rows_selector: str, index: int) -> Any:
        ...


class PlaywrightSurface:
    """
    Surface backed by a Playwright page.

    Lookups use the first element matching a selector inside the scope.
    Playwright errors are logged at DEBUG and reported as "absent"
    (``None`` / ``0``) so callers only ever see typed outcomes.

    Attributes:
        page: Playwright page instance.
        timeout: Per-read timeout in milliseconds.
    """

    def __init__(self, page: Page, timeout: int = 2000):
        self.page = page
        self.timeout = timeout

    def _root(self, scope: Locator | None) -> Page | Locator:
        return self.page if scope is None else scope

    def count_matches(self, scope: Locator | None, selector: str) -> int:
        try:
            return self._root(scope).locator(selector).count()
        except PlaywrightError as exc:
            logger.debug("Counting %r failed: %s", selector, exc)
            return 0

    def get_text(self, scope: Locator | None, selector: str) -> str | None:
        try:
            return self._root(scope).locator(selector).first.text_content(timeout=self.timeout)
        except PlaywrightError as exc:
            logger.debug("Reading text of %r failed: %s", selector, exc)
            return None

    def get_input_value(self, scope: Locator | None, selector: str) -> str | None:
        try:
            return self._root(scope).locator(selector).first.input_value(timeout=self.timeout)
        except PlaywrightError as exc:
            logger.debug("Reading input value of %r failed: %s", selector, exc)
            return None

    def get_attribute(self, scope: Locator | None, name: str) -> str | None:
        if scope is None:
            return None
        try:
            return scope.get_attribute(name, timeout=self.timeout)
        except PlaywrightError as exc:
            logger.debug("Reading attribute %r failed: %s", name, exc)
            return None

    def scope_for_row(self, scope: Locator | None, rows_selector: str, index: int) -> Locator:
        return self._root(scope).locator(rows_selector).nth(index)
