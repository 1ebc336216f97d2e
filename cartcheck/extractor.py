"""
Cart table extraction.

Turns the rendered cart into ``CartLineItem`` records. The row selector
is chosen from the candidate list at call time, so the same extractor
works whether rows carry a ``cart-item`` class or are plain table rows.
Every call re-reads the page; nothing is cached between calls.
"""

from __future__ import annotations

import logging
from typing import Any

from cartcheck.locator import ResilientLocator
from cartcheck.models import CartLineItem
from cartcheck.money import parse_currency
from cartcheck.selectors import CART_SELECTORS, CartSelectors
from cartcheck.surface import Surface

logger = logging.getLogger(__name__)


class CartRowExtractor:
    """
    Read cart rows and the displayed grand total.

    Attributes:
        surface: Surface the cart is read from.
        selectors: Candidate selectors for every cart field.
    """

    def __init__(self, surface: Surface, selectors: CartSelectors = CART_SELECTORS):
        self.surface = surface
        self.selectors = selectors
        self.locator = ResilientLocator(surface)

    def detect_rows(self, scope: Any = None) -> tuple[str, int] | None:
        """
        Find the first row selector that matches anything.

        Returns:
            ``(selector, row_count)`` or None when no candidate matches.
        """
        for selector in self.selectors.rows:
            try:
                count = self.surface.count_matches(scope, selector)
            except Exception as exc:
                logger.debug("Row candidate %r failed: %s", selector, exc)
                continue
            if count > 0:
                logger.info("Detected %d cart rows via %r", count, selector)
                return selector, count
        return None

    def _read_row(self, row: Any) -> CartLineItem:
        return CartLineItem(
            name=self.locator.text(row, self.selectors.name),
            unit_price=self.locator.currency(row, self.selectors.price),
            quantity=self.locator.quantity(row, self.selectors.quantity),
            displayed_subtotal=self.locator.currency(row, self.selectors.subtotal),
        )

    def extract_rows(self, scope: Any = None) -> list[CartLineItem]:
        """
        Extract every meaningful cart row.

        Rows that read as entirely empty (no name, no price, no quantity)
        are header or footer rows caught by a generic selector and are
        dropped.

        Args:
            scope: Region holding the cart table (None for the whole page).

        Returns:
            Cart line items in page order; empty for an empty cart.
        """
        detected = self.detect_rows(scope)
        if detected is None:
            logger.warning("No cart rows found")
            return []

        rows_selector, count = detected
        items: list[CartLineItem] = []
        for index in range(count):
            row = self.surface.scope_for_row(scope, rows_selector, index)
            item = self._read_row(row)
            if not (item.name or item.unit_price > 0 or item.quantity > 0):
                logger.debug("Skipping empty row %d", index)
                continue
            items.append(item)

        logger.info("Found %d cart items", len(items))
        return items

    def read_total(self, scope: Any = None) -> float:
        """Grand total shown under the cart table, 0.0 when absent."""
        text = self.locator.text(scope, self.selectors.total)
        if not text:
            logger.warning("Total price not found")
            return 0.0
        total = parse_currency(text)
        logger.info("Total price: $%s", total)
        return total
