"""
Product lookup on the shop page.

Reads the rendered product cards so cart values can be checked against
an independent source. A product that is not on the page is reported
as None; callers decide whether that fails their scenario.
"""

from __future__ import annotations

import logging
from typing import Any

from cartcheck.locator import ResilientLocator
from cartcheck.models import ProductInfo
from cartcheck.selectors import CATALOG_SELECTORS, CatalogSelectors
from cartcheck.surface import Surface

logger = logging.getLogger(__name__)


class CatalogLookup:
    """
    Read and search the product catalog.

    Attributes:
        surface: Surface the catalog is read from.
        selectors: Candidate selectors for cards, titles and prices.
    """

    def __init__(self, surface: Surface, selectors: CatalogSelectors = CATALOG_SELECTORS):
        self.surface = surface
        self.selectors = selectors
        self.locator = ResilientLocator(surface)

    def _detect_cards(self, scope: Any) -> tuple[str, int] | None:
        for selector in self.selectors.cards:
            try:
                count = self.surface.count_matches(scope, selector)
            except Exception as exc:
                logger.debug("Card candidate %r failed: %s", selector, exc)
                continue
            if count > 0:
                return selector, count
        return None

    def _card_id(self, card: Any) -> str | None:
        try:
            return self.surface.get_attribute(card, "id")
        except Exception as exc:
            logger.debug("Could not read card id: %s", exc)
            return None

    def list_products(self, scope: Any = None) -> list[ProductInfo]:
        """
        Read every product card in page order.

        The identifier is the card's ``id`` attribute, or
        ``product-<n>`` (1-based position) when the card has none.
        """
        detected = self._detect_cards(scope)
        if detected is None:
            logger.warning("No products found")
            return []
        cards_selector, count = detected

        products = []
        for index in range(count):
            card = self.surface.scope_for_row(scope, cards_selector, index)
            name = self.locator.text(card, self.selectors.title)
            if not name:
                continue
            products.append(
                ProductInfo(
                    name=name,
                    price=self.locator.currency(card, self.selectors.price),
                    identifier=self._card_id(card) or f"product-{index + 1}",
                )
            )

        logger.info("Found %d products: %s", len(products), ", ".join(p.name for p in products))
        return products

    def find_product(self, partial_name: str, scope: Any = None) -> ProductInfo | None:
        """
        Find the first product whose name contains ``partial_name``.

        Matching is case-sensitive and follows page order.

        Returns:
            The matching product, or None.
        """
        for product in self.list_products(scope):
            if partial_name in product.name:
                logger.info("Catalog match for %r: %s ($%s)", partial_name, product.name, product.price)
                return product
        logger.warning("No catalog entry matches %r", partial_name)
        return None

    def price_index(self, scope: Any = None) -> dict[str, ProductInfo]:
        """Products keyed by exact name; the first card wins on duplicates."""
        index: dict[str, ProductInfo] = {}
        for product in self.list_products(scope):
            index.setdefault(product.name, product)
        return index
