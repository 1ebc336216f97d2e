"""
Candidate selector lists for the Jupiter Toys pages.

Each field maps to an ordered tuple of selectors. Earlier entries win:
dedicated classes come first, generic table structure last.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CartSelectors:
    rows: tuple[str, ...]
    name: tuple[str, ...]
    price: tuple[str, ...]
    quantity: tuple[str, ...]
    subtotal: tuple[str, ...]
    total: tuple[str, ...]


@dataclass(frozen=True)
class CatalogSelectors:
    cards: tuple[str, ...]
    title: tuple[str, ...]
    price: tuple[str, ...]


CART_SELECTORS = CartSelectors(
    rows=(".cart-item", ".cart-items tbody tr", "tbody tr"),
    name=(".product-title", "td:nth-child(1)"),
    price=(".product-price", "td:nth-child(2)"),
    quantity=("input.input-mini", "input[name='quantity']", "input[type='number']", "input"),
    subtotal=(".line-price", ".subtotal", "td:nth-child(4)"),
    total=(".total", "tfoot strong", "tfoot td"),
)

CATALOG_SELECTORS = CatalogSelectors(
    cards=(".product", "li[id^='product-']"),
    title=(".product-title", "h4"),
    price=(".product-price", ".price"),
)
