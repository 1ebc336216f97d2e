"""
Records produced while reading and reconciling the shop.

All records are immutable and recreated from the live page on every
call; nothing here is cached or written back.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProductInfo:
    """A product card as rendered on the shop page."""

    name: str
    price: float
    identifier: str


@dataclass(frozen=True)
class CartLineItem:
    """
    One row of the cart table.

    Attributes:
        name: Product name (whitespace stripped).
        unit_price: Price of a single unit.
        quantity: Units in the cart; 0 when the quantity input is missing.
        displayed_subtotal: Subtotal exactly as the page shows it.
    """

    name: str
    unit_price: float
    quantity: int
    displayed_subtotal: float

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError(f"quantity must not be negative, got {self.quantity}")


@dataclass(frozen=True)
class SubtotalCheck:
    """Displayed line subtotal compared with ``unit_price * quantity``."""

    item: CartLineItem
    expected_subtotal: float
    within_tolerance: bool

    def describe(self) -> str:
        return (
            f"{self.item.name}: expected ${self.expected_subtotal:.2f}, "
            f"actual ${self.item.displayed_subtotal:.2f}"
        )


@dataclass(frozen=True)
class TotalCheck:
    """Displayed grand total compared with the sum of displayed subtotals."""

    displayed_total: float
    computed_sum: float
    within_tolerance: bool

    def describe(self) -> str:
        return (
            f"total: expected ${self.computed_sum:.2f}, "
            f"actual ${self.displayed_total:.2f}"
        )


@dataclass(frozen=True)
class PriceCheck:
    """Cart unit price compared with the catalog price of the same product."""

    item: CartLineItem
    catalog_price: float | None
    within_tolerance: bool

    def describe(self) -> str:
        if self.catalog_price is None:
            return f"{self.item.name}: not found in catalog"
        return (
            f"{self.item.name}: catalog ${self.catalog_price:.2f}, "
            f"cart ${self.item.unit_price:.2f}"
        )


@dataclass(frozen=True)
class CartReport:
    """Every check made against one cart snapshot."""

    items: tuple[CartLineItem, ...]
    subtotal_checks: tuple[SubtotalCheck, ...]
    total_check: TotalCheck
    price_checks: tuple[PriceCheck, ...] = field(default_factory=tuple)

    @property
    def all_passed(self) -> bool:
        return not self.failures()

    def failures(self) -> list[str]:
        """Human-readable description of every failed check."""
        failed = [check.describe() for check in self.subtotal_checks if not check.within_tolerance]
        if not self.total_check.within_tolerance:
            failed.append(self.total_check.describe())
        failed.extend(check.describe() for check in self.price_checks if not check.within_tolerance)
        return failed
