"""
Subtotal, total and price reconciliation for a cart snapshot.

All functions are pure: they take already-extracted line items and
return result records. A mismatch is reported through
``within_tolerance=False`` (and logged), never raised, so one failing
line does not hide the others.

The grand total is compared with the sum of the *displayed* line
subtotals, not the recomputed ones. A wrong line subtotal therefore
fails its own check without also failing the total check.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from cartcheck.models import (
    CartLineItem,
    CartReport,
    PriceCheck,
    ProductInfo,
    SubtotalCheck,
    TotalCheck,
)
from cartcheck.money import CURRENCY_TOLERANCE, approx_equal, calculate_subtotal

logger = logging.getLogger(__name__)


def verify_subtotals(
    items: Iterable[CartLineItem], epsilon: float = CURRENCY_TOLERANCE
) -> list[SubtotalCheck]:
    """
    Check every line subtotal against ``unit_price * quantity``.

    Args:
        items: Cart line items.
        epsilon: Tolerance for the comparison.

    Returns:
        One SubtotalCheck per item, in input order.
    """
    logger.info("Verifying subtotals")
    checks = []
    for item in items:
        expected = calculate_subtotal(item.unit_price, item.quantity)
        check = SubtotalCheck(
            item=item,
            expected_subtotal=expected,
            within_tolerance=approx_equal(expected, item.displayed_subtotal, epsilon),
        )
        if not check.within_tolerance:
            logger.error("Subtotal verification failed for %s", check.describe())
        checks.append(check)
    return checks


def sum_of_subtotals(items: Iterable[CartLineItem]) -> float:
    """Sum of the displayed line subtotals."""
    total = sum((item.displayed_subtotal for item in items), 0.0)
    logger.info("Sum of subtotals: $%s", total)
    return total


def verify_total(
    items: Iterable[CartLineItem],
    displayed_total: float,
    epsilon: float = CURRENCY_TOLERANCE,
) -> TotalCheck:
    """
    Check the displayed grand total against the sum of line subtotals.

    Args:
        items: Cart line items.
        displayed_total: Grand total read from the page.
        epsilon: Tolerance for the comparison.

    Returns:
        TotalCheck for this snapshot.
    """
    logger.info("Verifying total")
    computed = sum_of_subtotals(items)
    check = TotalCheck(
        displayed_total=displayed_total,
        computed_sum=computed,
        within_tolerance=approx_equal(displayed_total, computed, epsilon),
    )
    if not check.within_tolerance:
        logger.error("Total verification failed: %s", check.describe())
    return check


def verify_prices(
    items: Iterable[CartLineItem],
    catalog: Mapping[str, ProductInfo],
    epsilon: float = CURRENCY_TOLERANCE,
) -> list[PriceCheck]:
    """
    Corroborate cart unit prices with the catalog.

    Items whose name is missing from ``catalog`` fail with
    ``catalog_price=None``.
    """
    logger.info("Verifying unit prices against catalog")
    checks = []
    for item in items:
        product = catalog.get(item.name)
        if product is None:
            check = PriceCheck(item=item, catalog_price=None, within_tolerance=False)
        else:
            check = PriceCheck(
                item=item,
                catalog_price=product.price,
                within_tolerance=approx_equal(product.price, item.unit_price, epsilon),
            )
        if not check.within_tolerance:
            logger.error("Price verification failed for %s", check.describe())
        checks.append(check)
    return checks


def build_report(
    items: Sequence[CartLineItem],
    displayed_total: float,
    catalog: Mapping[str, ProductInfo] | None = None,
    epsilon: float = CURRENCY_TOLERANCE,
) -> CartReport:
    """Run every check against one cart snapshot."""
    price_checks = verify_prices(items, catalog, epsilon) if catalog is not None else []
    report = CartReport(
        items=tuple(items),
        subtotal_checks=tuple(verify_subtotals(items, epsilon)),
        total_check=verify_total(items, displayed_total, epsilon),
        price_checks=tuple(price_checks),
    )
    logger.info(
        "Cart report: %d items, %s",
        len(report.items),
        "all checks passed" if report.all_passed else f"{len(report.failures())} failures",
    )
    return report
