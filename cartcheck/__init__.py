"""
Cart verification core for the Jupiter Toys test suite.

This package turns the rendered shop and cart pages into structured
records and reconciles the numbers shown to the customer:

- money: currency and quantity normalisation
- surface: the narrow browser capability the core consumes
- locator: ordered candidate-selector resolution
- extractor: cart rows -> CartLineItem records
- verifier: subtotal / total / price reconciliation
- catalog: product lookup on the shop page
"""

import logging

from config import get_config

# Configure logging
logging.basicConfig(
    level=getattr(logging, get_config().LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

from cartcheck.catalog import CatalogLookup
from cartcheck.extractor import CartRowExtractor
from cartcheck.locator import FieldMode, LocatedValue, ResilientLocator
from cartcheck.models import (
    CartLineItem,
    CartReport,
    PriceCheck,
    ProductInfo,
    SubtotalCheck,
    TotalCheck,
)
from cartcheck.surface import PlaywrightSurface, Surface

__all__ = [
    "CartLineItem",
    "CartReport",
    "CartRowExtractor",
    "CatalogLookup",
    "FieldMode",
    "LocatedValue",
    "PlaywrightSurface",
    "PriceCheck",
    "ProductInfo",
    "ResilientLocator",
    "SubtotalCheck",
    "Surface",
    "TotalCheck",
]
