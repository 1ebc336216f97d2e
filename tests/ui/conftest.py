"""
Playwright fixtures for offline UI tests.

These tests drive a real browser, but against static copies of the
Jupiter Toys markup loaded with ``page.set_content`` instead of the
live site. They exercise the page objects and the Playwright surface
without network access.

Key Concepts Demonstrated:
- Browser context management
- Loading fixture markup into a page
- Page object initialization
"""

from collections.abc import Callable, Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page

from tests.e2e.pages.cart_page import CartPage
from tests.e2e.pages.contact_page import ContactPage
from tests.e2e.pages.shop_page import ShopPage
from tests.ui.markup import CONTACT_HTML, SCENARIO_CART_HTML, SHOP_HTML

# Page objects need a base URL; offline tests never navigate to it
OFFLINE_BASE_URL = "http://jupiter.test"


# -----------------------------------------------------------------------------
# Browser Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def browser_context_args():
    """
    Configure browser context options.

    Returns:
        dict: Browser context configuration.
    """
    return {"viewport": {"width": 1280, "height": 720}}


@pytest.fixture(scope="function")
def context(browser: Browser, browser_context_args: dict) -> Generator[BrowserContext, None, None]:
    """
    Create a fresh browser context for each test.

    Args:
        browser: Playwright browser instance.
        browser_context_args: Context configuration.

    Yields:
        BrowserContext: Fresh browser context.
    """
    context = browser.new_context(**browser_context_args)
    context.set_default_timeout(5000)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


@pytest.fixture
def load_markup(page: Page) -> Callable[[str], Page]:
    """
    Load static markup into the test page.

    Returns:
        Function taking an HTML string and returning the loaded page.
    """

    def _load(html: str) -> Page:
        page.set_content(html)
        return page

    return _load


# -----------------------------------------------------------------------------
# Page Object Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def cart_page(load_markup) -> CartPage:
    """CartPage over the three-product scenario cart."""
    return CartPage(load_markup(SCENARIO_CART_HTML), OFFLINE_BASE_URL)


@pytest.fixture
def shop_page(load_markup) -> ShopPage:
    return ShopPage(load_markup(SHOP_HTML), OFFLINE_BASE_URL)


@pytest.fixture
def contact_page(load_markup) -> ContactPage:
    return ContactPage(load_markup(CONTACT_HTML), OFFLINE_BASE_URL)
