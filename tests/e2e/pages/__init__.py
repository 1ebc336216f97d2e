"""
Page Object Model (POM) classes for the Jupiter Toys site.

This package contains page objects that encapsulate page-specific
locators and interactions. The POM pattern provides:
- Separation of test logic from page details
- Reusable page interactions
- Maintainable test code (changes to UI only require updates in one place)
"""

from tests.e2e.pages.base_page import BasePage
from tests.e2e.pages.cart_page import CartPage
from tests.e2e.pages.contact_page import ContactPage
from tests.e2e.pages.home_page import HomePage
from tests.e2e.pages.shop_page import ShopPage

__all__ = ["BasePage", "CartPage", "ContactPage", "HomePage", "ShopPage"]
