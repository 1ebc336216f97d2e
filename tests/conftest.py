"""
Shared pytest fixtures for the Jupiter Toys test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure
test isolation by providing fresh data for each test.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Overriding pytest-playwright fixtures
- Test data factories with Faker
- Screenshot capture on failure
"""

import os
from collections.abc import Callable, Generator

import pytest
from faker import Faker
from playwright.sync_api import Browser
from playwright.sync_api import Error as PlaywrightError

from config import Config, get_config


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Configuration Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def settings() -> type[Config]:
    """Active configuration class (selected by JUPITER_ENV)."""
    return get_config()


# -----------------------------------------------------------------------------
# Browser Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args: dict, settings) -> dict:
    """
    Extend pytest-playwright launch options with the configured headless mode.

    ``--headed`` on the command line still wins.
    """
    headless = browser_type_launch_args.get("headless", True) and settings.HEADLESS
    return {**browser_type_launch_args, "headless": headless}


@pytest.fixture(scope="session")
def browser(launch_browser) -> Generator[Browser, None, None]:
    """
    Launch the browser once per session.

    Browser tests are skipped (not failed) on machines where the
    Playwright browser binaries have not been installed.
    """
    try:
        browser = launch_browser()
    except PlaywrightError as exc:
        pytest.skip(f"Playwright browser unavailable (run `playwright install`): {exc}")
    yield browser
    browser.close()


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def contact_details_factory() -> Callable[..., dict[str, str]]:
    """
    Factory fixture for contact form data.

    Returns:
        Function that builds a complete set of contact form values;
        keyword arguments override individual fields.

    Example:
        def test_something(contact_details_factory):
            details = contact_details_factory(forename="Ada")
    """

    def _make(**overrides: str) -> dict[str, str]:
        details = {
            "forename": fake.first_name(),
            "surname": fake.last_name(),
            "email": fake.email(),
            "telephone": fake.numerify("04########"),
            "message": fake.sentence(nb_words=8),
        }
        details.update(overrides)
        return details

    return _make


# -----------------------------------------------------------------------------
# Screenshot on Failure
# -----------------------------------------------------------------------------

@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Capture screenshot on test failure.

    This pytest hook captures a screenshot when a browser test fails,
    which is invaluable for debugging test failures.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        # Only browser tests have a page fixture
        page = item.funcargs.get("page")
        if page:
            screenshot_dir = get_config().SCREENSHOT_DIR
            os.makedirs(screenshot_dir, exist_ok=True)

            test_name = item.name.replace("/", "_").replace("::", "_")
            screenshot_path = os.path.join(screenshot_dir, f"{test_name}.png")

            try:
                page.screenshot(path=screenshot_path)
                print(f"\nScreenshot saved: {screenshot_path}")
            except Exception as e:  # pragma: no cover - best effort logging
                print(f"\nFailed to capture screenshot: {e}")
