"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Browser and page fixtures for UI tests on the Playwright sync API.

Key Features:
- Session-scoped Chromium instance (tests are skipped if it cannot launch)
- Isolated context per test
- Page Object fixtures
- Screenshot capture on failure

================================================================================
"""

from typing import Generator

import allure
import pytest
from loguru import logger
from playwright.sync_api import Browser, BrowserContext, Error as PlaywrightError, Page, sync_playwright

from testsuites.ui_testing.pages.employees_page import EmployeesPage


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def browser() -> Generator[Browser, None, None]:
    """
    Session-scoped browser fixture.

    Provides a single headless Chromium shared across all tests.
    """
    with sync_playwright() as playwright:
        try:
            browser = playwright.chromium.launch(headless=True)
        except PlaywrightError as e:
            pytest.skip(f"Chromium is not available for UI tests: {e}")
        yield browser
        browser.close()


@pytest.fixture(scope="function")
def context(browser: Browser) -> Generator[BrowserContext, None, None]:
    """
    Function-scoped browser context fixture.

    Creates a new browser context for each test, providing isolation.
    """
    context = browser.new_context(viewport={"width": 1280, "height": 900})
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def employees_page(page: Page) -> EmployeesPage:
    """Employees fixture page, already opened."""
    return EmployeesPage(page).open()


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Capture a screenshot when a UI test fails and attach it to the Allure
    report.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = getattr(item, "funcargs", {}).get("page")
        if page is not None:
            try:
                allure.attach(
                    page.screenshot(full_page=True),
                    name="failure_screenshot",
                    attachment_type=allure.attachment_type.PNG,
                )
            except PlaywrightError as e:
                logger.warning(f"Failed to capture screenshot on failure: {e}")
