"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation on the Playwright
sync API.

Provides:
    - Navigation and URL handling
    - Load state waits
    - SmartElement / SmartTable construction from selectors
    - Screenshot attachment for reports

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Optional

import allure
from loguru import logger
from playwright.sync_api import Page

from table_tools.browser.smart_element import SmartElement
from table_tools.browser.smart_table import Navigator, SmartTable
from table_tools.common.global_config import get_config


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class EmployeesPage(BasePage):
            URL_PATH = "/employees"

            def employees(self) -> SmartTable:
                return self.table("#employees", "thead th", "tbody tr", "td")
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(self, page: Page, base_url: str = ""):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application; defaults to config `ui.base_url`
        """
        self.page = page
        if not base_url:
            base_url = get_config("ui.base_url", "http://localhost:3000")
        self.base_url = base_url.rstrip("/")

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    def navigate(self, wait_for: Optional[str] = None) -> None:
        """
        Navigate to this page.

        Args:
            wait_for: 'load', 'domcontentloaded' or 'networkidle';
                defaults to config `table.load_state`
        """
        wait_for = wait_for or get_config("table.load_state", "networkidle")
        with allure.step(f"Navigate to {self.URL_PATH}"):
            self.page.goto(self.url, wait_until=wait_for)
            logger.debug(f"Navigated to: {self.url}")

    def open_html(self, html: str) -> None:
        """Render static markup, e.g. a local fixture, instead of navigating."""
        with allure.step("Open static page content"):
            self.page.set_content(html)

    def wait_for_page_load(self, state: Optional[str] = None, timeout: int = 15000) -> None:
        self.page.wait_for_load_state(
            state or get_config("table.load_state", "networkidle"), timeout=timeout
        )

    # =========================================================================
    # Element helpers
    # =========================================================================

    def element(self, selector: str, *format_args: Any) -> SmartElement:
        return SmartElement.find(self.page, selector, *format_args)

    def table(
        self,
        root_selector: str,
        headers_locator: str,
        row_locator: str,
        cell_locator: str,
        navigator: Optional[Navigator] = None,
    ) -> SmartTable:
        """
        Build a SmartTable rooted at `root_selector`.

        Args:
            root_selector: Selector for the table root
            headers_locator: Header cells, relative to the root
            row_locator: Data rows, relative to the root
            cell_locator: Cells, relative to a row
            navigator: Optional pagination controls
        """
        return self.element(root_selector).as_table(
            headers_locator, row_locator, cell_locator
        ).with_navigator(navigator)

    def navigator(self, navigation_bar_selector: str) -> Navigator:
        return Navigator(self.element(navigation_bar_selector))

    def take_screenshot(self, name: str, full_page: bool = False) -> bytes:
        """Capture the page and attach it to the Allure report."""
        screenshot = self.page.screenshot(full_page=full_page)
        allure.attach(screenshot, name=name, attachment_type=allure.attachment_type.PNG)
        return screenshot


__all__ = [
    "BasePage",
]
