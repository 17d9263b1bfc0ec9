"""
================================================================================
Employees Page Object (Sync / Playwright)
================================================================================

Page object for the static employees fixture (`ui_testing/data/employees.html`):
a DataTables-style paginated table plus a table of editable rows.

================================================================================
"""

from __future__ import annotations

from pathlib import Path

import allure

from table_tools.browser.page_base import BasePage
from table_tools.browser.smart_table import Navigator, SmartTable


FIXTURE_PATH = Path(__file__).parent.parent / "data" / "employees.html"


class EmployeesPage(BasePage):
    """Employees fixture page."""

    PAGE_TITLE = "Employees"

    HEADERS = "thead >> th"
    ROWS = "tbody >> tr"
    CELLS = "td"

    EMPLOYEE_TABLE = "id=example"
    EDITABLE_TABLE = "id=forms"
    PAGINATION = "id=example_paginate"

    @allure.step("Open employees page")
    def open(self) -> "EmployeesPage":
        self.open_html(FIXTURE_PATH.read_text(encoding="utf-8"))
        self.wait_for_page_load()
        return self

    def pagination(self) -> Navigator:
        """Previous/next/page-number controls; First/Last are left to the caller."""
        return (
            self.navigator(self.PAGINATION)
            .with_previous_page("a.previous")
            .with_next_page("a.next")
            .with_page_number_buttons("span >> a", "class", "current")
        )

    def employees(self, paginated: bool = True) -> SmartTable:
        return self.table(
            self.EMPLOYEE_TABLE,
            self.HEADERS,
            self.ROWS,
            self.CELLS,
            navigator=self.pagination() if paginated else None,
        )

    def editable_employees(self) -> SmartTable:
        return self.table(self.EDITABLE_TABLE, self.HEADERS, self.ROWS, self.CELLS)
