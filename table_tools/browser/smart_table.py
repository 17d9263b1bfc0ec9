"""
================================================================================
Smart Table
================================================================================

Row/column access, search, extraction and validation for HTML tables,
optionally following pagination controls.

Components:
    - SmartTable: header lookup, row enumeration, page-aware search/extract
    - SmartTableRow: one row on the visible page, addressed by header name
    - Navigator: previous/next/first/last/page-number pagination controls

Usage:
    table = SmartElement.find(page, "id=example").as_table(
        "thead >> th", "tbody >> tr", "td"
    ).with_navigator(
        Navigator(SmartElement.find(page, "id=example_paginate"))
        .with_previous_page("a:has-text('Previous')")
        .with_next_page("a:has-text('Next')")
        .with_page_number_buttons("span >> a", "class", "current")
    )
    office = table.find_row({"Name": "Caesar Vance"}).get_cell_value("Office")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import timedelta
from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence, Union

import allure
from loguru import logger
from playwright.sync_api import Locator

from table_tools.browser.smart_element import HYPERLINK_SELECTOR, SmartElement
from table_tools.common.global_config import get_config
from table_tools.exceptions import (
    ColumnNotFoundError,
    NavigationConfigError,
    NotEditableError,
    PageOutOfRangeError,
    RowNotFoundError,
    RowShapeError,
)
from table_tools.validation.time_limit import TimeLimit
from table_tools.validation.validate import Method, ValidationResult, validate


class TableType(Enum):
    """How cell values are read, decided once per table."""
    STANDARD = "standard"
    INPUT_VALUES = "input_values"


class SmartTable:
    """
    An HTML table addressed by header names.

    Headers are read once at construction. Rows are never cached: every
    call re-queries the page, so results always reflect the visible page.
    """

    def __init__(
        self,
        table: Union[SmartElement, Locator],
        headers_locator: str,
        row_locator: str,
        cell_locator: str,
    ):
        """
        Initialize the table. Prefer `SmartTable.find`, which waits for the
        page to settle first.

        Args:
            table: Root element of the table
            headers_locator: Selector for header cells, relative to the root
            row_locator: Selector for data rows, relative to the root
            cell_locator: Selector for cells, relative to a row
        """
        self.table = SmartElement(table)
        self.headers_locator = headers_locator
        self.row_locator = row_locator
        self.cell_locator = cell_locator
        self.navigator: Optional[Navigator] = None
        self.headers: List[str] = list(self.table.locator(headers_locator).all_text_contents())
        # Tables containing form controls report control values instead of text
        self.type = (
            TableType.INPUT_VALUES if self.table.inner_input() is not None else TableType.STANDARD
        )
        logger.debug(f"Table resolved with {len(self.headers)} headers {self.headers} ({self.type.name})")

    @classmethod
    def find(
        cls,
        table: Union[SmartElement, Locator],
        headers_locator: str,
        row_locator: str,
        cell_locator: str,
    ) -> "SmartTable":
        """Create a table once the page has reached the configured load state."""
        table = SmartElement(table).wait_for_load_state()
        return cls(table, headers_locator, row_locator, cell_locator)

    # =========================================================================
    # Navigation
    # =========================================================================

    def with_navigator(self, navigator: Optional["Navigator"]) -> "SmartTable":
        """Attach, replace or (with None) detach the pagination navigator."""
        self.navigator = navigator
        return self

    def navigate(self) -> Optional["Navigator"]:
        return self.navigator

    def navigation_set(self) -> bool:
        return self.navigator is not None

    def as_smart_element(self) -> SmartElement:
        return self.table

    def _to_first_page(self) -> None:
        if self.navigation_set():
            self.navigator.to_first_page_if_set()

    def _to_next_page(self) -> bool:
        return self.navigation_set() and self.navigator.to_next_page_if_set()

    # =========================================================================
    # Columns
    # =========================================================================

    def get_column_index(self, header: str) -> int:
        try:
            return self.headers.index(header)
        except ValueError:
            logger.error(f"No column with the header '{header}' exists in {self.headers}")
            raise ColumnNotFoundError(header) from None

    def get_columns(self) -> SmartElement:
        return self.table.locator(self.headers_locator)

    def get_column(self, header: Union[str, int]) -> SmartElement:
        """Header cell by name or index."""
        index = header if isinstance(header, int) else self.get_column_index(header)
        return self.get_columns().nth(index)

    # =========================================================================
    # Rows (current page)
    # =========================================================================

    def rows(self) -> SmartElement:
        return self.table.locator(self.row_locator)

    def get_rows(self) -> List["SmartTableRow"]:
        return [self.get_row(i) for i in range(self.rows().count())]

    def get_row(self, index: int) -> "SmartTableRow":
        return SmartTableRow(self, self.rows().nth(index))

    def find_row_on_page(self, required_values: Mapping[str, str]) -> Optional["SmartTableRow"]:
        """First row on the visible page containing all required values."""
        for row in self.get_rows():
            if validate.values_are_present_in_map(required_values, row.get_value_map(), Method.EQUALS):
                return row
        return None

    # =========================================================================
    # Page-aware operations
    # =========================================================================

    @allure.step("Find table row: {required_values}")
    def find_row(self, required_values: Mapping[str, str]) -> "SmartTableRow":
        """
        Search every page for the first row containing all required values.

        Starts from the first page when a navigator is attached.

        Raises:
            ColumnNotFoundError: If a required key is not a header
            RowNotFoundError: If no reachable row matches
        """
        for header in required_values:
            self.get_column_index(header)

        logger.info(f"Searching table for row: {dict(required_values)}")
        self._to_first_page()
        row = self.find_row_on_page(required_values)
        while row is None and self._to_next_page():
            row = self.find_row_on_page(required_values)

        if row is None:
            logger.warning(f"No row of data found with the following values: {dict(required_values)}")
            raise RowNotFoundError(required_values)
        return row

    def extract_data_on_page(self, *column_headers: str) -> List[Dict[str, str]]:
        return [row.get_value_map(*column_headers) for row in self.get_rows()]

    @allure.step("Extract table data")
    def extract_data(self, *column_headers: str) -> List[Dict[str, str]]:
        """
        Records for every row on every page.

        Args:
            *column_headers: Columns to include; all columns when omitted
        """
        self._to_first_page()
        table_data = self.extract_data_on_page(*column_headers)
        while self._to_next_page():
            table_data.extend(self.extract_data_on_page(*column_headers))
        logger.info(f"Extracted {len(table_data)} rows of table data")
        return table_data

    def get_list_of_values_on_page(self, column_header: str) -> List[str]:
        return [row.get_cell_value(column_header) for row in self.get_rows()]

    @allure.step("Get column values: {column_header}")
    def get_list_of_values(self, column_header: str) -> List[str]:
        """Every value in one column across all pages."""
        self._to_first_page()
        values = self.get_list_of_values_on_page(column_header)
        while self._to_next_page():
            values.extend(self.get_list_of_values_on_page(column_header))
        return values

    @allure.step("Validate table contains {expected_data}")
    def validate_table(
        self,
        expected_data: Sequence[Mapping[str, str]],
        method: Method = Method.EQUALS,
    ) -> ValidationResult:
        """
        Check every expected record is matched by a distinct row.

        Pages are visited in order and paging stops as soon as every record
        has been matched.

        Returns:
            ValidationResult listing the unmatched records on failure
        """
        remaining = list(expected_data)
        self._to_first_page()
        self._validate_page(remaining, method)
        while remaining and self._to_next_page():
            self._validate_page(remaining, method)

        if not remaining:
            return ValidationResult.success()
        return ValidationResult.failure(
            "Matches not found for the following data: %s", [dict(r) for r in remaining]
        )

    def _validate_page(self, remaining: List[Mapping[str, str]], method: Method) -> None:
        """Remove from `remaining` each record matched by a row on this page."""
        for i in range(self.rows().count()):
            if not remaining:
                return
            row_data = self.get_row(i).get_value_map()
            for j in range(len(remaining) - 1, -1, -1):
                if validate.values_are_present_in_map(remaining[j], row_data, method):
                    del remaining[j]
                    break


class SmartTableRow:
    """
    One row of the visible page.

    Bound to its position at creation; discard it after navigating.
    """

    def __init__(self, table: SmartTable, element: Union[SmartElement, Locator]):
        self.table = table
        self.element = SmartElement(element)
        cell_count = self.get_cells().count()
        header_count = len(table.headers)
        if cell_count != header_count:
            inner_html = self.element.inner_html()
            logger.error(f"Row has {cell_count} cells but table has {header_count} headers")
            raise RowShapeError(header_count, cell_count, inner_html)

    @property
    def headers(self) -> List[str]:
        return self.table.headers

    def get_column_index(self, header: str) -> int:
        return self.table.get_column_index(header)

    def get_cells(self) -> SmartElement:
        return self.element.locator(self.table.cell_locator)

    def get_cell(self, header: str) -> SmartElement:
        return self.get_cells().nth(self.get_column_index(header))

    def get_cell_value(self, header: str) -> str:
        cell = self.get_cell(header)
        if self.table.type is TableType.STANDARD:
            return cell.text_content()
        inner_input = cell.inner_input()
        if inner_input is not None:
            return inner_input.input_value()
        return cell.inner_text()

    def get_values(self) -> List[str]:
        """Cell values in header order."""
        if self.table.type is TableType.STANDARD:
            return list(self.get_cells().all_text_contents())
        return [self.get_cell_value(header) for header in self.headers]

    def get_value_map(self, *columns_to_extract: str) -> Dict[str, str]:
        """
        Row as a record.

        Args:
            *columns_to_extract: Columns to include; all columns when omitted
        """
        if not columns_to_extract:
            return dict(zip(self.headers, self.get_values()))
        return {column: self.get_cell_value(column) for column in columns_to_extract}

    def select_link(self, header: str) -> None:
        """Click the first hyperlink inside a cell."""
        self.get_cell(header).locator(HYPERLINK_SELECTOR).first.click()

    @allure.step("Enter table data: {header} = {value}")
    def enter_data(self, header: str, value: str) -> None:
        """
        Set the value of the control inside a cell.

        Raises:
            NotEditableError: If the cell holds no input, textarea or select
        """
        inner_input = self.get_cell(header).inner_input()
        if inner_input is None:
            raise NotEditableError(f"Element is not an editable element: column '{header}'")
        logger.debug(f"Entering '{value}' into column '{header}'")
        inner_input.set_input_value(value)

    def enter_data_map(self, data: Mapping[str, str]) -> None:
        for header, value in data.items():
            self.enter_data(header, value)

    def __repr__(self) -> str:
        return f"SmartTableRow({self.element!r})"


class Navigator:
    """
    Pagination controls for a table.

    Every control is optional and configured with a selector relative to the
    navigation bar. Builder methods accept None to clear a control.

    A control counts as unavailable when it, or any of its ancestors, is
    disabled. Loops that click one page at a time are bounded by a time limit
    (config `navigation.timeout_limit`, seconds).
    """

    def __init__(self, navigation_bar: Union[SmartElement, Locator]):
        self.navigation_bar = SmartElement(navigation_bar)
        self.previous_page: Optional[SmartElement] = None
        self.next_page: Optional[SmartElement] = None
        self.first_page: Optional[SmartElement] = None
        self.last_page: Optional[SmartElement] = None
        self.page_number_buttons: Optional[SmartElement] = None
        self.current_page_number_attribute: Optional[str] = None
        self.current_page_number_required_value: Optional[str] = None
        self.timeout_limit: float = float(get_config("navigation.timeout_limit", 120))

    def _control(self, selector: Optional[str]) -> Optional[SmartElement]:
        return None if selector is None else self.navigation_bar.locator(selector)

    def with_previous_page(self, selector: Optional[str]) -> "Navigator":
        self.previous_page = self._control(selector)
        return self

    def with_next_page(self, selector: Optional[str]) -> "Navigator":
        self.next_page = self._control(selector)
        return self

    def with_first_page(self, selector: Optional[str]) -> "Navigator":
        self.first_page = self._control(selector)
        return self

    def with_last_page(self, selector: Optional[str]) -> "Navigator":
        self.last_page = self._control(selector)
        return self

    def with_page_number_buttons(
        self,
        selector: Optional[str],
        current_page_number_attribute: Optional[str],
        current_page_number_required_value: Optional[str],
    ) -> "Navigator":
        """
        Configure the page number buttons.

        Args:
            selector: Selector matching every page number button
            current_page_number_attribute: Attribute marking the current page, e.g. "class"
            current_page_number_required_value: Value the attribute contains on the current page
        """
        self.page_number_buttons = self._control(selector)
        self.current_page_number_attribute = current_page_number_attribute
        self.current_page_number_required_value = current_page_number_required_value
        return self

    def with_timeout_limit(self, timeout_limit: Union[float, timedelta]) -> "Navigator":
        if isinstance(timeout_limit, timedelta):
            timeout_limit = timeout_limit.total_seconds()
        self.timeout_limit = float(timeout_limit)
        return self

    # =========================================================================
    # Single steps
    # =========================================================================

    @staticmethod
    def _step(control: Optional[SmartElement], name: str) -> bool:
        if control is None:
            raise NavigationConfigError(f"{name} page locator has not been set")
        if control.is_parents_or_self_disabled():
            logger.debug(f"{name} page control is disabled")
            return False
        control.click()
        logger.debug(f"Clicked {name.lower()} page control")
        return True

    def to_previous_page(self) -> bool:
        """
        Click the previous page control.

        Returns:
            False if the control is disabled, True once clicked

        Raises:
            NavigationConfigError: If the control was never configured
        """
        return self._step(self.previous_page, "Previous")

    def to_previous_page_if_set(self) -> bool:
        return self.previous_page is not None and self.to_previous_page()

    def to_next_page(self) -> bool:
        """
        Click the next page control.

        Returns:
            False if the control is disabled, True once clicked

        Raises:
            NavigationConfigError: If the control was never configured
        """
        return self._step(self.next_page, "Next")

    def to_next_page_if_set(self) -> bool:
        return self.next_page is not None and self.to_next_page()

    # =========================================================================
    # Boundaries
    # =========================================================================

    @allure.step("Navigate to first page")
    def to_first_page(self) -> "Navigator":
        if self.first_page is not None:
            self.first_page.click()
        elif self.previous_page is not None:
            limit = TimeLimit(self.timeout_limit)
            while self.to_previous_page() and limit.time_left_else_throw():
                pass
        else:
            raise NavigationConfigError("Neither the 'First' or 'Previous' page locators have been set")
        return self

    def to_first_page_if_set(self) -> bool:
        if self.first_page is None and self.previous_page is None:
            return False
        self.to_first_page()
        return True

    @allure.step("Navigate to last page")
    def to_last_page(self) -> "Navigator":
        if self.last_page is not None:
            self.last_page.click()
        elif self.next_page is not None:
            limit = TimeLimit(self.timeout_limit)
            while self.to_next_page() and limit.time_left_else_throw():
                pass
        else:
            raise NavigationConfigError("Neither the 'Last' or 'Next' page locators have been set")
        return self

    def to_last_page_if_set(self) -> bool:
        if self.last_page is None and self.next_page is None:
            return False
        self.to_last_page()
        return True

    # =========================================================================
    # Page numbers
    # =========================================================================

    def get_current_page_number(self) -> int:
        """
        Number shown on the page button marked as current.

        Raises:
            NavigationConfigError: If page number buttons were never configured
            ElementNotFoundError: If no button carries the current marker
        """
        if self.page_number_buttons is None:
            raise NavigationConfigError(
                "Current page number can only be retrieved if a locator has been set for page number buttons"
            )
        current = self.page_number_buttons.with_attribute(
            self.current_page_number_attribute,
            self.current_page_number_required_value,
            Method.CONTAINS,
        )
        return int(current.text_content().strip())

    @allure.step("Navigate to page {page}")
    def to_page(self, page: int) -> "Navigator":
        """
        Step one page at a time until `page` is current.

        Raises:
            PageOutOfRangeError: If a boundary is reached first
            TimeLimitReachedError: If stepping exceeds the time limit
        """
        limit = TimeLimit(self.timeout_limit)
        current = self.get_current_page_number()
        while page != current:
            stepped = self.to_previous_page() if page < current else self.to_next_page()
            if not stepped:
                reached = self.get_current_page_number()
                logger.error(f"Required page {page} but cannot navigate past page {reached}")
                raise PageOutOfRangeError(page, reached)
            limit.time_left_else_throw()
            current = self.get_current_page_number()
        return self


__all__ = [
    "Navigator",
    "SmartTable",
    "SmartTableRow",
    "TableType",
]
