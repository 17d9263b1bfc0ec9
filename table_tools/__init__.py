"""
================================================================================
Smart Table Tools
================================================================================

Table scraping, pagination following and record validation helpers for
Playwright end-to-end tests.

Modules:
    - browser: SmartElement, SmartTable, Navigator and the base page object
    - validation: comparison helpers and time limits
    - common: configuration and logging
    - exceptions: error taxonomy

Example:
    from table_tools import Method, Navigator, SmartElement

    table = SmartElement.find(page, "#employees").as_table("thead th", "tbody tr", "td")
    table.with_navigator(Navigator(SmartElement.find(page, "#pager")).with_next_page(".next"))
    table.validate_table([{"Name": "Ada", "Office": "London"}], Method.EQUALS).assert_pass()

================================================================================
"""

__version__ = "1.0.0"

from .browser import BasePage, Navigator, SmartElement, SmartTable, SmartTableRow, TableType
from .exceptions import (
    ColumnNotFoundError,
    ElementNotFoundError,
    NavigationConfigError,
    NotEditableError,
    PageOutOfRangeError,
    RowNotFoundError,
    RowShapeError,
    TableToolsError,
    TimeLimitReachedError,
)
from .validation import Method, TimeLimit, Validate, ValidationResult, validate

__all__ = [
    "BasePage",
    "ColumnNotFoundError",
    "ElementNotFoundError",
    "Method",
    "NavigationConfigError",
    "Navigator",
    "NotEditableError",
    "PageOutOfRangeError",
    "RowNotFoundError",
    "RowShapeError",
    "SmartElement",
    "SmartTable",
    "SmartTableRow",
    "TableToolsError",
    "TableType",
    "TimeLimit",
    "TimeLimitReachedError",
    "Validate",
    "ValidationResult",
    "validate",
]
