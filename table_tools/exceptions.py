"""
================================================================================
Exceptions
================================================================================

Common exception classes raised by the table helpers.

Every error derives from `TableToolsError`. Where a built-in exception
describes the same failure (missing key, out of range, timeout) the class
also inherits from it, so callers can catch either.

Validation mismatches are never raised: they are returned as
`ValidationResult` values.

================================================================================
"""

from __future__ import annotations


class TableToolsError(Exception):
    """Base exception for the entire library."""


class NavigationConfigError(TableToolsError):
    """A navigator control was used before its locator was configured."""


class ColumnNotFoundError(TableToolsError, LookupError):
    """No table header carries the requested name."""

    def __init__(self, header: str):
        self.header = header
        super().__init__(f"No column with the header '{header}' exists")


class RowShapeError(TableToolsError, IndexError):
    """A row has a different number of cells than the table has headers."""

    def __init__(self, header_count: int, cell_count: int, inner_html: str):
        self.header_count = header_count
        self.cell_count = cell_count
        self.inner_html = inner_html
        super().__init__(
            f"{header_count} headers identified, but {cell_count} cells of data "
            f"extracted, please verify locators are accurate.\n"
            f"Inner HTML for row where issue found: {inner_html}"
        )


class RowNotFoundError(TableToolsError, LookupError):
    """No row on any reachable page matches the requested values."""

    def __init__(self, required_values: dict):
        self.required_values = dict(required_values)
        super().__init__(
            f"No row of data found with the following values: {self.required_values}"
        )


class NotEditableError(TableToolsError):
    """Data entry was attempted on a cell without an input control."""


class ElementNotFoundError(TableToolsError, LookupError):
    """No element matched the requested attribute filter."""


class TimeLimitReachedError(TableToolsError, TimeoutError):
    """A bounded loop ran past its time limit."""


class PageOutOfRangeError(TableToolsError, IndexError):
    """The navigator cannot reach the requested page."""

    def __init__(self, requested: int, reached: int):
        self.requested = requested
        self.reached = reached
        super().__init__(
            f"Required page {requested} but cannot navigate past page {reached}"
        )


__all__ = [
    "TableToolsError",
    "NavigationConfigError",
    "ColumnNotFoundError",
    "RowShapeError",
    "RowNotFoundError",
    "NotEditableError",
    "ElementNotFoundError",
    "TimeLimitReachedError",
    "PageOutOfRangeError",
]
