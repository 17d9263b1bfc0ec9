"""
================================================================================
Browser Helpers
================================================================================

Playwright (sync API) helpers for table-heavy pages.

Components:
    - smart_element: Locator wrapper with presence, input and disabled helpers
    - smart_table: Table, row and pagination navigator
    - page_base: Base page object

Author: Automation Team
License: MIT
================================================================================
"""

from .page_base import BasePage
from .smart_element import SmartElement
from .smart_table import Navigator, SmartTable, SmartTableRow, TableType

__all__ = [
    "BasePage",
    "Navigator",
    "SmartElement",
    "SmartTable",
    "SmartTableRow",
    "TableType",
]
