"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the UI fixture pages.

Each page class encapsulates:
    - Element locators
    - Table and pagination wiring
    - Page-specific actions

Author: Automation Team
License: MIT
================================================================================
"""

from .employees_page import EmployeesPage

__all__ = [
    "EmployeesPage",
]
