"""
================================================================================
Validation Utilities
================================================================================

Browser-independent helpers shared by the table tools.

Modules:
    - validate: string/record/list comparison with pass/fail results
    - time_limit: wall-clock ceiling for repeated actions

================================================================================
"""

from .time_limit import TimeLimit
from .validate import Method, Validate, ValidationResult, validate

__all__ = [
    "Method",
    "TimeLimit",
    "Validate",
    "ValidationResult",
    "validate",
]
