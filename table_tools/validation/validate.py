# ================================================================================
# Validate
# ================================================================================
#
# Value comparison helpers used by the table utilities and by test code.
# Comparisons never raise on mismatch: they return a ValidationResult with a
# human-readable reason, so an expected mismatch can be inspected or asserted.
#
# Key Features:
#   - String comparison by equality, case-insensitive equality or containment
#   - Record (dict) matching, single and multiset
#   - Plain value multiset containment
#   - Alphabetical ordering checks
#
# Usage:
#   validate.compare("New York", cell_text, Method.EQUALS).assert_pass()
#   validate.values_are_present_in_maps(expected_rows, actual_rows, Method.CONTAINS)
#
# ================================================================================

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence


class Method(Enum):
    """Supported comparison methods."""
    EQUALS = "equals"
    EQUALS_CASE_INSENSITIVE = "equals_case_insensitive"
    CONTAINS = "contains"


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a validation.

    Attributes:
        passed: Whether the validation passed
        reason: Explanation of the failure, None when passed
    """
    passed: bool
    reason: Optional[str] = None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(True)

    @classmethod
    def failure(cls, message: str, *args: Any) -> "ValidationResult":
        return cls(False, message % args if args else message)

    @property
    def failed(self) -> bool:
        return not self.passed

    def assert_pass(self) -> "ValidationResult":
        """Raise AssertionError with the failure reason unless passed."""
        if self.failed:
            raise AssertionError(self.reason)
        return self

    def assert_fail(self) -> "ValidationResult":
        """Raise AssertionError if the validation unexpectedly passed."""
        if self.passed:
            raise AssertionError("Expected a false validation result, however was true")
        return self

    def __bool__(self) -> bool:
        return self.passed


def _as_string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Given object is not a string: {value!r}")
    return value


class Validate:
    """
    Stateless comparison helpers.

    Instances hold no state, so the module-level `validate` object can be
    shared freely.

    Example:
        result = validate.values_are_present_in_maps(
            [{"Office": "London"}, {"Office": "London"}],
            table.extract_data("Office"),
            Method.EQUALS,
        )
        result.assert_pass()
    """

    def compare(self, expected: str, actual: str, method: Method) -> ValidationResult:
        """
        Compare two strings.

        Args:
            expected: Expected value
            actual: Actual value
            method: Comparison method

        Returns:
            ValidationResult naming both values on failure

        Raises:
            TypeError: If either value is not a string
        """
        expected = _as_string(expected)
        actual = _as_string(actual)

        if method is Method.EQUALS:
            if actual == expected:
                return ValidationResult.success()
            return ValidationResult.failure("Expected {%s} Actual {%s}", expected, actual)
        if method is Method.EQUALS_CASE_INSENSITIVE:
            if actual.casefold() == expected.casefold():
                return ValidationResult.success()
            return ValidationResult.failure("Expected {%s} Actual {%s}", expected, actual)
        if method is Method.CONTAINS:
            if expected in actual:
                return ValidationResult.success()
            return ValidationResult.failure("Expected {%s} to contain {%s}", actual, expected)
        raise ValueError(f"Invalid validation method: {method}")

    def values_are_present_in_maps(
        self,
        required_values: Sequence[Mapping[str, str]],
        actual_values: Sequence[Mapping[str, str]],
        method: Method,
    ) -> ValidationResult:
        """
        Check every required record is matched by a distinct actual record.

        Each actual record can satisfy at most one required record, so two
        identical required records need two matching actual records.

        Matching is greedy: required records are taken last to first and each
        consumes the last actual record it matches. When required records
        overlap, an earlier choice can use up the only actual record a later
        one needs, so the check may fail even though a full pairing exists.

        Args:
            required_values: Records that must be found
            actual_values: Records to search
            method: Comparison method applied per field

        Returns:
            ValidationResult listing the unmatched required records on failure
        """
        required = list(required_values)
        actual = list(actual_values)

        for j in range(len(required) - 1, -1, -1):
            for i in range(len(actual) - 1, -1, -1):
                if self.values_are_present_in_map(required[j], actual[i], method):
                    del actual[i]
                    del required[j]
                    break

        if not required:
            return ValidationResult.success()
        return ValidationResult.failure(
            "No matches found for the following data: %s", [dict(r) for r in required]
        )

    def values_are_present_in_map(
        self,
        required_values: Mapping[str, str],
        actual_values: Mapping[str, str],
        method: Method,
    ) -> bool:
        """True if every required key exists in actual_values and compares equal."""
        for key, expected in required_values.items():
            if key not in actual_values:
                return False
            if self.compare(expected, actual_values[key], method).failed:
                return False
        return True

    def values_are_present_in_map_by(
        self,
        required_values: Mapping[str, str],
        getter: Callable[[str], str],
        method: Method,
    ) -> ValidationResult:
        """
        Check required fields against values produced by a lookup function.

        Unlike `values_are_present_in_map` every field is evaluated, and each
        failing field is reported on its own line.

        Args:
            required_values: Field name to expected value
            getter: Returns the actual value for a field name,
                e.g. `row.get_cell_value`
            method: Comparison method
        """
        failures: List[str] = []
        for field_name, expected in required_values.items():
            result = self.compare(expected, getter(field_name), method)
            if result.failed:
                failures.append(f"{field_name}: {result.reason}")

        if not failures:
            return ValidationResult.success()
        return ValidationResult.failure("\n".join(failures))

    def values_are_present_in_list(
        self,
        expected: Sequence[Any],
        actual: Sequence[Any],
    ) -> ValidationResult:
        """Multiset containment of plain values."""
        missing = list(expected)
        remaining = list(actual)

        for i in range(len(missing) - 1, -1, -1):
            if missing[i] in remaining:
                remaining.remove(missing[i])
                del missing[i]

        if not missing:
            return ValidationResult.success()
        return ValidationResult.failure("The following values were not found: %s", missing)

    def list_in_alphabetical_order(
        self,
        values: Sequence[str],
        ascending: bool = True,
    ) -> ValidationResult:
        """
        Check neighbouring values are ordered; equal neighbours are allowed.

        With ascending=False every neighbour must be greater than or equal to
        the next one.
        """
        for previous, current in zip(values, values[1:]):
            out_of_order = previous > current if ascending else previous < current
            if out_of_order:
                return ValidationResult.failure(
                    "List is not in %s alphabetical order. Failing elements {%s, %s}",
                    "ascending" if ascending else "descending",
                    previous,
                    current,
                )
        return ValidationResult.success()


validate = Validate()


__all__ = [
    "Method",
    "ValidationResult",
    "Validate",
    "validate",
]
