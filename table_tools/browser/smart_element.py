"""
================================================================================
Smart Element
================================================================================

Thin wrapper around a Playwright `Locator` adding helpers that table
scraping relies on:
    - Presence checks and child lookup without waiting
    - Discovery of embedded form controls (input / textarea / select)
    - Attribute filtering across a multi-element locator
    - Disabled detection that also honours `class="disabled"` and ancestors
    - Text extraction after the configured page load state

Anything not defined here is forwarded to the wrapped locator, and calls
that return a new locator return a SmartElement instead.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from loguru import logger
from playwright.sync_api import Locator, Page

from table_tools.common.global_config import get_config
from table_tools.exceptions import ElementNotFoundError
from table_tools.validation.validate import Method, validate

if TYPE_CHECKING:
    from table_tools.browser.smart_table import SmartTable


INPUT_SELECTORS = ("input", "textarea", "select")
HYPERLINK_SELECTOR = "[href]"
PARENT_SELECTOR = "xpath=.."


class SmartElement:
    """
    Playwright locator with table-friendly helpers.

    Usage:
        >>> table_root = SmartElement.find(page, "id=example")
        >>> table_root.has_child("tbody >> tr")
        True
        >>> table = table_root.as_table("thead >> th", "tbody >> tr", "td")
    """

    def __init__(self, locator: Locator):
        if locator is None:
            raise ValueError("Cannot create SmartElement from null locator")
        if isinstance(locator, SmartElement):
            locator = locator.raw
        self._locator = locator

    @classmethod
    def find(cls, page: Page, selector: str, *format_args: Any) -> "SmartElement":
        """
        Locate an element on a page.

        Args:
            page: Playwright Page object
            selector: Selector, optionally with `{}` placeholders
            *format_args: Values substituted into the placeholders
        """
        if format_args:
            selector = selector.format(*format_args)
        return cls(page.locator(selector))

    @classmethod
    def from_locator(cls, locator: Locator) -> "SmartElement":
        return cls(locator)

    @property
    def raw(self) -> Locator:
        """The wrapped Playwright locator."""
        return self._locator

    def __getattr__(self, name: str) -> Any:
        if name == "_locator":
            raise AttributeError(name)
        return getattr(self._locator, name)

    def __repr__(self) -> str:
        return f"SmartElement({self._locator!r})"

    # =========================================================================
    # Locator-returning calls
    # =========================================================================

    def locator(self, selector: str, **kwargs: Any) -> "SmartElement":
        if selector is None:
            raise ValueError("Cannot locate with null locator")
        return SmartElement(self._locator.locator(selector, **kwargs))

    def nth(self, index: int) -> "SmartElement":
        return SmartElement(self._locator.nth(index))

    @property
    def first(self) -> "SmartElement":
        return SmartElement(self._locator.first)

    @property
    def last(self) -> "SmartElement":
        return SmartElement(self._locator.last)

    def filter(self, **kwargs: Any) -> "SmartElement":
        return SmartElement(self._locator.filter(**kwargs))

    @property
    def page(self) -> Page:
        return self._locator.page

    def as_table(self, headers_locator: str, row_locator: str, cell_locator: str) -> "SmartTable":
        """Treat this element as the root of a table."""
        from table_tools.browser.smart_table import SmartTable

        return SmartTable.find(self, headers_locator, row_locator, cell_locator)

    # =========================================================================
    # Presence and children
    # =========================================================================

    def is_valid(self) -> bool:
        """True if the locator currently matches at least one element."""
        return self._locator.count() > 0

    def has_child(self, child_locator: str) -> bool:
        return self.locator(child_locator).is_valid()

    def get_child(self, *locators: str) -> Optional[str]:
        """Return the first selector that matches a descendant, or None."""
        return next((s for s in locators if self.has_child(s)), None)

    def inner_input(self) -> Optional["SmartElement"]:
        """First embedded input, textarea or select control, if any."""
        selector = self.get_child(*INPUT_SELECTORS)
        if selector is None:
            return None
        return self.locator(selector).first

    def get_tag_name(self) -> str:
        return str(self._locator.evaluate("e => e.tagName"))

    def with_attribute(
        self,
        attribute: str,
        required_value: str,
        method: Method = Method.EQUALS,
    ) -> "SmartElement":
        """
        Narrow a multi-element locator to the first member whose attribute
        satisfies the comparison. Members without the attribute never match.

        Raises:
            ElementNotFoundError: If no member matches
        """
        for i in range(self._locator.count()):
            candidate = self.nth(i)
            value = candidate.get_attribute(attribute)
            if value is not None and validate.compare(required_value, value, method).passed:
                return candidate

        message = (
            f"Unable to find an element with the value '{required_value}' "
            f"in the '{attribute}' attribute for this locator"
        )
        logger.error(message)
        raise ElementNotFoundError(message)

    # =========================================================================
    # Waiting and reading
    # =========================================================================

    def wait_for_load_state(self, state: Optional[str] = None) -> "SmartElement":
        """
        Wait for the owning page to reach a load state.

        Args:
            state: 'load', 'domcontentloaded' or 'networkidle'.
                Defaults to config `table.load_state`.
        """
        state = state or get_config("table.load_state", "networkidle")
        timeout = get_config("table.load_timeout_ms", 30000)
        self.page.wait_for_load_state(state, timeout=timeout)
        return self

    def text_content(self, **kwargs: Any) -> str:
        """Text content once the page has settled."""
        self.wait_for_load_state()
        return self._locator.text_content(**kwargs) or ""

    # =========================================================================
    # State
    # =========================================================================

    def is_disabled(self, **kwargs: Any) -> bool:
        disabled = self._locator.get_attribute("disabled")
        if disabled is not None and (not disabled.strip() or "true" in disabled):
            return True
        css_class = self._locator.get_attribute("class")
        if css_class is not None and "disabled" in css_class:
            return True
        return self._locator.is_disabled(**kwargs)

    def is_enabled(self, **kwargs: Any) -> bool:
        return self._locator.is_enabled(**kwargs) and not self.is_disabled()

    def is_parents_or_self_disabled(self, **kwargs: Any) -> bool:
        """True if this element or any ancestor reports disabled."""
        element = self
        while element.is_valid():
            if element.is_disabled(**kwargs):
                return True
            element = element.locator(PARENT_SELECTOR)
        return False

    # =========================================================================
    # Input
    # =========================================================================

    def select_option_by_value(self, value: str) -> None:
        self._locator.select_option(value=value)

    def select_option_by_label(self, label: str) -> None:
        self._locator.select_option(label=label)

    def set_input_value(self, value: str) -> None:
        """Choose `value` by label on a select control, fill any other control."""
        if self.get_tag_name().upper() == "SELECT":
            self.select_option_by_label(value)
        else:
            self._locator.fill(value)


__all__ = [
    "SmartElement",
]
