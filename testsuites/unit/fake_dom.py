"""
In-memory stand-in for the parts of Playwright's sync Locator/Page API the
table helpers use, so table logic can be unit tested without a browser.

Supported selectors: `tag`, `#id`, `.class`, `[attr]`, combinations of
those (`a.next`), descendant chains (`tbody tr`), `>>` chaining,
`id=value` and `xpath=..`.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Iterable, List, Optional, Sequence

FORM_CONTROLS = {"input", "textarea", "select", "button", "option", "optgroup"}

_SIMPLE_SELECTOR = re.compile(
    r"^(?P<tag>[a-zA-Z*][\w-]*)?(?P<id>#[\w-]+)?(?P<classes>(?:\.[\w-]+)*)(?:\[(?P<attr>[\w-]+)\])?$"
)


class FakeNode:
    def __init__(
        self,
        tag: str,
        text: str = "",
        attrs: Optional[Dict[str, str]] = None,
        children: Iterable["FakeNode"] = (),
        value: Optional[str] = None,
        on_click: Optional[Callable[[], None]] = None,
    ):
        self.tag = tag
        self.text = text
        self.attrs = dict(attrs or {})
        self.value = value
        self.on_click = on_click
        self.parent: Optional[FakeNode] = None
        self.children: List[FakeNode] = []
        self.clicks = 0
        self.set_children(children)

    def set_children(self, children: Iterable["FakeNode"]) -> None:
        for child in self.children:
            child.parent = None
        self.children = list(children)
        for child in self.children:
            child.parent = self

    def descendants(self) -> List["FakeNode"]:
        found = []
        for child in self.children:
            found.append(child)
            found.extend(child.descendants())
        return found

    def text_content(self) -> str:
        return self.text + "".join(child.text_content() for child in self.children)

    def inner_html(self) -> str:
        return "".join(child.outer_html() for child in self.children) or self.text

    def outer_html(self) -> str:
        attrs = "".join(f' {k}="{v}"' for k, v in self.attrs.items())
        return f"<{self.tag}{attrs}>{self.text}{''.join(c.outer_html() for c in self.children)}</{self.tag}>"

    def matches(self, simple: str) -> bool:
        if simple.startswith("id="):
            return self.attrs.get("id") == simple[3:]
        match = _SIMPLE_SELECTOR.match(simple)
        if not match:
            raise ValueError(f"Unsupported selector in fake DOM: {simple}")
        tag = match.group("tag")
        if tag and tag != "*" and tag.lower() != self.tag:
            return False
        if match.group("id") and self.attrs.get("id") != match.group("id")[1:]:
            return False
        classes = self.attrs.get("class", "").split()
        for css_class in filter(None, match.group("classes").split(".")):
            if css_class not in classes:
                return False
        if match.group("attr") and match.group("attr") not in self.attrs:
            return False
        return True

    def click(self) -> None:
        self.clicks += 1
        if self.on_click is not None:
            self.on_click()

    def __repr__(self) -> str:
        return f"<{self.tag} {self.attrs}>"


def _select(node: FakeNode, selector: str) -> List[FakeNode]:
    current = [node]
    for part in (p.strip() for p in selector.split(">>")):
        found: List[FakeNode] = []
        if part == "xpath=..":
            for n in current:
                if n.parent is not None and n.parent.tag != "#document" and n.parent not in found:
                    found.append(n.parent)
        else:
            step = current
            for simple in part.split():
                step_found: List[FakeNode] = []
                for n in step:
                    for d in n.descendants():
                        if d.matches(simple) and d not in step_found:
                            step_found.append(d)
                step = step_found
            found = step
        current = found
    return current


class FakeLocator:
    def __init__(self, page: "FakePage", resolve: Callable[[], List[FakeNode]], description: str = ""):
        self._page = page
        self._resolve = resolve
        self._description = description

    def __repr__(self) -> str:
        return f"FakeLocator({self._description})"

    @property
    def page(self) -> "FakePage":
        return self._page

    def _nodes(self) -> List[FakeNode]:
        return self._resolve()

    def _single(self) -> FakeNode:
        nodes = self._nodes()
        if len(nodes) != 1:
            raise RuntimeError(f"{self._description} resolved to {len(nodes)} elements")
        return nodes[0]

    def locator(self, selector: str, **kwargs) -> "FakeLocator":
        def resolve() -> List[FakeNode]:
            result: List[FakeNode] = []
            for n in self._nodes():
                for m in _select(n, selector):
                    if m not in result:
                        result.append(m)
            return result

        return FakeLocator(self._page, resolve, f"{self._description} >> {selector}")

    def nth(self, index: int) -> "FakeLocator":
        def resolve() -> List[FakeNode]:
            nodes = self._nodes()
            try:
                return [nodes[index]]
            except IndexError:
                return []

        return FakeLocator(self._page, resolve, f"{self._description} >> nth={index}")

    @property
    def first(self) -> "FakeLocator":
        return self.nth(0)

    @property
    def last(self) -> "FakeLocator":
        return self.nth(-1)

    def count(self) -> int:
        return len(self._nodes())

    def all_text_contents(self) -> List[str]:
        return [n.text_content() for n in self._nodes()]

    def text_content(self, **kwargs) -> Optional[str]:
        return self._single().text_content()

    def inner_text(self, **kwargs) -> str:
        return self._single().text_content().strip()

    def inner_html(self, **kwargs) -> str:
        return self._single().inner_html()

    def input_value(self, **kwargs) -> str:
        return self._single().value or ""

    def get_attribute(self, name: str, **kwargs) -> Optional[str]:
        return self._single().attrs.get(name)

    def is_disabled(self, **kwargs) -> bool:
        node = self._single()
        return node.tag in FORM_CONTROLS and "disabled" in node.attrs

    def is_enabled(self, **kwargs) -> bool:
        return not self.is_disabled()

    def click(self, **kwargs) -> None:
        self._single().click()

    def fill(self, value: str, **kwargs) -> None:
        self._single().value = value

    def select_option(self, value=None, label=None, **kwargs) -> List[str]:
        node = self._single()
        for option in node.children:
            if (label is not None and option.text == label) or (
                value is not None and option.attrs.get("value") == value
            ):
                node.value = option.attrs.get("value", option.text)
                return [node.value]
        raise RuntimeError(f"No option matching value={value!r} label={label!r}")

    def evaluate(self, expression: str, arg=None, **kwargs):
        if expression == "e => e.tagName":
            return self._single().tag.upper()
        raise NotImplementedError(expression)


class FakePage:
    def __init__(self, body: FakeNode):
        self.document = FakeNode("#document", children=[FakeNode("html", children=[body])])
        self.load_states: List[str] = []

    def locator(self, selector: str, **kwargs) -> FakeLocator:
        return FakeLocator(self, lambda: [self.document], "page").locator(selector)

    def wait_for_load_state(self, state: str = "load", timeout: Optional[float] = None) -> None:
        self.load_states.append(state)


# =============================================================================
# Table builders
# =============================================================================

def cell(value: str, editable: Optional[str] = None, options: Sequence[str] = ()) -> FakeNode:
    """A td; `editable` = "input" | "textarea" | "select" embeds a control."""
    if editable is None:
        return FakeNode("td", text=value)
    if editable == "select":
        control = FakeNode(
            "select",
            value=value,
            children=[FakeNode("option", text=o, attrs={"value": o.lower()}) for o in options],
        )
    else:
        control = FakeNode(editable, value=value)
    return FakeNode("td", children=[control])


def row(*cells: FakeNode) -> FakeNode:
    return FakeNode("tr", children=cells)


def build_table(headers: Sequence[str], rows: Sequence[FakeNode], table_id: str = "example") -> FakeNode:
    return FakeNode(
        "table",
        attrs={"id": table_id},
        children=[
            FakeNode("thead", children=[FakeNode("tr", children=[FakeNode("th", text=h) for h in headers])]),
            FakeNode("tbody", children=rows),
        ],
    )


def simple_table_page(headers: Sequence[str], data: Sequence[Sequence[str]]) -> FakePage:
    table = build_table(headers, [row(*(cell(v) for v in values)) for values in data])
    return FakePage(FakeNode("body", children=[table]))


class PaginatedTable:
    """
    A table split into pages with a DataTables-style pager:

        <div id="pager">
          <a class="first"> <a class="previous"> <span><a class="page current">1</a>...</span>
          <a class="next"> <a class="last">
        </div>

    The boundary controls receive class "disabled" on the first/last page.
    With `disable_via_parent` the next/previous links are wrapped in an <li>
    that carries the disabled class instead.
    """

    def __init__(
        self,
        headers: Sequence[str],
        data: Sequence[Sequence[str]],
        page_size: int,
        disable_via_parent: bool = False,
        stuck: bool = False,
    ):
        self.headers = list(headers)
        self.data = [list(values) for values in data]
        self.page_size = page_size
        self.disable_via_parent = disable_via_parent
        self.stuck = stuck
        self.current = 1
        self.tbody = FakeNode("tbody")
        table = FakeNode(
            "table",
            attrs={"id": "example"},
            children=[
                FakeNode("thead", children=[FakeNode("tr", children=[FakeNode("th", text=h) for h in headers])]),
                self.tbody,
            ],
        )
        self.pager = FakeNode("div", attrs={"id": "pager"})
        self.page = FakePage(FakeNode("body", children=[table, self.pager]))
        self.render()

    @property
    def page_count(self) -> int:
        return max(1, -(-len(self.data) // self.page_size))

    def go(self, number: int) -> None:
        if not self.stuck:
            self.current = max(1, min(self.page_count, number))
        self.render()

    def _control(self, css_class: str, text: str, target: Callable[[], int], disabled: bool) -> FakeNode:
        classes = css_class + (" disabled" if disabled and not self.disable_via_parent else "")
        link = FakeNode("a", text=text, attrs={"class": classes}, on_click=lambda: self.go(target()))
        if self.disable_via_parent and css_class in ("previous", "next"):
            return FakeNode("li", attrs={"class": "disabled" if disabled else "item"}, children=[link])
        return link

    def render(self) -> None:
        start = (self.current - 1) * self.page_size
        visible = self.data[start:start + self.page_size]
        self.tbody.set_children(row(*(cell(v) for v in values)) for values in visible)

        at_start = self.current == 1 and not self.stuck
        at_end = self.current == self.page_count and not self.stuck
        numbers = [
            FakeNode(
                "a",
                text=str(n),
                attrs={"class": "page current" if n == self.current else "page"},
                on_click=lambda n=n: self.go(n),
            )
            for n in range(1, self.page_count + 1)
        ]
        self.pager.set_children([
            self._control("first", "First", lambda: 1, at_start),
            self._control("previous", "Previous", lambda: self.current - 1, at_start),
            FakeNode("span", children=numbers),
            self._control("next", "Next", lambda: self.current + 1, at_end),
            self._control("last", "Last", lambda: self.page_count, at_end),
        ])
