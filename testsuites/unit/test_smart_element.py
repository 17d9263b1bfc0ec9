import pytest

from table_tools.browser.smart_element import SmartElement
from table_tools.exceptions import ElementNotFoundError
from table_tools.validation.validate import Method
from testsuites.unit.fake_dom import FakeNode, FakePage


@pytest.fixture
def page():
    return FakePage(
        FakeNode(
            "body",
            children=[
                FakeNode(
                    "div",
                    attrs={"id": "form"},
                    children=[
                        FakeNode("input", attrs={"id": "name"}, value="Ada"),
                        FakeNode(
                            "select",
                            attrs={"id": "office"},
                            value="london",
                            children=[
                                FakeNode("option", text="London", attrs={"value": "london"}),
                                FakeNode("option", text="Tokyo", attrs={"value": "tokyo"}),
                            ],
                        ),
                    ],
                ),
                FakeNode(
                    "ul",
                    attrs={"id": "pages", "class": "pagination"},
                    children=[
                        FakeNode("li", text="1", attrs={"class": "page"}),
                        FakeNode("li", text="2", attrs={"class": "page active"}),
                        FakeNode("li", text="3"),
                    ],
                ),
                FakeNode(
                    "div",
                    attrs={"class": "toolbar disabled"},
                    children=[FakeNode("button", text="Save", attrs={"id": "save"})],
                ),
                FakeNode("button", text="Off", attrs={"id": "off", "disabled": ""}),
            ],
        )
    )


def test_find_formats_selector(page):
    element = SmartElement.find(page, "#{}", "name")
    assert element.is_valid()
    assert element.input_value() == "Ada"


def test_from_locator_rejects_none():
    with pytest.raises(ValueError):
        SmartElement.from_locator(None)


def test_locator_calls_return_smart_elements(page):
    items = SmartElement.find(page, "#pages").locator("li")
    assert isinstance(items, SmartElement)
    assert isinstance(items.nth(1), SmartElement)
    assert isinstance(items.first, SmartElement)
    assert items.count() == 3
    assert items.last.text_content() == "3"


def test_children_and_inner_input(page):
    form = SmartElement.find(page, "#form")
    assert form.has_child("select")
    assert not form.has_child("textarea")
    assert form.get_child("textarea", "select", "input") == "select"
    assert form.inner_input().get_tag_name() == "INPUT"
    assert SmartElement.find(page, "#pages").inner_input() is None


def test_with_attribute_skips_missing_attributes(page):
    items = SmartElement.find(page, "#pages").locator("li")
    assert items.with_attribute("class", "active", Method.CONTAINS).text_content() == "2"
    with pytest.raises(ElementNotFoundError, match="'current' in the 'class' attribute"):
        items.with_attribute("class", "current", Method.CONTAINS)


def test_text_content_waits_for_load_state(page):
    SmartElement.find(page, "#pages").locator("li").first.text_content()
    assert page.load_states == ["networkidle"]


def test_disabled_detection(page):
    assert SmartElement.find(page, "#off").is_disabled()
    assert not SmartElement.find(page, "#save").is_disabled()
    assert SmartElement.find(page, "#save").is_parents_or_self_disabled()
    assert not SmartElement.find(page, "#name").is_parents_or_self_disabled()


def test_set_input_value_fills_or_selects(page):
    name = SmartElement.find(page, "#name")
    name.set_input_value("Grace")
    assert name.input_value() == "Grace"

    office = SmartElement.find(page, "#office")
    office.set_input_value("Tokyo")
    assert office.input_value() == "tokyo"
