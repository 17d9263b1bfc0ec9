"""
================================================================================
Employee Table UI Tests (Sync / Playwright)
================================================================================

Exercises SmartTable, SmartTableRow and Navigator against a real browser
rendering the static employees fixture: 14 employees, 5 per page.

================================================================================
"""

import allure
import pytest

from table_tools.browser.smart_element import SmartElement
from table_tools.browser.smart_table import SmartTable, TableType
from table_tools.exceptions import ColumnNotFoundError, PageOutOfRangeError, RowNotFoundError, RowShapeError
from table_tools.validation.validate import Method, validate
from testsuites.ui_testing.pages.employees_page import EmployeesPage


BRIELLE = {"Name": "Brielle Williamson", "Position": "Integration Specialist", "Office": "New York", "Age": "61"}
DAI = {"Name": "Dai Rios", "Position": "Personnel Lead", "Office": "Edinburgh", "Age": "35"}


@allure.epic("UI Testing")
@allure.feature("Table Search")
class TestTableSearch:

    @allure.title("Bad header locator is reported as a row shape mismatch")
    @pytest.mark.P1
    def test_bad_header_locator(self, employees_page: EmployeesPage):
        table = SmartTable.find(employees_page.element("id=example"), "th", "tr", "td")
        with pytest.raises(RowShapeError, match="4 headers identified, but 0 cells"):
            table.get_row(0)

    @allure.title("Row on the first page is found without paging")
    @pytest.mark.P0
    @pytest.mark.smoke
    def test_find_row_first_page(self, employees_page: EmployeesPage):
        table = employees_page.employees()
        assert table.type is TableType.STANDARD
        assert table.find_row({"Name": "Ashton Cox"}).get_cell_value("Office") == "San Francisco"

    @allure.title("Row on a later page needs a navigator")
    @pytest.mark.P0
    def test_row_not_found_without_navigator(self, employees_page: EmployeesPage):
        table = employees_page.employees(paginated=False)
        with pytest.raises(RowNotFoundError, match="Dai Rios"):
            table.find_row({"Name": "Dai Rios"})

    @allure.title("Search follows pagination and restarts from page one")
    @pytest.mark.P0
    def test_find_row_across_pages(self, employees_page: EmployeesPage):
        table = employees_page.employees()
        assert table.find_row({"Name": "Dai Rios", "Age": "35"}).get_cell_value("Position") == "Personnel Lead"
        assert table.navigate().get_current_page_number() == 3
        assert table.find_row({"Name": "Airi Satou"}).get_cell_value("Age") == "33"
        assert table.navigate().get_current_page_number() == 1

    @allure.title("Unknown headers are rejected")
    @pytest.mark.P2
    def test_invalid_column_header(self, employees_page: EmployeesPage):
        table = employees_page.employees()
        with pytest.raises(ColumnNotFoundError):
            table.find_row({"Salary": "$1"})
        with pytest.raises(ColumnNotFoundError):
            table.find_row({"Name": "Dai Rios"}).get_cell_value("Salary")

    @allure.title("Full row record is extracted")
    @pytest.mark.P1
    def test_full_row_extracted(self, employees_page: EmployeesPage):
        row_data = employees_page.employees().find_row({"Name": "Dai Rios"}).get_value_map()
        assert validate.values_are_present_in_map(DAI, row_data, Method.EQUALS)

    @allure.title("Selecting a link activates the cell hyperlink")
    @pytest.mark.P2
    def test_select_link(self, employees_page: EmployeesPage):
        employees_page.employees().find_row({"Name": "Bruno Nash"}).select_link("Name")
        assert employees_page.element("id=selected").text_content() == "#employee-7"


@allure.epic("UI Testing")
@allure.feature("Table Extraction")
class TestTableExtraction:

    @allure.title("Extraction covers every page")
    @pytest.mark.P0
    def test_all_data_extracted(self, employees_page: EmployeesPage):
        table = employees_page.employees()
        data = table.extract_data()
        assert len(data) == 14
        assert data[0]["Name"] == "Airi Satou" and data[-1]["Name"] == "Finn Camacho"

    @allure.title("Single page extraction matches the visible rows")
    @pytest.mark.P2
    def test_single_page_extraction(self, employees_page: EmployeesPage):
        table = employees_page.employees(paginated=False)
        assert len(table.extract_data()) == len(table.get_rows()) == 5

    @allure.title("Column values are listed in page order")
    @pytest.mark.P1
    def test_list_of_values_sorted(self, employees_page: EmployeesPage):
        names = employees_page.employees().get_list_of_values("Name")
        assert len(names) == 14
        validate.list_in_alphabetical_order(names, True).assert_pass()

    @allure.title("Form controls are read and written")
    @pytest.mark.P1
    def test_data_entry(self, employees_page: EmployeesPage):
        table = employees_page.editable_employees()
        assert table.type is TableType.INPUT_VALUES
        for value in table.get_list_of_values("Position"):
            assert value.strip()
        validate.values_are_present_in_maps(
            [{"Office": "London"}, {"Office": "San Francisco"}, {"Office": "Tokyo"}],
            table.extract_data("Office"),
            Method.EQUALS,
        ).assert_pass()

        original = {"Name": "Bradley Greer", "Age": "41", "Position": "Software Engineer", "Office": "London"}
        updated = {"Age": "22", "Position": "QA Consultant", "Office": "Edinburgh"}
        table.find_row(original).enter_data_map(updated)
        assert table.find_row(updated).get_cell_value("Name") == "Bradley Greer"


@allure.epic("UI Testing")
@allure.feature("Table Validation")
class TestTableValidation:

    @allure.title("Validation stops paging once all records match")
    @pytest.mark.P0
    def test_efficient_validation(self, employees_page: EmployeesPage):
        table = employees_page.employees()
        table.validate_table([BRIELLE, {"Name": "Angelica Ramos", "Office": "London"}], Method.EQUALS).assert_pass()
        assert table.navigate().get_current_page_number() == 2

    @allure.title("Unmatched records are listed in the failure reason")
    @pytest.mark.P0
    def test_data_not_found(self, employees_page: EmployeesPage):
        missing = {"Name": "Steve Jobs", "Position": "Accountant", "Office": "Tokyo", "Age": "63"}
        reason = employees_page.employees().validate_table([BRIELLE, missing], Method.EQUALS).assert_fail().reason
        for value in missing.values():
            validate.compare(value, reason, Method.CONTAINS).assert_pass()
        for value in ("Brielle Williamson", "Integration Specialist", "New York", "61"):
            validate.compare(value, reason, Method.CONTAINS).assert_fail()

    @allure.title("Contains and case-insensitive matching")
    @pytest.mark.P1
    def test_validation_methods(self, employees_page: EmployeesPage):
        table = employees_page.employees()
        partial = [{"Name": "Cox", "Office": "San"}, {"Name": "Nash", "Position": "Engineer"}]
        table.validate_table(partial, Method.EQUALS).assert_fail()
        table.validate_table(partial, Method.CONTAINS).assert_pass()

        lower = [{"Name": "brielle williamson", "Office": "new york"}]
        table.validate_table(lower, Method.EQUALS).assert_fail()
        table.validate_table(lower, Method.EQUALS_CASE_INSENSITIVE).assert_pass()


@allure.epic("UI Testing")
@allure.feature("Table Navigation")
class TestTableNavigation:

    @allure.title("Every navigation control moves between pages")
    @pytest.mark.P0
    def test_all_navigation_buttons(self, employees_page: EmployeesPage):
        navigator = employees_page.employees().navigate()
        assert navigator.get_current_page_number() == 1
        navigator.to_next_page()
        navigator.to_next_page()
        assert navigator.get_current_page_number() == 3
        assert navigator.to_next_page() is False
        navigator.to_previous_page()
        assert navigator.get_current_page_number() == 2
        navigator.to_first_page()
        assert navigator.get_current_page_number() == 1
        navigator.to_last_page()
        assert navigator.get_current_page_number() == 3

        navigator.with_first_page("a.first").with_last_page("a.last")
        navigator.to_first_page()
        assert navigator.get_current_page_number() == 1
        assert navigator.to_page(2).get_current_page_number() == 2

    @allure.title("Pages outside the range are rejected")
    @pytest.mark.P1
    def test_page_out_of_range(self, employees_page: EmployeesPage):
        navigator = employees_page.employees().navigate()
        with pytest.raises(PageOutOfRangeError, match="Required page 0 but cannot navigate past page 1"):
            navigator.to_page(0)
        with pytest.raises(PageOutOfRangeError, match="Required page 9 but cannot navigate past page 3"):
            navigator.to_page(9)

    @allure.title("Navigator can be replaced on an existing table")
    @pytest.mark.P2
    def test_replace_navigator(self, employees_page: EmployeesPage):
        table = employees_page.employees(paginated=False)
        assert not table.navigation_set()
        table.with_navigator(employees_page.pagination())
        assert table.navigation_set()
        assert isinstance(table.as_smart_element(), SmartElement)
        assert len(table.extract_data("Name")) == 14
