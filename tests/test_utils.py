import pytest

from roster_manager.exceptions import CancelAction
from roster_manager.models.employee import Employee
from roster_manager.models.role import Role
from roster_manager.utils.formatting import EMPTY_ROSTER, format_employee, format_roster
from roster_manager.utils.input_handler import (
    get_input, prompt_capacity, prompt_int, prompt_role, prompt_salary
)
from roster_manager.utils.parse_utils import parse_amount, parse_int


@pytest.mark.parametrize("text, expected", [
    ("42", 42), (" 7 ", 7), ("-3", -3), ("4.2", None), ("abc", None), ("", None), (None, None),
])
def test_parse_int(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("5000", 5000.0), ("1,250.50", 1250.5), ("-5", -5.0), ("", None),
    ("abc", None), ("nan", None), ("inf", None),
])
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


def test_get_input_reprompts_on_blank(scripted):
    answers = scripted(["", "  ", "Alice"])
    out = []
    assert get_input("Name", input_func=answers, output=out.append) == "Alice"
    assert len(answers.prompts) == 3
    assert answers.prompts[0] == "Name: "
    assert len(out) == 2


def test_get_input_cancel(scripted):
    with pytest.raises(CancelAction):
        get_input("Name", input_func=scripted(["Cancel"]), output=lambda s: None)


def test_prompt_int_reprompts_on_non_integer(scripted):
    out = []
    assert prompt_int("ID", input_func=scripted(["x", "1.5", "12"]), output=out.append) == 12
    assert out.count("Please enter a whole number.") == 2


def test_prompt_role_reprompts_until_valid(scripted):
    out = []
    answers = scripted(["janitor", "ceo", " finance "])
    assert prompt_role(input_func=answers, output=out.append) is Role.FINANCE
    assert len(answers.prompts) == 3
    assert "Intern/Engineer/Manager/HR/Finance/Sales" in answers.prompts[0]


@pytest.mark.parametrize("answer, expected, used_default, warned", [
    ("", 5000.0, True, False),
    ("7200", 7200.0, False, False),
    ("5000", 5000.0, False, False),
    ("lots", 5000.0, True, True),
])
def test_prompt_salary(scripted, answer, expected, used_default, warned):
    out = []
    value, default = prompt_salary(input_func=scripted([answer]), output=out.append)
    assert value == expected
    assert default is used_default
    assert bool(out) is warned


def test_prompt_salary_passes_negative_through(scripted):
    value, default = prompt_salary(input_func=scripted(["-10"]), output=lambda s: None)
    assert value == -10.0
    assert default is False


def test_prompt_capacity_bounds(scripted):
    out = []
    assert prompt_capacity(input_func=scripted(["1", "9", "4"]), output=out.append) == 4
    assert len(out) == 2


def test_format_roster_empty():
    assert format_roster([]) == [EMPTY_ROSTER]


def test_format_employee_two_decimals():
    emp = Employee("Bob", 2, Role.HR, 6000)
    emp.set_bonus(12.5)
    line = format_employee(emp)
    assert "Bob" in line and "HR" in line
    assert "6000.00" in line and "12.50" in line and "6012.50" in line


def test_format_roster_has_header_and_rows():
    lines = format_roster([Employee("A", 1, Role.HR), Employee("B", 2, Role.SALES)])
    assert lines[0].startswith("Name")
    assert len(lines) == 4
