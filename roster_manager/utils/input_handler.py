# utils/input_handler.py
from __future__ import annotations
from typing import Callable, Optional, Tuple

from roster_manager.config import DEFAULT_BASIC_SALARY, MAX_CAPACITY, MIN_CAPACITY
from roster_manager.exceptions import CancelAction, InvalidRole
from roster_manager.models.role import Role
from roster_manager.utils.parse_utils import parse_amount, parse_int

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]


def get_input(prompt: str, allow_empty: bool = False, default: str | None = None,
              input_func: InputFunc = input, output: OutputFunc = print) -> str:
    label = prompt
    if default is not None:
        label += f" [{default}]"
    label += ": "

    while True:
        v = input_func(label).strip()

        if v.lower() == "cancel":
            raise CancelAction()

        if not v and allow_empty:
            return ""
        if not v:
            output("Please enter a value, or 'cancel' to go back.")
            continue
        return v


def prompt_int(prompt: str, input_func: InputFunc = input, output: OutputFunc = print) -> int:
    """Re-prompts until an integer is typed."""
    while True:
        n = parse_int(get_input(prompt, input_func=input_func, output=output))
        if n is not None:
            return n
        output("Please enter a whole number.")


def prompt_amount(prompt: str, input_func: InputFunc = input, output: OutputFunc = print) -> float:
    while True:
        value = parse_amount(get_input(prompt, input_func=input_func, output=output))
        if value is not None:
            return value
        output("Please enter a number.")


def prompt_role(prompt: str = "Role", input_func: InputFunc = input,
                output: OutputFunc = print) -> Role:
    label = f"{prompt} ({'/'.join(Role.labels())})"
    while True:
        text = get_input(label, input_func=input_func, output=output)
        try:
            return Role.parse(text)
        except InvalidRole as e:
            output(f"{e}. Choose one of: {', '.join(Role.labels())}")


def prompt_salary(prompt: str = "Basic salary", input_func: InputFunc = input,
                  output: OutputFunc = print) -> Tuple[float, bool]:
    """
    -> (salary, used_default)
    blank -> default, unparsable text -> default with a warning
    """
    text = get_input(prompt, allow_empty=True, default=str(DEFAULT_BASIC_SALARY),
                     input_func=input_func, output=output)
    if not text:
        return float(DEFAULT_BASIC_SALARY), True
    value = parse_amount(text)
    if value is None:
        output(f"Invalid salary {text!r}; using default {DEFAULT_BASIC_SALARY:.2f}.")
        return float(DEFAULT_BASIC_SALARY), True
    return value, False


def prompt_capacity(input_func: InputFunc = input, output: OutputFunc = print) -> int:
    while True:
        n = prompt_int(f"Roster capacity ({MIN_CAPACITY}-{MAX_CAPACITY})",
                       input_func=input_func, output=output)
        if MIN_CAPACITY <= n <= MAX_CAPACITY:
            return n
        output(f"Capacity must be between {MIN_CAPACITY} and {MAX_CAPACITY}.")
