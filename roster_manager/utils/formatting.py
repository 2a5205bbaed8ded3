# utils/formatting.py
from typing import Iterable, List

from roster_manager.models.employee import Employee

HEADER = f"{'Name':<20} | {'ID':>5} | {'Role':<8} | {'Basic':>10} | {'Bonus':>10} | {'Total':>10}"
EMPTY_ROSTER = "No employees in the roster."


def format_money(value: float) -> str:
    return f"{value:.2f}"


def format_employee(emp: Employee) -> str:
    return (f"{emp.name:<20} | {emp.employee_id:>5} | {emp.role.value:<8} | "
            f"{format_money(emp.basic_salary):>10} | {format_money(emp.bonus):>10} | "
            f"{format_money(emp.total_salary()):>10}")


def format_roster(employees: Iterable[Employee]) -> List[str]:
    employees = list(employees)
    if not employees:
        return [EMPTY_ROSTER]
    return [HEADER, "-" * len(HEADER)] + [format_employee(e) for e in employees]
