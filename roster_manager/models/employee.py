# models/employee.py
from __future__ import annotations
import math
from numbers import Real
from typing import Any, Dict, Optional

from roster_manager.config import DEFAULT_BASIC_SALARY
from roster_manager.exceptions import InvalidArgument
from roster_manager.models.role import Role


def _check_amount(value, field: str) -> float:
    # bool is a subclass of int; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgument(f"{field} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidArgument(f"{field} must be finite, got {value}")
    if value < 0:
        raise InvalidArgument(f"{field} must not be negative, got {value}")
    return float(value)


class Employee:
    """
    One roster entry.
    Only the bonus can change after creation (via set_bonus).
    """
    __slots__ = ("_name", "_employee_id", "_role", "_basic_salary", "_bonus")

    def __init__(self, name: str, employee_id: int, role: Role,
                 basic_salary: float = DEFAULT_BASIC_SALARY):
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgument("Name must not be blank")
        if isinstance(employee_id, bool) or not isinstance(employee_id, int):
            raise InvalidArgument(f"Employee ID must be an integer, got {employee_id!r}")
        if employee_id <= 0:
            raise InvalidArgument(f"Employee ID must be positive, got {employee_id}")
        if not isinstance(role, Role):
            raise InvalidArgument("Role is required")

        self._name = name.strip()
        self._employee_id = employee_id
        self._role = role
        self._basic_salary = _check_amount(basic_salary, "Basic salary")
        self._bonus = 0.0

    @classmethod
    def create(cls, name: str, employee_id: int, role,
               basic_salary: Optional[float] = None) -> "Employee":
        """role may be a Role or its label text; basic_salary=None -> default"""
        if isinstance(role, str):
            role = Role.parse(role)
        if basic_salary is None:
            basic_salary = DEFAULT_BASIC_SALARY
        return cls(name, employee_id, role, basic_salary)

    @property
    def name(self) -> str:
        return self._name

    @property
    def employee_id(self) -> int:
        return self._employee_id

    @property
    def role(self) -> Role:
        return self._role

    @property
    def basic_salary(self) -> float:
        return self._basic_salary

    @property
    def bonus(self) -> float:
        return self._bonus

    def total_salary(self) -> float:
        return self._basic_salary + self._bonus

    def set_bonus(self, value: float) -> None:
        self._bonus = _check_amount(value, "Bonus")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self._name,
            "employee_id": self._employee_id,
            "role": self._role.value,
            "basic_salary": self._basic_salary,
            "bonus": self._bonus,
            "total_salary": self.total_salary(),
        }

    def __repr__(self):
        return (f"Employee(name={self._name!r}, employee_id={self._employee_id}, "
                f"role={self._role.value}, basic_salary={self._basic_salary}, bonus={self._bonus})")
