# models/role.py
from __future__ import annotations
from enum import Enum
from typing import Optional

from roster_manager.exceptions import InvalidRole


class Role(Enum):
    INTERN = "Intern"
    ENGINEER = "Engineer"
    MANAGER = "Manager"
    HR = "HR"
    FINANCE = "Finance"
    SALES = "Sales"

    def __str__(self):
        return self.value

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def labels(cls) -> list[str]:
        return [r.value for r in cls]

    @classmethod
    def try_parse(cls, text) -> Optional["Role"]:
        """' engineer ' -> Role.ENGINEER, unknown/blank -> None"""
        if not isinstance(text, str):
            return None
        key = text.strip().lower()
        if not key:
            return None
        return next((r for r in cls if r.value.lower() == key), None)

    @classmethod
    def parse(cls, text) -> "Role":
        role = cls.try_parse(text)
        if role is None:
            raise InvalidRole(text)
        return role
