# data/roster.py
from __future__ import annotations
from datetime import datetime
from numbers import Real
from typing import Callable, Iterator, List, Optional

from roster_manager.config import TIMESTAMP_FORMAT, validate_capacity
from roster_manager.exceptions import InvalidArgument
from roster_manager.logging import get_logger
from roster_manager.models.employee import Employee

logger = get_logger(__name__)

LogSink = Callable[[str], None]


def console_sink(line: str) -> None:
    print(line)


class Roster:
    """
    Fixed-capacity, insertion-ordered employee store keyed by employee ID.
    - add/update_bonus report failure as False, never raise
    - every action is written to the sink as "[timestamp] message"
    - no removal: the roster only grows
    """
    def __init__(self, capacity: int, sink: Optional[LogSink] = None,
                 clock: Callable[[], datetime] = datetime.now):
        self._capacity = validate_capacity(capacity)
        self._employees: List[Employee] = []
        self._sink = sink or console_sink
        self._clock = clock

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        return len(self._employees)

    @property
    def is_full(self) -> bool:
        return len(self._employees) >= self._capacity

    def __len__(self):
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(list(self._employees))

    # ---------- lookup ----------
    def get(self, employee_id: int) -> Optional[Employee]:
        return next((e for e in self._employees if e.employee_id == employee_id), None)

    def exists(self, employee_id: int) -> bool:
        return self.get(employee_id) is not None

    def list_all(self) -> List[Employee]:
        return list(self._employees)

    # ---------- mutation ----------
    def add(self, employee: Optional[Employee]) -> bool:
        if employee is None:
            self.log("Add rejected: no employee given")
            return False
        if self.is_full:
            self.log(f"Add rejected for {employee.name} (ID {employee.employee_id}): "
                     f"roster is full ({self._capacity}/{self._capacity})")
            return False
        if self.exists(employee.employee_id):
            self.log(f"Add rejected for {employee.name}: "
                     f"ID {employee.employee_id} already exists")
            return False

        self._employees.append(employee)
        self.log(f"Added employee {employee.name} (ID {employee.employee_id}, {employee.role})")
        return True

    def update_bonus(self, employee_id: int, bonus: float) -> bool:
        if isinstance(bonus, bool) or not isinstance(bonus, Real) or bonus < 0:
            self.log(f"Bonus update rejected for ID {employee_id}: invalid bonus {bonus!r}")
            return False
        emp = self.get(employee_id)
        if emp is None:
            self.log(f"Bonus update rejected: no employee with ID {employee_id}")
            return False
        try:
            emp.set_bonus(bonus)
        except InvalidArgument as e:
            self.log(f"Bonus update rejected for ID {employee_id}: {e}")
            return False
        self.log(f"Updated bonus for {emp.name} (ID {employee_id}) to {emp.bonus:.2f}")
        return True

    # ---------- log ----------
    def log(self, message: str) -> None:
        line = f"[{self._clock().strftime(TIMESTAMP_FORMAT)}] {message}"
        logger.debug(message)
        self._sink(line)
