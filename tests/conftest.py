import logging
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from roster_manager.data.roster import Roster
from roster_manager.models.employee import Employee
from roster_manager.models.role import Role


class ListSink:
    def __init__(self):
        self.lines = []

    def __call__(self, line):
        self.lines.append(line)


class ScriptedInput:
    """Feeds prepared answers to prompts; raises EOFError when exhausted."""
    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError()
        return self.answers.pop(0)


@pytest.fixture
def sink():
    return ListSink()


@pytest.fixture
def roster(sink):
    return Roster(3, sink=sink)


@pytest.fixture
def alice():
    return Employee("Alice", 1, Role.ENGINEER)


@pytest.fixture
def bob():
    return Employee("Bob", 2, Role.HR, 6000)


@pytest.fixture
def scripted():
    return ScriptedInput


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("roster_manager")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
