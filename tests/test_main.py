from click.testing import CliRunner

from roster_manager.cli.menu import FAREWELL
from roster_manager.main import main


def invoke(args, text):
    return CliRunner().invoke(main, args, input=text)


def test_help():
    result = invoke(["--help"], "")
    assert result.exit_code == 0
    assert "--capacity" in result.output
    assert "--gui" in result.output


def test_session_with_capacity_option():
    result = invoke(["--capacity", "2"],
                    "1\nAlice\n1\nEngineer\n\n"
                    "1\nBob\n2\nHR\n6000\n"
                    "2\n1\n500\n"
                    "3\n4\n")
    assert result.exit_code == 0, result.output
    assert "Added employee Alice (ID 1, Engineer)" in result.output
    assert "Updated bonus for Alice (ID 1) to 500.00" in result.output
    assert "5500.00" in result.output
    assert "Roster is full" not in result.output
    assert FAREWELL in result.output


def test_capacity_is_prompted_when_missing():
    result = invoke([], "7\n3\n4\n")
    assert result.exit_code == 0, result.output
    assert "Capacity must be between 2 and 5." in result.output
    assert FAREWELL in result.output


def test_capacity_prompt_end_of_input():
    result = invoke([], "")
    assert result.exit_code == 0
    assert "No capacity given. Exiting." in result.output


def test_capacity_option_out_of_range():
    result = invoke(["--capacity", "6"], "4\n")
    assert result.exit_code != 0
    assert "6" in result.output
