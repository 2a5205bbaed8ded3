# cli/menu.py
from roster_manager.data.roster import Roster
from roster_manager.exceptions import CancelAction, InvalidArgument
from roster_manager.logging import get_logger
from roster_manager.models.employee import Employee
from roster_manager.utils.formatting import format_roster
from roster_manager.utils.input_handler import (
    get_input, prompt_amount, prompt_int, prompt_role, prompt_salary
)

logger = get_logger(__name__)

FAREWELL = "Exiting roster manager. Goodbye!"


def main_menu(roster: Roster, input_func=input, output=print):
    while True:
        output("\n[Employee Roster]")
        output("1. Add employee")
        output("2. Update bonus")
        output("3. Display all employees")
        output("4. Exit")

        try:
            choice = get_input("Choice", input_func=input_func, output=output)
            if choice == "1":
                add_employee(roster, input_func, output)
            elif choice == "2":
                update_bonus(roster, input_func, output)
            elif choice == "3":
                show_employees(roster, output)
            elif choice == "4":
                output(FAREWELL)
                break
            else:
                output("Invalid choice.")
        except CancelAction:
            output("Cancelled. Back to the main menu.")
        except EOFError:
            output("")
            output(FAREWELL)
            break


def add_employee(roster: Roster, input_func=input, output=print) -> bool:
    if roster.is_full:
        output(f"Roster is full ({roster.count}/{roster.capacity}).")
        return False

    name = get_input("Name", input_func=input_func, output=output)
    emp_id = prompt_int("Employee ID", input_func=input_func, output=output)
    role = prompt_role(input_func=input_func, output=output)
    salary, used_default = prompt_salary(input_func=input_func, output=output)
    if used_default:
        output(f"Using default basic salary {salary:.2f}.")

    try:
        emp = Employee.create(name, emp_id, role, salary)
    except InvalidArgument as e:
        logger.debug("employee rejected: %s", e)
        output(f"Error: {e}")
        return False

    if roster.add(emp):
        output("Employee added.")
        return True
    output("Employee was not added.")
    return False


def update_bonus(roster: Roster, input_func=input, output=print) -> bool:
    emp_id = prompt_int("Employee ID", input_func=input_func, output=output)
    bonus = prompt_amount("Bonus", input_func=input_func, output=output)
    if roster.update_bonus(emp_id, bonus):
        output("Bonus updated.")
        return True
    output("Bonus was not updated.")
    return False


def show_employees(roster: Roster, output=print):
    output("\n[Employees]")
    for line in format_roster(roster.list_all()):
        output(line)
