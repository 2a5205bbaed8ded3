# main.py
import click

from roster_manager.cli.menu import main_menu
from roster_manager.config import MAX_CAPACITY, MIN_CAPACITY, Settings
from roster_manager.data.roster import Roster
from roster_manager.exceptions import CancelAction
from roster_manager.logging import configure_logging, get_logger
from roster_manager.utils.input_handler import prompt_capacity

logger = get_logger(__name__)


@click.command()
@click.option("--capacity", "-c", type=click.IntRange(MIN_CAPACITY, MAX_CAPACITY),
              default=None, help=f"Roster capacity ({MIN_CAPACITY}-{MAX_CAPACITY}); asked at start-up if omitted.")
@click.option("--gui", is_flag=True, help="Open the desktop roster window instead of the text menu.")
@click.option("--verbose", "-v", is_flag=True, help="Show debug diagnostics on stderr.")
def main(capacity, gui, verbose):
    """In-memory employee roster: add employees, update bonuses, list them."""
    settings = Settings.from_env(capacity=capacity, gui=gui, verbose=verbose)
    configure_logging(settings.log_level)

    if settings.capacity is None:
        try:
            settings.capacity = prompt_capacity(input_func=input, output=click.echo)
        except (CancelAction, EOFError):
            click.echo("No capacity given. Exiting.")
            return

    roster = Roster(settings.capacity, sink=click.echo)
    logger.debug("roster created with capacity %d", roster.capacity)

    if settings.gui:
        from roster_manager.gui.roster_dialog import run_gui
        run_gui(roster)
        return

    main_menu(roster, input_func=input, output=click.echo)


if __name__ == "__main__":
    main()
