# __main__.py
from roster_manager.main import main

main(prog_name="roster-manager")
