# cli/main.py

"""
Start Menu for the Student Records CLI.

Configures logging, resolves the data directory, opens the `RecordStore` through a JSON file
gateway, and hands control to the Student Records menu.
"""

import logging

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import students_menu
from cli.path_utils import data_dir_from_env, resolve_data_dir
from core.editor import StudentEditor
from core.logging_config import get_logger, log_with_context, setup_logging
from core.persistence import JsonFileGateway
from models.record_store import RecordStore

logger = get_logger("cli")


def run_cli() -> None:
    """
    Top-level loop with dispatch for the Start menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    setup_logging()

    title = formatters.format_banner_text("STUDENT RECORDS")
    options = [
        ("Open student records", open_records),
    ]
    zero_option = "Exit Program"

    env_dir = data_dir_from_env()

    if env_dir is not None:
        store = open_store(resolve_data_dir(env_dir))
        if store is not None:
            students_menu.run(StudentEditor(store))

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            exit_program()

        elif callable(menu_response):
            store = menu_response()

            if store is not None:
                students_menu.run(StudentEditor(store))

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def open_records() -> RecordStore | None:
    """
    Prompts the user for a data directory and opens the `RecordStore` stored there.

    Returns:
        RecordStore: The opened store if loading succeeds.
        None: If loading fails; the failure is displayed to the user.

    Notes:
        - A blank directory input uses `~/Documents/StudentRecords`.
        - A directory with no stored records opens with the seed dataset.
    """
    dir_input = helpers.prompt_user_input_or_none(
        "Enter directory for student records (leave blank to use default):"
    )

    return open_store(resolve_data_dir(dir_input))


def open_store(data_dir: str) -> RecordStore | None:
    print(f"\nOpening student records in {data_dir} ...")

    store_response = RecordStore.open(JsonFileGateway(data_dir))

    if not store_response.success:
        helpers.display_response_failure(store_response)
        return None

    log_with_context(
        logger, logging.INFO, "Student records opened.", {"data_dir": data_dir}
    )
    print(f"... {store_response.detail}")

    return store_response.data["store"]


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


if __name__ == "__main__":
    run_cli()
