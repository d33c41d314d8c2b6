# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Student Records application.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for and validating user input
- Handling user selections and confirmation flows
- Displaying standard system messages, field errors, and failure feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from enum import Enum
from typing import Any, Callable, Iterable, TypeVar

import core.formatters as formatters
from core.confirmation import ConfirmationGate
from core.response import ErrorCode, Response

T = TypeVar("T")


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    DEFAULT = "DEFAULT"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("Select an option: ")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            # casts choice to int and adjusts for zero-index, retrieves action from tuple
            return options[int(choice) - 1][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a numbered index to each result. Defaults to False.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


# === prompt user input methods ===


# Prompt Helpers
#
# These functions provide a consistent way to handle user input and confirmation prompts.
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - Empty string responses are overloaded for control signals:
#     - `prompt_user_input_or_cancel()` returns `MenuSignal.CANCEL` on blank input.
#     - `prompt_user_input_or_default()` returns `MenuSignal.DEFAULT`.
#     - `prompt_user_input_or_none()` returns `None`.
# - `confirm_action()` loops until the user enters a valid yes/no response.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_user_input_or_default(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.DEFAULT if response == "" else response


def prompt_user_input_or_none(prompt: str) -> str | None:
    response = prompt_user_input(prompt)
    return None if response == "" else response


def prompt_selection_from_list(
    list_data: list[T],
    list_description: str,
    formatter: Callable[[T], str] = lambda x: str(x),
) -> T | None:
    """
    Prompts the user to select an item from an already ordered list.

    Args:
        list_data (list[T]): The items to choose from, displayed in the given order.
        list_description (str): A short description used in prompts and headings (e.g. "students").
        formatter (Callable[[T], str], optional): Function to convert each item to a display string. Defaults to str().

    Returns:
        T: The selected item if a valid index is chosen.
        None: If the list is empty or the user cancels with "0".
    """
    if not list_data:
        print(f"\nThere are no {list_description.lower()}.")
        return None

    while True:
        print(f"\n{formatters.format_banner_text(list_description)}")

        display_results(list_data, True, formatter)

        choice = prompt_user_input("Select an option (0 to cancel):")

        if choice == "0":
            return None

        try:
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)
            return list_data[index]

        except (ValueError, IndexError):
            print("\nInvalid selection. Please try again.")


def prompt_choice_from_values(
    values: Iterable[str], description: str, current: str
) -> str | MenuSignal:
    """
    Prompts the user to pick one of a fixed set of values, keeping `current` on blank input.

    Returns:
        The chosen value, or `MenuSignal.DEFAULT` if the user keeps the current value.
    """
    values = list(values)

    while True:
        print(f"\n{description} (current: {current})")
        display_results(values, True)

        choice = prompt_user_input_or_default("Select an option (leave blank to keep):")

        if choice is MenuSignal.DEFAULT:
            return MenuSignal.DEFAULT

        try:
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)
            return values[index]

        except (ValueError, IndexError):
            print("\nInvalid selection. Please try again.")


# === confirmation gate ===


def resolve_pending_confirmation(gate: ConfirmationGate) -> Response | None:
    """
    Asks the user to confirm or cancel the action pending on `gate`.

    Returns:
        The `Response` of the confirmed action, or None if the user cancels or nothing is pending.
    """
    if not gate.is_pending:
        return None

    caution_banner()

    if confirm_action(gate.message or "Are you sure?"):
        return gate.confirm()

    gate.cancel()
    returning_without_changes()
    return None


# === often used messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


def returning_to(destination: str) -> None:
    print(f"\nReturning to {destination}.")


def caution_banner() -> None:
    caution_banner = formatters.format_banner_text("CAUTION!")
    print(f"\n{caution_banner}")


def display_field_errors(errors: dict[str, str]) -> None:
    for field, message in errors.items():
        print(f"... {field}: {message}")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Notes:
        - Does nothing if the response was successful.
        - Validation failures list every field message beneath the summary line.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")

    if response.error is ErrorCode.VALIDATION_FAILED:
        display_field_errors(response.field_errors)


def display_response(response: Response) -> None:
    """
    Displays the outcome of a store operation, warning when the change was not written to storage.
    """
    if not response.success:
        display_response_failure(response)
        return

    print(f"\n{response.detail}")

    if response.data.get("persisted") is False and response.data.get("matched", True):
        print("[WARNING] The change could not be written to storage and is held in memory only.")
