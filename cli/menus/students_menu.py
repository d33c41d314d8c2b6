# cli/menus/students_menu.py

"""
Student Records menu for the Student Records CLI.

This module defines the list-level interface for student records, including:
- Viewing the student list, filtered by the current search term and sorted by the selected column
- Changing the search term
- Sorting by name, class, or class number (selecting the same column again reverses the order)
- Starting a new student draft
- Selecting a student to open their profile

All state lives in the `StudentEditor`; profile editing is delegated to `profile_menu`.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import profile_menu
from core.editor import StudentEditor
from models.student import Student


def run(editor: StudentEditor) -> None:
    """
    Top-level loop with dispatch for the Student Records menu.

    Args:
        editor (StudentEditor): The session state for the opened store.

    Raises:
        RuntimeError: If the menu response is unrecognized.

    Notes:
        - The finally block guarantees a retry prompt if the last write to storage failed.
    """
    title = formatters.format_banner_text("Student Records")
    options = [
        ("View Students", view_students),
        ("Search Students", search_students),
        ("Sort Students", sort_students),
        ("Open Student Profile", select_and_open_student),
        ("Add New Student", add_new_student),
    ]
    zero_option = "Return to Start Menu"

    try:
        while True:
            menu_response = helpers.display_menu(title, options, zero_option)

            if menu_response is MenuSignal.EXIT:
                break

            elif callable(menu_response):
                menu_response(editor)

            else:
                raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    finally:
        prompt_if_unsaved(editor)

    helpers.returning_to("Start Menu")


def prompt_if_unsaved(editor: StudentEditor) -> None:
    store = editor.store

    if store.has_unsaved_changes and helpers.confirm_action(
        "The last change could not be written to storage. Do you want to try saving again?"
    ):
        helpers.display_response(store.save())


# === view students ===


def view_students(editor: StudentEditor) -> None:
    """
    Displays the current student list view.

    Notes:
        - The list reflects the active search term and sort selection.
    """
    banner = formatters.format_banner_text("Student List")
    print(f"\n{banner}")

    if editor.search_term:
        print(f"Search: '{editor.search_term}'")

    students = editor.visible_students()

    if not students:
        print("There are no matching students.")
        return

    print(model_formatters.format_student_header(editor.sort))
    helpers.display_results(students, formatter=model_formatters.format_student_oneline)


def search_students(editor: StudentEditor) -> None:
    term = helpers.prompt_user_input(
        "Search by name, ID, class, or class number (leave blank to show all):"
    )

    editor.search_term = term

    view_students(editor)


def sort_students(editor: StudentEditor) -> None:
    options = [
        ("Name", lambda: editor.sort_by("name")),
        ("Class", lambda: editor.sort_by("class")),
        ("Class Number", lambda: editor.sort_by("classNumber")),
    ]

    menu_response = helpers.display_menu(
        f"Sort Students (currently {editor.sort.field} {editor.sort.direction.value})",
        options,
        "Return without sorting",
    )

    if menu_response is MenuSignal.EXIT:
        helpers.returning_without_changes()
        return
    elif callable(menu_response):
        menu_response()
    else:
        raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    view_students(editor)


# === open and create ===


def select_and_open_student(editor: StudentEditor) -> None:
    """
    Prompts the user to pick a student from the current list view and opens their profile.
    """
    student = helpers.prompt_selection_from_list(
        editor.visible_students(),
        "Students",
        model_formatters.format_student_oneline,
    )

    if student is None:
        return
    student = cast(Student, student)

    select_response = editor.select(student.id)

    if not select_response.success:
        helpers.display_response_failure(select_response)
        return

    profile_menu.run(editor)


def add_new_student(editor: StudentEditor) -> None:
    """
    Starts a blank draft and opens it in the profile menu.

    Notes:
        - The draft is only stored once the user saves it and it passes validation.
    """
    editor.new_draft()

    profile_menu.run(editor)
