# cli/menus/profile_menu.py

"""
Student Profile menu for the Student Records CLI.

This module defines the interface for editing the selected student, including:
- Editing identifying fields (name, class, class number)
- Editing strengths and weaknesses as comma-separated text, subject grades, and the remark
- Staging, adding, and deleting medical records and academic results
- Saving the profile (adding a draft or updating a stored student)
- Deleting the student

Field edits only change the editor's working copy. Nothing reaches the store until the profile is
saved, except nested entry changes on a stored student, which are saved immediately. Every
delete passes through the editor's confirmation gate.
"""

from collections.abc import Callable
from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from core.editor import StudentEditor
from core.entry_stager import EntryStager
from models.academic_result import SUBJECTS, FormLevel, Term
from models.student import Student


def run(editor: StudentEditor) -> None:
    """
    Top-level loop with dispatch for the Student Profile menu.

    Args:
        editor (StudentEditor): The session state holding the selected student.

    Raises:
        RuntimeError: If the menu response is unrecognized.

    Notes:
        - Leaving the menu clears the selection; unsaved field edits are discarded after confirmation.
    """
    while editor.selected is not None:
        display_profile(editor)

        save_label = "Update Student" if editor.is_editing_existing else "Add Student"
        title = formatters.format_banner_text("Student Profile")
        options: list[tuple[str, Callable[[StudentEditor], None]]] = [
            ("Edit Name", edit_name),
            ("Edit Class", edit_class),
            ("Edit Class Number", edit_class_number),
            ("Edit Strengths", edit_strengths),
            ("Edit Weaknesses", edit_weaknesses),
            ("Edit Grade", edit_grade),
            ("Edit Remark", edit_remark),
            ("Medical Records", medical_records_menu),
            ("Academic Results", academic_results_menu),
            (save_label, save_profile),
        ]

        if editor.is_editing_existing:
            options.append(("Delete Student", delete_student))

        menu_response = helpers.display_menu(title, options, "Close profile")

        if menu_response is MenuSignal.EXIT:
            if has_unsaved_edits(editor) and not helpers.confirm_action(
                "This profile has unsaved changes. Discard them?"
            ):
                continue
            editor.clear_selection()
            break

        elif callable(menu_response):
            menu_response(editor)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    helpers.returning_to("Student Records menu")


def has_unsaved_edits(editor: StudentEditor) -> bool:
    student = cast(Student, editor.selected)

    if student.is_draft:
        return student != Student.new_draft()

    stored_response = editor.store.find_by_id(student.id)

    return stored_response.success and stored_response.data["record"] != student


def display_profile(editor: StudentEditor) -> None:
    student = cast(Student, editor.selected)

    print(f"\n{model_formatters.format_student_multiline(student)}")

    if editor.validation_errors:
        print("\nPlease correct the following:")
        helpers.display_field_errors(editor.validation_errors)


# === field editors ===


def prompt_field_or_keep(label: str, current: str) -> str | MenuSignal:
    return helpers.prompt_user_input_or_default(
        f"Enter {label} (current: '{current}', leave blank to keep):"
    )


def edit_name(editor: StudentEditor) -> None:
    student = cast(Student, editor.selected)
    value = prompt_field_or_keep("name", student.name)

    if value is MenuSignal.DEFAULT:
        helpers.returning_without_changes()
        return

    student.name = cast(str, value)


def edit_class(editor: StudentEditor) -> None:
    student = cast(Student, editor.selected)
    value = prompt_field_or_keep("class (e.g. 3A)", student.class_name)

    if value is MenuSignal.DEFAULT:
        helpers.returning_without_changes()
        return

    student.class_name = cast(str, value)


def edit_class_number(editor: StudentEditor) -> None:
    student = cast(Student, editor.selected)
    value = prompt_field_or_keep("class number (1-39)", student.class_number)

    if value is MenuSignal.DEFAULT:
        helpers.returning_without_changes()
        return

    student.class_number = cast(str, value)


def edit_strengths(editor: StudentEditor) -> None:
    student = cast(Student, editor.selected)
    value = helpers.prompt_user_input(
        f"Enter strengths separated by '{formatters.LIST_DELIMITER}' (current: '{student.strengths_text}', leave blank to clear):"
    )

    student.strengths_text = value


def edit_weaknesses(editor: StudentEditor) -> None:
    student = cast(Student, editor.selected)
    value = helpers.prompt_user_input(
        f"Enter weaknesses separated by '{formatters.LIST_DELIMITER}' (current: '{student.weaknesses_text}', leave blank to clear):"
    )

    student.weaknesses_text = value


def edit_grade(editor: StudentEditor) -> None:
    student = cast(Student, editor.selected)

    subject = helpers.prompt_user_input_or_cancel(
        "Enter the subject to grade (leave blank to cancel):"
    )

    if subject is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    subject = cast(str, subject)

    while True:
        score = helpers.prompt_user_input_or_cancel(
            f"Enter the score for {subject} (leave blank to cancel):"
        )

        if score is MenuSignal.CANCEL:
            helpers.returning_without_changes()
            return

        try:
            student.set_grade(subject, float(cast(str, score)))
            return

        except ValueError:
            print("\n[ERROR] Score must be a number.")
            print("Please try again.")


def edit_remark(editor: StudentEditor) -> None:
    student = cast(Student, editor.selected)

    student.remark = helpers.prompt_user_input(
        f"Enter remark (current: '{student.remark}'):"
    )


# === save and delete ===


def save_profile(editor: StudentEditor) -> None:
    helpers.display_response(editor.save_selected())


def delete_student(editor: StudentEditor) -> None:
    student = cast(Student, editor.selected)

    print("\nYou are about to permanently delete the following student record:")
    print(model_formatters.format_student_oneline(student))

    editor.request_delete_selected()

    response = helpers.resolve_pending_confirmation(editor.gate)

    if response is not None:
        helpers.display_response(response)


# === nested entries ===


def stage_fields(
    stager: EntryStager,
    text_fields: list[tuple[str, str]],
    choice_fields: list[tuple[str, str, list[str]]],
) -> bool:
    """
    Walks the user through each staged field, keeping the current value on blank input.

    Args:
        stager (EntryStager): The staging buffer being filled.
        text_fields (list[tuple[str, str]]): (field, label) pairs entered as free text.
        choice_fields (list[tuple[str, str, list[str]]]): (field, label, values) triples chosen from a list.

    Returns:
        True if the staged entry is complete, False otherwise.
    """
    if not stager.is_pristine() and helpers.confirm_action(
        "An entry from earlier is still partly filled in. Start over with a blank entry?"
    ):
        stager.clear()

    for field, label, values in choice_fields:
        choice = helpers.prompt_choice_from_values(values, label, stager.get(field))
        if choice is not MenuSignal.DEFAULT:
            stager.set(field, cast(str, choice))

    for field, label in text_fields:
        value = prompt_field_or_keep(label, stager.get(field))
        if value is not MenuSignal.DEFAULT:
            stager.set(field, cast(str, value))

    print("\nStaged entry:")
    print(model_formatters.format_staged_values(stager.values()))

    if not stager.is_ready():
        print("\nThis entry cannot be added yet:")
        helpers.display_field_errors(stager.errors())
        return False

    return True


def medical_records_menu(editor: StudentEditor) -> None:
    def view() -> None:
        records = cast(Student, editor.selected).medical_records

        if not records:
            print("\nThere are no medical records.")
            return

        for i, record in enumerate(records, 1):
            print(f"\n{i:>2}.")
            print(model_formatters.format_medical_record_multiline(record))

    def add() -> None:
        ready = stage_fields(
            editor.medical_stager,
            text_fields=[
                ("pic", "physician in charge"),
                ("time", "date (YYYY-MM-DD)"),
                ("hospital", "hospital"),
                ("treatment", "treatment"),
                ("remark", "remark (optional)"),
            ],
            choice_fields=[],
        )

        if ready and helpers.confirm_action("Add this medical record?"):
            helpers.display_response(editor.add_staged_medical_record())

    def delete() -> None:
        records = cast(Student, editor.selected).medical_records
        selection = helpers.prompt_selection_from_list(
            list(enumerate(records)),
            "Medical Records",
            lambda pair: model_formatters.format_medical_record_oneline(pair[1]),
        )

        if selection is None:
            return

        editor.request_delete_medical_record(selection[0])

        response = helpers.resolve_pending_confirmation(editor.gate)

        if response is not None:
            helpers.display_response(response)

    run_entries_menu("Medical Records", view, add, delete)


def academic_results_menu(editor: StudentEditor) -> None:
    def view() -> None:
        results = cast(Student, editor.selected).academic_results

        if not results:
            print("\nThere are no academic results.")
            return

        helpers.display_results(
            results, True, model_formatters.format_academic_result_oneline
        )

    def add() -> None:
        ready = stage_fields(
            editor.academic_stager,
            text_fields=[("marks", "marks")],
            choice_fields=[
                ("form", "Form", [f.value for f in FormLevel]),
                ("term", "Term", [t.value for t in Term]),
                ("subject", "Subject", list(SUBJECTS)),
            ],
        )

        if ready and helpers.confirm_action("Add this academic result?"):
            helpers.display_response(editor.add_staged_academic_result())

    def delete() -> None:
        results = cast(Student, editor.selected).academic_results
        selection = helpers.prompt_selection_from_list(
            list(enumerate(results)),
            "Academic Results",
            lambda pair: model_formatters.format_academic_result_oneline(pair[1]),
        )

        if selection is None:
            return

        editor.request_delete_academic_result(selection[0])

        response = helpers.resolve_pending_confirmation(editor.gate)

        if response is not None:
            helpers.display_response(response)

    run_entries_menu("Academic Results", view, add, delete)


def run_entries_menu(
    title: str,
    view: Callable[[], None],
    add: Callable[[], None],
    delete: Callable[[], None],
) -> None:
    options = [
        (f"View {title}", view),
        ("Add Entry", add),
        ("Delete Entry", delete),
    ]

    while True:
        menu_response = helpers.display_menu(
            formatters.format_banner_text(title), options, "Return to Student Profile"
        )

        if menu_response is MenuSignal.EXIT:
            break
        elif callable(menu_response):
            menu_response()
        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")
