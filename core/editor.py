# core/editor.py

"""
UI-facing session state for the student records screen.

`StudentEditor` owns everything the front end needs between user events: the search term and
sort selection, the currently selected student (a working copy, never the stored instance), the
last set of validation errors, the staging buffers for new nested entries, and the confirmation
gate for destructive actions.

Every mutating method delegates to the `RecordStore`; the editor only decides which store call
an event maps to and keeps the selection and error state in step with the result.
"""

from __future__ import annotations

from core.confirmation import ConfirmationGate
from core.entry_stager import AcademicResultStager, MedicalRecordStager
from core.query import SortState, view
from core.response import ErrorCode, Response
from models.record_store import RecordStore
from models.student import Student

DELETE_STUDENT_MESSAGE = (
    "Are you sure you want to delete this student? This action cannot be undone."
)
DELETE_MEDICAL_RECORD_MESSAGE = (
    "Are you sure you want to delete this medical record? This action cannot be undone."
)
DELETE_ACADEMIC_RESULT_MESSAGE = (
    "Are you sure you want to delete this academic result? This action cannot be undone."
)


class StudentEditor:

    def __init__(self, store: RecordStore):
        self._store = store
        self._selected: Student | None = None
        self._search_term: str = ""
        self._sort = SortState()
        self._validation_errors: dict[str, str] = {}
        self._medical_stager = MedicalRecordStager()
        self._academic_stager = AcademicResultStager()
        self._gate = ConfirmationGate()

    # === properties ===

    @property
    def store(self) -> RecordStore:
        return self._store

    @property
    def selected(self) -> Student | None:
        return self._selected

    @property
    def is_editing_existing(self) -> bool:
        return self._selected is not None and self._store.contains(self._selected.id)

    @property
    def search_term(self) -> str:
        return self._search_term

    @search_term.setter
    def search_term(self, search_term: str) -> None:
        self._search_term = search_term

    @property
    def sort(self) -> SortState:
        return self._sort

    @property
    def validation_errors(self) -> dict[str, str]:
        return self._validation_errors.copy()

    @property
    def medical_stager(self) -> MedicalRecordStager:
        return self._medical_stager

    @property
    def academic_stager(self) -> AcademicResultStager:
        return self._academic_stager

    @property
    def gate(self) -> ConfirmationGate:
        return self._gate

    # === list view ===

    def visible_students(self) -> list[Student]:
        return view(
            self._store.list(),
            self._search_term,
            self._sort.field,
            self._sort.direction,
        )

    def sort_by(self, field: str) -> None:
        self._sort.select(field)

    # === selection ===

    def select(self, student_id: str) -> Response:
        response = self._store.find_by_id(student_id)

        if response.success:
            self._selected = response.data["record"].copy()
            self._validation_errors = {}

        return response

    def new_draft(self) -> Student:
        self._selected = Student.new_draft()
        self._validation_errors = {}
        return self._selected

    def clear_selection(self) -> None:
        self._selected = None
        self._validation_errors = {}

    def _require_selection(self) -> Student:
        if self._selected is None:
            raise RuntimeError("No student is selected.")
        return self._selected

    # === student mutations ===

    def _track(self, response: Response) -> Response:
        """Keeps the selection and error state in step with a store response."""
        if response.success:
            self._validation_errors = {}
            if "record" in response.data:
                self._selected = response.data["record"].copy()
        elif response.error is ErrorCode.VALIDATION_FAILED:
            self._validation_errors = response.field_errors

        return response

    def save_selected(self) -> Response:
        """
        Commits the selected student: `create()` for a draft, `update()` for a stored record.

        Notes:
            - On a validation failure the errors are kept in `validation_errors` and the
              selection is left as it was, so the user can correct the fields.
        """
        student = self._require_selection()

        if self._store.contains(student.id):
            return self._track(self._store.update(student))

        return self._track(self._store.create(student))

    def request_delete_selected(self) -> None:
        student = self._require_selection()
        student_id = student.id

        def delete() -> Response:
            response = self._store.delete(student_id)
            if response.success:
                self.clear_selection()
            return response

        self._gate.request(DELETE_STUDENT_MESSAGE, delete)

    # --- nested collections ---

    def add_staged_medical_record(self) -> Response:
        """
        Appends the staged medical record to the selected student.

        Notes:
            - Rejected with `ErrorCode.VALIDATION_FAILED` if a required field is blank; the
              student and the staged values are left untouched.
            - The stager is cleared only after the entry is accepted.
        """
        student = self._require_selection()

        if not self._medical_stager.is_ready():
            return Response.invalid(
                self._medical_stager.errors(), detail="Medical record was not added."
            )

        response = self._track(
            self._store.add_medical_record(student, self._medical_stager.build())
        )

        if response.success:
            self._medical_stager.clear()

        return response

    def add_staged_academic_result(self) -> Response:
        student = self._require_selection()

        if not self._academic_stager.is_ready():
            return Response.invalid(
                self._academic_stager.errors(), detail="Academic result was not added."
            )

        try:
            entry = self._academic_stager.build()
        except ValueError as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        response = self._track(self._store.add_academic_result(student, entry))

        if response.success:
            self._academic_stager.clear()

        return response

    def request_delete_medical_record(self, index: int) -> None:
        snapshot = self._require_selection().copy()

        self._gate.request(
            DELETE_MEDICAL_RECORD_MESSAGE,
            lambda: self._track(self._store.remove_medical_record(snapshot, index)),
        )

    def request_delete_academic_result(self, index: int) -> None:
        snapshot = self._require_selection().copy()

        self._gate.request(
            DELETE_ACADEMIC_RESULT_MESSAGE,
            lambda: self._track(self._store.remove_academic_result(snapshot, index)),
        )

    # === confirmation ===

    def confirm(self) -> Response:
        return self._gate.confirm()

    def cancel(self) -> None:
        self._gate.cancel()
