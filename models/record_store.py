# models/record_store.py

"""
The RecordStore is the central data object of the program and the "source of truth" for all
student records in the current session.

Students are kept in an ordered list (insertion order is display order before sorting) and the
whole list is written through the injected `PersistenceGateway` after every mutation. Every
mutation builds the new list first and swaps it in only once it is complete, so a failed
operation never leaves a partially applied change behind.

Provides functions for opening a store from storage (falling back to the seed dataset),
creating, updating, and deleting students, and adding or removing the nested medical records
and academic results of a student. Nested edits are routed through `update()`, so the whole
student is re-validated and re-persisted.

Persistence failures are logged and reported in the response payload, but never undo the
in-memory change: the in-memory collection stays authoritative for the session.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from core.logging_config import get_logger, log_with_context
from core.persistence import PersistenceError, PersistenceGateway
from core.response import ErrorCode, Response
from core.validator import (
    validate_academic_result,
    validate_medical_record,
    validate_student,
)
from models.academic_result import AcademicResult
from models.medical_record import MedicalRecord
from models.seed_data import seed_students
from models.student import Student
from models.types import EntryType

logger = get_logger("store")

ID_PREFIX = "s"
ID_DIGITS = 6


class RecordStore:

    def __init__(
        self,
        gateway: PersistenceGateway,
        students: list[Student] | None = None,
    ):
        self._gateway = gateway
        self._students: list[Student] = list(students or [])
        self._unsaved_changes: bool = False

    # === properties ===

    @property
    def has_unsaved_changes(self) -> bool:
        return self._unsaved_changes

    def __len__(self) -> int:
        return len(self._students)

    # === public classmethods ===

    @classmethod
    def open(
        cls,
        gateway: PersistenceGateway,
        seed: Callable[[], list[Student]] = seed_students,
    ) -> Response:
        """
        Loads previously stored students through `gateway` and returns a `RecordStore` instance.

        Args:
            gateway (PersistenceGateway): The storage collaborator to read from and write to.
            seed (Callable[[], list[Student]]): Produces the records used when nothing is stored yet.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the store was loaded from storage or seeded.
                    - False if stored data exists but cannot be read or decoded.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, where the records came from.
                - error (ErrorCode | str | None):
                    - `ErrorCode.PERSISTENCE_FAILED` if the gateway cannot read or parse the data.
                    - `ErrorCode.INVALID_INPUT` if a stored record is malformed.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "store" (RecordStore): The opened store.
                        - "seeded" (bool): True if the seed dataset was used.
                    - On failure:
                        - None

        Notes:
            - Unreadable data is reported rather than replaced by the seed, so a later save
              cannot silently overwrite it.
            - The seed is not written back until the first mutation.
        """
        try:
            raw_records = gateway.load()

            if raw_records is None:
                log_with_context(
                    logger,
                    logging.INFO,
                    "No stored students found, using seed dataset.",
                    {"key": gateway.key},
                )
                return Response.succeed(
                    detail="Loaded seed dataset.",
                    data={"store": cls(gateway, seed()), "seeded": True},
                )

            students = [Student.from_dict(record) for record in raw_records]

        except PersistenceError as e:
            log_with_context(
                logger,
                logging.ERROR,
                "Failed to load stored students.",
                {"key": gateway.key},
                exc_info=True,
            )
            return Response.fail(
                detail=f"Failed to load stored students: {e}",
                error=ErrorCode.PERSISTENCE_FAILED,
            )

        except (KeyError, TypeError, ValueError, AttributeError) as e:
            log_with_context(
                logger,
                logging.ERROR,
                "Stored student record is malformed.",
                {"key": gateway.key},
                exc_info=True,
            )
            return Response.fail(
                detail=f"Stored student record is malformed: {e}",
                error=ErrorCode.INVALID_INPUT,
            )

        else:
            return Response.succeed(
                detail=f"Loaded {len(students)} students from storage.",
                data={"store": cls(gateway, students), "seeded": False},
            )

    # === persistence ===

    def save(self) -> Response:
        """
        Writes the full collection through the gateway.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if the gateway accepted the write.
                - error (ErrorCode | str | None):
                    - `ErrorCode.PERSISTENCE_FAILED` if the gateway raised.
                - data (dict | None): Always None.

        Notes:
            - Failures are logged and leave the store marked as having unsaved changes.
        """
        try:
            self._gateway.save([s.to_dict() for s in self._students])

        except PersistenceError as e:
            self._unsaved_changes = True
            log_with_context(
                logger,
                logging.ERROR,
                "Failed to save students.",
                {"key": self._gateway.key, "count": len(self._students)},
                exc_info=True,
            )
            return Response.fail(
                detail=f"Failed to save students: {e}",
                error=ErrorCode.PERSISTENCE_FAILED,
                status_code=500,
            )

        else:
            self._unsaved_changes = False
            return Response.succeed(detail="Students successfully saved.")

    # === data accessors ===

    def list(self) -> list[Student]:
        """
        Returns the stored students in insertion order.

        Notes:
            - The returned list is a copy; the `Student` objects are the stored instances.
              Callers that edit a record should edit `student.copy()` and pass it to `update()`.
        """
        return list(self._students)

    def contains(self, student_id: str) -> bool:
        return bool(student_id) and any(s.id == student_id for s in self._students)

    def find_by_id(self, student_id: str) -> Response:
        """
        Finds a stored `Student` by id.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if a matching student exists.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no student has the given id.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no match is found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Student): The matching student.
        """
        for student in self._students:
            if student.id == student_id:
                return Response.succeed(data={"record": student})

        return Response.fail(
            detail=f"No student found with id '{student_id}'.",
            error=ErrorCode.NOT_FOUND,
            status_code=404,
        )

    # === data manipulators ===

    def _commit(self, students: list[Student]) -> bool:
        """
        Swaps in a fully built collection and persists it.

        Returns:
            True if the gateway write succeeded.
        """
        self._students = students
        return self.save().success

    def next_id(self) -> str:
        """
        Computes the id the next created student will receive.

        The number is the current count plus one. After deletions that number can already be in
        use; the store then advances to the next unused number so ids stay unique.
        """
        taken = {s.id for s in self._students}
        number = len(self._students) + 1

        while self.format_id(number) in taken:
            number += 1

        if number != len(self._students) + 1:
            log_with_context(
                logger,
                logging.WARNING,
                "Count-based student id already in use, advanced to next free id.",
                {"count": len(self._students), "assigned": self.format_id(number)},
            )

        return self.format_id(number)

    @staticmethod
    def format_id(number: int) -> str:
        return f"{ID_PREFIX}{number:0{ID_DIGITS}d}"

    # --- student manipulation ---

    def create(self, candidate: Student) -> Response:
        """
        Validates a draft `Student`, assigns it an id, and appends it to the store.

        Args:
            candidate (Student): The draft to commit. Its current id is ignored.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was added.
                    - False if validation failed or unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.VALIDATION_FAILED` if any field rule failed.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 422 on validation failure
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The stored student, with its new id.
                        - "persisted" (bool): Whether the gateway write succeeded.
                    - On validation failure:
                        - "errors" (dict[str, str]): Field name -> message.

        Notes:
            - The store is unchanged unless validation passes.
            - The candidate itself is not modified; a copy is stored.
        """
        try:
            errors = validate_student(candidate, require_id=False)

            if errors:
                return Response.invalid(errors, detail="Student was not added.")

            student = candidate.copy()
            student.id = self.next_id()
            students = [*self._students, student]

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            persisted = self._commit(students)

            log_with_context(
                logger, logging.INFO, "Student created.", {"student_id": student.id}
            )

            return Response.succeed(
                detail="Student successfully added.",
                data={"record": student, "persisted": persisted},
            )

    def update(self, record: Student) -> Response:
        """
        Validates a `Student` and replaces the stored record with the same id.

        Args:
            record (Student): The full updated record.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was replaced, or if no stored record has its id (no-op).
                    - False if validation failed or unexpected errors occur.
                - error (ErrorCode | str | None):
                    - `ErrorCode.VALIDATION_FAILED` if any field rule failed.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 422 on validation failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The stored record.
                        - "matched" (bool): False if no stored record had the id.
                        - "persisted" (bool): Whether the gateway write succeeded.
                    - On validation failure:
                        - "errors" (dict[str, str]): Field name -> message.

        Notes:
            - An unmatched id leaves the store unchanged and is logged, but is not an error.
        """
        try:
            errors = validate_student(record)

            if errors:
                return Response.invalid(errors, detail="Student was not updated.")

            if not self.contains(record.id):
                log_with_context(
                    logger,
                    logging.INFO,
                    "Update ignored, no stored student has this id.",
                    {"student_id": record.id},
                )
                return Response.succeed(
                    detail="No stored student matched; nothing was updated.",
                    data={"record": record, "matched": False, "persisted": False},
                )

            stored = record.copy()
            students = [stored if s.id == record.id else s for s in self._students]

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            persisted = self._commit(students)

            return Response.succeed(
                detail="Student successfully updated.",
                data={"record": stored, "matched": True, "persisted": persisted},
            )

    def delete(self, student_id: str) -> Response:
        """
        Removes the student with the given id.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True unless unexpected errors occur.
                - data (dict | None): Payload with the following keys:
                    - "removed" (bool): False if no student had the id.
                    - "persisted" (bool): Whether the gateway write succeeded.

        Notes:
            - Deleting an id that is not stored is a no-op, so repeated deletes are safe.
        """
        try:
            students = [s for s in self._students if s.id != student_id]
            removed = len(students) != len(self._students)

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            persisted = self._commit(students)

            if removed:
                log_with_context(
                    logger, logging.INFO, "Student deleted.", {"student_id": student_id}
                )

            return Response.succeed(
                detail=(
                    "Student successfully removed."
                    if removed
                    else "No stored student matched; nothing was removed."
                ),
                data={"removed": removed, "persisted": persisted},
            )

    # --- nested collections ---

    def _apply_to_student(self, updated: Student) -> Response:
        """
        Stores a student whose nested collection changed.

        Committed students go through `update()`. Drafts are not in the store yet, so the
        updated draft is simply handed back to the caller.
        """
        if updated.is_draft or not self.contains(updated.id):
            return Response.succeed(
                detail="Draft updated.",
                data={"record": updated, "matched": False, "persisted": False},
            )

        return self.update(updated)

    def _append_entry(
        self,
        student: Student,
        entry: EntryType,
        entries: list[EntryType],
        rebuild_fn: Callable[[Student, list[EntryType]], Student],
        validate_fn: Callable[[dict], dict[str, str]],
        entry_name: str,
    ) -> Response:
        errors = validate_fn(entry.to_dict())

        if errors:
            return Response.invalid(errors, detail=f"The {entry_name} was not added.")

        return self._apply_to_student(rebuild_fn(student, [*entries, entry]))

    def _remove_entry(
        self,
        student: Student,
        index: int,
        entries: list[EntryType],
        rebuild_fn: Callable[[Student, list[EntryType]], Student],
        entry_name: str,
    ) -> Response:
        if not 0 <= index < len(entries):
            return Response.fail(
                detail=f"No {entry_name} at position {index + 1}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        remaining = [e for i, e in enumerate(entries) if i != index]

        return self._apply_to_student(rebuild_fn(student, remaining))

    def add_medical_record(self, student: Student, entry: MedicalRecord) -> Response:
        """
        Appends a medical record to a student's list.

        Returns:
            Response: The response of `update()` for a stored student, or a success response
            carrying the updated draft for an uncommitted one. On success, "record" holds the
            student with the new entry.

        Notes:
            - Fails with `ErrorCode.VALIDATION_FAILED` if a required field of `entry` is blank;
              the student's collection is left unchanged.
        """
        return self._append_entry(
            student,
            entry,
            student.medical_records,
            Student.with_medical_records,
            validate_medical_record,
            "medical record",
        )

    def remove_medical_record(self, student: Student, index: int) -> Response:
        """
        Removes the medical record at `index` (zero-based) from a student's list.

        Notes:
            - Positions are only meaningful against the snapshot of `student` they were read from.
            - Fails with `ErrorCode.NOT_FOUND` if `index` is out of range.
        """
        return self._remove_entry(
            student,
            index,
            student.medical_records,
            Student.with_medical_records,
            "medical record",
        )

    def add_academic_result(self, student: Student, entry: AcademicResult) -> Response:
        return self._append_entry(
            student,
            entry,
            student.academic_results,
            Student.with_academic_results,
            validate_academic_result,
            "academic result",
        )

    def remove_academic_result(self, student: Student, index: int) -> Response:
        return self._remove_entry(
            student,
            index,
            student.academic_results,
            Student.with_academic_results,
            "academic result",
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"RecordStore({len(self._students)} students, key={self._gateway.key})"
