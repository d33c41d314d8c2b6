# core/entry_stager.py

"""
Staging buffers for nested entries that have not yet been added to a `Student`.

A stager holds the in-progress values of one new medical record or academic result while the
user fills in its fields. Nothing in the stager touches the `RecordStore`: the caller builds the
entry once the stager reports it is ready, passes it to the store, and then clears the stager.

This enables workflows such as:
    - Filling fields in any order, one prompt at a time
    - Reporting which required fields are still blank
    - Resetting to the default values after a successful add

Two stagers are provided:
    - `MedicalRecordStager`: all fields start blank; `remark` is optional.
    - `AcademicResultStager`: starts at F1 / First Term / the first subject with blank marks.
"""

from collections.abc import Callable

from core.validator import validate_academic_result, validate_medical_record
from models.academic_result import SUBJECTS, AcademicResult, FormLevel, Term
from models.medical_record import MedicalRecord
from models.types import EntryType


class EntryStager:
    """
    A temporary store for the field values of one new nested entry.

    Notes:
        - Values are kept as plain strings keyed by the stored field names.
        - Unknown field names are rejected so typos surface immediately.
    """

    def __init__(
        self,
        defaults: dict[str, str],
        validate_fn: Callable[[dict[str, str]], dict[str, str]],
        build_fn: Callable[[dict[str, str]], EntryType],
    ):
        self._defaults: dict[str, str] = dict(defaults)
        self._validate_fn = validate_fn
        self._build_fn = build_fn
        self._staged: dict[str, str] = dict(defaults)

    def set(self, field: str, value: str) -> None:
        """
        Stage a value for one field.

        Raises:
            KeyError: If the field is not part of this entry type.
        """
        if field not in self._defaults:
            raise KeyError(f"Unknown field: '{field}'.")

        self._staged[field] = value

    def get(self, field: str) -> str:
        return self._staged[field]

    def values(self) -> dict[str, str]:
        return self._staged.copy()

    def errors(self) -> dict[str, str]:
        return self._validate_fn(self._staged)

    def missing_fields(self) -> list[str]:
        return list(self.errors())

    def is_ready(self) -> bool:
        return not self.errors()

    def build(self) -> EntryType:
        """
        Build the staged entry.

        Raises:
            ValueError: If any required field is still blank.
        """
        errors = self.errors()

        if errors:
            raise ValueError("; ".join(errors.values()))

        return self._build_fn(self._staged)

    def clear(self) -> None:
        """Reset every field to its default value."""
        self._staged = dict(self._defaults)

    def is_pristine(self) -> bool:
        return self._staged == self._defaults


class MedicalRecordStager(EntryStager):

    def __init__(self):
        super().__init__(
            defaults={"pic": "", "time": "", "hospital": "", "treatment": "", "remark": ""},
            validate_fn=validate_medical_record,
            build_fn=MedicalRecord.from_dict,
        )


class AcademicResultStager(EntryStager):

    def __init__(self):
        super().__init__(
            defaults={
                "form": FormLevel.F1.value,
                "term": Term.FIRST.value,
                "subject": SUBJECTS[0],
                "marks": "",
            },
            validate_fn=validate_academic_result,
            build_fn=AcademicResult.from_dict,
        )
