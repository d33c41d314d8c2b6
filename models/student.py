# models/student.py

"""
Represents a student profile held by the `RecordStore`.

Stores identifying information (id, name, class, class number) alongside the profile data
edited from the student screen: subject grades, strengths and weaknesses, medical records,
academic results, and a free-text remark.

Includes functionality for:
- Creating blank drafts for the "new student" flow
- Editing strengths and weaknesses as a single comma-delimited string
- Appending and removing nested medical records and academic results by position
- Serializing to and from JSON-compatible dictionaries (using the stored key names
  `class`, `classNumber`, `medicalRecords`, `academicResults`)

A `Student` with an empty `id` is a draft: it exists only in the UI until the store commits it
and assigns an id.
"""

from __future__ import annotations

import core.formatters as formatters
from models.academic_result import AcademicResult
from models.medical_record import MedicalRecord


class Student:

    def __init__(
        self,
        id: str,
        name: str,
        class_name: str,
        class_number: str,
        grades: dict[str, float] | None = None,
        strengths: list[str] | None = None,
        weaknesses: list[str] | None = None,
        medical_records: list[MedicalRecord] | None = None,
        academic_results: list[AcademicResult] | None = None,
        remark: str = "",
    ):
        self._id: str = id
        self._name: str = name
        self._class_name: str = class_name
        self._class_number: str = class_number
        self._grades: dict[str, float] = dict(grades or {})
        self._strengths: list[str] = list(strengths or [])
        self._weaknesses: list[str] = list(weaknesses or [])
        self._medical_records: list[MedicalRecord] = list(medical_records or [])
        self._academic_results: list[AcademicResult] = list(academic_results or [])
        self._remark: str = remark

    # === public classmethods ===

    @classmethod
    def new_draft(cls) -> Student:
        return cls(id="", name="", class_name="", class_number="")

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @id.setter
    def id(self, id: str) -> None:
        self._id = id

    @property
    def is_draft(self) -> bool:
        return not self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._name = name

    @property
    def class_name(self) -> str:
        return self._class_name

    @class_name.setter
    def class_name(self, class_name: str) -> None:
        self._class_name = class_name

    @property
    def class_number(self) -> str:
        return self._class_number

    @class_number.setter
    def class_number(self, class_number: str) -> None:
        self._class_number = class_number

    @property
    def grades(self) -> dict[str, float]:
        return self._grades.copy()

    def set_grade(self, subject: str, score: float) -> None:
        self._grades[subject] = score

    @property
    def strengths(self) -> list[str]:
        return self._strengths.copy()

    @strengths.setter
    def strengths(self, strengths: list[str]) -> None:
        self._strengths = list(strengths)

    @property
    def strengths_text(self) -> str:
        return formatters.join_delimited(self._strengths)

    @strengths_text.setter
    def strengths_text(self, text: str) -> None:
        self._strengths = formatters.split_delimited(text)

    @property
    def weaknesses(self) -> list[str]:
        return self._weaknesses.copy()

    @weaknesses.setter
    def weaknesses(self, weaknesses: list[str]) -> None:
        self._weaknesses = list(weaknesses)

    @property
    def weaknesses_text(self) -> str:
        return formatters.join_delimited(self._weaknesses)

    @weaknesses_text.setter
    def weaknesses_text(self, text: str) -> None:
        self._weaknesses = formatters.split_delimited(text)

    @property
    def remark(self) -> str:
        return self._remark

    @remark.setter
    def remark(self, remark: str) -> None:
        self._remark = remark

    # --- nested collections ---

    @property
    def medical_records(self) -> list[MedicalRecord]:
        return self._medical_records.copy()

    @property
    def academic_results(self) -> list[AcademicResult]:
        return self._academic_results.copy()

    def with_medical_records(self, medical_records: list[MedicalRecord]) -> Student:
        """Returns a copy of this student holding `medical_records` in place of the current list."""
        student = self.copy()
        student._medical_records = list(medical_records)
        return student

    def with_academic_results(self, academic_results: list[AcademicResult]) -> Student:
        """Returns a copy of this student holding `academic_results` in place of the current list."""
        student = self.copy()
        student._academic_results = list(academic_results)
        return student

    # === field lookup ===

    def field_value(self, field: str) -> str:
        """
        Looks up a searchable or sortable field by its stored key name.

        Args:
            field (str): One of `id`, `name`, `class`, or `classNumber`.

        Returns:
            The string value of the field.

        Raises:
            ValueError: If the field name is not recognized.
        """
        match field:
            case "id":
                return self._id
            case "name":
                return self._name
            case "class":
                return self._class_name
            case "classNumber":
                return self._class_number
            case _:
                raise ValueError(f"Unrecognized student field: '{field}'.")

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self._name,
            "class": self._class_name,
            "classNumber": self._class_number,
            "grades": dict(self._grades),
            "strengths": list(self._strengths),
            "weaknesses": list(self._weaknesses),
            "medicalRecords": [r.to_dict() for r in self._medical_records],
            "academicResults": [r.to_dict() for r in self._academic_results],
            "remark": self._remark,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Student:
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            class_name=data.get("class") or "",
            class_number=str(data.get("classNumber") or ""),
            grades=data.get("grades") or {},
            strengths=data.get("strengths") or [],
            weaknesses=data.get("weaknesses") or [],
            medical_records=[
                MedicalRecord.from_dict(r) for r in data.get("medicalRecords") or []
            ],
            academic_results=[
                AcademicResult.from_dict(r) for r in data.get("academicResults") or []
            ],
            remark=data.get("remark") or "",
        )

    def copy(self) -> Student:
        return Student.from_dict(self.to_dict())

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._name}, {self._class_name}, {self._class_number})"

    def __str__(self) -> str:
        return f"STUDENT: {self._name} - {self._class_name}/{self._class_number} (ID: {self._id or 'NEW'})"
