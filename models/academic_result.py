# models/academic_result.py

"""
Represents a single academic result attached to a `Student`.

Each result records the form level (F1 through F7), the school term, the subject, and the
marks awarded. Marks are kept as free text so that letter grades and numeric scores can both
be entered.

Form levels and terms are enumerated; subjects are drawn from the fixed `SUBJECTS` list.
Like medical records, academic results are referenced only by their position on the owning
`Student`.
"""

from __future__ import annotations

from enum import Enum


class FormLevel(str, Enum):
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"


class Term(str, Enum):
    FIRST = "First Term"
    SECOND = "Second Term"
    THIRD = "Third Term"


SUBJECTS: tuple[str, ...] = (
    "English Language",
    "Chinese Language",
    "Mathematics",
    "Liberal Studies",
    "Physics",
    "Chemistry",
    "Biology",
    "Economics",
    "Business, Accounting and Financial Studies",
    "History",
    "Chinese History",
    "Geography",
    "Information and Communication Technology",
    "Music",
    "Visual Arts",
    "Physical Education",
)


class AcademicResult:

    def __init__(
        self,
        form: FormLevel | str,
        term: Term | str,
        subject: str,
        marks: str,
    ):
        self._form: FormLevel = FormLevel(form)
        self._term: Term = Term(term)
        self._subject: str = AcademicResult.validate_subject_input(subject)
        self._marks: str = marks

    # === properties ===

    @property
    def form(self) -> FormLevel:
        return self._form

    @property
    def term(self) -> Term:
        return self._term

    @property
    def subject(self) -> str:
        return self._subject

    @property
    def marks(self) -> str:
        return self._marks

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "form": self._form.value,
            "term": self._term.value,
            "subject": self._subject,
            "marks": self._marks,
        }

    @classmethod
    def from_dict(cls, data: dict) -> AcademicResult:
        return cls(
            form=data["form"],
            term=data["term"],
            subject=data["subject"],
            marks=str(data["marks"]),
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AcademicResult):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"AcademicResult({self._form.value}, {self._term.value}, {self._subject}, {self._marks})"

    def __str__(self) -> str:
        return f"RESULT: {self._form.value} {self._term.value} - {self._subject}: {self._marks}"

    # === data validators ===

    @staticmethod
    def validate_subject_input(subject: str) -> str:
        """
        Ensures the subject is one of the fixed `SUBJECTS`.

        Raises:
            ValueError: If the subject is not recognized.
        """
        if subject not in SUBJECTS:
            raise ValueError(f"Unknown subject: '{subject}'.")
        return subject
