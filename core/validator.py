# core/validator.py

"""
Field-level validation for student records and their nested entries.

Every function here is pure: it inspects a candidate and returns a mapping of field name to
human-readable message. An empty mapping means the candidate is valid. Rules are evaluated
independently, so a candidate with several problems reports all of them at once.

Keys in the returned mapping use the stored field names (`id`, `name`, `class`, `classNumber`)
so the UI can place each message next to the matching input.
"""

import re

from models.medical_record import MedicalRecord
from models.student import Student

CLASS_PATTERN = re.compile(r"[1-6][A-F]")
CLASS_NUMBER_MIN = 1
CLASS_NUMBER_MAX = 39

# leading whitespace, optional sign, ASCII digits; anything after the digits is ignored
_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")


def parse_leading_int(value: str) -> int | None:
    """
    Parses the integer prefix of a string, ignoring any trailing characters.

    Args:
        value (str): The raw input, e.g. "12", " 7", "5th", "3.9".

    Returns:
        The parsed integer, or None if the string does not start with a number.
    """
    match = _LEADING_INTEGER.match(value)
    return int(match.group(1)) if match else None


def validate_student(student: Student, require_id: bool = True) -> dict[str, str]:
    """
    Validates the identifying fields of a `Student`.

    Args:
        student (Student): The candidate record.
        require_id (bool): If False, a missing id is not reported. Used when the store is about
            to assign the id itself.

    Returns:
        dict[str, str]: Field name -> error message, empty if the record is valid.

    Notes:
        - `grades`, strengths and weaknesses, nested collections, and `remark` are not validated.
    """
    errors: dict[str, str] = {}

    if require_id and not student.id:
        errors["id"] = "Student ID is required"

    if not student.name:
        errors["name"] = "Name is required"

    if not student.class_name:
        errors["class"] = "Class is required"
    elif not CLASS_PATTERN.fullmatch(student.class_name):
        errors["class"] = "Class must be in format [1-6][A-F]"

    if not student.class_number:
        errors["classNumber"] = "Class number is required"
    else:
        number = parse_leading_int(student.class_number)
        if number is None or not CLASS_NUMBER_MIN <= number <= CLASS_NUMBER_MAX:
            errors["classNumber"] = (
                f"Class number must be between {CLASS_NUMBER_MIN} and {CLASS_NUMBER_MAX}"
            )

    return errors


def validate_medical_record(values: dict[str, str]) -> dict[str, str]:
    """Reports each required medical record field that is blank."""
    labels = {
        "pic": "Physician in charge",
        "time": "Date",
        "hospital": "Hospital",
        "treatment": "Treatment",
    }

    return {
        field: f"{labels[field]} is required"
        for field in MedicalRecord.REQUIRED_FIELDS
        if not values.get(field)
    }


def validate_academic_result(values: dict[str, str]) -> dict[str, str]:
    if not (values.get("marks") or "").strip():
        return {"marks": "Marks are required"}
    return {}
