# models/types.py

"""
Holds TypeVar definitions for simplifying type checks on nested student entries.
"""

from typing import TypeVar

from .academic_result import AcademicResult
from .medical_record import MedicalRecord

EntryType = TypeVar("EntryType", MedicalRecord, AcademicResult)
