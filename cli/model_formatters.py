# cli/model_formatters.py

# anything that renders domain objects for the terminal
from textwrap import dedent

import core.formatters as formatters
from core.query import SortState
from models.academic_result import AcademicResult
from models.medical_record import MedicalRecord
from models.student import Student

# === student formatters ===


def format_student_header(sort: SortState) -> str:
    name = f"Name {sort.indicator('name')}".strip()
    class_name = f"Class {sort.indicator('class')}".strip()
    number = f"Number {sort.indicator('classNumber')}".strip()

    return f"{name:<20} | {class_name:<7} | {number:<8} | ID"


def format_student_oneline(student: Student) -> str:
    return f"{student.name:<20} | {student.class_name:<7} | {student.class_number:<8} | {student.id}"


def format_student_multiline(student: Student) -> str:
    title = f"{student.name}'s Profile" if not student.is_draft else "New Student"
    grades = ", ".join(f"{subject}: {score}" for subject, score in student.grades.items())

    return dedent(
        f"""\
        {title}:
        ... Student ID: {student.id or '[UNASSIGNED]'}
        ... Name: {student.name}
        ... Class: {student.class_name}
        ... Class Number: {student.class_number}
        ... Grades: {grades or '[NONE]'}
        ... Strengths: {student.strengths_text or '[NONE]'}
        ... Weaknesses: {student.weaknesses_text or '[NONE]'}
        ... Medical Records: {len(student.medical_records)}
        ... Academic Results: {len(student.academic_results)}
        ... Remark: {student.remark or '[NONE]'}"""
    )


# === nested entry formatters ===


def format_medical_record_oneline(record: MedicalRecord) -> str:
    return f"{record.time:<10} | {record.hospital:<20} | {record.treatment}"


def format_medical_record_multiline(record: MedicalRecord) -> str:
    return dedent(
        f"""\
        ... PIC: {record.pic}
        ... Date: {formatters.format_record_date(record.time)}
        ... Hospital: {record.hospital}
        ... Treatment: {record.treatment}
        ... Remark: {record.remark}"""
    )


def format_academic_result_oneline(result: AcademicResult) -> str:
    return f"{result.form.value:<3} | {result.term.value:<11} | {result.subject:<30} | {result.marks}"


def format_staged_values(values: dict[str, str]) -> str:
    return "\n".join(f"... {field}: {value or '[BLANK]'}" for field, value in values.items())
