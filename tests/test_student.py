# tests/test_student.py

import pytest

from models.academic_result import AcademicResult, FormLevel, Term
from models.medical_record import MedicalRecord
from models.seed_data import seed_students
from models.student import Student


def test_student_to_dict(sample_student):
    data = sample_student.to_dict()

    assert data["id"] == "s000001"
    assert data["name"] == "Zhang San"
    assert data["class"] == "3A"
    assert data["classNumber"] == "1"
    assert data["strengths"] == ["Critical thinking", "Leadership"]
    assert data["medicalRecords"] == []
    assert data["academicResults"] == []


def test_student_from_dict():
    student = Student.from_dict(
        {
            "id": "s000001",
            "name": "Zhang San",
            "class": "3A",
            "classNumber": "1",
            "grades": {"Math": 85},
            "strengths": ["Leadership"],
            "weaknesses": [],
            "medicalRecords": [
                {
                    "pic": "Dr. Li",
                    "time": "2023-05-15",
                    "hospital": "City Hospital",
                    "treatment": "Annual checkup",
                    "remark": "All clear",
                }
            ],
            "academicResults": [
                {
                    "form": "F1",
                    "term": "First Term",
                    "subject": "English Language",
                    "marks": "A",
                }
            ],
            "remark": "Excellent student",
        }
    )

    assert student.id == "s000001"
    assert student.class_name == "3A"
    assert student.class_number == "1"
    assert student.grades == {"Math": 85}
    assert student.medical_records[0].hospital == "City Hospital"
    assert student.academic_results[0].form is FormLevel.F1
    assert student.academic_results[0].term is Term.FIRST
    assert not student.is_draft


def test_student_from_dict_fills_missing_optional_fields():
    student = Student.from_dict(
        {"id": "s000002", "name": "Li Wei", "class": "2B", "classNumber": 5}
    )

    assert student.class_number == "5"
    assert student.grades == {}
    assert student.strengths == []
    assert student.medical_records == []
    assert student.academic_results == []
    assert student.remark == ""


def test_new_draft_is_blank():
    draft = Student.new_draft()

    assert draft.is_draft
    assert draft.name == ""
    assert draft.class_name == ""
    assert draft.class_number == ""


def test_strengths_text_round_trip():
    student = Student.new_draft()
    student.strengths_text = "Leadership, Time management"

    assert student.strengths == ["Leadership", "Time management"]
    assert student.strengths_text == "Leadership, Time management"


def test_weaknesses_text_empty_input_clears_list(sample_student):
    sample_student.weaknesses_text = ""

    assert sample_student.weaknesses == []


def test_delimiter_inside_entry_does_not_round_trip():
    student = Student.new_draft()
    student.strengths = ["Reading, writing"]

    student.strengths_text = student.strengths_text

    assert student.strengths == ["Reading", "writing"]


def test_copy_is_independent(sample_student, sample_medical_record):
    copy = sample_student.copy()
    copy.name = "Someone Else"
    updated = copy.with_medical_records([sample_medical_record])

    assert sample_student.name == "Zhang San"
    assert sample_student.medical_records == []
    assert updated.medical_records == [sample_medical_record]
    assert copy.medical_records == []


def test_field_value_lookup(sample_student):
    assert sample_student.field_value("class") == "3A"
    assert sample_student.field_value("classNumber") == "1"

    with pytest.raises(ValueError):
        sample_student.field_value("remark")


def test_medical_record_remark_optional():
    record = MedicalRecord.from_dict(
        {"pic": "Dr. Li", "time": "2023-05-15", "hospital": "City", "treatment": "Checkup"}
    )

    assert record.remark == ""
    assert record.to_dict()["remark"] == ""


def test_academic_result_rejects_unknown_values():
    with pytest.raises(ValueError):
        AcademicResult("F8", "First Term", "Mathematics", "90")

    with pytest.raises(ValueError):
        AcademicResult("F1", "Fourth Term", "Mathematics", "90")

    with pytest.raises(ValueError):
        AcademicResult("F1", "First Term", "Astrology", "90")


def test_seed_dataset():
    students = seed_students()

    assert len(students) == 1
    assert students[0].id == "s000001"
    assert students[0].medical_records[0].pic == "Dr. Li"
    assert students[0].grades == {"Math": 85, "English": 90, "Science": 88}
