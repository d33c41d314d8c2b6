# tests/conftest.py

import pytest

from core.editor import StudentEditor
from core.persistence import InMemoryGateway, PersistenceError, PersistenceGateway
from models.academic_result import AcademicResult
from models.medical_record import MedicalRecord
from models.record_store import RecordStore
from models.seed_data import seed_students
from models.student import Student


class FailingGateway(PersistenceGateway):
    """Accepts loads but raises on every write."""

    def __init__(self):
        super().__init__()
        self.write_attempts = 0

    def read_text(self) -> str | None:
        return None

    def write_text(self, text: str) -> None:
        self.write_attempts += 1
        raise PersistenceError("disk full")


@pytest.fixture
def memory_gateway():
    return InMemoryGateway()


@pytest.fixture
def failing_gateway():
    return FailingGateway()


@pytest.fixture
def sample_store(memory_gateway):
    return RecordStore(memory_gateway, seed_students())


@pytest.fixture
def empty_store(memory_gateway):
    return RecordStore(memory_gateway)


@pytest.fixture
def sample_editor(sample_store):
    return StudentEditor(sample_store)


@pytest.fixture
def sample_student():
    return Student(
        id="s000001",
        name="Zhang San",
        class_name="3A",
        class_number="1",
        strengths=["Critical thinking", "Leadership"],
        weaknesses=["Time management"],
        remark="Excellent student",
    )


@pytest.fixture
def sample_draft():
    draft = Student.new_draft()
    draft.name = "Li Wei"
    draft.class_name = "2B"
    draft.class_number = "5"
    return draft


@pytest.fixture
def sample_medical_record():
    return MedicalRecord(
        pic="Dr. Chan",
        time="2024-02-01",
        hospital="Queen Mary Hospital",
        treatment="Sprained ankle",
    )


@pytest.fixture
def sample_academic_result():
    return AcademicResult("F3", "Second Term", "Mathematics", "78")
