# models/seed_data.py

"""
Built-in dataset used when the persistence gateway has nothing stored yet.
"""

from models.medical_record import MedicalRecord
from models.student import Student


def seed_students() -> list[Student]:
    return [
        Student(
            id="s000001",
            name="Zhang San",
            class_name="3A",
            class_number="1",
            grades={"Math": 85, "English": 90, "Science": 88},
            strengths=["Critical thinking", "Leadership"],
            weaknesses=["Time management"],
            medical_records=[
                MedicalRecord(
                    pic="Dr. Li",
                    time="2023-05-15",
                    hospital="City Hospital",
                    treatment="Annual checkup",
                    remark="All clear",
                )
            ],
            academic_results=[],
            remark="Excellent student",
        ),
    ]
