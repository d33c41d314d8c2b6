# models/medical_record.py

"""
Represents a single medical record attached to a `Student`.

A medical record stores the physician in charge (`pic`), the date of the visit (`time`),
the hospital, the treatment given, and an optional free-text remark.

Medical records have no identity of their own: they live in an ordered list on the owning
`Student` and are referenced only by their position in that list.
"""

from __future__ import annotations


class MedicalRecord:

    REQUIRED_FIELDS = ("pic", "time", "hospital", "treatment")

    def __init__(
        self,
        pic: str,
        time: str,
        hospital: str,
        treatment: str,
        remark: str = "",
    ):
        self._pic: str = pic
        self._time: str = time
        self._hospital: str = hospital
        self._treatment: str = treatment
        self._remark: str = remark

    # === properties ===

    @property
    def pic(self) -> str:
        return self._pic

    @property
    def time(self) -> str:
        return self._time

    @property
    def hospital(self) -> str:
        return self._hospital

    @property
    def treatment(self) -> str:
        return self._treatment

    @property
    def remark(self) -> str:
        return self._remark

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "pic": self._pic,
            "time": self._time,
            "hospital": self._hospital,
            "treatment": self._treatment,
            "remark": self._remark,
        }

    @classmethod
    def from_dict(cls, data: dict) -> MedicalRecord:
        return cls(
            pic=data["pic"],
            time=data["time"],
            hospital=data["hospital"],
            treatment=data["treatment"],
            remark=data.get("remark") or "",
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MedicalRecord):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"MedicalRecord({self._pic}, {self._time}, {self._hospital}, {self._treatment}, {self._remark})"

    def __str__(self) -> str:
        return f"MEDICAL RECORD: {self._time} at {self._hospital} ({self._pic}): {self._treatment}"
