# tests/test_record_store.py

import json
import logging

from core.persistence import InMemoryGateway, JsonFileGateway, STORAGE_KEY
from core.response import ErrorCode
from models.academic_result import AcademicResult
from models.medical_record import MedicalRecord
from models.record_store import RecordStore
from models.student import Student


def ids(store):
    return [s.id for s in store.list()]


# === opening ===


def test_open_uses_seed_when_nothing_stored(memory_gateway):
    response = RecordStore.open(memory_gateway)

    assert response.success
    assert response.data["seeded"]
    assert ids(response.data["store"]) == ["s000001"]


def test_open_loads_stored_records(sample_student):
    gateway = InMemoryGateway({STORAGE_KEY: json.dumps([sample_student.to_dict()])})

    response = RecordStore.open(gateway)

    assert response.success
    assert not response.data["seeded"]
    assert response.data["store"].list() == [sample_student]


def test_open_reports_corrupt_storage():
    gateway = InMemoryGateway({STORAGE_KEY: "{not json"})

    response = RecordStore.open(gateway)

    assert not response.success
    assert response.error == ErrorCode.PERSISTENCE_FAILED


def test_open_reports_malformed_record():
    gateway = InMemoryGateway({STORAGE_KEY: json.dumps([{"medicalRecords": [{}]}])})

    response = RecordStore.open(gateway)

    assert not response.success
    assert response.error == ErrorCode.INVALID_INPUT


# === create ===


def test_create_assigns_count_based_id(sample_store, sample_draft):
    response = sample_store.create(sample_draft)

    assert response.success
    assert response.data["record"].id == "s000002"
    assert ids(sample_store) == ["s000001", "s000002"]
    assert sample_draft.is_draft


def test_create_then_search_scenario(sample_store, sample_draft):
    from core.query import view

    sample_store.create(sample_draft)

    result = view(sample_store.list(), "li", "name", "asc")

    assert [s.name for s in result] == ["Li Wei"]


def test_create_rejects_missing_name(sample_store):
    candidate = Student(id="", name="", class_name="3A", class_number="1")

    response = sample_store.create(candidate)

    assert not response.success
    assert response.error == ErrorCode.VALIDATION_FAILED
    assert response.field_errors == {"name": "Name is required"}
    assert ids(sample_store) == ["s000001"]


def test_create_rejects_bad_class(sample_store):
    candidate = Student(id="", name="X", class_name="9Z", class_number="1")

    response = sample_store.create(candidate)

    assert response.field_errors == {"class": "Class must be in format [1-6][A-F]"}
    assert len(sample_store) == 1


def test_create_persists_full_collection(sample_store, memory_gateway, sample_draft):
    sample_store.create(sample_draft)

    stored = json.loads(memory_gateway.entries[STORAGE_KEY])

    assert [s["id"] for s in stored] == ["s000001", "s000002"]
    assert stored[1]["class"] == "2B"
    assert stored[1]["classNumber"] == "5"


def test_create_after_delete_skips_taken_id(empty_store, sample_draft, caplog):
    for _ in range(3):
        empty_store.create(sample_draft)
    assert ids(empty_store) == ["s000001", "s000002", "s000003"]

    empty_store.delete("s000001")

    with caplog.at_level(logging.WARNING, logger="app.store"):
        response = empty_store.create(sample_draft)

    # count + 1 would be s000003, which is still taken
    assert response.data["record"].id == "s000004"
    assert len(set(ids(empty_store))) == len(empty_store)
    assert "already in use" in caplog.text


# === update ===


def test_update_replaces_matching_record(sample_store):
    edited = sample_store.list()[0].copy()
    edited.name = "Zhang Sanfeng"

    response = sample_store.update(edited)

    assert response.success
    assert response.data["matched"]
    assert sample_store.list()[0].name == "Zhang Sanfeng"


def test_update_rejects_invalid_and_leaves_store_unchanged(sample_store):
    before = [s.copy() for s in sample_store.list()]
    edited = sample_store.list()[0].copy()
    edited.class_number = "40"

    response = sample_store.update(edited)

    assert not response.success
    assert response.field_errors == {
        "classNumber": "Class number must be between 1 and 39"
    }
    assert sample_store.list() == before


def test_update_requires_id(sample_store):
    edited = sample_store.list()[0].copy()
    edited.id = ""

    response = sample_store.update(edited)

    assert response.field_errors == {"id": "Student ID is required"}


def test_update_unmatched_id_is_noop(sample_store, memory_gateway):
    stranger = Student(id="s999999", name="Nobody", class_name="1A", class_number="1")

    response = sample_store.update(stranger)

    assert response.success
    assert not response.data["matched"]
    assert ids(sample_store) == ["s000001"]
    assert STORAGE_KEY not in memory_gateway.entries


def test_update_stores_a_copy(sample_store):
    edited = sample_store.list()[0].copy()
    sample_store.update(edited)

    edited.name = "Changed After Update"

    assert sample_store.list()[0].name == "Zhang San"


# === delete ===


def test_delete_is_idempotent(sample_store):
    response = sample_store.delete("s000001")
    assert response.success
    assert response.data["removed"]
    assert "s000001" not in ids(sample_store)

    response = sample_store.delete("s000001")
    assert response.success
    assert not response.data["removed"]
    assert ids(sample_store) == []


def test_find_by_id(sample_store):
    response = sample_store.find_by_id("s000001")
    assert response.success
    assert response.data["record"].name == "Zhang San"

    response = sample_store.find_by_id("s000404")
    assert not response.success
    assert response.error == ErrorCode.NOT_FOUND


# === nested collections ===


def test_add_medical_record_to_stored_student(sample_store, sample_medical_record):
    student = sample_store.list()[0]

    response = sample_store.add_medical_record(student, sample_medical_record)

    assert response.success
    stored = sample_store.list()[0]
    assert len(stored.medical_records) == 2
    assert stored.medical_records[-1] == sample_medical_record


def test_add_medical_record_to_draft_does_not_touch_store(
    sample_store, sample_draft, sample_medical_record
):
    response = sample_store.add_medical_record(sample_draft, sample_medical_record)

    assert response.success
    assert response.data["record"].medical_records == [sample_medical_record]
    assert len(sample_store) == 1


def test_remove_medical_record_by_position(sample_store, sample_medical_record):
    sample_store.add_medical_record(sample_store.list()[0], sample_medical_record)
    student = sample_store.list()[0]

    response = sample_store.remove_medical_record(student, 0)

    assert response.success
    assert sample_store.list()[0].medical_records == [sample_medical_record]


def test_remove_medical_record_out_of_range(sample_store):
    student = sample_store.list()[0]

    response = sample_store.remove_medical_record(student, 5)

    assert not response.success
    assert response.error == ErrorCode.NOT_FOUND
    assert len(sample_store.list()[0].medical_records) == 1


def test_add_and_remove_academic_result(sample_store, sample_academic_result):
    response = sample_store.add_academic_result(
        sample_store.list()[0], sample_academic_result
    )
    assert response.success
    assert sample_store.list()[0].academic_results == [sample_academic_result]

    response = sample_store.remove_academic_result(sample_store.list()[0], 0)
    assert response.success
    assert sample_store.list()[0].academic_results == []


def test_nested_edit_revalidates_student(sample_store, sample_academic_result):
    student = sample_store.list()[0].copy()
    student.class_name = "Z9"

    response = sample_store.add_academic_result(student, sample_academic_result)

    assert response.error == ErrorCode.VALIDATION_FAILED
    assert sample_store.list()[0].academic_results == []


# === persistence failures ===


def test_save_failure_is_logged_and_keeps_memory_state(
    failing_gateway, sample_draft, caplog
):
    store = RecordStore(failing_gateway)

    with caplog.at_level(logging.ERROR, logger="app.store"):
        response = store.create(sample_draft)

    assert response.success
    assert not response.data["persisted"]
    assert ids(store) == ["s000001"]
    assert store.has_unsaved_changes
    assert "Failed to save students" in caplog.text


def test_retry_save_clears_unsaved_flag(failing_gateway, sample_draft):
    store = RecordStore(failing_gateway)
    store.create(sample_draft)
    assert store.has_unsaved_changes

    store._gateway = InMemoryGateway()
    response = store.save()

    assert response.success
    assert not store.has_unsaved_changes


def test_store_round_trip_through_file_gateway(tmp_path, sample_draft):
    store = RecordStore.open(JsonFileGateway(str(tmp_path))).data["store"]
    store.create(sample_draft)

    reopened = RecordStore.open(JsonFileGateway(str(tmp_path)))

    assert reopened.success
    assert not reopened.data["seeded"]
    assert ids(reopened.data["store"]) == ["s000001", "s000002"]


def test_add_medical_record_missing_hospital_is_rejected(sample_store):
    incomplete = MedicalRecord(
        pic="Dr. Chan", time="2024-02-01", hospital="", treatment="Sprained ankle"
    )

    response = sample_store.add_medical_record(sample_store.list()[0], incomplete)

    assert response.error == ErrorCode.VALIDATION_FAILED
    assert response.field_errors == {"hospital": "Hospital is required"}
    assert len(sample_store.list()[0].medical_records) == 1


def test_add_academic_result_blank_marks_is_rejected(
    sample_store, sample_draft, memory_gateway
):
    blank = AcademicResult("F1", "First Term", "Mathematics", "  ")

    stored_response = sample_store.add_academic_result(sample_store.list()[0], blank)
    draft_response = sample_store.add_academic_result(sample_draft, blank)

    assert stored_response.field_errors == {"marks": "Marks are required"}
    assert draft_response.field_errors == {"marks": "Marks are required"}
    assert sample_store.list()[0].academic_results == []
    assert STORAGE_KEY not in memory_gateway.entries


def test_open_reports_undecodable_file(tmp_path):
    (tmp_path / f"{STORAGE_KEY}.json").write_bytes(b'[{"name": "\xff\xfe"}]')

    response = RecordStore.open(JsonFileGateway(str(tmp_path)))

    assert not response.success
    assert response.error == ErrorCode.PERSISTENCE_FAILED
