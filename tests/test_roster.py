# tests/test_roster.py

import json

import pytest

from conftest import TODAY, make_student, sequential_ids

from core.response import ErrorCode
from core.storage import JsonFileStore, MemoryStore
from models.catalog import StudentStatus
from models.roster import RosterStore
from models.seed import seed_students
from models.subject import Subject

# === load and save ===


def test_load_without_saved_data_uses_seed(memory_store):
    roster = RosterStore(memory_store)
    response = roster.load()

    assert response.success
    assert response.data["source"] == "seed"
    assert list(roster.students) == seed_students()
    assert [s.id for s in roster.students] == ["STU001", "STU002", "STU003", "STU004"]


def test_load_malformed_blob_falls_back_to_seed():
    store = MemoryStore({RosterStore.STORAGE_KEY: "not json"})
    roster = RosterStore(store)

    response = roster.load()

    assert response.success
    assert response.data["source"] == "seed"
    assert list(roster.students) == seed_students()


def test_load_non_list_document_falls_back_to_seed():
    store = MemoryStore({RosterStore.STORAGE_KEY: '{"students": []}'})
    roster = RosterStore(store)

    assert roster.load().data["source"] == "seed"


def test_load_record_missing_fields_falls_back_to_seed():
    store = MemoryStore({RosterStore.STORAGE_KEY: '[{"id": "STU-0001"}]'})
    roster = RosterStore(store)

    assert roster.load().data["source"] == "seed"


def test_load_deeply_nested_blob_falls_back_to_seed():
    store = MemoryStore({RosterStore.STORAGE_KEY: "[" * 100000})
    roster = RosterStore(store)

    response = roster.load()

    assert response.success
    assert response.data["source"] == "seed"
    assert list(roster.students) == seed_students()


@pytest.mark.parametrize(
    "field, value",
    [
        ("gpa", "3.5"),
        ("gpa", 7),
        ("gpa", float("nan")),
        ("gpa", float("inf")),
        ("attendance", None),
        ("attendance", True),
        ("attendance", 150),
    ],
)
def test_load_invalid_numeric_field_falls_back_to_seed(sample_student, field, value):
    record = sample_student.to_dict()
    record[field] = value
    roster = RosterStore(MemoryStore({RosterStore.STORAGE_KEY: json.dumps([record])}))

    assert roster.load().data["source"] == "seed"


@pytest.mark.parametrize("score", ["high", None, -5, float("nan")])
def test_load_invalid_subject_score_falls_back_to_seed(sample_student, score):
    record = sample_student.to_dict()
    record["subjects"] = [{"name": "Physics", "score": score, "grade": "A"}]
    roster = RosterStore(MemoryStore({RosterStore.STORAGE_KEY: json.dumps([record])}))

    assert roster.load().data["source"] == "seed"


def test_load_duplicate_ids_falls_back_to_seed(sample_student):
    blob = json.dumps([sample_student.to_dict(), sample_student.to_dict()])
    roster = RosterStore(MemoryStore({RosterStore.STORAGE_KEY: blob}))

    assert roster.load().data["source"] == "seed"


def test_save_before_load_is_refused(memory_store):
    roster = RosterStore(memory_store)

    response = roster.save()

    assert not response.success
    assert response.error is ErrorCode.LOGIC_ERROR
    assert memory_store.get(RosterStore.STORAGE_KEY) is None


def test_save_and_load_round_trip(memory_store, sample_student):
    roster = RosterStore(memory_store)
    roster.load()
    roster.add_student(sample_student)
    roster.add_student(
        make_student(
            id="STU-0002",
            first_name="Ada",
            status=StudentStatus.GRADUATED,
            photo="data:image/png;base64,iVBORw0KGgo=",
            subjects=[Subject("Art", 88), Subject("Art", 91)],
        )
    )
    assert roster.save().success

    reloaded = RosterStore(memory_store)
    response = reloaded.load()

    assert response.data["source"] == "storage"
    assert reloaded.students == roster.students


def test_round_trip_through_json_file_store(tmp_path, sample_student):
    store = JsonFileStore(str(tmp_path))
    roster = RosterStore(store)
    roster.load()
    roster.add_student(sample_student)

    slot_path = tmp_path / f"{RosterStore.STORAGE_KEY}.json"
    assert slot_path.exists()

    data = json.loads(slot_path.read_text())
    assert isinstance(data, list)
    assert data[-1]["id"] == "STU-0001"

    reloaded = RosterStore(JsonFileStore(str(tmp_path)))
    reloaded.load()

    assert reloaded.students == roster.students


def test_save_failure_is_reported(sample_student):
    class BrokenStore(MemoryStore):
        def set(self, key, value):
            raise OSError("disk full")

    roster = RosterStore(BrokenStore())
    roster.load()

    response = roster.save()
    assert not response.success
    assert response.error is ErrorCode.STORAGE_ERROR

    add_response = roster.add_student(sample_student)
    assert add_response.success
    assert not add_response.data["saved"]
    assert sample_student in roster.students


# === add, enroll, remove, find ===


def test_add_student_persists(empty_roster, memory_store, sample_student):
    response = empty_roster.add_student(sample_student)

    assert response.success
    assert response.data["saved"]
    assert empty_roster.students == (sample_student,)

    stored = json.loads(memory_store.get(RosterStore.STORAGE_KEY))
    assert [record["id"] for record in stored] == ["STU-0001"]


def test_add_student_allows_duplicate_names(empty_roster):
    empty_roster.add_student(make_student(id="STU-AAAA"))
    response = empty_roster.add_student(make_student(id="STU-BBBB"))

    assert response.success
    assert len(empty_roster.students) == 2


def test_add_student_rejects_issued_id(empty_roster, sample_student):
    empty_roster.add_student(sample_student)

    response = empty_roster.add_student(make_student(id=sample_student.id))

    assert not response.success
    assert response.error is ErrorCode.VALIDATION_FAILED
    assert len(empty_roster.students) == 1


def test_enroll_student_applies_creation_defaults(empty_roster, enrollment_form):
    response = empty_roster.enroll_student(**enrollment_form)

    assert response.success
    student = response.data["record"]

    assert student.id == "STU-0001"
    assert student.email == "alice.walker@example.edu"
    assert student.status is StudentStatus.ACTIVE
    assert student.attendance == 100
    assert student.gpa == 0
    assert student.subjects == ()
    assert student.notes == ""
    assert student.photo is None
    assert student.enrollment_date == TODAY


def test_enroll_student_rejects_unknown_course(empty_roster, enrollment_form):
    enrollment_form["course"] = "Astrology (1 Week)"

    response = empty_roster.enroll_student(**enrollment_form)

    assert not response.success
    assert response.error is ErrorCode.INVALID_FIELD_VALUE
    assert empty_roster.students == ()


def test_enroll_student_skips_issued_ids(memory_store, enrollment_form):
    ids = iter(["STU001", "STU001", "STU-9Z9Z"])
    roster = RosterStore(memory_store, id_factory=lambda: next(ids))
    roster.load()

    response = roster.enroll_student(**enrollment_form)

    assert response.data["record"].id == "STU-9Z9Z"


def test_enroll_student_reports_exhausted_id_generation(memory_store, enrollment_form):
    roster = RosterStore(memory_store, id_factory=lambda: "STU001")
    roster.load()

    response = roster.enroll_student(**enrollment_form)

    assert not response.success
    assert response.error is ErrorCode.INTERNAL_ERROR


def test_add_then_remove_restores_roster_and_retires_id(seeded_roster, enrollment_form):
    before = seeded_roster.students

    enrolled = seeded_roster.enroll_student(**enrollment_form).data["record"]
    assert seeded_roster.students[-1] == enrolled

    response = seeded_roster.remove_student(enrolled.id)
    assert response.success
    assert response.data["removed"]
    assert seeded_roster.students == before

    again = seeded_roster.enroll_student(**enrollment_form).data["record"]
    assert again.id != enrolled.id


def test_remove_unknown_student_is_a_no_op(seeded_roster):
    before = seeded_roster.students

    response = seeded_roster.remove_student("STU-NOPE")

    assert response.success
    assert not response.data["removed"]
    assert seeded_roster.students == before


def test_find_student_by_id(seeded_roster):
    response = seeded_roster.find_student_by_id("STU002")

    assert response.success
    assert response.data["record"].first_name == "Bob"


def test_find_missing_student(seeded_roster):
    response = seeded_roster.find_student_by_id("stu002")

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert response.status_code == 404


def test_snapshot_is_detached_from_later_mutations(empty_roster, sample_student):
    snapshot = empty_roster.snapshot()

    empty_roster.add_student(sample_student)

    assert snapshot == ()
    assert empty_roster.snapshot() == (sample_student,)


def test_sequential_id_factory_is_deterministic():
    next_id = sequential_ids()

    assert [next_id(), next_id()] == ["STU-0001", "STU-0002"]
