import threading

import pytest

from class_portal_api.app.core.exceptions import DuplicateRecordError
from class_portal_api.app.core.storage import EntityType, Storage


@pytest.mark.parametrize("entity_type", list(EntityType))
def test_ids_start_at_one_and_increase(storage, entity_type):
    ids = [storage.create(entity_type, {"n": n})["id"] for n in range(5)]
    assert ids == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("entity_type", list(EntityType))
def test_get_returns_created_record(storage, entity_type):
    created = storage.create(entity_type, {"name": "x", "value": 3})
    assert storage.get(entity_type, created["id"]) == created == {"name": "x", "value": 3, "id": 1}


@pytest.mark.parametrize("entity_type", list(EntityType))
def test_delete_then_get_is_absent(storage, entity_type):
    created = storage.create(entity_type, {"name": "x"})
    assert storage.delete(entity_type, created["id"]) is True
    assert storage.get(entity_type, created["id"]) is None
    assert storage.delete(entity_type, created["id"]) is False


def test_ids_are_not_reused_after_delete(storage):
    first = storage.create(EntityType.ANNOUNCEMENT, {"title": "a"})
    second = storage.create(EntityType.ANNOUNCEMENT, {"title": "b"})
    storage.delete(EntityType.ANNOUNCEMENT, second["id"])
    storage.delete(EntityType.ANNOUNCEMENT, first["id"])
    third = storage.create(EntityType.ANNOUNCEMENT, {"title": "c"})
    assert third["id"] == 3


def test_counters_are_per_collection(storage):
    storage.create(EntityType.TRANSACTION, {"amount": 1})
    storage.create(EntityType.TRANSACTION, {"amount": 2})
    assert storage.create(EntityType.SCHEDULE, {"day": "Monday"})["id"] == 1


def test_update_merges_fields(storage):
    created = storage.create(EntityType.CLASS_MEMBER, {"name": "Dewi", "student_id": "1", "image_url": "a.jpg"})
    updated = storage.update(EntityType.CLASS_MEMBER, created["id"], {"name": "Dewi A."})
    assert updated == {"name": "Dewi A.", "student_id": "1", "image_url": "a.jpg", "id": created["id"]}
    assert storage.get(EntityType.CLASS_MEMBER, created["id"]) == updated


def test_update_cannot_change_id(storage):
    created = storage.create(EntityType.USER, {"username": "u"})
    updated = storage.update(EntityType.USER, created["id"], {"id": 99})
    assert updated["id"] == created["id"]
    assert storage.get(EntityType.USER, 99) is None


def test_update_missing_record_does_not_create(storage):
    assert storage.update(EntityType.ASSIGNMENT, 42, {"title": "x"}) is None
    assert storage.list(EntityType.ASSIGNMENT) == []


def test_list_keeps_insertion_order(storage):
    for title in ["c", "a", "b"]:
        storage.create(EntityType.ANNOUNCEMENT, {"title": title})
    assert [r["title"] for r in storage.list(EntityType.ANNOUNCEMENT)] == ["c", "a", "b"]


def test_returned_records_are_copies(storage):
    created = storage.create(EntityType.USER, {"username": "u"})
    created["username"] = "changed"
    listed = storage.list(EntityType.USER)
    listed[0]["username"] = "changed too"
    assert storage.get(EntityType.USER, 1)["username"] == "u"


def test_unique_field_rejects_duplicate_and_keeps_counter(storage):
    storage.create(EntityType.CORE_MEMBER, {"student_id": "19210720"}, unique=("student_id",))
    with pytest.raises(DuplicateRecordError) as excinfo:
        storage.create(EntityType.CORE_MEMBER, {"student_id": "19210720"}, unique=("student_id",))
    assert excinfo.value.field_name == "student_id"
    assert len(storage.list(EntityType.CORE_MEMBER)) == 1
    assert storage.create(EntityType.CORE_MEMBER, {"student_id": "19210721"}, unique=("student_id",))["id"] == 2


def test_unique_check_on_update_ignores_own_record(storage):
    a = storage.create(EntityType.USER, {"username": "a"}, unique=("username",))
    storage.create(EntityType.USER, {"username": "b"}, unique=("username",))
    assert storage.update(EntityType.USER, a["id"], {"username": "a"}, unique=("username",))["username"] == "a"
    with pytest.raises(DuplicateRecordError):
        storage.update(EntityType.USER, a["id"], {"username": "b"}, unique=("username",))
    assert storage.get(EntityType.USER, a["id"])["username"] == "a"


def test_same_value_allowed_in_different_collections(storage):
    storage.create(EntityType.CORE_MEMBER, {"student_id": "1"}, unique=("student_id",))
    storage.create(EntityType.CLASS_MEMBER, {"student_id": "1"}, unique=("student_id",))
    assert storage.counts()["class_member"] == 1


def test_find(storage):
    storage.create(EntityType.USER, {"username": "alice", "password": "x"})
    storage.create(EntityType.USER, {"username": "bob", "password": "y"})
    assert storage.find(EntityType.USER, username="bob")["id"] == 2
    assert storage.find(EntityType.USER, username="carol") is None


def test_entity_type_accepts_string_values():
    store = Storage()
    store.create("transaction", {"amount": 5})
    assert store.list(EntityType.TRANSACTION) == [{"amount": 5, "id": 1}]


def _run_threads(count, target):
    barrier = threading.Barrier(count)

    def worker(index):
        barrier.wait()
        target(index)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def test_concurrent_creates_get_distinct_sequential_ids(storage):
    threads, per_thread = 8, 200

    def create_many(index):
        for n in range(per_thread):
            storage.create(EntityType.TRANSACTION, {"thread": index, "n": n})

    _run_threads(threads, create_many)

    ids = sorted(record["id"] for record in storage.list(EntityType.TRANSACTION))
    assert ids == list(range(1, threads * per_thread + 1))
    assert storage.create(EntityType.TRANSACTION, {"n": -1})["id"] == threads * per_thread + 1


def test_concurrent_duplicates_admit_only_one(storage):
    threads = 16
    created, rejected = [], []

    def insert(index):
        try:
            record = storage.create(
                EntityType.CLASS_MEMBER,
                {"name": f"Student {index}", "student_id": "19210723"},
                unique=("student_id",),
            )
        except DuplicateRecordError:
            rejected.append(index)
        else:
            created.append(record)

    _run_threads(threads, insert)

    assert len(created) == 1
    assert len(rejected) == threads - 1
    assert storage.list(EntityType.CLASS_MEMBER) == created
    assert created[0]["id"] == 1
