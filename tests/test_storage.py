# tests/test_storage.py

import base64
import random
import re

import pytest

from core.storage import JsonFileStore, MemoryStore
from core.utils import encode_photo_data_uri, generate_student_id


def test_memory_store_get_and_set():
    store = MemoryStore()

    assert store.get("slot") is None

    store.set("slot", "value")
    assert store.get("slot") == "value"


def test_json_file_store_creates_directory_and_overwrites(tmp_path):
    store = JsonFileStore(str(tmp_path / "data"))

    assert store.get("slot") is None

    store.set("slot", "first")
    store.set("slot", "second")

    assert store.get("slot") == "second"
    assert (tmp_path / "data" / "slot.json").read_text() == "second"
    assert not (tmp_path / "data" / "slot.json.tmp").exists()


def test_json_file_store_failed_write_keeps_old_value_and_removes_temp_file(tmp_path, monkeypatch):
    store = JsonFileStore(str(tmp_path / "data"))
    store.set("slot", "first")

    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("core.storage.os.replace", fail_replace)

    with pytest.raises(OSError):
        store.set("slot", "second")

    assert store.get("slot") == "first"
    assert not (tmp_path / "data" / "slot.json.tmp").exists()


def test_generate_student_id_format():
    student_id = generate_student_id(random.Random(7))

    assert re.fullmatch(r"STU-[A-Z0-9]{4}", student_id)
    assert generate_student_id(random.Random(7)) == student_id


def test_encode_photo_data_uri(tmp_path):
    photo = tmp_path / "me.png"
    photo.write_bytes(b"\x89PNG")

    data_uri = encode_photo_data_uri(str(photo))

    assert data_uri == "data:image/png;base64," + base64.b64encode(b"\x89PNG").decode()
