"""Tests for the JSON-backed InventoryLogger."""

import json
from datetime import datetime, timezone

import pytest

from recordbook.exceptions import StoreCorruptError
from recordbook.inventory_log import InventoryLogger
from recordbook.models import InventoryItem


def make_logger(path):
    return InventoryLogger(path, InventoryItem.from_dict)


def sample_items():
    return [
        InventoryItem(3, "Stapler", 12, datetime(2025, 7, 1, 9, 30, tzinfo=timezone.utc)),
        InventoryItem(1, "Printer paper", 200, datetime(2025, 7, 2, 14, 0)),
        InventoryItem(2, "Toner", 4, datetime(2025, 7, 3, 8, 15, 42, 123456)),
    ]


def test_save_then_load_round_trip(tmp_path):
    path = tmp_path / "inventory.json"
    writer = make_logger(path)
    for item in sample_items():
        writer.add(item)
    writer.save_to_file()

    reader = make_logger(path)
    loaded = reader.load_from_file()

    assert loaded == sample_items()
    assert reader.get_all() == sample_items()


def test_saved_file_is_json_array(tmp_path):
    path = tmp_path / "inventory.json"
    inv = make_logger(path)
    inv.add(sample_items()[0])
    inv.save_to_file()

    data = json.loads(path.read_text(encoding="utf-8"))
    assert isinstance(data, list)
    assert data[0]["name"] == "Stapler"
    assert data[0]["date_added"] == "2025-07-01T09:30:00+00:00"


def test_load_replaces_in_memory_contents(tmp_path):
    path = tmp_path / "inventory.json"
    path.write_text("[]", encoding="utf-8")
    inv = make_logger(path)
    inv.add(sample_items()[0])

    inv.load_from_file()
    assert inv.get_all() == []


def test_missing_file_loads_empty(tmp_path, caplog):
    inv = make_logger(tmp_path / "absent.json")
    inv.add(sample_items()[0])
    assert inv.load_from_file() == []
    assert inv.get_all() == []
    assert "not found" in caplog.text


def test_corrupt_file_raises(tmp_path):
    path = tmp_path / "inventory.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StoreCorruptError):
        make_logger(path).load_from_file()


def test_wrong_shape_raises(tmp_path):
    path = tmp_path / "inventory.json"
    path.write_text('{"id": 1}', encoding="utf-8")
    with pytest.raises(StoreCorruptError):
        make_logger(path).load_from_file()


def test_record_missing_key_raises(tmp_path):
    path = tmp_path / "inventory.json"
    path.write_text('[{"id": 1, "name": "x"}]', encoding="utf-8")
    with pytest.raises(StoreCorruptError):
        make_logger(path).load_from_file()


def test_save_creates_parent_dirs(tmp_path):
    path = tmp_path / "nested" / "dir" / "inventory.json"
    make_logger(path).save_to_file()
    assert json.loads(path.read_text(encoding="utf-8")) == []


def test_get_all_is_a_copy(tmp_path):
    inv = make_logger(tmp_path / "inventory.json")
    inv.add(sample_items()[0])
    inv.get_all().clear()
    assert len(inv.get_all()) == 1
