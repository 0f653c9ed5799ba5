"""Tests for the client-local key-value store."""

import json

from question_simplifier.state import QuestionGroup, QuestionItem
from question_simplifier.storage import STORAGE_KEY, LocalStorage, load_groups, save_groups


def test_get_missing_key_returns_none(tmp_path):
    storage = LocalStorage(path=str(tmp_path / "storage.json"))
    assert storage.get_item(STORAGE_KEY) is None
    assert load_groups(storage) == []


def test_set_and_remove_item(tmp_path):
    storage = LocalStorage(path=str(tmp_path / "nested" / "storage.json"))
    storage.set_item("a", "1")
    storage.set_item("b", "2")
    assert storage.get_item("a") == "1"

    storage.remove_item("a")
    assert storage.get_item("a") is None
    assert storage.get_item("b") == "2"


def test_save_then_load_groups(tmp_path):
    storage = LocalStorage(path=str(tmp_path / "storage.json"))
    group = QuestionGroup(
        id=1,
        title="Two Sum",
        expanded=True,
        items=[
            QuestionItem(id=1, description="Find two numbers adding to target"),
            QuestionItem(id=2, description="Find one pair", level=1),
        ],
    )
    save_groups(storage, [group])

    raw = json.loads(storage.get_item(STORAGE_KEY))
    assert len(raw) == 1 and len(raw[0]["items"]) == 1

    restored = load_groups(storage)
    assert restored[0].id == 1
    assert restored[0].title == "Two Sum"
    assert restored[0].expanded is False
    assert [i.description for i in restored[0].items] == ["Find two numbers adding to target"]


def test_unreadable_file_is_treated_as_empty(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("{not json", encoding="utf-8")
    storage = LocalStorage(path=str(path))
    assert load_groups(storage) == []


def test_malformed_snapshot_is_discarded(tmp_path):
    storage = LocalStorage(path=str(tmp_path / "storage.json"))
    storage.set_item(STORAGE_KEY, json.dumps([{"title": "no id"}]))
    assert load_groups(storage) == []
