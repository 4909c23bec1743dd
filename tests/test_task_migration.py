# tests/test_task_migration.py

from __future__ import annotations

from todo_tracker.tasks.task_migration import (
    RecordShape,
    classify_record,
    merge_records,
    migrate_records,
    normalize_record,
    split_records,
)
from todo_tracker.tasks.task_models import Task


def test_classify_record_shapes() -> None:
    assert classify_record({"text": "a", "completed": False}) == RecordShape.LEGACY_TEXT
    assert classify_record({"title": "a"}) == RecordShape.CURRENT
    # title wins when both are present
    assert classify_record({"title": "a", "text": "b"}) == RecordShape.CURRENT
    assert classify_record({"completed": True}) == RecordShape.UNKNOWN
    assert classify_record("just a string") == RecordShape.UNKNOWN
    assert classify_record(None) == RecordShape.UNKNOWN


def test_legacy_record_is_renamed_and_defaulted() -> None:
    task = normalize_record({"text": "Buy milk", "completed": True})
    assert task == Task(title="Buy milk", description="", completed=True, state="")


def test_current_record_passes_through() -> None:
    raw = {"title": "Write report", "description": "Q3", "completed": False, "state": "blocked"}
    task = normalize_record(raw)
    assert task is not None
    assert task.to_record() == raw


def test_current_record_without_state_stays_without_state() -> None:
    task = normalize_record({"title": "x", "description": "", "completed": False})
    assert task is not None
    assert task.state is None
    assert "state" not in task.to_record()


def test_missing_completed_defaults_to_false() -> None:
    task = normalize_record({"text": "x"})
    assert task is not None
    assert task.completed is False


def test_migration_is_idempotent() -> None:
    raw = [
        {"text": "legacy", "completed": True},
        {"title": "current", "description": "d", "completed": False},
        {"title": "labelled", "description": "", "completed": False, "state": "soon", "extra": 1},
    ]
    once = migrate_records(raw)
    twice = migrate_records([t.to_record() for t in once])

    assert twice == once
    assert [t.title for t in once] == ["legacy", "current", "labelled"]


def test_unknown_records_are_not_returned_as_tasks() -> None:
    tasks = migrate_records([{"title": "a"}, 42, {"foo": "bar"}, {"text": "b"}])
    assert [t.title for t in tasks] == ["a", "b"]


def test_completed_strings_are_read_by_meaning() -> None:
    assert normalize_record({"text": "a", "completed": "false"}).completed is False
    assert normalize_record({"title": "a", "completed": "False "}).completed is False
    assert normalize_record({"title": "a", "completed": "true"}).completed is True
    assert normalize_record({"title": "a", "completed": "yes"}).completed is True
    assert normalize_record({"title": "a", "completed": None}).completed is False
    assert normalize_record({"title": "a", "completed": True}).completed is True


def test_split_and_merge_keep_unknown_records_in_place() -> None:
    raw = [{"foo": 1}, {"title": "a"}, 7, {"text": "b"}, {"bar": 2}]
    tasks, opaque = split_records(raw)

    assert [t.title for t in tasks] == ["a", "b"]
    assert [o.raw for o in opaque] == [{"foo": 1}, 7, {"bar": 2}]

    merged = merge_records(tasks, opaque)
    assert merged[0] == {"foo": 1}
    assert merged[2] == 7
    assert merged[4] == {"bar": 2}
    assert [m["title"] for m in merged if isinstance(m, dict) and "title" in m] == ["a", "b"]
