# tests/test_task_mapper.py

from __future__ import annotations

import pytest

from tasklist.tasks.task_mapper import TaskMapper
from tasklist.tasks.task_models import Task

from .fakes import FakeTaskRows


def test_create_then_find_returns_same_fields(mapper: TaskMapper) -> None:
    created = mapper.create("Go to the Gym", "exercise is good for you")

    assert isinstance(created.id, int)
    assert created.id > 0

    found = mapper.find(created.id)
    assert found == Task(id=created.id, title="Go to the Gym", description="exercise is good for you")


def test_create_single_task_shows_up_in_all(mapper: TaskMapper) -> None:
    mapper.create("Go to the Gym", "exercise is good for you")

    tasks = mapper.all()
    assert len(tasks) == 1
    assert tasks[0].title == "Go to the Gym"
    assert tasks[0].description == "exercise is good for you"
    assert tasks[0].id > 0


def test_all_is_in_insertion_order(mapper: TaskMapper) -> None:
    a = mapper.create("a", "first")
    b = mapper.create("b", "second")
    c = mapper.create("c", "third")

    assert [t.id for t in mapper.all()] == [a.id, b.id, c.id]
    assert a.id < b.id < c.id


def test_find_missing_returns_none(mapper: TaskMapper) -> None:
    assert mapper.find(12345) is None


def test_update_changes_only_target_record(mapper: TaskMapper) -> None:
    keep = mapper.create("Read a book", "one chapter")
    target = mapper.create("Buy groceries", "milk")

    updated = mapper.update(target.id, "Buy groceries", "milk and eggs")

    assert updated == Task(id=target.id, title="Buy groceries", description="milk and eggs")
    assert mapper.find(target.id) == updated
    assert mapper.find(keep.id) == keep


def test_update_missing_returns_none_and_writes_nothing(mapper: TaskMapper) -> None:
    mapper.create("a", "b")

    assert mapper.update(999, "x", "y") is None
    assert [(t.title, t.description) for t in mapper.all()] == [("a", "b")]


def test_delete_removes_one_record(mapper: TaskMapper) -> None:
    a = mapper.create("a", "1")
    b = mapper.create("b", "2")

    assert mapper.delete(a.id) is True
    assert mapper.find(a.id) is None
    assert mapper.all() == [b]


def test_delete_missing_returns_false_and_keeps_size(mapper: TaskMapper) -> None:
    mapper.create("a", "1")
    mapper.create("b", "2")

    assert mapper.delete(404) is False
    assert mapper.count() == 2


def test_delete_all_empties_table(mapper: TaskMapper) -> None:
    for i in range(3):
        mapper.create(f"task {i}", "something")

    assert mapper.delete_all() == 3
    assert mapper.all() == []
    assert mapper.delete_all() == 0


def test_ids_are_not_reused_after_delete(mapper: TaskMapper) -> None:
    first = mapper.create("a", "1")
    mapper.delete(first.id)
    second = mapper.create("b", "2")

    assert second.id > first.id


def test_values_are_stored_stripped(mapper: TaskMapper) -> None:
    task = mapper.create("  Go to the Gym ", "\texercise is good for you\n")

    assert mapper.find(task.id) == Task(
        id=task.id, title="Go to the Gym", description="exercise is good for you"
    )


@pytest.mark.parametrize(
    ("title", "description"),
    [
        ("", "ok"),
        ("   ", "ok"),
        ("ok", ""),
        (None, "ok"),
        ("ok", 42),
    ],
)
def test_create_rejects_missing_fields(mapper: TaskMapper, title, description) -> None:
    with pytest.raises(ValueError):
        mapper.create(title, description)
    assert mapper.count() == 0


def test_create_rejects_over_length_fields(mapper: TaskMapper) -> None:
    with pytest.raises(ValueError, match="too long"):
        mapper.create("x" * 256, "ok")

    # Exactly at the bound is accepted.
    task = mapper.create("x" * 255, "ok")
    assert len(task.title) == 255


def test_rejected_update_leaves_row_untouched(mapper: TaskMapper) -> None:
    task = mapper.create("a", "b")

    with pytest.raises(ValueError):
        mapper.update(task.id, "a", "")

    assert mapper.find(task.id) == task


def test_custom_max_field_length() -> None:
    mapper = TaskMapper(FakeTaskRows(), max_field_length=5)

    mapper.create("short", "12345")
    with pytest.raises(ValueError):
        mapper.create("longer", "x")


def test_mapper_over_fake_rows_converts_to_tasks() -> None:
    rows = FakeTaskRows()
    mapper = TaskMapper(rows)

    task = mapper.create("Call Mom", "tonight")
    assert rows.rows[task.id] == {"id": task.id, "title": "Call Mom", "description": "tonight"}

    listed = mapper.all()
    assert listed == [task]
    assert all(isinstance(t, Task) for t in listed)

    assert mapper.update(task.id, "Call Mom", "tomorrow") == Task(task.id, "Call Mom", "tomorrow")
    assert mapper.delete(task.id) is True
    assert mapper.delete(task.id) is False
    assert mapper.find(task.id) is None


def test_validation_happens_before_storage_is_touched() -> None:
    rows = FakeTaskRows()
    mapper = TaskMapper(rows)

    with pytest.raises(ValueError):
        mapper.create("", "x")
    with pytest.raises(ValueError):
        mapper.update(1, "x", " ")

    assert rows.calls == []


def test_tasks_are_immutable(mapper: TaskMapper) -> None:
    task = mapper.create("a", "b")
    with pytest.raises(AttributeError):
        task.title = "changed"  # type: ignore[misc]
