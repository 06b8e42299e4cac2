from __future__ import annotations

import uuid
from concurrent.futures import ThreadPoolExecutor

import pytest

from todo_app.core.errors import ValidationError
from todo_app.domain.repositories import TodoRepository


def test_add_returns_distinct_ids(repo: TodoRepository) -> None:
    ids = [repo.add(f"todo {i}") for i in range(200)]

    assert len(set(ids)) == len(ids)
    assert all(isinstance(todo_id, uuid.UUID) for todo_id in ids)


def test_list_keeps_insertion_order(repo: TodoRepository) -> None:
    names = ["Einkaufen", "Rechnung senden", "Follow-up"]
    ids = [repo.add(name) for name in names]

    listed = repo.list()

    assert [todo.name for todo in listed] == names
    assert [todo.id for todo in listed] == ids
    assert all(todo.done is False for todo in listed)


@pytest.mark.parametrize("name", ["", "   ", None])
def test_add_rejects_empty_name(repo: TodoRepository, name) -> None:
    with pytest.raises(ValidationError):
        repo.add(name)

    assert repo.list() == []


def test_add_keeps_name_as_given(repo: TodoRepository) -> None:
    repo.add("  Buy milk \n")

    assert repo.list()[0].name == "  Buy milk \n"


def test_toggle_twice_restores_done(repo: TodoRepository) -> None:
    todo_id = repo.add("a")

    assert repo.toggle(todo_id) is True
    assert repo.get(todo_id).done is True
    assert repo.toggle(todo_id) is True
    assert repo.get(todo_id).done is False


def test_unknown_id_is_a_noop(repo: TodoRepository) -> None:
    repo.add("a")
    repo.add("b")
    before = repo.list()

    assert repo.toggle(uuid.uuid4()) is False
    assert repo.remove(uuid.uuid4()) is False
    assert repo.list() == before


def test_remove_keeps_the_others(repo: TodoRepository) -> None:
    id1 = repo.add("a")
    repo.add("b")

    assert repo.remove(id1) is True

    listed = repo.list()
    assert [todo.name for todo in listed] == ["b"]
    assert repo.count() == 1
    assert repo.get(id1) is None


def test_remove_preserves_relative_order(repo: TodoRepository) -> None:
    ids = [repo.add(name) for name in "abcde"]

    repo.remove(ids[2])

    assert [todo.name for todo in repo.list()] == ["a", "b", "d", "e"]


def test_list_is_a_snapshot(repo: TodoRepository) -> None:
    todo_id = repo.add("a")
    snapshot = repo.list()

    snapshot[0].done = True
    snapshot.clear()
    repo.add("b")

    assert repo.get(todo_id).done is False
    assert [todo.name for todo in repo.list()] == ["a", "b"]


def test_add_retries_on_id_collision() -> None:
    fixed = uuid.UUID("00000000-0000-4000-8000-000000000001")
    other = uuid.UUID("00000000-0000-4000-8000-000000000002")
    generated = iter([fixed, fixed, fixed, other])
    repo = TodoRepository(id_factory=lambda: next(generated))

    first = repo.add("a")
    second = repo.add("b")

    assert first == fixed
    assert second == other


def test_removed_id_is_never_reassigned() -> None:
    fixed = uuid.UUID("00000000-0000-4000-8000-000000000001")
    other = uuid.UUID("00000000-0000-4000-8000-000000000002")
    generated = iter([fixed, fixed, other])
    repo = TodoRepository(id_factory=lambda: next(generated))

    repo.remove(repo.add("a"))

    assert repo.add("b") == other


def test_concurrent_adds_lose_nothing(repo: TodoRepository) -> None:
    names = [f"todo {i}" for i in range(500)]

    with ThreadPoolExecutor(max_workers=16) as pool:
        ids = list(pool.map(repo.add, names))

    listed = repo.list()
    assert len(listed) == len(names)
    assert sorted(todo.name for todo in listed) == sorted(names)
    assert len(set(ids)) == len(names)


def test_concurrent_toggles_and_reads(repo: TodoRepository) -> None:
    todo_id = repo.add("a")

    def work(i: int) -> int:
        if i % 2:
            repo.toggle(todo_id)
        return len(repo.list())

    with ThreadPoolExecutor(max_workers=8) as pool:
        lengths = list(pool.map(work, range(200)))

    # 100 bascules : retour à l'état initial
    assert repo.get(todo_id).done is False
    assert set(lengths) == {1}
