import pytest

from behavioral.memento import MementoDecodeError, TextCaretaker, TextHistory, TextOriginator
from utils.key_value_store import InMemoryKeyValueStore


def test_caretaker_round_trips_through_store():
    store = InMemoryKeyValueStore()
    caretaker = TextCaretaker(store)

    caretaker.save(TextOriginator("你好"), title="greeting")

    assert "greeting" in store
    assert caretaker.load("greeting") == TextOriginator("你好")


def test_load_missing_memento_raises():
    with pytest.raises(MementoDecodeError):
        TextCaretaker().load("missing")


def test_load_corrupt_memento_raises():
    store = InMemoryKeyValueStore()
    store.set("broken", b"not json")
    store.set("wrong-shape", b'{"body": "x"}')
    caretaker = TextCaretaker(store)

    with pytest.raises(MementoDecodeError):
        caretaker.load("broken")
    with pytest.raises(MementoDecodeError):
        caretaker.load("wrong-shape")


def test_history_starts_with_initial_state():
    history = TextHistory()
    assert history.states == ["Initial State"]


def test_saving_same_text_twice_is_ignored():
    history = TextHistory()
    assert history.save("draft")
    assert not history.save("draft")
    assert history.states == ["Initial State", "draft"]


def test_undo_restores_previous_states():
    history = TextHistory()
    history.save("Hello")
    history.save("Hello, world")

    assert history.undo("Hello, world") == "Hello"
    assert history.states == ["Initial State"]
    assert history.undo("Hello") == "Initial State"
    assert history.states == []
    assert history.undo("Initial State") is None


def test_undo_with_unsaved_edit_restores_latest_saved():
    history = TextHistory()
    history.save("saved")

    assert history.undo("unsaved edit") == "saved"
    assert history.states == ["Initial State"]


def test_history_without_initial_state():
    history = TextHistory(initial_text=None)
    assert history.states == []
    assert history.undo("anything") is None


def test_failed_undo_leaves_history_unchanged():
    history = TextHistory()
    history.save("Hello")
    history.caretaker.store.delete("Hello")

    with pytest.raises(MementoDecodeError):
        history.undo("unsaved")
    assert history.states == ["Initial State", "Hello"]


def test_undo_deletes_popped_mementos():
    history = TextHistory()
    history.save("Hello")
    history.save("Hello, world")
    store = history.caretaker.store

    assert history.undo("Hello, world") == "Hello"
    assert sorted(store.keys()) == ["Initial State"]
    assert history.undo("Hello") == "Initial State"
    assert len(store) == 0


def test_undo_keeps_memento_shared_by_earlier_state():
    history = TextHistory()
    history.save("A")
    history.save("B")
    history.save("A")

    assert history.undo("A") == "B"
    assert "A" in history.caretaker.store
    assert history.undo("B") == "A"
