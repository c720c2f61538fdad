import gc

import pytest

from behavioral.multicast_delegate import Ipad, Iphone, Macbook, MulticastDelegate
from behavioral.object_registry import ObjectRegistry, ObjectWrapper


class Listener:
    def __init__(self, name):
        self.name = name
        self.calls = []


def test_wrapper_keeps_strong_reference_alive():
    wrapper = ObjectWrapper(Listener("strong"), strong=True)
    gc.collect()
    assert wrapper.is_alive
    assert wrapper.object.name == "strong"


def test_wrapper_drops_weak_reference():
    listener = Listener("weak")
    wrapper = ObjectWrapper(listener, strong=False)
    assert wrapper.refers_to(listener)

    del listener
    gc.collect()
    assert wrapper.object is None
    assert not wrapper.is_alive


def test_wrapper_rejects_none_and_unreferenceable_objects():
    with pytest.raises(TypeError):
        ObjectWrapper(None)
    with pytest.raises(TypeError):
        ObjectWrapper(42, strong=False)


def test_registry_prunes_collected_entries():
    registry = ObjectRegistry()
    kept = Listener("kept")
    dropped = Listener("dropped")
    registry.add_object(kept, strong=False)
    registry.add_object(dropped, strong=False)
    registry.add_object(Listener("owned"), strong=True)

    del dropped
    gc.collect()

    assert [listener.name for listener in registry.live_objects] == ["kept", "owned"]
    assert len(registry) == 2


def test_invoke_skips_dead_entries():
    registry = ObjectRegistry()
    first = Listener("first")
    second = Listener("second")
    registry.add_object(first, strong=False)
    registry.add_object(second, strong=False)

    del first
    gc.collect()

    names = []
    registry.invoke_objects(lambda listener: names.append(listener.name))
    assert names == ["second"]


def test_remove_object_uses_identity():
    registry = ObjectRegistry()
    first = Listener("same")
    second = Listener("same")
    registry.add_object(first)
    registry.add_object(second)

    assert registry.remove_object(second)
    assert registry.live_objects == [first]
    assert not registry.remove_object(second)


def test_duplicate_registration_invokes_twice():
    registry = ObjectRegistry()
    listener = Listener("twice")
    registry.add_object(listener)
    registry.add_object(listener)

    registry.invoke_objects(lambda item: item.calls.append("hit"))
    assert listener.calls == ["hit", "hit"]

    registry.remove_object(listener)
    assert len(registry) == 1


def test_closure_can_modify_registry_during_invocation():
    registry = ObjectRegistry()
    first = Listener("first")
    second = Listener("second")
    late = Listener("late")
    registry.add_object(first)
    registry.add_object(second)

    visited = []

    def closure(listener):
        visited.append(listener.name)
        registry.remove_object(second)
        registry.add_object(late)

    registry.invoke_objects(closure)

    assert visited == ["first", "second"]
    assert second not in registry
    assert late in registry


def test_closure_exceptions_propagate():
    registry = ObjectRegistry()
    registry.add_object(Listener("boom"))

    def closure(listener):
        raise RuntimeError(listener.name)

    with pytest.raises(RuntimeError, match="boom"):
        registry.invoke_objects(closure)


def test_multicast_delegate_holds_weak_references():
    delegate = MulticastDelegate()
    macbook = Macbook()
    iphone = Iphone()
    ipad = Ipad()

    delegate += macbook
    delegate += iphone
    delegate += ipad

    delegate.invoke_delegates(lambda device: device.copy_to_clipboard("I got a notification!"))
    assert macbook.clipboard == iphone.clipboard == ipad.clipboard == "I got a notification!"

    delegate -= iphone
    delegate.invoke_delegates(lambda device: device.copy_to_clipboard("iPhone has gone :("))
    assert iphone.clipboard == "I got a notification!"
    assert macbook.clipboard == "iPhone has gone :("

    del ipad
    gc.collect()
    assert delegate.delegates == [macbook]


def test_copy_to_clipboard_message():
    assert Iphone().copy_to_clipboard("hi") == "Now iPhone clipboard contains 'hi'"


def test_none_never_matches_collected_entry():
    registry = ObjectRegistry()
    listener = Listener("gone")
    registry.add_object(listener, strong=False)
    wrapper = ObjectWrapper(listener, strong=False)

    del listener
    gc.collect()

    assert wrapper.refers_to(None) is False
    assert None not in registry
    assert registry.remove_object(None) is False
