"""Tests for the event registry."""

import pytest

from htmlbuilder import EventRegistry, MissingFieldError
from htmlbuilder.events import normalize_name


def handler(event):
    return event


@pytest.mark.parametrize(
    "name, trigger, callback, missing",
    [
        (None, "click", handler, "name"),
        ("", "click", handler, "name"),
        ("go", None, handler, "trigger_type"),
        ("go", "", handler, "trigger_type"),
        ("go", "click", None, "callback"),
    ],
)
def test_register_requires_fields(name, trigger, callback, missing):
    registry = EventRegistry()
    with pytest.raises(MissingFieldError) as exc_info:
        registry.register(name, trigger, callback)
    assert exc_info.value.field == missing
    assert len(registry) == 0


def test_register_and_lookup():
    registry = EventRegistry()
    binding = registry.register("sayHello", "click", handler, {"once": True})
    assert binding.name == "sayHello"
    assert binding.trigger_type == "click"
    assert binding.options == {"once": True}
    assert registry.lookup("sayHello") is binding
    assert "sayHello" in registry


def test_lookup_unknown_name():
    assert EventRegistry().lookup("nope") is None


def test_first_registration_wins():
    registry = EventRegistry()
    first = registry.register("go", "click", handler)
    registry.register("go", "keydown", handler)
    assert len(registry) == 2
    assert registry.lookup("go") is first


def test_on_prefix_is_stripped():
    registry = EventRegistry()
    binding = registry.register("onSayHello", "click", handler)
    assert binding.name == "sayHello"
    assert registry.lookup("sayHello") is binding
    assert registry.lookup("onSayHello") is binding


@pytest.mark.parametrize(
    "name, expected",
    [
        ("onClick", "click"),
        ("on-submit", "submit"),
        ("on_load", "load"),
        ("on:hover", "hover"),
        ("online", "online"),
        ("once", "once"),
        ("sayHello", "sayHello"),
        ("on", "on"),
    ],
)
def test_normalize_name(name, expected):
    assert normalize_name(name) == expected


def test_options_are_copied():
    options = {"once": False}
    binding = EventRegistry().register("go", "click", handler, options)
    options["once"] = True
    assert binding.options == {"once": False}


def test_iteration_in_registration_order():
    registry = EventRegistry()
    registry.register("a", "click", handler)
    registry.register("b", "click", handler)
    assert [b.name for b in registry] == ["a", "b"]
