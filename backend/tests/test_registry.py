"""Tests for the validator registry."""

import pytest

from formforge.errors import ConfigurationError, UnregisteredValidator
from formforge.schema.types import TextField
from formforge.validation.registry import ValidatorRegistry
from formforge.validation.types import Fail, Pass


@pytest.fixture
def registry():
    return ValidatorRegistry()


def always_pass(value, field):
    return Pass


def always_fail(value, field):
    return Fail("nope")


class TestRegister:
    def test_register_and_resolve(self, registry):
        registry.register("always-pass", always_pass)
        assert registry.resolve("always-pass") is always_pass

    def test_last_write_wins(self, registry):
        registry.register("rule", always_pass)
        registry.register("rule", always_fail)
        assert registry.resolve("rule") is always_fail

    def test_decorator(self, registry):
        @registry.validator("no-digits")
        def no_digits(value, field):
            return Fail("digits") if any(c.isdigit() for c in value) else Pass

        predicate = registry.resolve("no-digits")
        assert predicate is no_digits
        assert predicate("abc", TextField(name="x")).passed
        assert not predicate("a1", TextField(name="x")).passed

    def test_rejects_non_callable(self, registry):
        with pytest.raises(TypeError):
            registry.register("broken", "not a function")  # type: ignore[arg-type]

    def test_registries_are_independent(self):
        first = ValidatorRegistry()
        second = ValidatorRegistry()
        first.register("rule", always_pass)
        assert not second.is_registered("rule")


class TestResolve:
    def test_unregistered_raises(self, registry):
        registry.register("known", always_pass)
        with pytest.raises(UnregisteredValidator) as exc:
            registry.resolve("unknown")
        assert exc.value.name == "unknown"
        assert "known" in str(exc.value)

    def test_unregistered_is_configuration_error(self):
        assert issubclass(UnregisteredValidator, ConfigurationError)

    def test_unregistered_message_with_empty_registry(self, registry):
        with pytest.raises(UnregisteredValidator, match=r"\(none\)"):
            registry.resolve("anything")


class TestHousekeeping:
    def test_list_registered_is_sorted(self, registry):
        registry.register("b", always_pass)
        registry.register("a", always_pass)
        assert registry.list_registered() == ["a", "b"]

    def test_unregister(self, registry):
        registry.register("a", always_pass)
        registry.unregister("a")
        registry.unregister("never-there")
        assert not registry.is_registered("a")

    def test_clear(self, registry):
        registry.register("a", always_pass)
        registry.clear()
        assert registry.list_registered() == []

    def test_copy_is_detached(self, registry):
        registry.register("a", always_pass)
        other = registry.copy()
        other.register("b", always_fail)
        assert registry.list_registered() == ["a"]
        assert other.list_registered() == ["a", "b"]
