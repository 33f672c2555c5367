"""Tests for the built-in validators."""

import pytest

from formforge.schema.types import TextField
from formforge.validation.registry import ValidatorRegistry
from formforge.validation.types import Pass
from formforge.validation.validators import (
    BUILTIN_VALIDATORS,
    EMAIL_PATTERN,
    PHONE_PATTERN,
    builtin_registry,
    is_blank,
    isnt_phone_number,
    isnt_valid_email,
    register_builtin_validators,
)


@pytest.fixture
def field():
    return TextField(name="contact")


class TestIsBlank:
    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_blank_fails(self, field, value):
        outcome = is_blank(value, field)
        assert not outcome.passed
        assert outcome.reason == "contact must not be blank"

    def test_non_blank_passes(self, field):
        assert is_blank("Doe", field) == Pass


class TestIsntPhoneNumber:
    @pytest.mark.parametrize("value", ["555-123-4567", "+1 (555) 123-4567", "5551234567"])
    def test_valid_numbers_pass(self, field, value):
        assert isnt_phone_number(value, field).passed

    @pytest.mark.parametrize("value", ["call me", "555-CALL-NOW", "12-34-56-78-90-12"])
    def test_invalid_numbers_fail(self, field, value):
        outcome = isnt_phone_number(value, field)
        assert not outcome.passed
        assert "phone number" in outcome.reason

    def test_blank_passes(self, field):
        assert isnt_phone_number("", field).passed


class TestIsntValidEmail:
    @pytest.mark.parametrize("value", ["jane@example.com", "j.doe+tag@mail.example.org"])
    def test_valid_emails_pass(self, field, value):
        assert isnt_valid_email(value, field).passed

    @pytest.mark.parametrize("value", ["not-an-email", "jane@", "@example.com", "jane@example"])
    def test_invalid_emails_fail(self, field, value):
        outcome = isnt_valid_email(value, field)
        assert not outcome.passed
        assert "email" in outcome.reason

    def test_blank_passes(self, field):
        assert isnt_valid_email("  ", field).passed


class TestRegistration:
    def test_registers_all_builtins(self):
        registry = register_builtin_validators(ValidatorRegistry())
        assert registry.list_registered() == sorted(BUILTIN_VALIDATORS)
        assert registry.list_registered() == ["is-blank", "isnt-phone-number", "isnt-valid-email"]

    def test_builtin_registry_is_fresh(self):
        first = builtin_registry()
        first.clear()
        assert builtin_registry().is_registered("is-blank")

    def test_host_can_override(self):
        registry = builtin_registry()
        registry.register("isnt-valid-email", lambda value, field: Pass)
        assert registry.resolve("isnt-valid-email")("nope", TextField(name="e")).passed

    def test_patterns_are_exported(self):
        assert EMAIL_PATTERN.match("a@b.co")
        assert PHONE_PATTERN.match("555-123-4567")
