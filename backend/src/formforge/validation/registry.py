"""Validator registry for formforge.

Maps validator names (as written in a form schema) to predicates. Names are
resolved when a dispatch runs, not when a schema is loaded, so hosts can add
or override validators without touching the schema.
"""

import logging
import threading
from collections.abc import Callable

from formforge.errors import UnregisteredValidator
from formforge.validation.types import Predicate

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """Registry of named validation predicates.

    Re-registering a name replaces the previous predicate (last write wins),
    so a host application can override a built-in such as "isnt-valid-email".

    Writes are serialized with a lock; reads are plain dict lookups. Register
    everything during startup, before dispatching from several threads.

    Example:
        registry = ValidatorRegistry()

        @registry.validator("is-blank")
        def is_blank(value, field):
            return Fail("must not be blank") if not value.strip() else Pass

        predicate = registry.resolve("is-blank")
    """

    def __init__(self) -> None:
        self._validators: dict[str, Predicate] = {}
        self._lock = threading.Lock()

    def register(self, name: str, predicate: Predicate) -> None:
        """Bind a predicate to a name, replacing any existing binding.

        Args:
            name: Validator name as referenced from field ``validations``
            predicate: Callable ``(value, field) -> Outcome``
        """
        if not callable(predicate):
            raise TypeError(f"Validator '{name}' must be callable")
        with self._lock:
            if name in self._validators:
                logger.debug("Overriding validator '%s'", name)
            else:
                logger.debug("Registering validator '%s'", name)
            self._validators[name] = predicate

    def validator(self, name: str) -> Callable[[Predicate], Predicate]:
        """Decorator form of register()."""

        def decorator(fn: Predicate) -> Predicate:
            self.register(name, fn)
            return fn

        return decorator

    def resolve(self, name: str) -> Predicate:
        """Get the predicate bound to a name.

        Raises:
            UnregisteredValidator: If nothing is registered under the name
        """
        try:
            return self._validators[name]
        except KeyError:
            raise UnregisteredValidator(name, self.list_registered()) from None

    def unregister(self, name: str) -> None:
        with self._lock:
            self._validators.pop(name, None)

    def is_registered(self, name: str) -> bool:
        """Check if a validator is registered."""
        return name in self._validators

    def list_registered(self) -> list[str]:
        """List all registered validator names."""
        return sorted(self._validators)

    def clear(self) -> None:
        """Clear all registrations. Primarily for testing."""
        with self._lock:
            self._validators.clear()

    def copy(self) -> "ValidatorRegistry":
        """A new registry with the same bindings."""
        other = ValidatorRegistry()
        with self._lock:
            other._validators = dict(self._validators)
        return other
