"""Global storage holding one value per type."""

from __future__ import annotations

from typing import Any, Optional, TypeVar

T = TypeVar("T")


class TypeStorage:
    """Holds at most one value for each type, looked up by that type."""

    def __init__(self) -> None:
        self._values: dict[type, Any] = {}

    def store(self, data: Any) -> None:
        """Store data under its type, replacing any older value."""
        self._values[type(data)] = data

    def get(self, kind: type[T]) -> T:
        """Return the value of the given type; KeyError if there is none."""
        try:
            return self._values[kind]
        except KeyError:
            raise KeyError(f"no value of type {kind.__name__} in storage") from None

    def try_get(self, kind: type[T]) -> Optional[T]:
        """Return the value of the given type, or None."""
        return self._values.get(kind)

    def __contains__(self, kind: object) -> bool:
        return kind in self._values


_default = TypeStorage()


def store(data: Any) -> None:
    """Store data in the global storage."""
    _default.store(data)


def get(kind: type[T]) -> T:
    """Fetch a value from the global storage; KeyError if absent."""
    return _default.get(kind)


def try_get(kind: type[T]) -> Optional[T]:
    """Fetch a value from the global storage, or None if absent."""
    return _default.try_get(kind)