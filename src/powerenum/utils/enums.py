"""Small helpers shared by the mixin, the validation rule and request binding."""

from collections.abc import Iterable
from enum import Enum
from typing import Any


def enum_identity(enum_type: type[Enum]) -> str:
    """Fully qualified name used in error messages and log events."""
    return f"{enum_type.__module__}.{enum_type.__qualname__}"


def normalize_cases(cases: Iterable[Any]) -> tuple[Any, ...]:
    """
    Flatten positional "cases" arguments into a tuple.

    Accepts any mix of single members and sequences of members, so
    `only(A)`, `only(A, B)` and `only([A, B])` all normalize the same way.
    Members of str-backed enums are iterable strings; they are never
    unpacked.
    """
    flat: list[Any] = []
    for item in cases:
        if item is None:
            continue
        if isinstance(item, (Enum, str, bytes)) or not isinstance(item, Iterable):
            flat.append(item)
        else:
            flat.extend(item)
    return tuple(flat)
