"""Validation rule for enum-backed input."""

from enum import Enum
from functools import lru_cache
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from powerenum.core.errors import ValidationError
from powerenum.core.logging import get_logger
from powerenum.utils.enums import enum_identity, normalize_cases

logger = get_logger(__name__)

E = TypeVar("E", bound=Enum)


@lru_cache(maxsize=None)
def adapter_for(enum_type: type[Enum]) -> TypeAdapter:
    """Pydantic adapter for an enum type, built once per type."""
    return TypeAdapter(enum_type)


def _matches_any(member: Enum, cases: tuple) -> bool:
    # PowerEnum members compare with is_any, same as only()/except_()
    is_any = getattr(member, "is_any", None)
    if is_any is not None:
        return is_any(cases)
    return any(member is case for case in cases)


class EnumRule(Generic[E]):
    """
    Checks that a value is a member (or backing value) of an enum.

    Rules are immutable: `only()` and `except_()` return a new rule.
    When both restrictions are set, a value must be in `only` and not in
    `except_`.
    """

    def __init__(
        self,
        enum_type: type[E],
        only: tuple[E, ...] = (),
        except_: tuple[E, ...] = (),
    ):
        self.enum_type = enum_type
        self._only = tuple(only)
        self._except = tuple(except_)
        self._adapter: TypeAdapter[E] = adapter_for(enum_type)

    def only(self, *cases: Any) -> "EnumRule[E]":
        """Restrict the rule to the given cases."""
        return EnumRule(self.enum_type, only=normalize_cases(cases), except_=self._except)

    def except_(self, *cases: Any) -> "EnumRule[E]":
        """Reject the given cases."""
        return EnumRule(self.enum_type, only=self._only, except_=normalize_cases(cases))

    def _allowed(self, member: E) -> bool:
        if self._only and not _matches_any(member, self._only):
            return False
        if self._except and _matches_any(member, self._except):
            return False
        return True

    def validate(self, value: Any) -> E:
        """
        Coerce value to a member of the enum.

        Args:
            value: A member or a backing value

        Returns:
            The matching member

        Raises:
            ValidationError: If value is not a member or is excluded by the rule
        """
        enum_name = enum_identity(self.enum_type)
        details = {"enum": enum_name, "value": str(value)}

        try:
            member = self._adapter.validate_python(value)
        except PydanticValidationError as e:
            logger.debug("enum.rule.rejected", reason="invalid", **details)
            raise ValidationError(
                f"The selected value is invalid for {self.enum_type.__name__}",
                details=details,
            ) from e

        if not self._allowed(member):
            logger.debug("enum.rule.rejected", reason="not_allowed", **details)
            raise ValidationError(
                f"The selected value is not allowed for {self.enum_type.__name__}",
                details=details,
            )

        return member

    def passes(self, value: Any) -> bool:
        """Return True if value satisfies the rule."""
        try:
            self.validate(value)
        except ValidationError:
            return False
        return True

    def __repr__(self) -> str:
        return f"EnumRule({self.enum_type.__name__}, only={self._only!r}, except_={self._except!r})"
