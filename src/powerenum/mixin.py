"""
PowerEnum mixin for Python enums.

Adds lookup, filtering and presentation helpers to any `enum.Enum`:

    class Status(PowerEnum, str, Enum):
        Published = "published"
        Hidden = "hidden"
        Draft = "draft"

    Status.names()                     # ["Published", "Hidden", "Draft"]
    Status.options(except_=Status.Draft)  # {"published": "Published", "hidden": "Hidden"}
    Status.Draft.is_any(Status.Hidden, Status.Draft)  # True

The mixin must come before the data type and `Enum` in the bases.
`Status.count()` counts members; on a member, `count` is still the data
type's own method, so `Status.Draft.count("a")` behaves like `str.count`.
"""

from typing import Any, Optional

from starlette.requests import Request

from powerenum.core.errors import InvalidNameError
from powerenum.core.request import abind_enum, bind_enum
from powerenum.core.validation import EnumRule
from powerenum.utils.enums import enum_identity, normalize_cases
from powerenum.utils.strings import headline


class _MemberCount:
    """
    `count` that means "number of members" on the enum class only.

    Member access falls through to the data type (e.g. `str.count`), and
    raises AttributeError when the data type has no `count`.
    """

    def __get__(self, instance: Any, owner: type) -> Any:
        if instance is None:

            def count() -> int:
                return len(owner.cases())

            return count

        data_count = getattr(owner._member_type_, "count", None)
        if data_count is None:
            raise AttributeError(f"'{owner.__name__}' member has no attribute 'count'")
        return data_count.__get__(instance, owner)


class PowerEnum:
    """Query, filter and presentation helpers for enum classes."""

    # Lookup

    @classmethod
    def from_name(cls, name: str) -> Any:
        """
        Get a member by its exact (case-sensitive) name.

        Raises:
            InvalidNameError: If no member has that name
        """
        member = cls.try_from_name(name)
        if member is None:
            raise InvalidNameError(str(name), enum_identity(cls))
        return member

    @classmethod
    def try_from_name(cls, name: str) -> Optional[Any]:
        """Get a member by its exact name, or None."""
        return cls.__members__.get(name)

    # Listing

    @classmethod
    def cases(cls) -> list[Any]:
        """All members in declaration order."""
        return list(cls)

    count = _MemberCount()

    @classmethod
    def collect(cls) -> list[Any]:
        """Fresh list of all members; callers may mutate it freely."""
        return cls.cases()

    @classmethod
    def _select(cls, only: Any = None, except_: Any = None) -> list[Any]:
        # `only` wins over `except_`; empty selections mean "no filter"
        only_cases = normalize_cases((only,))
        if only_cases:
            return cls.only(only_cases)

        except_cases = normalize_cases((except_,))
        if except_cases:
            return cls.except_(except_cases)

        return cls.cases()

    @classmethod
    def names(cls, only: Any = None, except_: Any = None) -> list[str]:
        """Member names, optionally restricted with `only` or `except_`."""
        return [member.name for member in cls._select(only, except_)]

    @classmethod
    def values(cls, only: Any = None, except_: Any = None) -> list[Any]:
        """Member values, optionally restricted with `only` or `except_`."""
        return [member.value for member in cls._select(only, except_)]

    @classmethod
    def options(cls, only: Any = None, except_: Any = None) -> dict[Any, str]:
        """
        Map of value -> label for rendering select inputs.

        Args:
            only: Member or sequence of members to include
            except_: Member or sequence of members to exclude (ignored if `only` is given)

        Returns:
            Dict in declaration order. Duplicate values keep the last label.
        """
        return {member.value: member.label for member in cls._select(only, except_)}

    @classmethod
    def choices(cls, only: Any = None, except_: Any = None) -> list[tuple[Any, str]]:
        """`options()` as (value, label) pairs for form select fields."""
        return list(cls.options(only, except_).items())

    # Filtering

    @classmethod
    def only(cls, *cases: Any) -> list[Any]:
        """
        Members matching any of the given cases.

        Accepts `only(A)`, `only(A, B)` or `only([A, B])`. The result keeps
        declaration order, not argument order.
        """
        wanted = normalize_cases(cases)
        return [member for member in cls.cases() if member.is_any(wanted)]

    @classmethod
    def except_(cls, *cases: Any) -> list[Any]:
        """Members matching none of the given cases, in declaration order."""
        unwanted = normalize_cases(cases)
        return [member for member in cls.cases() if member.is_not_any(unwanted)]

    # Comparison

    def is_(self, other: Any) -> bool:
        """True if other is a member of the same enum with the same value."""
        return isinstance(other, type(self)) and self.value == other.value

    def is_not(self, other: Any) -> bool:
        return not self.is_(other)

    def is_any(self, *cases: Any) -> bool:
        """Check if this member is any of the given cases."""
        return any(self.is_(case) for case in normalize_cases(cases))

    def is_not_any(self, *cases: Any) -> bool:
        """Check if this member is NOT any of the given cases."""
        return not self.is_any(*cases)

    # Presentation

    @property
    def label(self) -> str:
        """Display label. Override in an enum to supply explicit labels."""
        return headline(self.name)

    # Framework glue

    @classmethod
    def rule(cls) -> EnumRule:
        """Validation rule accepting members or backing values of this enum."""
        return EnumRule(cls)

    @classmethod
    def from_request(
        cls,
        key: str,
        default: Optional[Any] = None,
        request: Optional[Request] = None,
    ) -> Optional[Any]:
        """
        Bind query or path input `key` to a member, or return `default`.

        Uses the given request, else the one bound by RequestContextMiddleware.
        """
        return bind_enum(cls, key, default=default, request=request)

    @classmethod
    async def afrom_request(
        cls,
        key: str,
        default: Optional[Any] = None,
        request: Optional[Request] = None,
    ) -> Optional[Any]:
        """Like `from_request`, also reading form fields and JSON bodies."""
        return await abind_enum(cls, key, default=default, request=request)
