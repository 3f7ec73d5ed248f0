"""Lookup, filtering and presentation helpers for Python enums."""

from powerenum.core.errors import (
    AppError,
    ErrorDetail,
    InvalidNameError,
    NoRequestError,
    ValidationError,
)
from powerenum.core.exception_handlers import register_exception_handlers
from powerenum.core.request import enum_param
from powerenum.core.validation import EnumRule
from powerenum.middleware.request import RequestContextMiddleware
from powerenum.mixin import PowerEnum

__all__ = [
    "AppError",
    "EnumRule",
    "ErrorDetail",
    "InvalidNameError",
    "NoRequestError",
    "PowerEnum",
    "RequestContextMiddleware",
    "ValidationError",
    "enum_param",
    "register_exception_handlers",
]
