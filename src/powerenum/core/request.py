"""Current-request context and request-to-enum binding."""

import contextvars
from enum import Enum
from typing import Awaitable, Callable, Optional, TypeVar

from starlette.requests import Request

from powerenum.core.errors import NoRequestError
from powerenum.core.logging import get_logger
from powerenum.utils.enums import enum_identity

logger = get_logger(__name__)

E = TypeVar("E", bound=Enum)

# Set per request by RequestContextMiddleware (safe across asyncio tasks)
request_var: contextvars.ContextVar[Optional[Request]] = contextvars.ContextVar(
    "powerenum_request", default=None
)


def get_current_request() -> Optional[Request]:
    """Get the request bound to the current context, if any."""
    return request_var.get()


def set_current_request(request: Optional[Request]) -> contextvars.Token:
    """Bind a request to the current context. Returns a token for reset."""
    return request_var.set(request)


def reset_current_request(token: contextvars.Token) -> None:
    """Restore the request binding that was active before set_current_request."""
    request_var.reset(token)


def read_input(request: Request, key: str) -> Optional[str]:
    """Read a raw input value from query params, then path params."""
    raw = request.query_params.get(key)
    if raw is None:
        raw = request.path_params.get(key)
    if raw is None:
        return None
    return str(raw)


def coerce_member(enum_type: type[E], raw: str) -> Optional[E]:
    """
    Match a raw string against an enum.

    Tries backing values first (compared as strings, so "2" matches an
    int-backed member with value 2), then exact member names.
    """
    for member in enum_type:
        if str(member.value) == raw:
            return member
    return enum_type.__members__.get(raw)


async def read_body_input(request: Request, key: str) -> Optional[str]:
    """
    Read a raw input value from a submitted form or a JSON object body.

    Other content types, file uploads and non-object JSON give None.
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form_data = await request.form()
        raw = form_data.get(key)
        return raw if isinstance(raw, str) else None

    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            logger.debug("enum.request.invalid_json", key=key)
            return None
        if isinstance(payload, dict) and payload.get(key) is not None:
            return str(payload[key])

    return None


def _resolve_request(enum_type: type[Enum], key: str, request: Optional[Request]) -> Request:
    if request is None:
        request = get_current_request()
    if request is None:
        raise NoRequestError(f"Cannot bind {enum_type.__name__} from request key '{key}'")
    return request


def _member_or_default(
    enum_type: type[E],
    key: str,
    raw: Optional[str],
    default: Optional[E],
) -> Optional[E]:
    if raw is None or not raw.strip():
        return default

    member = coerce_member(enum_type, raw)
    if member is None:
        logger.debug(
            "enum.request.fallback",
            enum=enum_identity(enum_type),
            key=key,
            raw=raw,
        )
        return default
    return member


def bind_enum(
    enum_type: type[E],
    key: str,
    default: Optional[E] = None,
    request: Optional[Request] = None,
) -> Optional[E]:
    """
    Bind query or path input `key` to a member of `enum_type`.

    Returns `default` when the key is missing, empty or does not match any
    member. Body input needs `abind_enum`.

    Raises:
        NoRequestError: If no request is given and none is bound to the context
    """
    request = _resolve_request(enum_type, key, request)
    return _member_or_default(enum_type, key, read_input(request, key), default)


async def abind_enum(
    enum_type: type[E],
    key: str,
    default: Optional[E] = None,
    request: Optional[Request] = None,
) -> Optional[E]:
    """
    Bind `key` from query params, path params, form fields or a JSON body.

    Lookup stops at the first source that has the key. Pass the endpoint's
    own request when the endpoint also declares body parameters, so the
    body is read through the same (cached) Request.

    Raises:
        NoRequestError: If no request is given and none is bound to the context
    """
    request = _resolve_request(enum_type, key, request)
    raw = read_input(request, key)
    if raw is None:
        raw = await read_body_input(request, key)
    return _member_or_default(enum_type, key, raw, default)


def enum_param(
    enum_type: type[E],
    key: str,
    default: Optional[E] = None,
) -> Callable[[Request], Awaitable[Optional[E]]]:
    """
    Build a FastAPI dependency that binds `key` to a member of `enum_type`.

    Reads query params, path params, then the form or JSON body.

    Usage:
        @router.post("/posts")
        async def create_post(status: Status = Depends(enum_param(Status, "status"))):
            ...
    """

    async def dependency(request: Request) -> Optional[E]:
        return await abind_enum(enum_type, key, default=default, request=request)

    dependency.__name__ = f"bind_{enum_type.__name__.lower()}_{key}"
    return dependency
