"""Middleware binding the current request for enum request binding."""

from starlette.requests import Request
from starlette.types import ASGIApp, Receive, Scope, Send

from powerenum.core.logging import get_logger
from powerenum.core.request import reset_current_request, set_current_request


class RequestContextMiddleware:
    """
    Bind the incoming request to the current context.

    Lets `PowerEnum.from_request()` resolve input without an explicit
    request argument. The binding is reset once the request completes.
    """

    def __init__(self, app: ASGIApp):
        self.app = app
        self.logger = get_logger(__name__)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Process request with request context binding."""
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        token = set_current_request(Request(scope, receive))
        self.logger.debug("request.bound", method=scope["method"], path=scope["path"])
        try:
            await self.app(scope, receive, send)
        finally:
            reset_current_request(token)
