"""Exception handlers for FastAPI applications using powerenum."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from powerenum.core.errors import AppError
from powerenum.core.logging import get_logger

logger = get_logger(__name__)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """
    Handle all AppError exceptions and convert to JSON response.

    Returns standardized error format:
    {
        "code": "INVALID_NAME",
        "message": "\"Archived\" is not a valid backing name for enum \"app.enums.Status\"",
        "details": {"name": "Archived", "enum": "app.enums.Status"}
    }
    """
    logger.info(
        "http.app_error",
        code=exc.code,
        status_code=exc.status_code,
        path=request.url.path,
    )
    error_response = exc.to_response()
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register powerenum exception handlers with a FastAPI app."""
    app.add_exception_handler(AppError, app_error_handler)
