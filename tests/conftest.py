# File: tests/conftest.py
"""Pytest configuration and fixtures."""

from typing import Optional

import pytest_asyncio
from fastapi import Depends, FastAPI
from httpx import ASGITransport, AsyncClient

from powerenum import RequestContextMiddleware, enum_param, register_exception_handlers
from tests.enums import SocialLink, Status, Type


def create_test_app() -> FastAPI:
    """Small FastAPI app exercising the request glue."""
    app = FastAPI(title="powerenum test app")
    register_exception_handlers(app)
    app.add_middleware(RequestContextMiddleware)

    @app.get("/status")
    async def read_status():
        status = Status.from_request("status", default=Status.Draft)
        return {"status": status.value}

    @app.post("/status")
    async def submit_status():
        status = await Status.afrom_request("status")
        return {"status": status.value if status else None}

    @app.post("/depends")
    async def submit_depends(
        status: Optional[Status] = Depends(enum_param(Status, "status")),
    ):
        return {"status": status.value if status else None}

    @app.get("/type")
    async def read_type():
        member = Type.from_request("type")
        return {"type": member.name if member else None}

    @app.get("/links/{link}")
    async def read_link(link: str):
        member = SocialLink.from_request("link")
        return {"link": member.value if member else None}

    @app.get("/depends")
    async def read_depends(
        status: Optional[Status] = Depends(enum_param(Status, "status", Status.Hidden)),
    ):
        return {"status": status.value}

    @app.get("/by-name/{name}")
    async def read_by_name(name: str):
        return {"status": Status.from_name(name).value}

    @app.get("/validate")
    async def validate(value: str):
        member = Status.rule().except_(Status.Hidden).validate(value)
        return {"status": member.value}

    return app


@pytest_asyncio.fixture
async def client():
    """Create test client for the test app."""
    app = create_test_app()

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
