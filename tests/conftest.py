"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - notifications: Collects notifications emitted by a session
    - stub_resolver: Resolver returning a fixed answer
    - gated_resolver: Resolver whose outcome the test releases by hand
    - answering_service: FastAPI stand-in for the remote answering service
    - service_transport: ASGI transport routing httpx calls to that stand-in
    - async_client: HTTPX client for the host app
"""

import asyncio
from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from httpx import ASGITransport, AsyncClient

from src.api import app
from src.models.schemas import Notification


class StubResolver:
    """Returns ``answer`` or raises ``error`` and records every query."""

    def __init__(self, answer: str = "Hi there", error: Exception | None = None) -> None:
        self.answer = answer
        self.error = error
        self.calls: list[str] = []

    async def resolve(self, query: str) -> str:
        self.calls.append(query)
        if self.error is not None:
            raise self.error
        return self.answer


class GatedResolver:
    """Blocks inside ``resolve`` until the test releases or fails it."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.started = asyncio.Event()
        self._gate: asyncio.Future[str] | None = None

    async def resolve(self, query: str) -> str:
        self.calls.append(query)
        self._gate = asyncio.get_running_loop().create_future()
        self.started.set()
        return await self._gate

    def release(self, answer: str) -> None:
        assert self._gate is not None
        self._gate.set_result(answer)

    def fail(self, error: Exception) -> None:
        assert self._gate is not None
        self._gate.set_exception(error)


def build_answering_service() -> FastAPI:
    """Minimal answering service with a few scripted misbehaviours.

    Query values select the behaviour:
        - "crash": HTTP 500
        - "not-json": plain-text body
        - "no-answer": JSON without an ``answer`` field
        - anything else: ``{"answer": "You asked: <query>"}``
    """
    service = FastAPI()

    @service.get("/chat")
    async def chat(query: str):
        if query == "crash":
            raise HTTPException(status_code=500, detail="Internal error")
        if query == "not-json":
            return PlainTextResponse("definitely not json")
        if query == "no-answer":
            return {"result": "missing the answer field"}
        return {"answer": f"You asked: {query}"}

    return service


@pytest.fixture
def notifications() -> list[Notification]:
    """Collected notifications, in emission order."""
    return []


@pytest.fixture
def stub_resolver() -> StubResolver:
    return StubResolver()


@pytest.fixture
def gated_resolver() -> GatedResolver:
    return GatedResolver()


@pytest.fixture
def answering_service() -> FastAPI:
    return build_answering_service()


@pytest.fixture
def service_transport(answering_service: FastAPI) -> ASGITransport:
    """Route httpx requests to the in-process answering service."""
    return ASGITransport(app=answering_service)


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for the host app.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
