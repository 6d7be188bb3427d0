"""Integration tests for a playground session talking to the answering service.

Uses the real ChatSession, RemoteResolver and httpx against the in-process
FastAPI stand-in. No mocks for core functionality.
"""

import httpx
import pytest_check as check
from httpx import ASGITransport

from src.chat.classifier import GENERIC_FAILURE_TEXT
from src.chat.resolvers import RemoteResolver
from src.chat.session import ChatSession
from src.models.schemas import Notification, Sender

BASE_URL = "http://localhost:10000"


def transcript(session: ChatSession) -> list[tuple[Sender, str]]:
    return [(m.sender, m.content) for m in session.messages]


class TestPlaygroundFlow:
    """End-to-end request/response cycles."""

    async def test_answer_is_appended(
        self, service_transport: ASGITransport, notifications: list[Notification]
    ) -> None:
        session = ChatSession(
            RemoteResolver(BASE_URL, transport=service_transport),
            notifier=notifications.append,
        )

        await session.submit("Hello")

        check.equal(
            transcript(session),
            [(Sender.USER, "Hello"), (Sender.BOT, "You asked: Hello")],
        )
        check.is_false(session.is_awaiting_response)
        check.equal(notifications, [])

    async def test_unreachable_backend(self, notifications: list[Notification]) -> None:
        """Connection failure: generic transcript text, Connection Error toast."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        session = ChatSession(
            RemoteResolver(BASE_URL, transport=httpx.MockTransport(handler)),
            notifier=notifications.append,
        )

        await session.submit("Hello")

        check.equal(
            transcript(session),
            [(Sender.USER, "Hello"), (Sender.BOT, GENERIC_FAILURE_TEXT)],
        )
        check.equal(len(notifications), 1)
        check.equal(notifications[0].title, "Connection Error")
        check.is_in("localhost:10000", notifications[0].description)
        check.is_false(session.is_awaiting_response)

    async def test_server_error(
        self, service_transport: ASGITransport, notifications: list[Notification]
    ) -> None:
        """HTTP 500: same transcript text, status code in the toast."""
        session = ChatSession(
            RemoteResolver(BASE_URL, transport=service_transport),
            notifier=notifications.append,
        )

        await session.submit("crash")

        check.equal(session.messages[-1].content, GENERIC_FAILURE_TEXT)
        check.equal(len(notifications), 1)
        check.is_in("500", notifications[0].description)
        check.equal(notifications[0].variant, "destructive")

    async def test_bad_payload_then_recovery(
        self, service_transport: ASGITransport, notifications: list[Notification]
    ) -> None:
        session = ChatSession(
            RemoteResolver(BASE_URL, transport=service_transport),
            notifier=notifications.append,
        )

        await session.submit("no-answer")
        await session.submit("again")

        check.equal(
            [content for _, content in transcript(session)],
            ["no-answer", GENERIC_FAILURE_TEXT, "again", "You asked: again"],
        )
        check.equal(len(notifications), 1)

    async def test_whitespace_only_sends_nothing(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"answer": "unexpected"})

        session = ChatSession(RemoteResolver(BASE_URL, transport=httpx.MockTransport(handler)))

        await session.submit("   ")

        check.equal(session.messages, ())
        check.equal(requests, [])
