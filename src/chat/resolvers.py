"""Strategies that turn a user query into an answer.

Two interchangeable resolvers share the ``Resolver`` protocol:

1. **LocalEchoResolver** - No backend at all. Sleeps for a fixed delay and
   returns a canned acknowledgement. Used by the embedded widget.

2. **RemoteResolver** - Issues one ``GET <base>/chat?query=...`` per call and
   returns the ``answer`` field of the JSON body. Transport, status and payload
   problems are raised as the failures in ``src.chat.errors``. No retry, no
   caching.
"""

import asyncio
import logging
from typing import Protocol
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from src.chat.config import DEFAULT_LOCAL_REPLY
from src.chat.errors import ConnectivityFailure, PayloadFailure, ProtocolFailure
from src.models.schemas import ChatAnswer

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves untouched besides alphanumerics and "-_.~"
_QUERY_SAFE_CHARS = "!*'()"


class Resolver(Protocol):
    """Anything that can answer a query asynchronously."""

    async def resolve(self, query: str) -> str: ...


def encode_query(query: str) -> str:
    """Percent-encode a query value the way encodeURIComponent does."""
    return quote(query, safe=_QUERY_SAFE_CHARS)


def _describe_validation_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"])
    if location:
        return f"Unexpected response payload: {location}: {error['msg']}"
    return f"Unexpected response payload: {error['msg']}"


class LocalEchoResolver:
    """Replies with a fixed acknowledgement after a short delay."""

    def __init__(self, delay: float = 1.0, reply: str = DEFAULT_LOCAL_REPLY) -> None:
        self._delay = delay
        self._reply = reply

    async def resolve(self, query: str) -> str:
        await asyncio.sleep(self._delay)
        return self._reply


class RemoteResolver:
    """Fetches answers from the remote answering service over HTTP."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            base_url: Service root, e.g. ``http://localhost:10000``.
            timeout: Seconds to wait for the service. None waits indefinitely.
            transport: Optional httpx transport, used to route requests in tests.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._target = httpx.URL(self._base_url).netloc.decode("ascii")

    def build_url(self, query: str) -> str:
        return f"{self._base_url}/chat?query={encode_query(query)}"

    async def resolve(self, query: str) -> str:
        """Ask the service and return its answer text.

        Args:
            query: The user's message, sent verbatim.

        Returns:
            The ``answer`` field of the response body.

        Raises:
            ConnectivityFailure: No response was received.
            ProtocolFailure: The response status is not 2xx.
            PayloadFailure: The body is not a JSON object with a string ``answer``.
        """
        url = self.build_url(query)
        logger.debug(f"Sending request to: {url}")

        async with httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            try:
                # Header kept for parity with the service's other clients; the GET has no body
                response = await client.get(
                    url, headers={"Content-Type": "application/json"}
                )
            except httpx.RequestError as e:
                logger.warning(f"Request to {self._target} failed: {e!r}")
                raise ConnectivityFailure(self._target) from e

        logger.debug(f"Response status: {response.status_code}")
        if not response.is_success:
            raise ProtocolFailure(response.status_code)

        try:
            payload = ChatAnswer.model_validate_json(response.content)
        except ValidationError as e:
            raise PayloadFailure(_describe_validation_error(e)) from e

        logger.debug(f"Response data: {payload.model_dump()}")
        return payload.answer
