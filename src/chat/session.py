"""Session controller: one request/response cycle at a time.

Owns the transcript, the pending input and the awaiting flag. Each submit
appends the user's message, awaits the resolver, then appends either the
answer or the generic failure text. Failures never escape ``submit``.
"""

import logging
import time
from collections.abc import Callable

from src.chat.classifier import classify
from src.chat.errors import ResolverError
from src.chat.resolvers import Resolver
from src.chat.transcript import TranscriptStore
from src.models.schemas import Message, Notification, Sender

logger = logging.getLogger(__name__)

Notifier = Callable[[Notification], None]


def _discard_notification(notification: Notification) -> None:
    logger.debug(f"Dropping notification: {notification.title}")


class ChatSession:
    """Manages chat state for a user session."""

    def __init__(
        self,
        resolver: Resolver,
        notifier: Notifier | None = None,
        greeting: str | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            resolver: Strategy used to obtain answers.
            notifier: Receives a notification for every failed request.
            greeting: Optional bot message seeded into the transcript.
        """
        self.resolver = resolver
        self.notifier = notifier or _discard_notification
        self.transcript = TranscriptStore()
        self.pending_input: str = ""
        self.is_awaiting_response: bool = False
        self._alive = True
        self._last_id = 0

        if greeting:
            self.transcript.append(self._new_message(Sender.BOT, greeting))

    @property
    def messages(self) -> tuple[Message, ...]:
        return self.transcript.all()

    @property
    def is_alive(self) -> bool:
        return self._alive

    @property
    def can_submit(self) -> bool:
        """Whether the input affordance should be enabled."""
        return self._alive and not self.is_awaiting_response and bool(self.pending_input.strip())

    def close(self) -> None:
        """Tear the session down. Outcomes still in flight are dropped."""
        if self._alive:
            logger.debug("Chat session closed")
        self._alive = False

    def _next_id(self) -> int:
        self._last_id = max(time.time_ns(), self._last_id + 1)
        return self._last_id

    def _new_message(self, sender: Sender, content: str) -> Message:
        return Message(id=self._next_id(), sender=sender, content=content)

    async def submit(self, text: str | None = None) -> None:
        """Send a message and record the outcome.

        Blank input, a request already in flight, or a closed session make
        this a no-op.

        Args:
            text: Message to send. Defaults to ``pending_input``.
        """
        if text is None:
            text = self.pending_input
        if not text.strip() or self.is_awaiting_response or not self._alive:
            return

        self.transcript.append(self._new_message(Sender.USER, text))
        self.pending_input = ""
        self.is_awaiting_response = True

        try:
            answer = await self.resolver.resolve(text)
        except ResolverError as e:
            logger.warning(f"Failed to get a response: {e}")
            self._record_failure(e)
        except Exception as e:
            logger.exception(f"Unexpected error while resolving query: {e}")
            self._record_failure(e)
        else:
            if not self._alive:
                logger.debug("Session closed before the answer arrived; dropping it")
                return
            self.transcript.append(self._new_message(Sender.BOT, answer))
        finally:
            self.is_awaiting_response = False

    def _record_failure(self, error: Exception) -> None:
        if not self._alive:
            logger.debug("Session closed before the failure arrived; dropping it")
            return
        transcript_text, notification = classify(error)
        self.transcript.append(self._new_message(Sender.BOT, transcript_text))
        self.notifier(notification)
