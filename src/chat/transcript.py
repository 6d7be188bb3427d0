"""Append-only transcript of a chat session."""

import logging
from collections.abc import Callable, Iterator

from src.models.schemas import Message

logger = logging.getLogger(__name__)

AppendListener = Callable[[Message], None]


class TranscriptStore:
    """Ordered list of messages exchanged in one session.

    Messages are never mutated or removed once appended. Listeners registered
    with ``on_append`` are called after every append so the presentation layer
    can redraw and scroll to the latest entry.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._listeners: list[AppendListener] = []

    def append(self, message: Message) -> None:
        self._messages.append(message)
        logger.debug(f"Appended {message.sender.value} message {message.id}")
        for listener in self._listeners:
            listener(message)

    def all(self) -> tuple[Message, ...]:
        """Return the messages in insertion order."""
        return tuple(self._messages)

    def on_append(self, listener: AppendListener) -> None:
        """Register a callback invoked after each append."""
        self._listeners.append(listener)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.all())
