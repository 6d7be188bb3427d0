"""Conversational session controller.

Owns the transcript and drives one query/answer cycle at a time.

Responsibilities:
    - Append-only transcript with change notifications
    - Pluggable resolvers (local echo or remote HTTP service)
    - Failure taxonomy and classification into user-facing messages
    - In-flight tracking and teardown-safe completion

Has no knowledge of the UI toolkit. The NiceGUI pages only bind to it.
"""

from src.chat.classifier import GENERIC_FAILURE_TEXT, Classification, classify
from src.chat.config import ChatConfig, get_chat_config
from src.chat.errors import (
    ConnectivityFailure,
    PayloadFailure,
    ProtocolFailure,
    ResolverError,
)
from src.chat.resolvers import LocalEchoResolver, RemoteResolver, Resolver
from src.chat.session import ChatSession, Notifier
from src.chat.transcript import TranscriptStore

__all__ = [
    "GENERIC_FAILURE_TEXT",
    "ChatConfig",
    "ChatSession",
    "Classification",
    "ConnectivityFailure",
    "LocalEchoResolver",
    "Notifier",
    "PayloadFailure",
    "ProtocolFailure",
    "RemoteResolver",
    "Resolver",
    "ResolverError",
    "TranscriptStore",
    "classify",
    "get_chat_config",
]
