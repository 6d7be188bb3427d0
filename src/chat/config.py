"""Chat configuration with environment variable loading.

Pydantic-based configuration for the session controller and its resolvers.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_GREETING = "Hello! How can I help you today?"
DEFAULT_LOCAL_REPLY = (
    "Thanks for your message! I'm here to help you with any questions you might have."
)


class ChatConfig(BaseModel):
    """Configuration for the chat front-end.

    Attributes:
        backend_url: Base URL of the answering service.
        request_timeout: Seconds to wait for the service (None waits indefinitely).
        local_reply_delay: Delay before the local echo reply, in seconds.
        greeting: First bot message shown by the embedded widget.
        local_reply: Canned reply returned by the local echo resolver.
    """

    backend_url: str = Field(
        default_factory=lambda: os.getenv("CHAT_BACKEND_URL", "http://localhost:10000"),
        description="Base URL of the answering service",
    )
    request_timeout: float | None = Field(
        default_factory=lambda: os.getenv("CHAT_REQUEST_TIMEOUT"),
        validate_default=True,
        gt=0,
        description="Request timeout in seconds (None for no timeout)",
    )
    local_reply_delay: float = Field(
        default=1.0,
        ge=0.0,
        description="Delay before the widget's canned reply",
    )
    greeting: str = Field(default=DEFAULT_GREETING, min_length=1)
    local_reply: str = Field(default=DEFAULT_LOCAL_REPLY, min_length=1)

    @field_validator("backend_url")
    @classmethod
    def validate_backend_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                "Backend URL must start with http:// or https://. Set CHAT_BACKEND_URL in .env"
            )
        return v.rstrip("/")

    @field_validator("request_timeout", mode="before")
    @classmethod
    def parse_request_timeout(cls, v: object) -> object:
        """Treat a blank value as no timeout and reject non-numeric text."""
        if not isinstance(v, str):
            return v
        v = v.strip()
        if not v:
            return None
        try:
            return float(v)
        except ValueError:
            raise ValueError(
                f"Request timeout must be a number of seconds, got {v!r}. "
                "Set CHAT_REQUEST_TIMEOUT in .env"
            ) from None


def get_chat_config() -> ChatConfig:
    """Create chat configuration from environment.

    Returns:
        Configured ChatConfig instance.

    Raises:
        ValidationError: If the backend URL or timeout is invalid.
    """
    return ChatConfig()
