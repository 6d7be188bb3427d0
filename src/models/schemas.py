from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, model_validator


class Sender(str, Enum):
    """Who authored a transcript entry."""

    USER = "user"
    BOT = "bot"


class Message(BaseModel):
    """A single entry in the chat transcript.

    Attributes:
        id: Strictly increasing identifier, unique within a session.
        sender: Author of the message.
        content: Message text. User messages must contain non-blank text.
        created_at: Creation time, used for display only.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0)
    sender: Sender
    content: str
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def reject_blank_user_content(self) -> "Message":
        """User messages cannot be empty or whitespace-only."""
        if self.sender is Sender.USER and not self.content.strip():
            raise ValueError("User message content must not be blank")
        return self


class Notification(BaseModel):
    """Transient, dismissible notice shown beside the transcript.

    Attributes:
        title: Short heading.
        description: Diagnostic detail for the user.
        variant: Visual severity of the toast.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"


class ChatAnswer(BaseModel):
    """Success payload returned by the answering service."""

    answer: StrictStr
