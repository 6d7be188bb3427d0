"""Pydantic models shared by the chat controller and the UI.

Provides type safety and validation for everything that crosses a seam.

Models:
    - Sender: Message author (user or bot)
    - Message: Immutable transcript entry
    - Notification: Toast payload for the notification collaborator
    - ChatAnswer: Expected success body of the answering service
"""

from src.models.schemas import ChatAnswer, Message, Notification, Sender

__all__ = ["ChatAnswer", "Message", "Notification", "Sender"]
