"""Chat Playground - conversational front-end for a question-answering service.

Combines NiceGUI for the chat interface, httpx for calls to the answering
service, FastAPI as the hosting app, and Pydantic for data validation.

Components:
    - chat: Session controller, transcript, resolvers, failure classification
    - models: Message and notification schemas
    - ui: Chat widget and playground page
    - api: Host application and health check
"""

__version__ = "0.1.0"
