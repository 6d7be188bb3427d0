"""FastAPI host for the chat front-end.

Endpoints:
    - GET /health: Service health status

NiceGUI pages are mounted onto this app at start-up (see ``src.main``).
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
