"""Integration tests for components working together as a system.

Coverage:
    - RemoteResolver with real httpx requests
    - ChatSession driving full request/response cycles
    - Host app endpoints

The answering service is an in-process FastAPI app reached through
ASGITransport, so no external services are required.
"""
