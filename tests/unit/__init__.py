"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation
    - chat/: Transcript, classification, resolvers and the session controller

Resolvers are replaced with small in-memory fakes. No network access.
"""
