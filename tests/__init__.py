"""Test package for Chat Playground.

Structure:
    - unit/: Models, config, transcript, classifier, resolvers, session
    - integration/: Real httpx traffic against in-process FastAPI apps

Leverages pytest with pytest-asyncio and pytest-check for soft assertions.
"""
