"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Floating chat widget with a local canned reply
    - Playground page talking to the remote answering service
    - Typing indicator, scroll-to-latest and error toasts

Contains no business logic. Every action goes through ``ChatSession``.
"""
