"""
Routers module - API endpoint handlers.

- assistant: intent classification, chat, action parsing/execution and
  the combined /api/command pipeline
"""
