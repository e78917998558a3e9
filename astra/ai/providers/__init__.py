"""
AI Providers Module - LLM client used by the classifier, parser and chat.

Groq serves an OpenAI-compatible chat-completions API, so the provider is
a thin wrapper around the official OpenAI SDK pointed at Groq's base URL.

    response = await groq_provider.generate(prompt, system_prompt=...)
    if response.success:
        print(response.content)
"""

from astra.ai.providers.base import AIProvider, AIResponse, ProviderType, TokenUsage
from astra.ai.providers.groq_provider import GroqProvider, groq_provider

__all__ = [
    "AIProvider",
    "AIResponse",
    "ProviderType",
    "TokenUsage",
    "GroqProvider",
    "groq_provider",
]
