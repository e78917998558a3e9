"""
Base AI Provider - Abstract interface for LLM providers.

This module defines the contract every provider follows. The important
part of the contract is that providers NEVER raise: network errors,
timeouts and missing credentials all come back as an AIResponse with
success=False, so callers can fall through to their deterministic tier.

Example:
    provider = GroqProvider()
    response = await provider.generate("Hello, world!")
    print(response.content)
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Any, Dict, List
from enum import Enum
import logging

logger = logging.getLogger("astra.ai")


class ProviderType(str, Enum):
    """Enum of supported AI providers."""
    GROQ = "groq"


@dataclass
class TokenUsage:
    """Token usage statistics for an AI request."""
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    
    def __post_init__(self):
        """Calculate total if not provided."""
        if self.total_tokens == 0:
            self.total_tokens = self.prompt_tokens + self.completion_tokens


@dataclass
class AIResponse:
    """
    Standardized response from a provider.
    
    Attributes:
        content: The generated text response
        provider: Which provider generated this response
        model: The specific model used
        usage: Token usage statistics
        latency_ms: How long the request took
        success: Whether the request succeeded
        error: Error message if failed
        raw_response: Original provider response (for debugging)
        created_at: Timestamp of the response
    """
    content: str
    provider: ProviderType
    model: str
    usage: TokenUsage = field(default_factory=TokenUsage)
    latency_ms: float = 0.0
    success: bool = True
    error: Optional[str] = None
    raw_response: Optional[Any] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "content": self.content[:100] + "..." if len(self.content) > 100 else self.content,
            "provider": self.provider.value,
            "model": self.model,
            "tokens": {
                "prompt": self.usage.prompt_tokens,
                "completion": self.usage.completion_tokens,
                "total": self.usage.total_tokens,
            },
            "latency_ms": self.latency_ms,
            "success": self.success,
            "error": self.error,
            "created_at": self.created_at.isoformat(),
        }


class AIProvider(ABC):
    """
    Abstract base class for AI providers.
    
    Responsibilities:
    - Generate text from a single prompt (classification, parsing)
    - Continue a multi-turn conversation (chat)
    - Capture errors in the response instead of raising
    """
    
    provider_type: ProviderType
    model: str
    
    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """True when the provider has the credentials it needs."""
    
    @abstractmethod
    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.0,
        max_tokens: int = 256,
        **kwargs
    ) -> AIResponse:
        """
        Generate a single-turn response.
        
        Args:
            prompt: The user's message
            system_prompt: Optional system instructions for the model
            temperature: Creativity level (0=deterministic)
            max_tokens: Maximum tokens in the response
            
        Returns:
            AIResponse with the generated content. Never raises.
        """
    
    @abstractmethod
    async def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: float = 0.2,
        **kwargs
    ) -> AIResponse:
        """
        Generate the next assistant turn for a conversation.
        
        Args:
            messages: Ordered history of {"role", "content"} dicts
            temperature: Creativity level
            
        Returns:
            AIResponse with the reply text. Never raises.
        """
    
    def _measure_latency(self, start_time: float) -> float:
        """Calculate latency in milliseconds."""
        return (time.time() - start_time) * 1000
    
    def _create_error_response(
        self,
        error: str,
        model: str,
        latency_ms: float = 0.0
    ) -> AIResponse:
        """Create a standardized error response."""
        logger.error(f"AI Provider Error [{self.provider_type.value}]: {error}")
        return AIResponse(
            content="",
            provider=self.provider_type,
            model=model,
            latency_ms=latency_ms,
            success=False,
            error=error,
        )
