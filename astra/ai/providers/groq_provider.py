"""
Groq Provider - chat-completions client for Astra.

Groq hosts Llama models behind an OpenAI-compatible API, so we reuse the
official OpenAI SDK with Groq's base URL. The small llama-3.1-8b-instant
model is fast enough to sit in front of every command.

Failure policy:
==============
- No retries (max_retries=0): a failed call degrades immediately to the
  caller's fallback tier.
- Bounded timeout (settings.AI_REQUEST_TIMEOUT): a slow call is a failed call.

API Documentation: https://console.groq.com/docs/openai
"""

import time
import logging
from typing import Optional, Dict, List

from openai import AsyncOpenAI

from astra.core.config import settings
from astra.ai.providers.base import (
    AIProvider,
    AIResponse,
    ProviderType,
    TokenUsage
)

logger = logging.getLogger("astra.ai.groq")


class GroqProvider(AIProvider):
    """
    Groq provider implementation.
    
    Usage:
        provider = GroqProvider()
        response = await provider.generate(
            prompt="open chrome",
            system_prompt='Return {"mode":"chat"} or {"mode":"action"} ONLY.',
        )
    """
    
    provider_type = ProviderType.GROQ
    
    def __init__(
        self,
        model: str = None,
        api_key: str = None,
        base_url: str = None,
        timeout: float = None,
    ):
        """
        Initialize the Groq provider.
        
        Args:
            model: Model name (default: settings.GROQ_MODEL)
            api_key: API key (default: settings.GROQ_API_KEY)
            base_url: API root (default: settings.GROQ_BASE_URL)
            timeout: Request timeout in seconds (default: settings.AI_REQUEST_TIMEOUT)
        """
        self.model = model or settings.GROQ_MODEL
        self.api_key = api_key if api_key is not None else settings.GROQ_API_KEY
        self.base_url = base_url or settings.GROQ_BASE_URL
        self.timeout = timeout or settings.AI_REQUEST_TIMEOUT
        
        if self.api_key and self.api_key.strip():
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
            logger.info(f"Groq provider initialized with model: {self.model}")
        else:
            self._client = None
            logger.warning("Groq API key not configured - LLM features disabled")
    
    @property
    def is_configured(self) -> bool:
        return self._client is not None
    
    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.0,
        max_tokens: int = 256,
        **kwargs
    ) -> AIResponse:
        """Generate a single-turn response (system prompt + user prompt)."""
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})
        
        return await self._complete(messages, temperature=temperature, max_tokens=max_tokens)
    
    async def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: float = 0.2,
        **kwargs
    ) -> AIResponse:
        """Forward a whole conversation and return the next assistant turn."""
        return await self._complete(list(messages), temperature=temperature, max_tokens=kwargs.get("max_tokens"))
    
    async def _complete(
        self,
        messages: List[Dict[str, str]],
        temperature: float,
        max_tokens: Optional[int] = None,
    ) -> AIResponse:
        start_time = time.time()
        
        if not self._client:
            return self._create_error_response(
                error="Groq API key not configured",
                model=self.model,
                latency_ms=self._measure_latency(start_time)
            )
        
        try:
            request = {
                "model": self.model,
                "messages": messages,
                "temperature": temperature,
            }
            if max_tokens:
                request["max_tokens"] = max_tokens
            
            response = await self._client.chat.completions.create(**request)
            
            latency_ms = self._measure_latency(start_time)
            
            content = ""
            if response.choices:
                content = response.choices[0].message.content or ""
            
            usage = TokenUsage(
                prompt_tokens=response.usage.prompt_tokens if response.usage else 0,
                completion_tokens=response.usage.completion_tokens if response.usage else 0,
            )
            
            logger.info(f"Groq request completed in {latency_ms:.0f}ms, tokens: {usage.total_tokens}")
            
            return AIResponse(
                content=content,
                provider=self.provider_type,
                model=self.model,
                usage=usage,
                latency_ms=latency_ms,
                success=True,
                raw_response=response,
            )
            
        except Exception as e:
            latency_ms = self._measure_latency(start_time)
            logger.error(f"Groq completion failed: {e}")
            return self._create_error_response(
                error=str(e),
                model=self.model,
                latency_ms=latency_ms
            )


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
groq_provider = GroqProvider()
