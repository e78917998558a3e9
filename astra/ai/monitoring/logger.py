"""
AI Logger - Structured logging for the intent-to-action pipeline.

This module provides structured logging for every step of a command:
- Model requests and responses (provider, model, tokens, latency)
- Intent classification decisions
- Parsed actions, and which tier produced them (llm or fallback)
- Action execution results
- Errors and failures

Log Format:
==========
Each entry is a single line: a short label followed by a JSON object
carrying the request ID (for tracing), an event name and a timestamp.

    [2026-01-01 12:00:00] INFO [astra.ai] Action Parsed: {"event": "action_parsed", ...}
"""

import json
import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Optional, Dict, Any

from astra.core.config import settings
from astra.ai.providers.base import AIResponse

# Configure the astra root logger once; child loggers (astra.ai.groq,
# astra.resolver, ...) propagate to this handler.
root_logger = logging.getLogger("astra")
root_logger.setLevel(settings.LOG_LEVEL.upper())

if not root_logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

logger = logging.getLogger("astra.ai")


def new_request_id() -> str:
    """Short correlation ID for one request."""
    return uuid.uuid4().hex[:12]


def _preview(text: Optional[str], limit: int = 100) -> str:
    text = text or ""
    return text[:limit] + "..." if len(text) > limit else text


class AILogger:
    """
    Structured logger for AI operations.
    
    Usage:
        ai_logger.log_request(
            request_id="abc123",
            prompt="open chrome",
            provider="groq",
            model="llama-3.1-8b-instant",
        )
        ai_logger.log_response(request_id="abc123", response=ai_response)
    """
    
    def __init__(self):
        self._logger = logger
    
    def log_request(
        self,
        request_id: str,
        prompt: str,
        provider: str,
        model: str,
        stage: Optional[str] = None,
    ) -> None:
        """
        Log a model request.
        
        Args:
            request_id: Unique request identifier
            prompt: The prompt being sent (truncated for privacy)
            provider: AI provider name
            model: Model name
            stage: Pipeline stage (classify, parse, chat)
        """
        log_data = {
            "event": "ai_request",
            "request_id": request_id,
            "stage": stage,
            "provider": provider,
            "model": model,
            "prompt_length": len(prompt or ""),
            "prompt_preview": _preview(prompt),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        
        self._logger.info(f"AI Request: {json.dumps(log_data)}")
    
    def log_response(
        self,
        request_id: str,
        response: AIResponse,
        stage: Optional[str] = None,
    ) -> None:
        """Log a model response; failures are logged at WARNING."""
        log_data = {
            "event": "ai_response",
            "request_id": request_id,
            "stage": stage,
            "provider": response.provider.value if hasattr(response.provider, 'value') else str(response.provider),
            "model": response.model,
            "success": response.success,
            "latency_ms": round(response.latency_ms, 2),
            "tokens": {
                "prompt": response.usage.prompt_tokens,
                "completion": response.usage.completion_tokens,
                "total": response.usage.total_tokens,
            },
            "response_length": len(response.content),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        
        if not response.success:
            log_data["error"] = response.error
        
        level = logging.INFO if response.success else logging.WARNING
        self._logger.log(level, f"AI Response: {json.dumps(log_data)}")
    
    def log_intent(
        self,
        request_id: str,
        original_text: str,
        mode: str,
        source: str,
    ) -> None:
        """
        Log an intent classification.
        
        Args:
            request_id: Request identifier
            original_text: Original user input
            mode: "chat" or "action"
            source: Which tier decided (llm, default)
        """
        log_data = {
            "event": "intent_classified",
            "request_id": request_id,
            "mode": mode,
            "source": source,
            "original_text": _preview(original_text, 50),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        
        self._logger.info(f"Intent Classified: {json.dumps(log_data)}")
    
    def log_action_parsed(
        self,
        request_id: str,
        original_text: str,
        action_id: str,
        params: Dict[str, Any],
        source: str,
    ) -> None:
        """Log a parsed action and the tier (llm, fallback) that produced it."""
        log_data = {
            "event": "action_parsed",
            "request_id": request_id,
            "action_id": action_id,
            "params": params,
            "source": source,
            "original_text": _preview(original_text, 50),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        
        self._logger.info(f"Action Parsed: {json.dumps(log_data)}")
    
    def log_action_executed(
        self,
        request_id: str,
        action_id: Optional[str],
        ok: bool,
        error: Optional[str] = None,
        details: Optional[str] = None,
        processing_time_ms: float = 0.0,
    ) -> None:
        """Log the outcome of an executed action."""
        log_data = {
            "event": "action_executed",
            "request_id": request_id,
            "action_id": action_id,
            "ok": ok,
            "processing_time_ms": round(processing_time_ms, 2),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        
        if error:
            log_data["error"] = error
        if details:
            log_data["details"] = _preview(details, 200)
        
        level = logging.INFO if ok else logging.WARNING
        self._logger.log(level, f"Action Executed: {json.dumps(log_data)}")
    
    def log_error(
        self,
        request_id: str,
        error: str,
        stage: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log an error in the pipeline.
        
        Args:
            request_id: Request identifier
            error: Error message
            stage: Where the error occurred (classify, parse, execute)
            metadata: Additional context
        """
        log_data = {
            "event": "ai_error",
            "request_id": request_id,
            "error": error,
            "stage": stage,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        
        if metadata:
            log_data["metadata"] = metadata
        
        self._logger.error(f"AI Error: {json.dumps(log_data)}")


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
ai_logger = AILogger()
