"""
Chat Service - conversational replies for chat-mode utterances.

The whole history is forwarded to the model; there is no prompt
engineering here beyond what the caller puts in the messages.
"""

import logging
from typing import Dict, List, Optional, Sequence

from astra.core.config import settings
from astra.ai.providers import groq_provider, AIProvider
from astra.ai.monitoring import ai_logger, new_request_id

logger = logging.getLogger("astra.services.chat")

MISSING_KEY_REPLY = "Groq key missing."
FAILURE_REPLY = "Sorry, I couldn't get an answer right now."


class ChatService:
    """Forwards conversation history to the model and returns its reply."""
    
    def __init__(self, provider: Optional[AIProvider] = None):
        self.provider = provider or groq_provider
    
    async def reply(
        self,
        messages: Sequence[Dict[str, str]],
        request_id: Optional[str] = None,
    ) -> str:
        """
        Return the assistant's next message. Never raises.
        
        Args:
            messages: Ordered [{"role": ..., "content": ...}] history
        """
        request_id = request_id or new_request_id()
        
        if not self.provider.is_configured:
            return MISSING_KEY_REPLY
        
        history: List[Dict[str, str]] = [
            {"role": str(m.get("role", "user")), "content": str(m.get("content", ""))}
            for m in messages
        ]
        last_user = next((m["content"] for m in reversed(history) if m["role"] == "user"), "")
        ai_logger.log_request(request_id, last_user, self.provider.provider_type.value, self.provider.model, stage="chat")
        
        try:
            response = await self.provider.chat(history, temperature=settings.CHAT_TEMPERATURE)
        except Exception as e:
            ai_logger.log_error(request_id, str(e), stage="chat")
            return FAILURE_REPLY
        
        ai_logger.log_response(request_id, response, stage="chat")
        
        if not response.success:
            return FAILURE_REPLY
        return response.content


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
chat_service = ChatService()
