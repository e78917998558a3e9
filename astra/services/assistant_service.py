"""
Assistant Service - the full utterance pipeline in one call.

    text ──► IntentClassifier ──► chat   ──► ChatService ──► reply
                              └─► action ──► ActionParser ──► ActionExecutor ──► result

The four building blocks are also exposed on their own (see
routers/assistant.py); this service runs them in sequence for clients
that just want to send what the user said.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from astra.ai.intent.classifier import IntentClassifier, intent_classifier
from astra.ai.intent.parser import ActionParser, action_parser
from astra.ai.intent.schemas import Action, ActionResult, IntentMode
from astra.ai.monitoring import new_request_id
from astra.services.action_executor import ActionExecutor, action_executor
from astra.services.chat_service import ChatService, chat_service

logger = logging.getLogger("astra.services.assistant")

DONE_MESSAGE = "Done."
FAILED_MESSAGE = "I couldn't complete that."


@dataclass
class AssistantResult:
    """
    Result of handling one utterance.
    
    Attributes:
        mode: Which path was taken (chat or action)
        reply: Assistant reply (chat path)
        history: Conversation including the new user and assistant turns (chat path)
        action: Parsed action (action path)
        result: Execution result (action path)
        message: Short spoken-style summary of the outcome (action path)
        processing_time_ms: Processing time in milliseconds
        request_id: Correlation ID shared by every log line of this request
    """
    mode: IntentMode
    reply: Optional[str] = None
    history: List[Dict[str, str]] = field(default_factory=list)
    action: Optional[Action] = None
    result: Optional[ActionResult] = None
    message: Optional[str] = None
    processing_time_ms: float = 0.0
    request_id: str = ""
    
    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "mode": self.mode.value,
            "request_id": self.request_id,
            "processing_time_ms": round(self.processing_time_ms, 2),
        }
        if self.mode == IntentMode.CHAT:
            data["reply"] = self.reply
            data["history"] = self.history
        else:
            data["action"] = self.action.model_dump(mode="json") if self.action else None
            data["result"] = self.result.to_response() if self.result else None
            data["message"] = self.message
        return data


class AssistantService:
    """Runs classify → chat | parse → execute for a single utterance."""
    
    def __init__(
        self,
        classifier: Optional[IntentClassifier] = None,
        parser: Optional[ActionParser] = None,
        executor: Optional[ActionExecutor] = None,
        chat: Optional[ChatService] = None,
    ):
        self.classifier = classifier or intent_classifier
        self.parser = parser or action_parser
        self.executor = executor or action_executor
        self.chat = chat or chat_service
    
    async def handle(
        self,
        text: str,
        history: Optional[Sequence[Dict[str, str]]] = None,
    ) -> AssistantResult:
        request_id = new_request_id()
        start_time = time.time()
        
        decision = await self.classifier.classify(text, request_id=request_id)
        
        if decision.mode == IntentMode.CHAT:
            conversation = [dict(m) for m in (history or [])]
            conversation.append({"role": "user", "content": text})
            reply = await self.chat.reply(conversation, request_id=request_id)
            conversation.append({"role": "assistant", "content": reply})
            return AssistantResult(
                mode=IntentMode.CHAT,
                reply=reply,
                history=conversation,
                processing_time_ms=(time.time() - start_time) * 1000,
                request_id=request_id,
            )
        
        action = await self.parser.parse(text, request_id=request_id)
        result = await self.executor.execute(action, request_id=request_id)
        return AssistantResult(
            mode=IntentMode.ACTION,
            action=action,
            result=result,
            message=DONE_MESSAGE if result.is_ok else FAILED_MESSAGE,
            processing_time_ms=(time.time() - start_time) * 1000,
            request_id=request_id,
        )


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
assistant_service = AssistantService()
