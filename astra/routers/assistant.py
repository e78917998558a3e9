"""
Assistant Router - HTTP surface of the intent-to-action pipeline.

Endpoints:
=========
POST /api/intent         {text}            → {mode}
POST /api/chat           {messages}        → {reply}
POST /api/parseAction    {text}            → {action}
POST /api/executeAction  {action}          → {ok} | {error, details?}
POST /api/command        {text, history?}  → full pipeline result
GET  /api/actions                          → action catalogue

All business logic lives in the services; this file only translates
between HTTP and service calls. Execution failures are normal 200
responses carrying an error kind, so clients can branch on them.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from astra.ai.actions.registry import action_registry
from astra.ai.intent.classifier import intent_classifier
from astra.ai.intent.parser import action_parser
from astra.ai.intent.schemas import Action, IntentMode
from astra.services.action_executor import action_executor
from astra.services.assistant_service import assistant_service
from astra.services.chat_service import chat_service


# ---------------------------------------------------------------------------
# LOGGER SETUP
# ---------------------------------------------------------------------------
logger = logging.getLogger("astra.routers.assistant")


# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/api", tags=["assistant"])


# ---------------------------------------------------------------------------
# REQUEST/RESPONSE SCHEMAS
# ---------------------------------------------------------------------------

class TextRequest(BaseModel):
    """
    Request carrying one utterance.
    
    Example:
    {
        "text": "play kesariya"
    }
    """
    text: str = Field(default="", description="What the user said or typed")


class ChatMessage(BaseModel):
    role: str = Field(description="system, user or assistant")
    content: str = Field(default="")


class ChatRequest(BaseModel):
    messages: List[ChatMessage] = Field(default_factory=list, description="Conversation so far, oldest first")


class ExecuteRequest(BaseModel):
    """
    Request to execute an action.
    
    ``action`` is accepted as raw JSON so malformed actions come back as
    {"error": "invalid_action"} rather than a validation error.
    """
    action: Optional[Any] = None


class CommandRequest(BaseModel):
    text: str = Field(default="")
    history: List[ChatMessage] = Field(default_factory=list)


class IntentResponse(BaseModel):
    mode: IntentMode


class ChatResponse(BaseModel):
    reply: str


class ParseActionResponse(BaseModel):
    action: Action


# ---------------------------------------------------------------------------
# ENDPOINTS
# ---------------------------------------------------------------------------

@router.post("/intent", response_model=IntentResponse)
async def classify_intent(request: TextRequest):
    """Classify an utterance as chat or action."""
    decision = await intent_classifier.classify(request.text)
    return IntentResponse(mode=decision.mode)


@router.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest):
    """Reply to a conversation."""
    messages = [m.model_dump() for m in request.messages]
    reply = await chat_service.reply(messages)
    return ChatResponse(reply=reply)


@router.post("/parseAction", response_model=ParseActionResponse)
async def parse_action(request: TextRequest):
    """Parse an action-mode utterance into {action_id, params}."""
    action = await action_parser.parse(request.text)
    return ParseActionResponse(action=action)


@router.post("/executeAction")
async def execute_action(request: ExecuteRequest) -> Dict[str, Any]:
    """
    Execute a parsed action.
    
    **Examples:**
    - {"action": {"action_id": "search_web", "params": {"query": "astra ai"}}} → {"ok": true}
    - {"action": {"action_id": "set_timer", "params": {}}} → {"error": "unknown_action"}
    - {"action": null} → {"error": "invalid_action"}
    """
    result = await action_executor.execute(request.action)
    return result.to_response()


@router.post("/command")
async def run_command(request: CommandRequest) -> Dict[str, Any]:
    """
    Run the whole pipeline for one utterance.
    
    Chat-mode input returns the reply plus the updated history; action-mode
    input returns the parsed action, its result and a short message.
    """
    history = [m.model_dump() for m in request.history]
    result = await assistant_service.handle(request.text, history=history)
    return result.to_dict()


@router.get("/actions")
async def list_actions() -> Dict[str, Any]:
    """List every action the parser can produce and whether it is executable."""
    return {"actions": [a.to_dict() for a in action_registry.list_actions()]}
