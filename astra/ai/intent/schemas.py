"""
Intent Schemas - Pydantic models for the intent-to-action pipeline.

Design Philosophy:
=================
- Actions are immutable once created (frozen models)
- Validation at construction time
- Easy serialization to the JSON shapes the front-end expects
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IntentMode(str, Enum):
    """
    Coarse routing decision for an utterance.
    
    CHAT: answer conversationally
    ACTION: parse into an Action and execute it
    """
    CHAT = "chat"
    ACTION = "action"


class ActionId(str, Enum):
    """
    Every action the parser may emit.
    
    Only OPEN_WEBSITE, OPEN_ANY_APP, PLAY_SONG and SEARCH_WEB are
    executable; the others are accepted by the parser and reported as
    unknown_action at execution time.
    """
    OPEN_WEBSITE = "open_website"
    OPEN_ANY_APP = "open_any_app"
    PLAY_SONG = "play_song"
    SEARCH_WEB = "search_web"
    SET_TIMER = "set_timer"
    SET_ALARM = "set_alarm"
    SYSTEM_BRIGHTNESS = "system_brightness"
    SYSTEM_SHUTDOWN = "system_shutdown"
    SYSTEM_REBOOT = "system_reboot"
    TYPE_TEXT = "type_text"


class ErrorKind(str, Enum):
    """Typed failure reasons returned by the executor."""
    INVALID_ACTION = "invalid_action"      # malformed input to the executor
    UNKNOWN_ACTION = "unknown_action"      # well-formed but unsupported action_id
    NOT_FOUND = "not_found"                # resolution produced no candidate
    EXECUTION_FAILED = "execution_failed"  # launch attempt raised


class Action(BaseModel):
    """
    A structured instruction produced by parsing an utterance.
    
    Examples:
    - "play kesariya" → {"action_id": "play_song", "params": {"query": "kesariya"}}
    - "open chrome"   → {"action_id": "open_any_app", "params": {"name": "chrome"}}
    """
    model_config = ConfigDict(frozen=True)
    
    action_id: ActionId = Field(description="Which action to perform")
    params: Dict[str, str] = Field(default_factory=dict, description="Action parameters")
    
    @field_validator("params", mode="before")
    @classmethod
    def _coerce_params(cls, value: Any) -> Dict[str, str]:
        # Models sometimes return numbers or nulls as parameter values
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValueError("params must be an object")
        return {str(k): str(v) for k, v in value.items() if v is not None}


class IntentDecision(BaseModel):
    """Result of intent classification."""
    mode: IntentMode = IntentMode.CHAT


class ActionResult(BaseModel):
    """
    Uniform result of executing an action.
    
    Success serializes to {"ok": true}; failure to
    {"error": "<kind>", "details": "..."} (details omitted when absent).
    """
    ok: Optional[bool] = None
    error: Optional[ErrorKind] = None
    details: Optional[str] = None
    
    @classmethod
    def success(cls) -> "ActionResult":
        return cls(ok=True)
    
    @classmethod
    def failure(cls, kind: ErrorKind, details: Optional[str] = None) -> "ActionResult":
        return cls(error=kind, details=details)
    
    @property
    def is_ok(self) -> bool:
        return bool(self.ok) and self.error is None
    
    def to_response(self) -> Dict[str, Any]:
        """JSON-ready dict without unset fields."""
        return self.model_dump(mode="json", exclude_none=True)
