"""
Intent Module - understanding what the user asked for.

Example Flow:
============
User says: "play kesariya"

IntentClassifier → {"mode": "action"}
ActionParser     → {"action_id": "play_song", "params": {"query": "kesariya"}}
"""

from astra.ai.intent.schemas import (
    Action,
    ActionId,
    ActionResult,
    ErrorKind,
    IntentDecision,
    IntentMode,
)

__all__ = [
    "Action",
    "ActionId",
    "ActionResult",
    "ErrorKind",
    "IntentDecision",
    "IntentMode",
]
