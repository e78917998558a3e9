"""
Action Registry - Centralized action definitions and validation.

Single source of truth for the fixed action_id enumeration:
1. The parser prompt lists the actions (and their params) from here
2. The executor validates required parameters before launching anything
3. GET /api/actions publishes the catalogue

Usage:
======
```python
from astra.ai.actions.registry import action_registry

if action_registry.is_implemented("play_song"):
    is_valid, error = action_registry.validate("play_song", {"query": "kesariya"})
```
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Set
from enum import Enum

from astra.ai.intent.schemas import ActionId


logger = logging.getLogger("astra.ai.actions.registry")


# ---------------------------------------------------------------------------
# ACTION CATEGORIES
# ---------------------------------------------------------------------------

class ActionCategory(str, Enum):
    """Categories of actions for organization."""
    WEB = "web"           # Websites and web search
    MEDIA = "media"       # Music / video playback
    APPS = "apps"         # Local application launch
    TIME = "time"         # Timers and alarms
    SYSTEM = "system"     # Power and display settings
    INPUT = "input"       # Keyboard input


# ---------------------------------------------------------------------------
# ACTION DEFINITION
# ---------------------------------------------------------------------------

@dataclass
class ActionDefinition:
    """
    Definition of an action Astra can parse.
    
    Attributes:
        name: Unique action identifier (one of ActionId)
        category: Action category
        description: Human-readable description
        required_params: Parameters that must be provided and non-blank
        optional_params: Parameters that may be provided
        examples: Example utterances
        implemented: Whether the executor has a handler for it
    """
    name: str
    category: ActionCategory
    description: str
    required_params: Set[str] = field(default_factory=set)
    optional_params: Set[str] = field(default_factory=set)
    examples: List[str] = field(default_factory=list)
    implemented: bool = False
    
    def validate(self, parameters: Dict[str, Any]) -> tuple[bool, Optional[str]]:
        """
        Validate parameters for this action.
        
        Returns:
            (is_valid, error_message) tuple
        """
        for param in sorted(self.required_params):
            value = parameters.get(param)
            if value is None or not str(value).strip():
                return False, f"Missing required parameter: {param}"
        
        return True, None
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "action_id": self.name,
            "category": self.category.value,
            "description": self.description,
            "required_params": sorted(self.required_params),
            "optional_params": sorted(self.optional_params),
            "examples": list(self.examples),
            "implemented": self.implemented,
        }


# ---------------------------------------------------------------------------
# ACTION REGISTRY
# ---------------------------------------------------------------------------

class ActionRegistry:
    """
    Registry of all actions in the action_id enumeration.
    
    Built once at import time and only read afterwards.
    """
    
    def __init__(self):
        """Initialize the registry with built-in actions."""
        self._actions: Dict[str, ActionDefinition] = {}
        self._register_builtin_actions()
        logger.info(f"Action registry initialized with {len(self._actions)} actions")
    
    def _register_builtin_actions(self):
        """Register all built-in actions."""
        
        # -----------------------------------------------------------------------
        # WEB ACTIONS
        # -----------------------------------------------------------------------
        self.register(ActionDefinition(
            name=ActionId.OPEN_WEBSITE.value,
            category=ActionCategory.WEB,
            description="Open a URL in the default browser",
            required_params={"url"},
            examples=["open youtube", "go to github.com"],
            implemented=True,
        ))
        
        self.register(ActionDefinition(
            name=ActionId.SEARCH_WEB.value,
            category=ActionCategory.WEB,
            description="Run a Google search",
            required_params={"query"},
            examples=["search astra ai", "google weather in delhi"],
            implemented=True,
        ))
        
        # -----------------------------------------------------------------------
        # MEDIA / APP ACTIONS
        # -----------------------------------------------------------------------
        self.register(ActionDefinition(
            name=ActionId.PLAY_SONG.value,
            category=ActionCategory.MEDIA,
            description="Play a song or video on YouTube",
            required_params={"query"},
            examples=["play kesariya", "play lofi beats"],
            implemented=True,
        ))
        
        self.register(ActionDefinition(
            name=ActionId.OPEN_ANY_APP.value,
            category=ActionCategory.APPS,
            description="Launch an installed application by name",
            required_params={"name"},
            examples=["open chrome", "open visual studio code"],
            implemented=True,
        ))
        
        # -----------------------------------------------------------------------
        # NOT YET EXECUTABLE
        # -----------------------------------------------------------------------
        self.register(ActionDefinition(
            name=ActionId.SET_TIMER.value,
            category=ActionCategory.TIME,
            description="Start a countdown timer",
            required_params={"duration"},
            examples=["set timer for 10 seconds"],
        ))
        
        self.register(ActionDefinition(
            name=ActionId.SET_ALARM.value,
            category=ActionCategory.TIME,
            description="Set an alarm for a time of day",
            required_params={"time"},
            optional_params={"label"},
            examples=["wake me up at 7 am"],
        ))
        
        self.register(ActionDefinition(
            name=ActionId.SYSTEM_BRIGHTNESS.value,
            category=ActionCategory.SYSTEM,
            description="Set screen brightness (0-100)",
            required_params={"level"},
            examples=["set brightness to 40"],
        ))
        
        self.register(ActionDefinition(
            name=ActionId.SYSTEM_SHUTDOWN.value,
            category=ActionCategory.SYSTEM,
            description="Shut the computer down",
            examples=["shut down the pc"],
        ))
        
        self.register(ActionDefinition(
            name=ActionId.SYSTEM_REBOOT.value,
            category=ActionCategory.SYSTEM,
            description="Restart the computer",
            examples=["restart my computer"],
        ))
        
        self.register(ActionDefinition(
            name=ActionId.TYPE_TEXT.value,
            category=ActionCategory.INPUT,
            description="Type text into the focused window",
            required_params={"text"},
            examples=["type hello world"],
        ))
    
    # ---------------------------------------------------------------------------
    # REGISTRY OPERATIONS
    # ---------------------------------------------------------------------------
    
    def register(self, action: ActionDefinition) -> None:
        """Register an action in the registry."""
        self._actions[action.name] = action
        logger.debug(f"Registered action: {action.name}")
    
    def get_action(self, name: str) -> Optional[ActionDefinition]:
        """Get an action by name (case-insensitive)."""
        if not name:
            return None
        return self._actions.get(str(name).lower().strip())
    
    def is_implemented(self, name: str) -> bool:
        """Check if the executor can run an action."""
        action = self.get_action(name)
        return action is not None and action.implemented
    
    def validate(self, action_name: str, parameters: Dict[str, Any]) -> tuple[bool, Optional[str]]:
        """
        Validate parameters for an action.
        
        Returns:
            (is_valid, error_message) tuple
        """
        action = self.get_action(action_name)
        
        if not action:
            return False, f"Unknown action: {action_name}"
        
        return action.validate(parameters)
    
    def list_actions(self) -> List[ActionDefinition]:
        """List all registered actions in registration order."""
        return list(self._actions.values())
    
    def describe_for_prompt(self) -> str:
        """
        One line per action for the parser's system prompt, e.g.
        "- play_song: Play a song or video on YouTube. params: query"
        """
        lines = []
        for action in self._actions.values():
            params = sorted(action.required_params) + sorted(action.optional_params)
            param_text = ", ".join(params) if params else "none"
            lines.append(f"- {action.name}: {action.description}. params: {param_text}")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------

action_registry = ActionRegistry()
