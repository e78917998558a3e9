"""
Action Parser - turns an action-mode utterance into a structured Action.

The parser:
1. Asks the LLM for {"action_id": ..., "params": {...}} (when a key is configured)
2. Validates the reply against the action_id enumeration
3. Falls back to the rule-based parser for anything else

Callers never see a failure: a missing key, a network error, a timeout, a
reply without JSON, or an action_id the model made up all end up in the
rule-based tier.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from astra.ai.providers import groq_provider, AIProvider
from astra.ai.prompts.intent_prompts import build_parse_system_prompt
from astra.ai.actions.registry import action_registry
from astra.ai.intent.fallback import fallback_parse
from astra.ai.intent.json_extract import extract_json_object
from astra.ai.intent.schemas import Action, ActionId
from astra.ai.monitoring import ai_logger, new_request_id
from astra.core.tiers import first_success_async, NEXT_TIER

logger = logging.getLogger("astra.ai.intent.parser")

_ALLOWED_ACTION_IDS = {a.value for a in ActionId}


class ActionParser:
    """
    Parses natural language into an Action.
    
    Usage:
        parser = ActionParser()
        action = await parser.parse("play kesariya")
        # Action(action_id=ActionId.PLAY_SONG, params={"query": "kesariya"})
    """
    
    def __init__(self, provider: Optional[AIProvider] = None):
        """Initialize the parser with the Groq provider."""
        self.provider = provider or groq_provider
        self.system_prompt = build_parse_system_prompt(action_registry.describe_for_prompt())
        logger.info("Action parser initialized")
    
    async def parse(self, text: Optional[str], request_id: Optional[str] = None) -> Action:
        """
        Parse natural language text into an Action. Never raises.
        
        Args:
            text: The user's command
            request_id: Correlation ID for logs
            
        Returns:
            Action from the LLM tier, or from the rule-based parser
        """
        request_id = request_id or new_request_id()
        text = text or ""
        source = "fallback"
        
        async def llm_tier() -> Optional[Action]:
            nonlocal source
            action = await self._parse_with_llm(text, request_id)
            if action is not NEXT_TIER:
                source = "llm"
            return action
        
        async def rule_tier() -> Action:
            return fallback_parse(text)
        
        action = await first_success_async([llm_tier, rule_tier])
        ai_logger.log_action_parsed(request_id, text, action.action_id.value, dict(action.params), source)
        return action
    
    async def _parse_with_llm(self, text: str, request_id: str) -> Optional[Action]:
        if not self.provider.is_configured:
            return NEXT_TIER
        
        ai_logger.log_request(request_id, text, self.provider.provider_type.value, self.provider.model, stage="parse")
        
        try:
            response = await self.provider.generate(
                prompt=text,
                system_prompt=self.system_prompt,
                temperature=0,
            )
        except Exception as e:
            ai_logger.log_error(request_id, str(e), stage="parse")
            return NEXT_TIER
        
        ai_logger.log_response(request_id, response, stage="parse")
        
        if not response.success:
            return NEXT_TIER
        
        return self._action_from_reply(response.content)
    
    def _action_from_reply(self, content: str) -> Optional[Action]:
        """Build an Action from the model reply, or NEXT_TIER if it breaks the contract."""
        data = extract_json_object(content)
        if data is None:
            logger.warning(f"Parser reply had no JSON object: {content[:80]!r}")
            return NEXT_TIER
        
        action_id = str(data.get("action_id") or "").lower().strip()
        if not action_id:
            logger.warning("Parser reply lacks action_id")
            return NEXT_TIER
        
        if action_id not in _ALLOWED_ACTION_IDS:
            logger.warning(f"Parser reply used action outside the enumeration: {action_id}")
            return NEXT_TIER
        
        try:
            return Action(action_id=ActionId(action_id), params=data.get("params"))
        except ValidationError as e:
            logger.warning(f"Parser reply had invalid params: {e}")
            return NEXT_TIER


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
action_parser = ActionParser()
