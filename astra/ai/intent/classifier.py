"""
Intent Classifier - decides whether an utterance is chat or an action.

Tiers:
=====
1. LLM: one completion constrained to {"mode":"chat"} / {"mode":"action"}
2. Default: {"mode":"chat"}

The default is deliberately "chat": when in doubt Astra talks rather than
launching something on the user's machine. Without a configured API key
the LLM tier is skipped entirely.
"""

import logging
from typing import Optional

from astra.ai.providers import groq_provider, AIProvider
from astra.ai.prompts.intent_prompts import CLASSIFY_SYSTEM_PROMPT
from astra.ai.intent.json_extract import extract_first_json_object
from astra.ai.intent.schemas import IntentDecision, IntentMode
from astra.ai.monitoring import ai_logger, new_request_id
from astra.core.tiers import first_success_async, NEXT_TIER

logger = logging.getLogger("astra.ai.intent.classifier")


class IntentClassifier:
    """
    Binary chat/action classifier.
    
    Usage:
        classifier = IntentClassifier()
        decision = await classifier.classify("open chrome")
        if decision.mode == IntentMode.ACTION:
            ...
    """
    
    def __init__(self, provider: Optional[AIProvider] = None):
        self.provider = provider or groq_provider
    
    async def classify(self, text: Optional[str], request_id: Optional[str] = None) -> IntentDecision:
        """
        Classify text into chat or action mode. Never raises.
        """
        request_id = request_id or new_request_id()
        text = text or ""
        source = "default"
        
        async def llm_tier() -> Optional[IntentDecision]:
            nonlocal source
            decision = await self._classify_with_llm(text, request_id)
            if decision is not NEXT_TIER:
                source = "llm"
            return decision
        
        async def default_tier() -> IntentDecision:
            return IntentDecision(mode=IntentMode.CHAT)
        
        decision = await first_success_async([llm_tier, default_tier])
        ai_logger.log_intent(request_id, text, decision.mode.value, source)
        return decision
    
    async def _classify_with_llm(self, text: str, request_id: str) -> Optional[IntentDecision]:
        if not self.provider.is_configured:
            return NEXT_TIER
        
        ai_logger.log_request(request_id, text, self.provider.provider_type.value, self.provider.model, stage="classify")
        
        try:
            response = await self.provider.generate(
                prompt=text,
                system_prompt=CLASSIFY_SYSTEM_PROMPT,
                temperature=0,
            )
        except Exception as e:
            ai_logger.log_error(request_id, str(e), stage="classify")
            return NEXT_TIER
        
        ai_logger.log_response(request_id, response, stage="classify")
        
        if not response.success:
            return NEXT_TIER
        
        data = extract_first_json_object(response.content)
        if data is None:
            logger.warning(f"Classifier reply had no JSON object: {response.content[:80]!r}")
            return NEXT_TIER
        
        mode = str(data.get("mode", "")).lower().strip()
        if mode not in (IntentMode.CHAT.value, IntentMode.ACTION.value):
            logger.warning(f"Classifier returned unrecognised mode: {mode!r}")
            return NEXT_TIER
        
        return IntentDecision(mode=IntentMode(mode))


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
intent_classifier = IntentClassifier()
