"""
Rule-based action parser.

This is the last tier of action parsing: it needs no network and never
fails, so every utterance that reaches the action path gets *some*
action. Rules are checked top to bottom against the lowercased text and
the first match wins:

    "play <q>"            → play_song     {query: q}
    "open <name>"         → open_any_app  {name: name}
    ...youtube...         → open_website  {url: https://youtube.com}
    "search|google <q>"   → search_web    {query: q}
    anything else         → open_any_app  {name: <whole text>}

The catch-all turns conversational text that slipped past the classifier
into an app lookup, which usually ends in not_found.

A bare "open " yields an empty name. The executor rejects that as
invalid_action (missing required parameter) before any lookup, so it
never reports not_found for it.
"""

import re
from typing import Optional

from astra.ai.intent.schemas import Action, ActionId

YOUTUBE_URL = "https://youtube.com"

_SEARCH_PREFIX = re.compile(r"^(search|google)\s+", re.IGNORECASE)


def fallback_parse(text: Optional[str]) -> Action:
    """Map an utterance to an Action using fixed prefix rules."""
    text = text or ""
    lowered = text.lower()
    
    if lowered.startswith("play "):
        return Action(action_id=ActionId.PLAY_SONG, params={"query": text[5:].strip()})
    
    if lowered.startswith("open "):
        return Action(action_id=ActionId.OPEN_ANY_APP, params={"name": text[5:].strip()})
    
    if "youtube" in lowered:
        return Action(action_id=ActionId.OPEN_WEBSITE, params={"url": YOUTUBE_URL})
    
    if lowered.startswith("search ") or lowered.startswith("google "):
        return Action(action_id=ActionId.SEARCH_WEB, params={"query": _SEARCH_PREFIX.sub("", text)})
    
    return Action(action_id=ActionId.OPEN_ANY_APP, params={"name": text})
