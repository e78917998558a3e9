"""
Intent Prompts - templates for classification and action parsing.

Both prompts ask for a bare JSON object. Small models still wrap JSON in
prose or code fences now and then, so callers extract the first
brace-delimited object from the reply instead of parsing it whole.
"""

# ---------------------------------------------------------------------------
# CLASSIFICATION
# ---------------------------------------------------------------------------

CLASSIFY_SYSTEM_PROMPT = """You route messages for Astra, a desktop voice assistant.

Decide whether the user wants a conversational answer or wants the computer to DO something
(open an app or website, play music, search the web, set a timer, change a system setting, type text).

Return {"mode":"chat"} or {"mode":"action"} ONLY. No other text."""


# ---------------------------------------------------------------------------
# ACTION PARSING
# ---------------------------------------------------------------------------

PARSE_SYSTEM_PROMPT_TEMPLATE = """You convert desktop assistant commands into JSON.

Return ONLY JSON of the form {{"action_id": "<id>", "params": {{"<name>": "<value>"}}}}.
All param values are strings.

Allowed action_id values:
{actions}

Examples:
"play kesariya" -> {{"action_id": "play_song", "params": {{"query": "kesariya"}}}}
"open chrome" -> {{"action_id": "open_any_app", "params": {{"name": "chrome"}}}}
"search astra ai" -> {{"action_id": "search_web", "params": {{"query": "astra ai"}}}}"""


def build_parse_system_prompt(action_catalogue: str) -> str:
    """
    Build the parser system prompt.
    
    Args:
        action_catalogue: One line per allowed action (see
            ActionRegistry.describe_for_prompt)
    """
    return PARSE_SYSTEM_PROMPT_TEMPLATE.format(actions=action_catalogue)
