"""
Pull a JSON object out of free-form model output.
"""

import json
import re
from typing import Any, Dict, Optional

# First {...} block, non-greedy: nested objects are cut at the first "}"
# and fail to parse, which callers treat like any other bad reply.
_FIRST_OBJECT = re.compile(r"\{[\s\S]*?\}")


def extract_first_json_object(content: Optional[str]) -> Optional[Dict[str, Any]]:
    """
    Return the first brace-delimited JSON object in ``content``.
    
    Returns None when there is no such substring, it does not parse, or it
    parses to something other than an object.
    """
    if not content:
        return None
    
    match = _FIRST_OBJECT.search(content)
    if not match:
        return None
    
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError:
        return None
    
    return data if isinstance(data, dict) else None


def extract_json_object(content: Optional[str]) -> Optional[Dict[str, Any]]:
    """
    Like extract_first_json_object, but when the non-greedy match is cut
    short by a nested object, retry with the widest {...} span.
    """
    data = extract_first_json_object(content)
    if data is not None or not content:
        return data
    
    start, end = content.find("{"), content.rfind("}")
    if start == -1 or end <= start:
        return None
    
    try:
        data = json.loads(content[start:end + 1])
    except json.JSONDecodeError:
        return None
    
    return data if isinstance(data, dict) else None
