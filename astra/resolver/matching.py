"""
Name normalization and fuzzy matching for application names.

Matching is a two-step rule on normalized strings:
1. Containment: "google chrome" contains "chrome"
2. Word subset: every word of the target appears somewhere in the
   candidate, in any order ("code visual studio" vs "visual studio code")
"""

import re
from typing import Optional

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


def normalize_name(value: Optional[str]) -> str:
    """
    Canonicalize text into lowercase words separated by single spaces.
    
    "Microsoft VS-Code.exe" → "microsoft vs code exe"
    """
    if not value:
        return ""
    return " ".join(_NON_ALNUM.sub(" ", str(value)).lower().split())


def fuzzy_match(candidate: Optional[str], target: Optional[str]) -> bool:
    """
    Decide whether ``candidate`` plausibly refers to ``target``.
    
    An empty target never matches, so a blank query cannot select the
    first file on disk.
    """
    normalized_target = normalize_name(target)
    if not normalized_target:
        return False
    
    normalized_candidate = normalize_name(candidate)
    if normalized_target in normalized_candidate:
        return True
    
    return all(word in normalized_candidate for word in normalized_target.split(" "))
