"""
Resolver Module - maps a spoken application name to a launchable path.

Problem it Solves:
=================
Users say things like:
- "chrome"
- "visual studio code"
- "Code Visual Studio"

We need to turn these into something the shell can start, e.g.
C:\\Program Files\\Google\\Chrome\\Application\\chrome.exe or a Start Menu
shortcut.

Search order (first hit wins):
=============================
1. Known table (no disk scan)
2. Desktop and Start Menu shortcuts
3. Deep search of the program directories for .exe files
"""

from astra.resolver.matching import normalize_name, fuzzy_match
from astra.resolver.locator import ShortcutEntry, list_candidates, iter_candidates
from astra.resolver.executables import ExecutableResolver, executable_resolver

__all__ = [
    "normalize_name",
    "fuzzy_match",
    "ShortcutEntry",
    "list_candidates",
    "iter_candidates",
    "ExecutableResolver",
    "executable_resolver",
]
