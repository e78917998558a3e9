"""
Executable Resolver - free-text application name → launchable path.

Tiers (first hit wins, later tiers never run):
=============================================
1. Known table      O(1), no disk access beyond one exists() check
2. Shortcuts        Desktop + Start Menu, curated by installers
3. Deep search      Program Files trees, slowest and noisiest

Scans are synchronous; async callers run resolve() in a worker thread.
"""

import logging
import os
from typing import Callable, List, Mapping, Optional, Sequence

from astra.core.config import settings
from astra.core.tiers import first_success, NEXT_TIER
from astra.resolver.known_apps import KNOWN_APPS
from astra.resolver.locator import (
    EXECUTABLE_EXTENSIONS,
    SHORTCUT_EXTENSIONS,
    iter_candidates,
)
from astra.resolver.matching import fuzzy_match, normalize_name

logger = logging.getLogger("astra.resolver.executables")


def default_shortcut_roots() -> List[str]:
    """Public desktop, user desktop, user Start Menu, shared Start Menu."""
    return [
        os.path.join(os.environ.get("PUBLIC") or r"C:\Users\Public", "Desktop"),
        os.path.join(os.path.expanduser("~"), "Desktop"),
        os.path.join(os.environ.get("APPDATA", ""), "Microsoft", "Windows", "Start Menu", "Programs"),
        os.path.join(os.environ.get("ProgramData") or r"C:\ProgramData", "Microsoft", "Windows", "Start Menu", "Programs"),
    ]


def default_program_roots() -> List[str]:
    """Program Files, Program Files (x86), per-user local programs."""
    local_app_data = os.environ.get("LOCALAPPDATA") or os.path.join(os.path.expanduser("~"), "AppData", "Local")
    return [
        os.environ.get("ProgramFiles") or r"C:\Program Files",
        os.environ.get("ProgramFiles(x86)") or r"C:\Program Files (x86)",
        os.path.join(local_app_data, "Programs"),
    ]


class ExecutableResolver:
    """
    Maps application names to executables or shortcuts.
    
    Usage:
        resolver = ExecutableResolver()
        path = resolver.resolve("visual studio code")
        if path is None:
            ...  # nothing matched
    
    All locations are injectable for testing.
    """
    
    def __init__(
        self,
        known_apps: Optional[Mapping[str, str]] = None,
        shortcut_roots: Optional[Sequence[str]] = None,
        program_roots: Optional[Sequence[str]] = None,
        max_directories: Optional[int] = None,
        path_exists: Callable[[str], bool] = os.path.exists,
    ):
        self.known_apps = KNOWN_APPS if known_apps is None else known_apps
        self._shortcut_roots = shortcut_roots
        self._program_roots = program_roots
        self.max_directories = settings.SCAN_MAX_DIRECTORIES if max_directories is None else max_directories
        self._path_exists = path_exists
    
    @property
    def shortcut_roots(self) -> List[str]:
        if self._shortcut_roots is not None:
            return list(self._shortcut_roots)
        return default_shortcut_roots()
    
    @property
    def program_roots(self) -> List[str]:
        if self._program_roots is not None:
            return list(self._program_roots)
        return default_program_roots()
    
    def resolve(self, name: Optional[str]) -> Optional[str]:
        """
        Resolve an application name to a path.
        
        Returns:
            Absolute path of the executable/shortcut, or None if nothing matched
        """
        key = normalize_name(name)
        if not key:
            return None
        
        path = first_success([
            lambda: self._from_known_table(key),
            lambda: self._from_shortcuts(key),
            lambda: self._from_program_dirs(key),
        ])
        
        if path:
            logger.info(f"Resolved '{name}' → {path}")
        else:
            logger.info(f"No executable found for '{name}'")
        return path
    
    # ---------------------------------------------------------------------------
    # TIERS
    # ---------------------------------------------------------------------------
    
    def _from_known_table(self, key: str) -> Optional[str]:
        path = self.known_apps.get(key)
        if path and self._path_exists(path):
            return path
        return NEXT_TIER
    
    def _from_shortcuts(self, key: str) -> Optional[str]:
        for entry in iter_candidates(self.shortcut_roots, SHORTCUT_EXTENSIONS, self.max_directories):
            if fuzzy_match(entry.stem, key):
                return entry.path
        return NEXT_TIER
    
    def _from_program_dirs(self, key: str) -> Optional[str]:
        for entry in iter_candidates(self.program_roots, EXECUTABLE_EXTENSIONS, self.max_directories):
            if fuzzy_match(entry.name, key):
                return entry.path
        return NEXT_TIER


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
executable_resolver = ExecutableResolver()
