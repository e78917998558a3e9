"""
Filesystem Locator - enumerate launchable files under a set of roots.

Each root is walked depth-first with an explicit stack (no recursion, so
deep program trees cannot hit the recursion limit). Missing roots are
skipped and a directory that cannot be listed is skipped without
aborting the rest of the walk.

Result order follows the stack: entries of the most recently listed
directory come out first, so callers must only rely on "first match wins".
"""

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence

logger = logging.getLogger("astra.resolver.locator")

SHORTCUT_EXTENSIONS = (".lnk", ".url", ".exe", ".appref-ms")
EXECUTABLE_EXTENSIONS = (".exe",)


@dataclass(frozen=True)
class ShortcutEntry:
    """A launchable file found during a scan."""
    path: str
    name: str
    
    @property
    def stem(self) -> str:
        """File name with everything from the first dot removed."""
        return self.name.split(".", 1)[0]


def iter_candidates(
    roots: Iterable[str],
    extensions: Sequence[str] = SHORTCUT_EXTENSIONS,
    max_directories: Optional[int] = None,
) -> Iterator[ShortcutEntry]:
    """
    Lazily yield files under ``roots`` whose name ends with one of ``extensions``.
    
    Args:
        roots: Directories to scan, in order
        extensions: Lowercase suffixes to collect
        max_directories: Optional cap on directories visited per root
            (None or 0 means unbounded)
    """
    suffixes = tuple(ext.lower() for ext in extensions)
    
    for root in roots:
        if not root or not os.path.isdir(root):
            continue
        
        stack = [root]
        visited = 0
        while stack:
            if max_directories and visited >= max_directories:
                logger.warning(f"Stopped scanning {root} after {visited} directories")
                break
            
            current = stack.pop()
            visited += 1
            try:
                with os.scandir(current) as it:
                    entries = list(it)
            except OSError as e:
                logger.debug(f"Skipping unreadable directory {current}: {e}")
                continue
            
            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=False):
                        stack.append(entry.path)
                    elif entry.is_file() and entry.name.lower().endswith(suffixes):
                        yield ShortcutEntry(path=entry.path, name=entry.name)
                except OSError:
                    continue


def list_candidates(
    roots: Iterable[str],
    extensions: Sequence[str] = SHORTCUT_EXTENSIONS,
    max_directories: Optional[int] = None,
) -> List[ShortcutEntry]:
    """Eager form of iter_candidates."""
    return list(iter_candidates(roots, extensions, max_directories))
