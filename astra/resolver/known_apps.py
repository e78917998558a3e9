"""
Known applications - canonical names mapped to their usual install paths.

Checked before any filesystem scan. An entry only counts when the file
actually exists, so a stale path simply falls through to the search tiers.

The table is built once at import time and exposed read-only.
"""

import os
from types import MappingProxyType
from typing import Mapping


def _home(*parts: str) -> str:
    return os.path.join(os.path.expanduser("~"), *parts)


def build_known_apps() -> Mapping[str, str]:
    """Return the read-only table of normalized app name → absolute path."""
    return MappingProxyType({
        "notepad": r"C:\Windows\System32\notepad.exe",
        "brave": r"C:\Program Files\BraveSoftware\Brave-Browser\Application\brave.exe",
        "chrome": r"C:\Program Files\Google\Chrome\Application\chrome.exe",
        "edge": r"C:\Program Files (x86)\Microsoft\Edge\Application\msedge.exe",
        "vlc": r"C:\Program Files\VideoLAN\VLC\vlc.exe",
        "spotify": _home("AppData", "Roaming", "Spotify", "Spotify.exe"),
        "discord": _home("AppData", "Local", "Discord", "Update.exe"),
        "whatsapp": _home("AppData", "Local", "WhatsApp", "WhatsApp.exe"),
        "vscode": _home("AppData", "Local", "Programs", "Microsoft VS Code", "Code.exe"),
    })


KNOWN_APPS: Mapping[str, str] = build_known_apps()
