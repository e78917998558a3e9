"""
Media Locator - resolve a free-text query to a playable YouTube URL.

Tiers:
=====
1. Video search (yt-dlp "ytsearch1:") → watch URL of the top result, with autoplay
2. YouTube search-results URL built from the raw query

locate() never raises: whatever goes wrong in tier 1 (no search
capability, network error, zero results), tier 2 always produces a usable URL.
"""

import asyncio
import logging
from typing import Callable, Optional
from urllib.parse import quote

import yt_dlp

from astra.core.tiers import first_success_async, NEXT_TIER

logger = logging.getLogger("astra.services.media_locator")

# Returns the top video ID for a query, or None
VideoSearch = Callable[[str], Optional[str]]

WATCH_URL = "https://www.youtube.com/watch?v={video_id}&autoplay=1"
RESULTS_URL = "https://www.youtube.com/results?search_query={query}"

# Same unescaped set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    # Lone surrogates (valid in JSON strings) cannot be UTF-8 encoded; they become "?"
    return quote(value, safe=_URI_COMPONENT_SAFE, errors="replace")


def search_results_url(query: Optional[str]) -> str:
    """Deterministic YouTube search page for ``query``."""
    return RESULTS_URL.format(query=encode_uri_component(query or ""))


def ytdlp_top_video_id(query: str) -> Optional[str]:
    """Top YouTube video ID for ``query`` via yt-dlp flat extraction."""
    options = {
        "quiet": True,
        "no_warnings": True,
        "skip_download": True,
        "extract_flat": True,
        "noplaylist": True,
    }
    with yt_dlp.YoutubeDL(options) as ydl:
        info = ydl.extract_info(f"ytsearch1:{query}", download=False)
    
    entries = (info or {}).get("entries") or []
    if not entries:
        return None
    return entries[0].get("id") or None


class MediaLocator:
    """
    Query → URL for the play_song action.
    
    Usage:
        locator = MediaLocator()
        url = await locator.locate("kesariya")
        
        # Without any search capability:
        url = await MediaLocator(search=None).locate("kesariya")
        # https://www.youtube.com/results?search_query=kesariya
    """
    
    def __init__(self, search: Optional[VideoSearch] = ytdlp_top_video_id):
        self.search = search
    
    async def locate(self, query: Optional[str]) -> str:
        query = query or ""
        
        async def top_video() -> Optional[str]:
            if self.search is None or not query.strip():
                return NEXT_TIER
            try:
                video_id = await asyncio.to_thread(self.search, query)
            except Exception as e:
                logger.warning(f"Video search failed for '{query}': {e}")
                return NEXT_TIER
            if not video_id:
                return NEXT_TIER
            return WATCH_URL.format(video_id=encode_uri_component(str(video_id)))
        
        async def results_page() -> str:
            return search_results_url(query)
        
        return await first_success_async([top_video, results_page])


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
media_locator = MediaLocator()
