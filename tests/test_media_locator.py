"""
Tests for the Media Locator (play_song query → URL).

The real yt-dlp search is never invoked; search functions are injected.
"""

from unittest.mock import MagicMock, patch

import pytest

from astra.services import media_locator as media_module
from astra.services.media_locator import (
    MediaLocator,
    encode_uri_component,
    search_results_url,
    ytdlp_top_video_id,
)


class TestUrlHelpers:
    
    @pytest.mark.parametrize("raw, encoded", [
        ("kesariya", "kesariya"),
        ("shape of you", "shape%20of%20you"),
        ("rock & roll", "rock%20%26%20roll"),
        ("don't stop (live)", "don't%20stop%20(live)"),
        ("a/b?c=d", "a%2Fb%3Fc%3Dd"),
    ])
    def test_encode_uri_component(self, raw, encoded):
        """Test encoding matches encodeURIComponent semantics."""
        assert encode_uri_component(raw) == encoded
    
    def test_search_results_url(self):
        assert search_results_url("lofi beats") == "https://www.youtube.com/results?search_query=lofi%20beats"
    
    def test_lone_surrogate_is_replaced(self):
        """Test text that is not valid UTF-8 still encodes."""
        assert encode_uri_component("kes\ud800ariya") == "kes%3Fariya"


class TestMediaLocator:
    
    @pytest.mark.asyncio
    async def test_no_search_capability(self):
        """Test the results page is used when no search is available."""
        url = await MediaLocator(search=None).locate("kesariya")
        
        assert url.startswith("https://www.youtube.com/results?search_query=")
        assert "kesariya" in url
    
    @pytest.mark.asyncio
    async def test_top_video(self):
        """Test a found video becomes an autoplay watch URL."""
        search = MagicMock(return_value="BddP6PYo2gs")
        
        url = await MediaLocator(search=search).locate("kesariya")
        
        assert url == "https://www.youtube.com/watch?v=BddP6PYo2gs&autoplay=1"
        search.assert_called_once_with("kesariya")
    
    @pytest.mark.asyncio
    async def test_search_error_falls_back(self):
        """Test that a failing search never escapes locate()."""
        search = MagicMock(side_effect=RuntimeError("network down"))
        
        url = await MediaLocator(search=search).locate("kesariya")
        
        assert url == search_results_url("kesariya")
    
    @pytest.mark.asyncio
    async def test_no_results_falls_back(self):
        """Test zero results fall back to the results page."""
        url = await MediaLocator(search=lambda query: None).locate("zzzz")
        
        assert url == search_results_url("zzzz")
    
    @pytest.mark.asyncio
    async def test_blank_query_skips_search(self):
        """Test that a blank query does not hit the search."""
        search = MagicMock(return_value="abc")
        
        url = await MediaLocator(search=search).locate("")
        
        assert url == "https://www.youtube.com/results?search_query="
        search.assert_not_called()


class TestYtdlpSearch:
    """Tests for the yt-dlp adapter with YoutubeDL mocked."""
    
    def _patch_ydl(self, info):
        ydl = MagicMock()
        ydl.__enter__.return_value = ydl
        ydl.extract_info.return_value = info
        return patch.object(media_module.yt_dlp, "YoutubeDL", return_value=ydl), ydl
    
    def test_returns_first_entry_id(self):
        patcher, ydl = self._patch_ydl({"entries": [{"id": "abc123"}, {"id": "zzz"}]})
        
        with patcher:
            assert ytdlp_top_video_id("kesariya") == "abc123"
        
        ydl.extract_info.assert_called_once_with("ytsearch1:kesariya", download=False)
    
    @pytest.mark.parametrize("info", [None, {}, {"entries": []}, {"entries": [{"title": "no id"}]}])
    def test_no_result(self, info):
        patcher, _ = self._patch_ydl(info)
        
        with patcher:
            assert ytdlp_top_video_id("zzzz") is None


class TestUnencodableQueries:
    
    @pytest.mark.asyncio
    async def test_lone_surrogate_query(self):
        """Test locate() still returns a results URL for a query with a lone surrogate."""
        url = await MediaLocator(search=None).locate("kes\ud800ariya")
        
        assert url == "https://www.youtube.com/results?search_query=kes%3Fariya"
    
    @pytest.mark.asyncio
    async def test_lone_surrogate_video_id(self):
        """Test a malformed video ID from the search cannot break locate()."""
        url = await MediaLocator(search=lambda query: "ab\udc00c").locate("kesariya")
        
        assert url == "https://www.youtube.com/watch?v=ab%3Fc&autoplay=1"
