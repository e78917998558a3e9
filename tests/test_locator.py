"""
Tests for the filesystem locator (shortcut and executable enumeration).
"""

import os

import pytest

from astra.resolver import locator
from astra.resolver.locator import (
    EXECUTABLE_EXTENSIONS,
    SHORTCUT_EXTENSIONS,
    ShortcutEntry,
    iter_candidates,
    list_candidates,
)

from conftest import touch


def _names(entries):
    return sorted(entry.name for entry in entries)


class TestShortcutEntry:
    """Tests for the ShortcutEntry stem rule."""
    
    @pytest.mark.parametrize("name, stem", [
        ("Spotify.lnk", "Spotify"),
        ("Visual Studio Code.lnk", "Visual Studio Code"),
        ("node.js.lnk", "node"),
        ("README", "README"),
    ])
    def test_stem_strips_from_first_dot(self, name, stem):
        """Test the stem is everything before the first dot."""
        assert ShortcutEntry(path=name, name=name).stem == stem


class TestListCandidates:
    """Tests for list_candidates() / iter_candidates()."""
    
    def test_collects_matching_extensions_recursively(self, tmp_path):
        """Test nested directories are walked and filtered by suffix."""
        touch(tmp_path / "Desktop" / "Spotify.lnk")
        touch(tmp_path / "Desktop" / "notes.txt")
        touch(tmp_path / "Desktop" / "Tools" / "Deep" / "Tool.appref-ms")
        touch(tmp_path / "Desktop" / "Site.URL")
        
        entries = list_candidates([str(tmp_path / "Desktop")], SHORTCUT_EXTENSIONS)
        
        assert _names(entries) == ["Site.URL", "Spotify.lnk", "Tool.appref-ms"]
    
    def test_executables_only(self, tmp_path):
        """Test the executable extension set."""
        touch(tmp_path / "App" / "app.exe")
        touch(tmp_path / "App" / "app.lnk")
        touch(tmp_path / "App" / "app.dll")
        
        entries = list_candidates([str(tmp_path)], EXECUTABLE_EXTENSIONS)
        
        assert _names(entries) == ["app.exe"]
    
    def test_missing_roots_are_skipped(self, tmp_path):
        """Test that absent roots contribute nothing and do not fail."""
        touch(tmp_path / "real" / "Chrome.lnk")
        
        entries = list_candidates(
            [str(tmp_path / "missing"), "", str(tmp_path / "real")],
            SHORTCUT_EXTENSIONS,
        )
        
        assert _names(entries) == ["Chrome.lnk"]
    
    def test_file_root_is_skipped(self, tmp_path):
        """Test that a root pointing at a file is ignored."""
        path = touch(tmp_path / "Chrome.lnk")
        
        assert list_candidates([path]) == []
    
    def test_unreadable_directory_is_skipped(self, tmp_path, monkeypatch):
        """Test that one unlistable directory does not abort the scan."""
        touch(tmp_path / "ok" / "Discord.lnk")
        touch(tmp_path / "locked" / "Hidden.lnk")
        locked = str(tmp_path / "locked")
        real_scandir = os.scandir
        
        def fake_scandir(path):
            if str(path) == locked:
                raise PermissionError("access denied")
            return real_scandir(path)
        
        monkeypatch.setattr(locator.os, "scandir", fake_scandir)
        
        entries = list_candidates([str(tmp_path)])
        
        assert _names(entries) == ["Discord.lnk"]
    
    def test_max_directories_bounds_the_walk(self, tmp_path):
        """Test the optional per-root directory cap."""
        touch(tmp_path / "a" / "b" / "c" / "Deep.exe")
        
        assert list_candidates([str(tmp_path)], EXECUTABLE_EXTENSIONS, max_directories=2) == []
        assert _names(list_candidates([str(tmp_path)], EXECUTABLE_EXTENSIONS, max_directories=0)) == ["Deep.exe"]
    
    def test_iter_candidates_is_lazy(self, tmp_path):
        """Test that callers can stop after the first hit."""
        touch(tmp_path / "one.exe")
        touch(tmp_path / "two.exe")
        
        first = next(iter_candidates([str(tmp_path)], EXECUTABLE_EXTENSIONS))
        
        assert first.name in ("one.exe", "two.exe")
        assert first.path == os.path.join(str(tmp_path), first.name)
