"""
Tests for the Action Executor.

Nothing is launched: the launcher records targets, the media locator has
no search capability, and the resolver only sees tmp_path directories.
"""

import pytest

from astra.ai.actions.registry import action_registry
from astra.ai.intent.fallback import fallback_parse
from astra.ai.intent.schemas import Action, ActionId, ErrorKind
from astra.resolver.executables import ExecutableResolver
from astra.services.action_executor import ActionExecutor
from astra.services.media_locator import MediaLocator
from astra.services.shell import ShellCommandError

from conftest import RecordingLauncher, touch


class TestImplementedActions:
    """Successful executions."""
    
    @pytest.mark.asyncio
    async def test_search_web(self, executor, launcher):
        """Test the Google search URL is encoded and launched."""
        result = await executor.execute({"action_id": "search_web", "params": {"query": "astra ai"}})
        
        assert result.to_response() == {"ok": True}
        assert launcher.targets == ["https://www.google.com/search?q=astra%20ai"]
    
    @pytest.mark.asyncio
    async def test_open_website(self, executor, launcher):
        result = await executor.execute(Action(action_id=ActionId.OPEN_WEBSITE, params={"url": "https://youtube.com"}))
        
        assert result.is_ok
        assert launcher.targets == ["https://youtube.com"]
    
    @pytest.mark.asyncio
    async def test_play_song_without_search(self, executor, launcher):
        """Test play_song launches the results page when search is unavailable."""
        result = await executor.execute({"action_id": "play_song", "params": {"query": "kesariya"}})
        
        assert result.to_response() == {"ok": True}
        assert launcher.targets == ["https://www.youtube.com/results?search_query=kesariya"]
    
    @pytest.mark.asyncio
    async def test_play_song_with_search(self, empty_resolver, launcher):
        """Test play_song launches the top video when search finds one."""
        executor = ActionExecutor(
            resolver=empty_resolver,
            locator=MediaLocator(search=lambda query: "vid42"),
            launcher=launcher,
        )
        
        await executor.execute({"action_id": "play_song", "params": {"query": "kesariya"}})
        
        assert launcher.targets == ["https://www.youtube.com/watch?v=vid42&autoplay=1"]
    
    @pytest.mark.asyncio
    async def test_open_any_app_resolved(self, app_dirs, launcher):
        """Test a resolved path is launched."""
        shortcut = touch(app_dirs["shortcuts"] / "Discord.lnk")
        executor = ActionExecutor(
            resolver=ExecutableResolver(
                known_apps={},
                shortcut_roots=[str(app_dirs["shortcuts"])],
                program_roots=[str(app_dirs["programs"])],
            ),
            locator=MediaLocator(search=None),
            launcher=launcher,
        )
        
        result = await executor.execute({"action_id": "open_any_app", "params": {"name": "discord"}})
        
        assert result.to_response() == {"ok": True}
        assert launcher.targets == [shortcut]


class TestFailures:
    """Every failure comes back as a typed result."""
    
    @pytest.mark.asyncio
    async def test_open_any_app_not_found(self, executor, launcher):
        """Test an unresolvable name yields not_found and launches nothing."""
        result = await executor.execute({"action_id": "open_any_app", "params": {"name": "nonexistentapp123"}})
        
        assert result.to_response() == {"error": "not_found"}
        assert launcher.targets == []
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("action_id", [
        "set_timer", "set_alarm", "system_brightness", "system_shutdown", "system_reboot", "type_text",
    ])
    async def test_unimplemented_action(self, executor, action_id):
        """Test enumerated but unimplemented actions."""
        result = await executor.execute({"action_id": action_id, "params": {}})
        
        assert result.to_response() == {"error": "unknown_action"}
    
    @pytest.mark.asyncio
    async def test_unknown_action_id(self, executor):
        result = await executor.execute({"action_id": "launch_rocket"})
        
        assert result.error == ErrorKind.UNKNOWN_ACTION
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("action", [None, {}, {"params": {"query": "x"}}, {"action_id": ""}, "play kesariya", 42])
    async def test_invalid_action(self, executor, launcher, action):
        """Test missing or malformed actions."""
        result = await executor.execute(action)
        
        assert result.to_response() == {"error": "invalid_action"}
        assert launcher.targets == []
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("action", [
        {"action_id": "search_web", "params": {}},
        {"action_id": "open_website", "params": {"url": "   "}},
        {"action_id": "play_song"},
        {"action_id": "open_any_app", "params": "chrome"},
    ])
    async def test_missing_required_param(self, executor, launcher, action):
        """Test implemented actions without their parameter are rejected before launching."""
        result = await executor.execute(action)
        
        assert result.error == ErrorKind.INVALID_ACTION
        assert "Missing required parameter" in result.details
        assert launcher.targets == []
    
    @pytest.mark.asyncio
    async def test_launch_failure(self, empty_resolver):
        """Test a failing launch command becomes execution_failed with details."""
        executor = ActionExecutor(
            resolver=empty_resolver,
            locator=MediaLocator(search=None),
            launcher=RecordingLauncher(error=ShellCommandError("start", 1, "no handler")),
        )
        
        result = await executor.execute({"action_id": "open_website", "params": {"url": "https://youtube.com"}})
        
        response = result.to_response()
        assert response["error"] == "execution_failed"
        assert "exit code 1" in response["details"]
    
    @pytest.mark.asyncio
    async def test_numeric_params_are_coerced(self, executor, launcher):
        """Test raw JSON params with non-string values still execute."""
        result = await executor.execute({"action_id": "search_web", "params": {"query": 2024}})
        
        assert result.is_ok
        assert launcher.targets == ["https://www.google.com/search?q=2024"]


class TestRegistryGate:
    """The action registry decides what is executable."""
    
    @pytest.mark.asyncio
    async def test_unimplemented_in_registry_is_unknown(self, executor, launcher, monkeypatch):
        """Test a handler alone does not make an action executable."""
        monkeypatch.setattr(action_registry.get_action("search_web"), "implemented", False)
        
        result = await executor.execute({"action_id": "search_web", "params": {"query": "astra ai"}})
        
        assert result.to_response() == {"error": "unknown_action"}
        assert launcher.targets == []
    
    @pytest.mark.asyncio
    async def test_action_id_is_case_insensitive(self, executor, launcher):
        result = await executor.execute({"action_id": " SEARCH_WEB ", "params": {"query": "astra"}})
        
        assert result.is_ok
        assert launcher.targets == ["https://www.google.com/search?q=astra"]


class TestRuleBasedActions:
    """Executing what the rule-based parser produces."""
    
    @pytest.mark.asyncio
    async def test_bare_open_is_invalid_action(self, executor, launcher):
        """Test 'open ' parses to an empty app name, which is rejected before any lookup."""
        result = await executor.execute(fallback_parse("open "))
        
        assert result.error == ErrorKind.INVALID_ACTION
        assert result.details == "Missing required parameter: name"
        assert launcher.targets == []
