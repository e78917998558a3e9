"""
Action Executor - performs the OS side effect for a parsed Action.

Dispatch:
========
    open_website  → launch params.url
    play_song     → MediaLocator(params.query) → launch URL
    open_any_app  → ExecutableResolver(params.name) → launch path | not_found
    search_web    → launch Google search URL for params.query
    anything else → unknown_action

Every outcome is an ActionResult; nothing raises to the caller:
- no action / no action_id / missing required params → invalid_action
- resolver found nothing                            → not_found
- launch (or anything inside a handler) raised      → execution_failed
"""

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Tuple, Union

from astra.ai.actions.registry import action_registry
from astra.ai.intent.schemas import Action, ActionId, ActionResult, ErrorKind
from astra.ai.monitoring import ai_logger, new_request_id
from astra.resolver.executables import ExecutableResolver, executable_resolver
from astra.services.media_locator import MediaLocator, encode_uri_component, media_locator
from astra.services.shell import launch_target

logger = logging.getLogger("astra.services.action_executor")

GOOGLE_SEARCH_URL = "https://www.google.com/search?q={query}"

Launcher = Callable[[str], Awaitable[None]]
Handler = Callable[[Dict[str, str]], Awaitable[ActionResult]]


class ActionExecutor:
    """
    Executes Actions on the local machine.
    
    Usage:
        executor = ActionExecutor()
        result = await executor.execute(Action(action_id="search_web", params={"query": "astra ai"}))
        result.to_response()   # {"ok": True}
    """
    
    def __init__(
        self,
        resolver: Optional[ExecutableResolver] = None,
        locator: Optional[MediaLocator] = None,
        launcher: Optional[Launcher] = None,
    ):
        self.resolver = resolver or executable_resolver
        self.locator = locator or media_locator
        self.launcher = launcher or launch_target
        self._handlers: Dict[str, Handler] = {
            ActionId.OPEN_WEBSITE.value: self._open_website,
            ActionId.PLAY_SONG.value: self._play_song,
            ActionId.OPEN_ANY_APP.value: self._open_any_app,
            ActionId.SEARCH_WEB.value: self._search_web,
        }
    
    async def execute(
        self,
        action: Union[Action, Mapping[str, Any], None],
        request_id: Optional[str] = None,
    ) -> ActionResult:
        """
        Execute an action and return a uniform result. Never raises.
        
        Args:
            action: Parsed Action, or the raw JSON object from a request
            request_id: Correlation ID for logs
        """
        request_id = request_id or new_request_id()
        start_time = time.time()
        
        action_id, params = self._unpack(action)
        result = await self._dispatch(action_id, params)
        
        ai_logger.log_action_executed(
            request_id,
            action_id,
            ok=result.is_ok,
            error=result.error.value if result.error else None,
            details=result.details,
            processing_time_ms=(time.time() - start_time) * 1000,
        )
        return result
    
    async def _dispatch(self, action_id: Optional[str], params: Dict[str, str]) -> ActionResult:
        if not action_id:
            return ActionResult.failure(ErrorKind.INVALID_ACTION)
        
        handler = self._handlers.get(action_id)
        if handler is None or not action_registry.is_implemented(action_id):
            return ActionResult.failure(ErrorKind.UNKNOWN_ACTION)
        
        is_valid, error = action_registry.validate(action_id, params)
        if not is_valid:
            return ActionResult.failure(ErrorKind.INVALID_ACTION, error)
        
        try:
            return await handler(params)
        except Exception as e:
            logger.error(f"Action {action_id} failed: {e}")
            return ActionResult.failure(ErrorKind.EXECUTION_FAILED, str(e))
    
    @staticmethod
    def _unpack(action: Union[Action, Mapping[str, Any], None]) -> Tuple[Optional[str], Dict[str, str]]:
        """Pull (action_id, params) out of an Action or a raw mapping."""
        if isinstance(action, Action):
            return action.action_id.value, dict(action.params)
        
        if not isinstance(action, Mapping):
            return None, {}
        
        raw_id = action.get("action_id")
        action_id = str(raw_id).strip().lower() if raw_id else None
        
        raw_params = action.get("params")
        if not isinstance(raw_params, Mapping):
            raw_params = {}
        params = {str(k): str(v) for k, v in raw_params.items() if v is not None}
        
        return action_id or None, params
    
    # ---------------------------------------------------------------------------
    # HANDLERS
    # ---------------------------------------------------------------------------
    
    async def _open_website(self, params: Dict[str, str]) -> ActionResult:
        await self.launcher(params["url"])
        return ActionResult.success()
    
    async def _play_song(self, params: Dict[str, str]) -> ActionResult:
        url = await self.locator.locate(params["query"])
        await self.launcher(url)
        return ActionResult.success()
    
    async def _open_any_app(self, params: Dict[str, str]) -> ActionResult:
        # Filesystem scans block; keep them off the event loop
        path = await asyncio.to_thread(self.resolver.resolve, params["name"])
        if not path:
            return ActionResult.failure(ErrorKind.NOT_FOUND)
        await self.launcher(path)
        return ActionResult.success()
    
    async def _search_web(self, params: Dict[str, str]) -> ActionResult:
        url = GOOGLE_SEARCH_URL.format(query=encode_uri_component(params["query"]))
        await self.launcher(url)
        return ActionResult.success()


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
action_executor = ActionExecutor()
