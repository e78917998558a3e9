"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- Fake LLM provider (scripted replies, no network)
- Recording launcher (captures launch targets instead of opening them)
- Temporary shortcut / program directory trees
- FastAPI TestClient wired to offline collaborators
"""

import os
from typing import Callable, Generator, List, Optional

import pytest
from fastapi.testclient import TestClient

from astra.ai.providers.base import AIProvider, AIResponse, ProviderType
from astra.ai.intent.classifier import IntentClassifier
from astra.ai.intent.parser import ActionParser
from astra.resolver.executables import ExecutableResolver
from astra.services.action_executor import ActionExecutor
from astra.services.assistant_service import AssistantService
from astra.services.chat_service import ChatService
from astra.services.media_locator import MediaLocator


# ---------------------------------------------------------------------------
# FAKE COLLABORATORS
# ---------------------------------------------------------------------------

class FakeProvider(AIProvider):
    """
    Scripted stand-in for the Groq provider.
    
    Replies are returned in order; ``error`` makes every call fail the way
    a real provider does (success=False), ``raises`` makes it raise.
    """
    
    provider_type = ProviderType.GROQ
    
    def __init__(
        self,
        replies: Optional[List[str]] = None,
        configured: bool = True,
        error: Optional[str] = None,
        raises: Optional[Exception] = None,
    ):
        self.model = "fake-model"
        self._configured = configured
        self.replies = list(replies or [])
        self.error = error
        self.raises = raises
        self.calls: List[dict] = []
    
    @property
    def is_configured(self) -> bool:
        return self._configured
    
    async def generate(self, prompt, system_prompt=None, temperature=0.0, max_tokens=256, **kwargs):
        self.calls.append({"prompt": prompt, "system_prompt": system_prompt, "temperature": temperature})
        return self._next()
    
    async def chat(self, messages, temperature=0.2, **kwargs):
        self.calls.append({"messages": list(messages), "temperature": temperature})
        return self._next()
    
    def _next(self) -> AIResponse:
        if self.raises:
            raise self.raises
        if self.error:
            return AIResponse(content="", provider=self.provider_type, model=self.model, success=False, error=self.error)
        content = self.replies.pop(0) if self.replies else ""
        return AIResponse(content=content, provider=self.provider_type, model=self.model)


class RecordingLauncher:
    """Async launcher that records targets instead of opening them."""
    
    def __init__(self, error: Optional[Exception] = None):
        self.targets: List[str] = []
        self.error = error
    
    async def __call__(self, target: str) -> None:
        self.targets.append(target)
        if self.error:
            raise self.error


def touch(path) -> str:
    """Create an empty file (and parents); return its path as a string."""
    os.makedirs(os.path.dirname(str(path)), exist_ok=True)
    with open(path, "w"):
        pass
    return str(path)


# ---------------------------------------------------------------------------
# PROVIDER / LAUNCHER FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def make_provider() -> Callable[..., FakeProvider]:
    """Factory for FakeProvider instances."""
    return FakeProvider


@pytest.fixture
def offline_provider() -> FakeProvider:
    """Provider with no credentials configured."""
    return FakeProvider(configured=False)


@pytest.fixture
def launcher() -> RecordingLauncher:
    return RecordingLauncher()


# ---------------------------------------------------------------------------
# FILESYSTEM FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def app_dirs(tmp_path):
    """
    Empty shortcut and program roots under tmp_path.
    
    Returns:
        Dict with "shortcuts" and "programs" directory paths
    """
    shortcuts = tmp_path / "StartMenu"
    programs = tmp_path / "ProgramFiles"
    shortcuts.mkdir()
    programs.mkdir()
    return {"shortcuts": shortcuts, "programs": programs}


@pytest.fixture
def empty_resolver(app_dirs) -> ExecutableResolver:
    """Resolver with no known apps and empty search roots."""
    return ExecutableResolver(
        known_apps={},
        shortcut_roots=[str(app_dirs["shortcuts"])],
        program_roots=[str(app_dirs["programs"])],
    )


@pytest.fixture
def executor(empty_resolver, launcher) -> ActionExecutor:
    """Executor that never touches the real machine."""
    return ActionExecutor(
        resolver=empty_resolver,
        locator=MediaLocator(search=None),
        launcher=launcher,
    )


# ---------------------------------------------------------------------------
# API FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def client(monkeypatch, offline_provider, executor) -> Generator[TestClient, None, None]:
    """
    TestClient with every router collaborator swapped for an offline one.
    
    The LLM is unconfigured, so classification is always "chat" and parsing
    always uses the rule-based parser.
    """
    from astra.main import app
    from astra.routers import assistant as assistant_router
    
    classifier = IntentClassifier(provider=offline_provider)
    parser = ActionParser(provider=offline_provider)
    chat = ChatService(provider=offline_provider)
    
    monkeypatch.setattr(assistant_router, "intent_classifier", classifier)
    monkeypatch.setattr(assistant_router, "action_parser", parser)
    monkeypatch.setattr(assistant_router, "chat_service", chat)
    monkeypatch.setattr(assistant_router, "action_executor", executor)
    monkeypatch.setattr(
        assistant_router,
        "assistant_service",
        AssistantService(classifier=classifier, parser=parser, executor=executor, chat=chat),
    )
    
    with TestClient(app) as test_client:
        yield test_client
