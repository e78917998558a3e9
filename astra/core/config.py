"""
Configuration module - centralized settings for the entire application.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists
    
    To enable the LLM-backed behaviour, set:
        export GROQ_API_KEY=gsk_...
    Without it, intent classification always answers "chat" and action
    parsing always uses the rule-based parser.
    """
    
    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",        # Load from .env file in project root
        env_file_encoding="utf-8",
        extra="ignore",         # Ignore extra env vars not defined here
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    # APP_NAME: Display name shown in API docs and logging
    APP_NAME: str = "Astra Backend"
    
    # DEBUG: Enable debug mode (uvicorn auto-reload, verbose logs)
    DEBUG: bool = False
    
    # LOG_LEVEL: Level for the astra.* loggers
    LOG_LEVEL: str = "INFO"

    # ---------------------------------------------------------------------------
    # SERVER SETTINGS
    # ---------------------------------------------------------------------------
    # HOST/PORT: Where uvicorn listens. The chat front-end expects port 3001.
    HOST: str = "127.0.0.1"
    PORT: int = 3001

    # ---------------------------------------------------------------------------
    # AI/LLM PROVIDER SETTINGS
    # ---------------------------------------------------------------------------
    # GROQ_API_KEY: Credential for Groq's OpenAI-compatible endpoint
    # - Empty string disables every LLM-backed path (deterministic fallbacks only)
    GROQ_API_KEY: str = ""
    
    # GROQ_MODEL: Small, fast model used for classification, parsing and chat
    GROQ_MODEL: str = "llama-3.1-8b-instant"
    
    # GROQ_BASE_URL: OpenAI-compatible API root
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    
    # AI request timeout in seconds; a timeout counts as a failure
    AI_REQUEST_TIMEOUT: int = 30
    
    # Sampling temperature for free-form chat replies
    CHAT_TEMPERATURE: float = 0.2

    # ---------------------------------------------------------------------------
    # LOCAL MEDIA / FILESYSTEM SETTINGS
    # ---------------------------------------------------------------------------
    # MPV_PATH: Override path for a local media player. Read by nothing in
    # the executor; part of the configuration surface for local playback.
    MPV_PATH: Optional[str] = None
    
    # SCAN_MAX_DIRECTORIES: Per-root cap on directories visited while
    # searching for executables. 0 means unbounded.
    SCAN_MAX_DIRECTORIES: int = 0

    @property
    def has_llm_credentials(self) -> bool:
        """True when a remote-model API key is configured."""
        return bool(self.GROQ_API_KEY and self.GROQ_API_KEY.strip())


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from astra.core.config import settings
settings = Settings()
