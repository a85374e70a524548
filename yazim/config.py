"""
Configuration management using Pydantic Settings.
Loads configuration from environment variables and .env file.
"""
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # CORS Configuration
    CORS_ORIGINS: str = "*"

    # Development/Debug
    DEBUG: bool = False
    RELOAD: bool = False

    # Spell-check Configuration
    SPELLCHECK_ENABLED: bool = True  # Load the dictionary on startup
    SPELLCHECK_WORDLIST_PATH: str = "/app/data/dictionaries/tr-words.jsonl"  # Local word list (JSON lines or plain text)
    SPELLCHECK_WORDLIST_URL: Optional[str] = None  # Remote JSON-lines payload, used when no local file exists
    SPELLCHECK_CACHE_PATH: str = "/app/data/cache"  # Pickle cache (mounted volume for persistence)
    SPELLCHECK_DOWNLOAD_TIMEOUT: float = 60.0  # Seconds to wait for the remote word list
    SPELLCHECK_PERSONAL_DICT_PATH: str = "/app/data/personal/personal-words.json"
    SPELLCHECK_MAX_EDIT_DISTANCE: int = 2  # BK-tree search radius (1-3)
    SPELLCHECK_SUGGESTION_COUNT: int = 5  # Max suggestions per misspelled word
    SPELLCHECK_MIN_WORD_LENGTH: int = 1  # Skip tokens shorter than this
    SPELLCHECK_OVERLAY_WEIGHT: int = 10  # Ranking weight of personal dictionary words
    SPELLCHECK_SHUFFLE_INSERTION: bool = True  # Shuffle BK-tree insertion order (sorted lists degrade the tree)
    SPELLCHECK_SHUFFLE_SEED: int = 1717
    SPELLCHECK_MAX_TEXT_LENGTH: int = 200_000  # Characters accepted per check request

    # Logging Configuration (Optional - per-module log levels)
    APP_LOG_LEVEL: Optional[str] = None
    UVICORN_LOG_LEVEL: Optional[str] = None
    HTTPX_LOG_LEVEL: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]


# Global settings instance
settings = Settings()
