"""
Configuration loaded from environment variables
Every variable is prefixed with NICEPHRASE_ and may also come from .env
"""

from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional
from pathlib import Path

from nicephrase.limits import (
    DEFAULT_GENERATE_BYTES,
    MAX_PASSPHRASE_BYTES,
    MIN_PASSPHRASE_BYTES,
)


# Find .env file - could be in current dir or the project root
def _find_env_file() -> str:
    """Find .env file in current or project directory"""
    if Path(".env").exists():
        return ".env"
    project_env = Path(__file__).parent.parent / ".env"
    if project_env.exists():
        return str(project_env)
    return ".env"


class Settings(BaseSettings):
    """Application settings from environment"""

    # Word table
    WORDLIST_PATH: Optional[str] = None    # None loads the canonical niceware table
    ALLOW_CUSTOM_WORDLIST: bool = False    # Accept a table with a foreign fingerprint

    # Conversion
    DEFAULT_GENERATE_SIZE: int = DEFAULT_GENERATE_BYTES

    # Logging
    LOG_LEVEL: str = "INFO"

    # HTTP service
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    CORS_ORIGINS_RAW: str = ""

    @property
    def cors_origins(self) -> list[str]:
        raw = self.CORS_ORIGINS_RAW
        if not raw:
            return []
        return [item.strip() for item in str(raw).split(",") if item.strip()]

    class Config:
        env_prefix = "NICEPHRASE_"
        env_file = _find_env_file()
        case_sensitive = True
        extra = "ignore"


ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_settings(active_settings: Settings) -> None:
    """Validate settings before the service or CLI starts work."""
    errors = []

    size = active_settings.DEFAULT_GENERATE_SIZE
    if size < MIN_PASSPHRASE_BYTES or size > MAX_PASSPHRASE_BYTES:
        errors.append(
            f"DEFAULT_GENERATE_SIZE must be between {MIN_PASSPHRASE_BYTES} "
            f"and {MAX_PASSPHRASE_BYTES}"
        )
    elif size % 2 != 0:
        errors.append("DEFAULT_GENERATE_SIZE must be an even number")

    if active_settings.LOG_LEVEL.upper() not in ALLOWED_LOG_LEVELS:
        allowed = ", ".join(ALLOWED_LOG_LEVELS)
        errors.append(f"LOG_LEVEL must be one of: {allowed}")

    if not 1 <= active_settings.PORT <= 65535:
        errors.append("PORT must be between 1 and 65535")

    path = active_settings.WORDLIST_PATH
    if path is not None and not Path(path).is_file():
        errors.append(f"WORDLIST_PATH does not point to a file: {path}")

    if errors:
        raise ValueError("Invalid configuration:\n- " + "\n- ".join(errors))


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()


settings = get_settings()
