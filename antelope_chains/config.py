"""HTTP defaults shared by every chain API client.

Values come from ``ANTELOPE_CHAINS_*`` environment variables or a
project-level .env file, e.g. ``ANTELOPE_CHAINS_REQUEST_TIMEOUT=30``.
"""

from pathlib import Path
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        env_prefix="ANTELOPE_CHAINS_",
        extra="ignore",
    )

    # Seconds before a chain API request is abandoned; a client's own timeout wins
    request_timeout: float = Field(default=10.0, gt=0)
    # Sent on every request; caller headers can replace it
    user_agent: str = Field(default="antelope-chains/1.0", min_length=1)


@lru_cache
def get_settings() -> Settings:
    return Settings()
