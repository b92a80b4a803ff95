from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "INFO"
    # Kennel layout, fixed for the lifetime of the process
    small_kennels: int = 16
    medium_kennels: int = 10
    large_kennels: int = 8
    # Fill the shelter with demo animals at startup
    seed_demo_data: bool = False
    # CORS
    cors_allow_origins: str = "*"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("small_kennels", "medium_kennels", "large_kennels")
    @classmethod
    def ensure_non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("Kennel counts must be non-negative")
        return value

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
