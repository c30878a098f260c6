from __future__ import annotations

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8-sig",
        case_sensitive=False,
        extra="ignore",
    )

    XAI_API_KEY: SecretStr = SecretStr("")
    XAI_API_URL: str = "https://api.x.ai/v1/chat/completions"
    XAI_TEXT_MODEL: str = "grok-3-latest"
    XAI_VISION_MODEL: str = "grok-2-vision-1212"
    XAI_TIMEOUT_SECONDS: float = Field(default=60.0, gt=0)

    PAGE_FETCH_TIMEOUT_SECONDS: float = Field(default=15.0, gt=0)
    PAGE_MAX_CHARS: int = Field(default=15000, ge=0)

    # ingredient mode favours variety, URL/image modes favour fidelity
    GENERATION_TEMPERATURE: float = Field(default=0.7, ge=0, le=2)
    EXTRACTION_TEMPERATURE: float = Field(default=0.3, ge=0, le=2)
    IMAGE_MAX_TOKENS: int = Field(default=4096, ge=1)

    APP_ENV: str = "local"
    LOG_LEVEL: str = "INFO"
    FRONTEND_CORS_ORIGINS: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"],
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
