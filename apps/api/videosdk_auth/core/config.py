"""Application configuration for the session token service."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    app_env: str = Field(default="development")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=4000)
    log_level: str = Field(default="INFO")
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["http://localhost:5173"])

    zoom_video_sdk_key: str = Field(default="")
    zoom_video_sdk_secret: str = Field(default="")

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> object:
        """Allow comma-separated env values for CORS origins."""

        if isinstance(value, str):
            parts = [item.strip() for item in value.split(",") if item.strip()]
            return parts
        return value


@dataclass(frozen=True, slots=True)
class SigningIdentity:
    """Application key and shared secret used to issue tokens."""

    app_key: str
    secret: str

    @classmethod
    def from_settings(cls, source: Settings) -> "SigningIdentity":
        return cls(app_key=source.zoom_video_sdk_key, secret=source.zoom_video_sdk_secret)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


settings = get_settings()
