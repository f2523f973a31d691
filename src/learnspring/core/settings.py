"""Application settings using Pydantic Settings."""
from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    environment: str = Field(default="dev", description="Deployment environment")
    debug: bool = Field(default=False, description="Enable debug features")
    log_level: LogLevel = Field(default="INFO", description="Log level for the learnspring logger")
    host: str = Field(default="0.0.0.0", description="Interface the server binds to")
    port: int = Field(default=8080, description="Port the server listens on")

    model_config = SettingsConfigDict(
        env_prefix="LEARNSPRING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
