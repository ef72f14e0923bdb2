"""
Swell configuration.
Loads variables from the environment and an optional .env file.
"""

import json
from typing import Annotated, Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    # Environment (development | production)
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Calendar day boundary used for mission ids and streaks
    DAY_TIMEZONE: str = "UTC"

    # Scoring endpoint consumed by the reward pipeline
    SCORING_URL: str = "http://127.0.0.1:4000/score-mission"
    SCORING_TIMEOUT: float = 15.0

    # LLM behind the scoring endpoint (openai | anthropic)
    # AICODE-NOTE: "openai" talks to any OpenAI-compatible server, Ollama by default
    AI_PROVIDER: str = "openai"
    AI_TIMEOUT: float = 60.0
    OPENAI_KEY: SecretStr | None = None
    OPENAI_BASE_URL: str | None = "http://127.0.0.1:11434/v1"
    OPENAI_MODEL: str = "llama3.1"
    ANTHROPIC_KEY: SecretStr | None = None
    ANTHROPIC_MODEL: str = "claude-sonnet-4-5"

    # API server
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 4000
    CORS_ORIGINS: Annotated[list[str], NoDecode] = [
        "http://localhost:8081",
        "http://127.0.0.1:8081",
    ]

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_origins(cls, v: str | list[Any]) -> list[str]:
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return []
            if v.startswith("[") and v.endswith("]"):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            return [x.strip() for x in v.split(",") if x.strip()]
        return v

    @field_validator("DAY_TIMEZONE")
    @classmethod
    def check_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    @property
    def day_zone(self) -> ZoneInfo:
        """Timezone in which a calendar day starts and ends."""
        return ZoneInfo(self.DAY_TIMEZONE)


config = Settings()
