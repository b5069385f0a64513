"""Application configuration."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Contract Extraction Service"
    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Model provider
    OPENAI_API_KEY: str = ""
    OPENAI_BASE_URL: Optional[str] = None
    MODEL_NAME: str = "gpt-4o"
    LLM_TEMPERATURE: float = 0.1
    LLM_TIMEOUT_S: float = 60.0

    # Request handling
    DISCONNECT_POLL_S: float = 0.5

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


# Global settings instance
settings = Settings()
