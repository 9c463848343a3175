"""
Causal Insight Engine - Configuration
"""
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Paths
    BASE_DIR: Path = Path(__file__).parent
    LOG_DIR: Optional[Path] = Field(default=None, description="File logging is disabled when unset")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # LLM (explanations only, never used for causal inference)
    LLM_PROVIDER: str = Field(default="openai", description="openai or anthropic")
    OPENAI_API_KEY: str = Field(default="", description="OpenAI API key")
    ANTHROPIC_API_KEY: str = Field(default="", description="Anthropic API key")
    LLM_MODEL: Optional[str] = Field(default=None, description="Falls back to the provider default")
    LLM_TIMEOUT_SECONDS: float = Field(default=60.0)
    LLM_VERIFY_SSL: bool = Field(default=True)

    # Explanations
    USE_LLM_EXPLANATIONS: bool = Field(default=True)
    EXPLANATION_MAX_TOKENS: int = Field(default=500)
    EXPLANATION_TEMPERATURE: float = Field(default=0.7)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()


def ensure_directories():
    """Ensure all required directories exist."""
    if settings.LOG_DIR:
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)
