"""
Configuration settings for the Mail Categorizer.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development (see .env.example).

Each AI provider is toggled by the presence of its credential variable
(or, for Ollama, its base URL variable). Settings are read once at startup
and turned into an immutable provider registry by
``mail_categorizer.providers.registry.load_provider_registry``.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "Mail Categorizer"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # === DeepSeek ===
    DEEPSEEK_API_KEY: Optional[str] = None
    DEEPSEEK_API_BASE_URL: str = "https://api.deepseek.com"
    DEEPSEEK_MODEL: str = "deepseek-chat"

    # === Groq ===
    GROQ_API_KEY: Optional[str] = None
    GROQ_API_BASE_URL: str = "https://api.groq.com"
    GROQ_MODEL: str = "llama3-8b-8192"

    # === Ollama (enabled when the base URL is set explicitly) ===
    OLLAMA_API_BASE_URL: Optional[str] = None
    OLLAMA_MODEL: str = "llama2"

    # === Mistral ===
    MISTRAL_API_KEY: Optional[str] = None
    MISTRAL_API_BASE_URL: str = "https://api.mistral.ai"
    MISTRAL_MODEL: str = "mistral-tiny"

    # === Anthropic ===
    ANTHROPIC_API_KEY: Optional[str] = None
    ANTHROPIC_API_BASE_URL: str = "https://api.anthropic.com"
    ANTHROPIC_MODEL: str = "claude-3-haiku-20240307"

    # === OpenAI ===
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_API_BASE_URL: str = "https://api.openai.com"
    OPENAI_MODEL: str = "gpt-3.5-turbo"

    # === LLM Generation Parameters ===
    PROVIDER_TIMEOUT: float = 30.0  # seconds, per outbound request
    LLM_MAX_TOKENS: int = 1000
    LLM_TEMPERATURE: float = 0.7  # Sent by the OpenAI-compatible format only

    # === Batch ===
    BATCH_CONCURRENCY: int = 5  # Emails categorized in parallel per batch

    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()
