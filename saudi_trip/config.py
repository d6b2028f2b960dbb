"""
Configuration management for the itinerary service.
Supports OpenAI-compatible LLM providers: Groq, OpenAI, OpenRouter, Ollama, plus a mock.
"""
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from typing import Literal, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # LLM Configuration
    llm_provider: Literal["groq", "openai", "openrouter", "ollama", "mock"] = "groq"
    llm_api_key: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("llm_api_key", "groq_api_key"),
    )
    llm_base_url: Optional[str] = None
    llm_model: str = "llama-3.1-8b-instant"

    # LLM Parameters
    llm_temperature: float = 0.7
    llm_max_tokens: int = 4000

    # External lookups
    exchange_url: Optional[str] = None
    geocoding_url: str = "https://geocoding-api.open-meteo.com/v1/search"
    forecast_url: str = "https://api.open-meteo.com/v1/forecast"
    http_timeout: float = 10.0
    default_weather_city: str = "Riyadh"

    # Server Configuration
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()


DEFAULT_BASE_URLS = {
    "groq": "https://api.groq.com/openai/v1",
    "openai": "https://api.openai.com/v1",
    "openrouter": "https://openrouter.ai/api/v1",
    "ollama": "http://localhost:11434/v1",
}


def get_llm_config(config: Optional[Settings] = None) -> dict:
    """Get LLM configuration based on provider."""
    config = config or settings
    api_key = config.llm_api_key
    if config.llm_provider == "ollama" and not api_key:
        api_key = "ollama"  # Not checked by Ollama

    return {
        "provider": config.llm_provider,
        "api_key": api_key,
        "base_url": config.llm_base_url or DEFAULT_BASE_URLS.get(config.llm_provider),
        "model": config.llm_model,
        "temperature": config.llm_temperature,
        "max_tokens": config.llm_max_tokens,
    }
