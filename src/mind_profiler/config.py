"""Configuration management for Mind Profiler."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MP_",
    )

    # Analysis
    default_timeframe: str = Field(default="7days", description="7days, 30days, 3months or 6months")
    max_workers: int = Field(default=1, ge=1, description="Threads for per-document extraction")
    log_level: str = Field(default="WARNING")

    # Ollama (local LLM) for the optional narrative layer
    ollama_base_url: str = Field(default="http://localhost:11434")
    ollama_model: str = Field(default="llama3.1:8b")

    # Hugging Face Inference API
    hf_api_key: str = Field(default="")
    hf_model: str = Field(default="meta-llama/Llama-3.1-70B-Instruct")
    llm_provider: str = Field(default="ollama", description="ollama or huggingface")
    llm_timeout: float = Field(default=120.0)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
