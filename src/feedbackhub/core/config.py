"""Configuration management for FeedbackHub."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Inference provider: "auto", "openai", "workers_ai" or "none"
    inference_provider: str = Field("auto", description="Inference provider selection")
    product_family: str = Field("Cloudflare", description="Product family named in the system prompt")

    # OpenAI API
    openai_api_key: str = Field("", description="OpenAI API key")
    openai_model: str = Field("gpt-4o-mini", description="OpenAI chat model")

    # Cloudflare Workers AI
    cloudflare_account_id: str = Field("", description="Cloudflare account ID")
    cloudflare_api_token: str = Field("", description="Cloudflare API token with Workers AI access")
    workers_ai_model: str = Field("@cf/meta/llama-3-8b-instruct", description="Workers AI model")

    # Inference call budget
    max_output_tokens: int = Field(500, description="Maximum tokens in the model response")
    temperature: float = Field(0.0, description="Sampling temperature")
    request_timeout: float = Field(30.0, description="Inference request timeout in seconds")

    # Feedback store
    database_url: str = Field("sqlite:///feedback.db", description="SQLAlchemy database URL")

    # Analysis settings
    max_workers: int = Field(4, description="Parallel product groups for 'all' requests")

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    @property
    def has_workers_ai_credentials(self) -> bool:
        """Whether both Cloudflare credentials are configured."""
        return bool(self.cloudflare_account_id and self.cloudflare_api_token)


# Global settings instance
settings = Settings()
