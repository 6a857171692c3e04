## Application settings configuration

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "prod"
    log_level: str = "INFO"

    # Which generation service backs /api/generate: gemini | openai | ollama
    LLM_PROVIDER: str = "gemini"
    LLM_TIMEOUT_SECONDS: float = 120.0

    # Gemini settings (default provider)
    GEMINI_API_KEY: str | None = None
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_MODEL: str = "gemini-1.5-flash"

    # Any OpenAI-compatible endpoint (OpenAI, Groq, ...)
    OPENAI_API_KEY: str | None = None
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_SEND_TOP_K: bool = False

    # Ollama settings
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.1"

    # Handler behaviour
    STRICT_METHODS: bool = True
    CORS_ORIGINS: str = ""

    @model_validator(mode="after")
    def _require_provider_credential(self) -> "Settings":
        provider = self.LLM_PROVIDER.lower()
        if provider not in ("gemini", "openai", "ollama"):
            raise ValueError(f"Unsupported LLM_PROVIDER: {self.LLM_PROVIDER}")
        if provider == "gemini" and not self.GEMINI_API_KEY:
            raise ValueError("GEMINI_API_KEY is not defined in environment variables")
        if provider == "openai" and not self.OPENAI_API_KEY:
            raise ValueError("OPENAI_API_KEY is not defined in environment variables")
        return self

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
