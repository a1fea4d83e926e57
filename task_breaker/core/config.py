"""
Application configuration loader and it handles:
- Environment variables
- Database configuration
- Model provider configuration
- Auth header delegation

And, the main purpose:
Central place for system configuration.
"""


from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./task_breaker.db"

    # LLM
    LLM_PROVIDER: str = "gemini"  # gemini | groq | mock (for no-key dev)
    LLM_MODEL: str = "gemini-2.5-flash"
    LLM_TEMPERATURE: float = 0.4
    LLM_TIMEOUT_SECONDS: float = 60.0
    GEMINI_API_KEY: str = Field(
        default="",
        validation_alias=AliasChoices("GOOGLE_API_KEY", "GEMINI_API_KEY"),
    )
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    GROQ_API_KEY: str = ""
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"

    # Decomposition
    MAX_STEPS: int = 10

    # Identity is injected by the authenticating proxy in front of us
    AUTH_USER_HEADER: str = "X-User-Id"

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
