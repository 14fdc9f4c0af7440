"""Environment-driven configuration (``PRISMIC_*`` variables)."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PRISMIC_", extra="ignore")

    api_url: str = ""
    timeout_s: float = 30.0
    user_agent: str = "prismic-client/0.1"
    log_level: str = "WARNING"


def get_settings() -> Settings:
    return Settings()
