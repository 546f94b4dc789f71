from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="BOOKER_", extra="ignore")

    base_url: str = "https://restful-booker.herokuapp.com"
    username: str = "admin"
    password: str = "password123"
    timeout_seconds: float = 10.0
    max_retries: int = Field(default=3, ge=0)  # retries after the first attempt
    retry_delay_ms: int = Field(default=1000, ge=0)

    log_level: str = "INFO"
    log_dir: str | None = None  # one log file per test when set


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
