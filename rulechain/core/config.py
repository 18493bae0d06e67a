from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RULECHAIN_", env_file=".env", extra="ignore")

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Validation
    VALIDATION_MODE: Literal["fail_fast", "collect_all"] = "fail_fast"
    MAX_ERRORS: int = 50
    REDACT_VALUES: bool = False  # Replace actual values in error details with [REDACTED]

    @property
    def collects_all(self) -> bool:
        return self.VALIDATION_MODE == "collect_all"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
