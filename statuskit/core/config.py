# statuskit/core/config.py
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Raise UnknownStatusCodeError instead of falling back on codes outside the catalog
    strict_status_codes: bool = False
    unknown_status_message: str = "Unknown status."

    # Body message used by the FastAPI handler for unexpected exceptions
    generic_error_message: str = "Internal server error."
    expose_exception_messages: bool = False

    # Caller-supplied text is truncated to this length in log records
    log_max_message_length: int = 200

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="STATUSKIT_",  # STATUSKIT_STRICT_STATUS_CODES <-> strict_status_codes
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
