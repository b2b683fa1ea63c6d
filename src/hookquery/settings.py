"""Settings for the hookquery client."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class HookQuerySettings(BaseSettings):
    """hookquery configuration settings."""

    # Logging
    LOG_LEVEL: str = "INFO"

    # Pagination
    HOOK_PER_PAGE: int = 50  # page size used by `paginate()` when none is given

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = HookQuerySettings()
