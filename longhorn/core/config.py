"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.

Every setting can be overridden with a LONGHORN_ prefixed environment
variable or a .env file, e.g. LONGHORN_POD_SIZE=4.
"""

from functools import lru_cache
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"
    debug: bool = False

    # Input / output
    data_file: Optional[str] = None
    export_path: str = "longhorn-gui/src/data.json"

    # Referral search
    referral_company: str = "DummyCompany"

    # Pod formation
    pod_size: int = Field(3, ge=1)

    # Messaging demo
    thread_pool_size: int = Field(4, ge=1)
    messaging_timeout_seconds: float = Field(5.0, gt=0)

    @property
    def effective_log_level(self) -> str:
        """Debug mode always wins over the configured level."""
        return "DEBUG" if self.debug else self.log_level.upper()

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_prefix="LONGHORN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
