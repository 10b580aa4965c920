"""ipcnv - IPv4 address / 32-bit integer conversion tool."""
import codecs
import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "ipcnv"
    log_level: str = "WARNING"
    output_encoding: str = "utf-8"

    model_config = SettingsConfigDict(
        env_prefix="IPCNV_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("output_encoding")
    @classmethod
    def _check_output_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding: {value}") from None
        return value


@lru_cache()
def get_settings() -> Settings:
    return Settings()
