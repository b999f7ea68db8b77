"""
hsjwt Configuration Module.

One settings class per concern, each with its own environment variable
prefix, composed by ``Settings``:

    from hsjwt.config import Settings

    settings = Settings()
    settings.jwt.algorithm  # "HS256"
    settings.logging.level  # LogLevel.WARNING

Only the command line tool reads settings, building a fresh ``Settings``
per invocation; the library API takes every input as an argument.
"""

from functools import cached_property

from pydantic_settings import BaseSettings, SettingsConfigDict

from .jwt import JwtSettings
from .logging import LoggingSettings


class Settings(BaseSettings):
    """Composite settings aggregating the configuration domains."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def jwt(self) -> JwtSettings:
        return JwtSettings()

    @cached_property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()


__all__ = [
    "Settings",
    "JwtSettings",
    "LoggingSettings",
]
