"""
Token Signing Configuration.
"""

from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class JwtSettings(BaseSettings):
    """Defaults for the command line tool. The encode/decode API never reads these."""

    model_config = SettingsConfigDict(
        env_prefix="HSJWT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    secret: SecretStr = Field(default=SecretStr(""), description="Shared HMAC secret")
    algorithm: Literal["HS256", "HS384", "HS512"] = Field(default="HS256", description="Signing algorithm")
    verify: bool = Field(default=True, description="Verify signatures when decoding")

    @property
    def key(self) -> bytes:
        return self.secret.get_secret_value().encode("utf-8")
