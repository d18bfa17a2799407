"""
Board configuration using Pydantic Settings.

Values come from, in increasing priority:
- .env.base: shared defaults
- .env.{ENVIRONMENT}: per-environment overrides (development, test, production)
- process environment variables (MONGODB_URL, PORT, IDENTITY_TOKEN_KEY, ...)
"""

import os
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

ENV = os.getenv("ENVIRONMENT", "development")


def parse_database_name(mongodb_url: str) -> str:
    """
    Return the database named in a connection URL.

    Raises:
        ConfigurationError: If the URL names no usable database
    """
    path = mongodb_url.rsplit("/", 1)[-1]
    name = path.split("?", 1)[0]

    # A URL without a path leaves host or credentials here
    if not name or any(char in name for char in "&=:@"):
        raise ConfigurationError(
            f"MONGODB_URL names no database: {name!r}. "
            "Expected mongodb://host/dbname?params",
            raw_db_name=path,
        )
    return name


class Settings(BaseSettings):
    """Feature board settings."""

    model_config = SettingsConfigDict(
        env_file=[".env.base", f".env.{ENV}"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "test", "production"] = "development"

    # HTTP
    port: int = 5001
    cors_origins: list[str] = ["*"]

    # Document store; the URL path selects the database
    mongodb_url: str = "mongodb://localhost:27017/featureRequestBoard"

    # Bearer token verification.
    # A non-empty key (HS secret or PEM public key) takes precedence over the JWKS URL.
    identity_token_key: str = ""
    identity_token_algorithms: list[str] = ["RS256"]
    identity_jwks_url: str = (
        "https://www.googleapis.com/service_accounts/v1/jwk/"
        "securetoken@system.gserviceaccount.com"
    )
    identity_jwks_ttl_seconds: int = 3600
    # Firebase project id; required in JWKS mode, where every Firebase
    # project shares the same signing keys
    identity_token_audience: str = ""
    identity_token_issuer: str = ""

    # _id of the single board branding document
    board_id: str = "board"

    @property
    def database_name(self) -> str:
        return parse_database_name(self.mongodb_url)

    @property
    def identity_mode(self) -> str:
        """Either "static_key" or "jwks", whichever verifies bearer tokens."""
        return "static_key" if self.identity_token_key else "jwks"

    @property
    def identity_issuer(self) -> str | None:
        """Configured issuer, else the Firebase issuer for the audience in JWKS mode."""
        if self.identity_token_issuer:
            return self.identity_token_issuer
        if self.identity_mode == "jwks" and self.identity_token_audience:
            return f"https://securetoken.google.com/{self.identity_token_audience}"
        return None

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process."""
    return Settings()
