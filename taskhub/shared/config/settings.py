# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Origins the browser dev servers run on.
_LOCAL_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:5000",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5000",
    "http://localhost",
    "http://127.0.0.1",
)

_PLACEHOLDER_SECRETS = frozenset({"", "dev", "dev-secret", "development", "test", "secret"})

_ENV = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
    validate_by_name=True,
)


class DatabaseConfig(BaseSettings):
    url: str = Field(
        "sqlite:///taskhub.db",
        validation_alias=AliasChoices("DATABASE_URL", "PG_CONNECTION_STRING", "url"),
    )
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = _ENV

    @field_validator("url", mode="after")
    @classmethod
    def _use_psycopg_driver(cls, value: str) -> str:
        scheme, sep, rest = value.partition("://")
        if sep and scheme in ("postgres", "postgresql"):
            return f"postgresql+psycopg://{rest}"
        return value

    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class SecurityConfig(BaseSettings):
    frontend_url: str = Field("https://taskhub-alpha.vercel.app", alias="FRONTEND_URL")
    allowed_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(_LOCAL_ORIGINS), alias="ALLOWED_ORIGINS"
    )
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = _ENV

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            value = value.split(",")
        return [origin.strip() for origin in value if origin.strip()]

    def cors_origins(self) -> list[str]:
        """Frontend first, then the extra allowed origins without duplicates."""
        return list(dict.fromkeys([self.frontend_url, *self.allowed_origins]))

    def production_warnings(self) -> list[str]:
        warnings = []
        if "*" in self.allowed_origins:
            warnings.append("ALLOWED_ORIGINS contains '*'; any site may call the API")
        if not self.enable_hsts:
            warnings.append("ENABLE_HSTS is off; set it when serving over HTTPS")
        return warnings


class AuthConfig(BaseSettings):
    """Signing key and hashing cost for the credential subsystem."""

    jwt_secret: str = Field("dev-secret", alias="JWT_SECRET", repr=False)
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    token_ttl_seconds: int = Field(60 * 60 * 24 * 7, ge=1, alias="JWT_TTL_SECONDS")
    bcrypt_rounds: int = Field(10, ge=4, le=31, alias="BCRYPT_SALT_ROUNDS")
    hash_workers: int = Field(4, ge=1, alias="HASH_WORKERS")

    model_config = _ENV

    def has_placeholder_secret(self) -> bool:
        return self.jwt_secret.strip().lower() in _PLACEHOLDER_SECRETS


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(4000, ge=1, le=65535, alias="PORT")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)

    model_config = _ENV

    @model_validator(mode="after")
    def _refuse_unsafe_production(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.auth.has_placeholder_secret():
            print(
                "FATAL: JWT_SECRET is unset or a development placeholder and "
                f"APP_ENV={self.app_env}. Refusing to start.",
                file=sys.stderr,
            )
            sys.exit(1)

        for warning in self.security.production_warnings():
            print(f"WARNING: {warning}", file=sys.stderr)
        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()


__all__ = ["AppConfig", "AuthConfig", "DatabaseConfig", "SecurityConfig", "load_config"]
