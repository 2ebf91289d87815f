from __future__ import annotations

from pathlib import Path

import pytest

from taskhub.shared.config import AppConfig, AuthConfig, DatabaseConfig, SecurityConfig


@pytest.fixture()
def auth_config() -> AuthConfig:
    return AuthConfig(
        jwt_secret="test-secret",
        jwt_algorithm="HS256",
        token_ttl_seconds=60 * 60 * 24 * 7,
        bcrypt_rounds=4,
        hash_workers=2,
    )


@pytest.fixture()
def database_config(tmp_path: Path) -> DatabaseConfig:
    return DatabaseConfig(url=f"sqlite:///{tmp_path / 'taskhub-test.db'}")


@pytest.fixture()
def app_config(auth_config: AuthConfig, database_config: DatabaseConfig) -> AppConfig:
    return AppConfig(
        app_env="test",
        log_level="WARNING",
        log_file=None,
        database=database_config,
        security=SecurityConfig(frontend_url="http://localhost:3000"),
        auth=auth_config,
    )
