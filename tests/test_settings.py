"""Tests for the configuration loader."""

from pathlib import Path

import pytest

from robot_booking.enterprise.config.settings import get_settings


def test_settings_defaults_without_config_files():
    settings = get_settings()

    assert settings.environment == "dev"
    assert settings.storage.path == Path("data/robots.csv")
    assert settings.storage.delimiter == ","
    assert settings.booking.default_duration_minutes == 60
    assert settings.logging.level == "WARNING"
    assert settings.logging.json_output is False


def test_settings_load_default_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Default environment should combine base settings and dev overrides."""

    config_dir = tmp_path / "config"
    env_dir = config_dir / "environments"
    env_dir.mkdir(parents=True)

    (config_dir / "settings.yaml").write_text(
        """
        environment: dev
        storage:
          path: fleet/robots.csv
          delimiter: ";"
        booking:
          default_duration_minutes: 30
        """,
        encoding="utf-8",
    )

    (env_dir / "dev.yaml").write_text(
        """
        booking:
          default_duration_minutes: 15
        logging:
          level: DEBUG
        """,
        encoding="utf-8",
    )

    monkeypatch.setenv("RB_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("RB_ENVIRONMENT", raising=False)

    get_settings.cache_clear()
    settings = get_settings()

    assert settings.environment == "dev"
    assert settings.storage.path == Path("fleet/robots.csv")
    assert settings.storage.delimiter == ";"
    assert settings.booking.default_duration_minutes == 15
    assert settings.logging.level == "DEBUG"


def test_settings_env_override(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Environment variables should override YAML configuration."""

    config_dir = tmp_path / "config"
    env_dir = config_dir / "environments"
    env_dir.mkdir(parents=True)

    (config_dir / "settings.yaml").write_text(
        """
        environment: prod
        storage:
          path: base.csv
        booking:
          default_duration_minutes: 45
        """,
        encoding="utf-8",
    )

    (env_dir / "prod.yaml").write_text("{}", encoding="utf-8")

    monkeypatch.setenv("RB_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("RB_ENVIRONMENT", "prod")
    monkeypatch.setenv("RB_BOOKING__DEFAULT_DURATION_MINUTES", "90")

    get_settings.cache_clear()
    settings = get_settings()

    assert settings.environment == "prod"
    assert settings.booking.default_duration_minutes == 90
    assert settings.storage.path == Path("base.csv")


def test_settings_cache_clear(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Clearing the cache should re-read configuration files."""

    config_dir = tmp_path / "config"
    env_dir = config_dir / "environments"
    env_dir.mkdir(parents=True)

    (config_dir / "settings.yaml").write_text("{}", encoding="utf-8")
    (env_dir / "dev.yaml").write_text("{}", encoding="utf-8")

    monkeypatch.setenv("RB_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("RB_ENVIRONMENT", raising=False)

    get_settings.cache_clear()
    first = get_settings()

    monkeypatch.setenv("RB_ENVIRONMENT", "qa")
    (env_dir / "qa.yaml").write_text(
        "logging:\n  level: ERROR\n",
        encoding="utf-8",
    )

    get_settings.cache_clear()
    second = get_settings()

    assert first.environment == "dev"
    assert second.environment == "qa"
    assert second.logging.level == "ERROR"
