"""Shared fixtures for the robot booking tests."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import pytest

from robot_booking.enterprise.config.settings import LoggingSettings, get_settings
from robot_booking.observability import configure_logging
from robot_booking.persistence import RobotStorage
from robot_booking.services import ReservationManager

NOW = datetime(2026, 10, 16, 12, 0, 0, tzinfo=timezone.utc)
NOW_MS = int(NOW.timestamp() * 1000)
MINUTE_MS = 60_000

HEADER = "id,alias,type,used_by,start_time,end_time\n"


@pytest.fixture(scope="session", autouse=True)
def _structured_logging() -> None:
    configure_logging(LoggingSettings(level="DEBUG"))


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep repository YAML, .env files and RB_* variables out of tests."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("RB_CONFIG_DIR", str(tmp_path / "no-config"))
    monkeypatch.delenv("RB_ENVIRONMENT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_robots(tmp_path: Path) -> Callable[..., Path]:
    def _write(*rows: str, name: str = "robots.csv") -> Path:
        path = tmp_path / name
        path.write_text(HEADER + "".join(f"{row}\n" for row in rows), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_manager() -> Callable[..., ReservationManager]:
    def _make(path: Path, now: datetime = NOW) -> ReservationManager:
        manager = ReservationManager(RobotStorage(path), clock=lambda: now)
        manager.load()
        return manager

    return _make
