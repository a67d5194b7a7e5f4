"""Unified configuration system for the robot booking tool.

This module centralises application settings using :mod:`pydantic-settings`.
Configuration values are assembled from (in order of precedence):

1. Explicit keyword arguments when instantiating :class:`AppSettings`.
2. Environment variables prefixed with ``RB_`` (supports nested fields using ``__``).
3. A ``.env`` file located in the working directory.
4. YAML configuration files: ``config/settings.yaml`` (base) and
   ``config/environments/<environment>.yaml`` (environment-specific overrides).

All sources are deeply merged, so an environment file only needs to carry the
values it changes.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
	"StorageSettings",
	"BookingSettings",
	"LoggingSettings",
	"AppSettings",
	"get_settings",
]


_ENVIRONMENT_VAR = "RB_ENVIRONMENT"
_CONFIG_DIR_ENV_VAR = "RB_CONFIG_DIR"


def _project_root() -> Path:
	"""Return the absolute project root directory."""

	return Path(__file__).resolve().parents[3]


DEFAULT_CONFIG_DIR = _project_root() / "config"


class StorageSettings(BaseModel):
	"""Location and dialect of the robot CSV file."""

	path: Path = Field(Path("data/robots.csv"), description="CSV file holding one row per robot.")
	encoding: str = Field("utf-8", description="Text encoding of the CSV file.")
	delimiter: str = Field(",", min_length=1, max_length=1, description="CSV column separator.")


class BookingSettings(BaseModel):
	"""Reservation defaults."""

	default_duration_minutes: PositiveInt = Field(
		60,
		description="Reservation length used when a command omits durationMin.",
	)


class LoggingSettings(BaseModel):
	"""Logging verbosity and related tuning parameters."""

	level: str = Field("WARNING", description="Root log level (DEBUG, INFO, etc.).")
	json_output: bool = Field(False, description="Emit logs as JSON for aggregators.")


def _load_yaml_file(path: Path) -> Dict[str, Any]:
	"""Load a YAML file, returning an empty dict when it is missing or empty."""

	if not path.exists() or path.is_dir():
		return {}

	with path.open("r", encoding="utf-8") as handle:
		data = yaml.safe_load(handle)
		return data or {}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
	"""Recursively merge ``override`` into ``base``."""

	result = base.copy()
	for key, value in override.items():
		if (
			key in result
			and isinstance(result[key], dict)
			and isinstance(value, dict)
		):
			result[key] = _deep_merge(result[key], value)
		else:
			result[key] = value
	return result


class AppSettings(BaseSettings):
	"""Primary configuration model for the application."""

	environment: str = Field("dev", description="Active environment name (dev, test, prod, ...).")
	storage: StorageSettings = StorageSettings()
	booking: BookingSettings = BookingSettings()
	logging: LoggingSettings = LoggingSettings()

	model_config = SettingsConfigDict(
		env_prefix="RB_",
		env_file=".env",
		env_file_encoding="utf-8",
		env_nested_delimiter="__",
		extra="ignore",
		validate_assignment=True,
	)

	@classmethod
	def _yaml_settings_source(cls) -> Dict[str, Any]:
		"""Produce settings from YAML configuration files."""

		config_dir = Path(os.getenv(_CONFIG_DIR_ENV_VAR, DEFAULT_CONFIG_DIR))
		base = _load_yaml_file(config_dir / "settings.yaml")
		env_name = os.getenv(_ENVIRONMENT_VAR, base.get("environment", "dev"))
		env_override = _load_yaml_file(config_dir / "environments" / f"{env_name}.yaml")

		merged = _deep_merge(base, env_override)
		merged.setdefault("environment", env_name)
		return merged

	@classmethod
	def settings_customise_sources(
		cls,
		_settings_cls,
		init_settings,
		env_settings,
		dotenv_settings,
		file_secret_settings,
	):
		"""Inject YAML files as the lowest-precedence settings source."""

		return (
			init_settings,
			env_settings,
			dotenv_settings,
			cls._yaml_settings_source,
			file_secret_settings,
		)


@lru_cache()
def get_settings(**overrides: Any) -> AppSettings:
	"""Return a cached :class:`AppSettings` instance.

	Keyword arguments are forwarded to :class:`AppSettings` and therefore have
	the highest precedence.
	"""

	return AppSettings(**overrides)
