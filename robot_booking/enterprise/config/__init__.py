"""Configuration package for the robot booking tool."""

from .settings import AppSettings, BookingSettings, LoggingSettings, StorageSettings, get_settings

__all__ = [
	"AppSettings",
	"BookingSettings",
	"LoggingSettings",
	"StorageSettings",
	"get_settings",
]
