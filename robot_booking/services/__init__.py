"""Service layer exports for the robot booking tool."""

from .reporting import describe_usage, describe_usages, unavailable_type_message
from .reservations import DEFAULT_DURATION_MINUTES, ReservationManager

__all__ = [
	"DEFAULT_DURATION_MINUTES",
	"ReservationManager",
	"describe_usage",
	"describe_usages",
	"unavailable_type_message",
]
