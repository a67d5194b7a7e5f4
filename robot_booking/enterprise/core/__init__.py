"""Core domain package for the robot booking tool."""

from .errors import BookingError, FormatError, UnknownCommandError
from .models import (
    RESERVATION_FIELDS,
    ROBOT_FIELDS,
    ReservationOutcome,
    ReservationStatus,
    RobotRecord,
)

__all__ = [
    "BookingError",
    "FormatError",
    "UnknownCommandError",
    "RESERVATION_FIELDS",
    "ROBOT_FIELDS",
    "ReservationOutcome",
    "ReservationStatus",
    "RobotRecord",
]
