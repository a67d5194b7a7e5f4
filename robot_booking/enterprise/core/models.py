"""Domain models for the robot booking tool.

A robot is either fully free (no ``used_by``, ``start_time`` or ``end_time``)
or fully reserved. Times are epoch milliseconds, matching the storage file.
"""

from __future__ import annotations

import enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ROBOT_FIELDS = ("id", "alias", "type", "used_by", "start_time", "end_time")
RESERVATION_FIELDS = ("used_by", "start_time", "end_time")


class RobotRecord(BaseModel):
    """One row of fleet state: identity, category and reservation."""

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="allow")

    id: str = Field(..., description="Unique robot identifier.")
    alias: str = Field(..., description="Human-friendly robot name.")
    type: str = Field(..., description="Category used to group robots.")
    used_by: Optional[str] = Field(None, description="Current reserver, if any.")
    start_time: Optional[int] = Field(None, description="Reservation start (epoch ms).")
    end_time: Optional[int] = Field(None, description="Reservation end (epoch ms).")

    @field_validator("used_by", "start_time", "end_time", mode="before")
    @classmethod
    def _empty_as_absent(cls, value: Any) -> Any:
        if value == "":
            return None
        return value

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "RobotRecord":
        return cls.model_validate(dict(row))

    def to_row(self) -> Dict[str, Any]:
        """Return the record as a mapping in storage column order.

        Columns the file carries beyond the robot fields follow in file order.
        """

        row = {name: getattr(self, name) for name in ROBOT_FIELDS}
        row.update(self.model_extra or {})
        return row

    @property
    def is_reserved(self) -> bool:
        return bool(self.used_by)

    def with_reservation(self, user: str, start_time: int, end_time: int) -> "RobotRecord":
        return self.model_copy(update={"used_by": user, "start_time": start_time, "end_time": end_time})

    def without_reservation(self) -> "RobotRecord":
        return self.model_copy(update={name: None for name in RESERVATION_FIELDS})

    def is_expired(self, now_ms: int) -> bool:
        """Return ``True`` if the reservation ended strictly before ``now_ms``."""

        if not self.is_reserved or self.end_time is None:
            return False
        return now_ms > self.end_time


class ReservationStatus(str, enum.Enum):
    """Result categories for a reservation request."""

    RESERVED = "reserved"
    IN_USE = "in_use"
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"


class ReservationOutcome(BaseModel):
    """What happened to a reservation request."""

    status: ReservationStatus
    robot: Optional[RobotRecord] = None
    message: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status == ReservationStatus.RESERVED
