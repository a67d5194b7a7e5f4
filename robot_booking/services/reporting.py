"""Human-readable rendering of robot usage."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Sequence

from robot_booking.enterprise.core import RobotRecord

NOT_FOUND_BY_TYPE_MESSAGE = "availableRobot is not found"


def format_clock(epoch_ms: Optional[int]) -> str:
    """Render epoch milliseconds as local ``HH:MM:SS``."""

    if epoch_ms is None:
        return "--:--:--"
    try:
        moment = datetime.fromtimestamp(epoch_ms / 1000)
    except (OverflowError, OSError, ValueError):
        return "Invalid"
    return moment.strftime("%H:%M:%S")


def describe_usage(robot: RobotRecord) -> str:
    label = f"[{robot.type}] {robot.id}({robot.alias})"
    if not robot.is_reserved:
        return f"{label} is not used"
    return (
        f"{label} is used by 💎{robot.used_by}💎 "
        f"{format_clock(robot.start_time)} - {format_clock(robot.end_time)}"
    )


def describe_usages(robots: Iterable[RobotRecord]) -> str:
    return "\n".join(describe_usage(robot) for robot in robots)


def unavailable_type_message(robot_type: str, known_types: Sequence[str]) -> str:
    return f"unavailable type: ({robot_type}) from [{','.join(known_types)}]"


def not_found_message(key: str, value: str) -> str:
    return f"Can not find robot {key} {value}"
