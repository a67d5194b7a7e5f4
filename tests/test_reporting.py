from datetime import timedelta

from conftest import MINUTE_MS, NOW, NOW_MS
from robot_booking.enterprise.core import RobotRecord
from robot_booking.services import describe_usage, describe_usages, unavailable_type_message
from robot_booking.services.reporting import format_clock


def _local_clock(moment):
    return moment.astimezone().strftime("%H:%M:%S")


def test_free_robot_line():
    robot = RobotRecord(id="R1", alias="a1", type="arm")
    assert describe_usage(robot) == "[arm] R1(a1) is not used"


def test_reserved_robot_line_uses_local_times():
    robot = RobotRecord(id="R1", alias="a1", type="arm").with_reservation(
        "alice", NOW_MS, NOW_MS + 30 * MINUTE_MS
    )

    expected = (
        f"[arm] R1(a1) is used by 💎alice💎 "
        f"{_local_clock(NOW)} - {_local_clock(NOW + timedelta(minutes=30))}"
    )
    assert describe_usage(robot) == expected


def test_describe_usages_joins_lines():
    robots = [RobotRecord(id="R1", alias="a1", type="arm"), RobotRecord(id="R2", alias="a2", type="arm")]
    assert describe_usages(robots) == "[arm] R1(a1) is not used\n[arm] R2(a2) is not used"
    assert describe_usages([]) == ""


def test_unavailable_type_message_lists_known_types():
    assert unavailable_type_message("drone", ["arm", "agv"]) == "unavailable type: (drone) from [arm,agv]"


def test_format_clock_without_time():
    assert format_clock(None) == "--:--:--"


def test_out_of_range_time_renders_placeholder():
    robot = RobotRecord(id="R1", alias="a1", type="arm").with_reservation("alice", NOW_MS, 10**20)

    assert format_clock(10**20) == "Invalid"
    assert describe_usage(robot) == f"[arm] R1(a1) is used by 💎alice💎 {_local_clock(NOW)} - Invalid"
