"""Command-line entry point for checking and reserving robots."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Callable, Dict, List, Optional, Sequence, Union

from robot_booking.enterprise.config.settings import get_settings
from robot_booking.enterprise.core import ReservationOutcome, UnknownCommandError
from robot_booking.observability import bind_global_context, configure_logging
from robot_booking.persistence import CsvCodec, RobotStorage
from robot_booking.services import (
    ReservationManager,
    describe_usage,
    describe_usages,
    unavailable_type_message,
)

Handler = Callable[[argparse.ArgumentParser, ReservationManager, List[str]], int]


def _expect_args(
    parser: argparse.ArgumentParser,
    command: str,
    values: Sequence[str],
    usage: str,
    minimum: int,
    maximum: int,
) -> None:
    if not minimum <= len(values) <= maximum:
        parser.error(f"{command} expects: {usage}".rstrip())


def _parse_duration(parser: argparse.ArgumentParser, raw: str) -> Union[int, float]:
    try:
        value = float(raw)
    except ValueError:
        parser.error(f"durationMin must be a number, got {raw!r}")
    if not math.isfinite(value) or not math.isfinite(value * 60_000):
        parser.error(f"durationMin must be finite, got {raw!r}")
    return int(value) if value.is_integer() else value


def _print_outcome(outcome: ReservationOutcome) -> None:
    if outcome.robot is not None:
        print(describe_usage(outcome.robot))
    else:
        print(outcome.message)


def cmd_check_all(parser: argparse.ArgumentParser, manager: ReservationManager, values: List[str]) -> int:
    _expect_args(parser, "check_all", values, "", 0, 0)
    for robot_type in manager.all_types():
        print(describe_usages(manager.list_by_type(robot_type)))
    return 0


def cmd_check_type(parser: argparse.ArgumentParser, manager: ReservationManager, values: List[str]) -> int:
    _expect_args(parser, "check_type", values, "<type>", 1, 1)
    robot_type = values[0]
    robots = manager.list_by_type(robot_type)
    if not robots:
        print(unavailable_type_message(robot_type, manager.all_types()))
        return 0
    print(describe_usages(robots))
    return 0


def _reservation_handler(command: str, key: str, reserve: Callable[..., ReservationOutcome]) -> Handler:
    def handler(parser: argparse.ArgumentParser, manager: ReservationManager, values: List[str]) -> int:
        _expect_args(parser, command, values, f"<{key}> <user> [durationMin]", 2, 3)
        duration = _parse_duration(parser, values[2]) if len(values) == 3 else None
        _print_outcome(reserve(manager, values[0], values[1], duration))
        return 0

    handler.__name__ = f"cmd_{command}"
    return handler


COMMANDS: Dict[str, Handler] = {
    "check_all": cmd_check_all,
    "check_type": cmd_check_type,
    "use_robot_by_type": _reservation_handler("use_robot_by_type", "type", ReservationManager.reserve_by_type),
    "use_robot_by_id": _reservation_handler("use_robot_by_id", "id", ReservationManager.reserve_by_id),
    "use_robot_by_alias": _reservation_handler("use_robot_by_alias", "alias", ReservationManager.reserve_by_alias),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="robot-booking",
        description="Check and reserve robots listed in a CSV file.",
    )
    parser.add_argument(
        "--data-file",
        default=None,
        help="Path to the robot CSV file (default: storage.path setting, data/robots.csv)",
    )
    parser.add_argument("command", help=", ".join(COMMANDS))
    parser.add_argument("args", nargs="*", metavar="arg", help="command arguments")
    return parser


def build_manager(data_file: Optional[str] = None) -> ReservationManager:
    settings = get_settings()
    storage = RobotStorage(
        data_file or settings.storage.path,
        codec=CsvCodec(delimiter=settings.storage.delimiter),
        encoding=settings.storage.encoding,
    )
    return ReservationManager(
        storage,
        default_duration_minutes=settings.booking.default_duration_minutes,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(get_settings().logging)
    bind_global_context(command=args.command)

    manager = build_manager(args.data_file)
    manager.load()

    handler = COMMANDS.get(args.command)
    if handler is None:
        raise UnknownCommandError("unavailable function name")
    return handler(parser, manager, args.args)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
