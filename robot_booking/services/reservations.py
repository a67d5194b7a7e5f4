"""Reservation management for the robot fleet."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, List, Optional, Union

import structlog

from robot_booking.enterprise.core import ReservationOutcome, ReservationStatus, RobotRecord
from robot_booking.persistence import RobotStorage

from .reporting import NOT_FOUND_BY_TYPE_MESSAGE, not_found_message

logger = structlog.get_logger(__name__)

DEFAULT_DURATION_MINUTES = 60
MS_PER_MINUTE = 60_000

Duration = Union[int, float]


def _utcnow() -> datetime:
	return datetime.now(timezone.utc)


class ReservationManager:
	"""Holds the fleet in memory, books robots and frees expired bookings.

	Lookups are first-match-wins over the records in file order. Every
	mutation rewrites the whole storage file.
	"""

	def __init__(
		self,
		storage: RobotStorage,
		clock: Optional[Callable[[], datetime]] = None,
		default_duration_minutes: Duration = DEFAULT_DURATION_MINUTES,
	) -> None:
		self.storage = storage
		self.clock = clock or _utcnow
		self.default_duration_minutes = default_duration_minutes
		self._robots: List[RobotRecord] = []

	@property
	def robots(self) -> List[RobotRecord]:
		return list(self._robots)

	def load(self) -> None:
		self._robots = self.storage.read()
		logger.debug("robots_loaded", count=len(self._robots))

		if self.clear_expired():
			self.save()

	def save(self) -> None:
		self.storage.write(self._robots)

	def _now_ms(self) -> int:
		return int(self.clock().timestamp() * 1000)

	def list_by_type(self, robot_type: str) -> List[RobotRecord]:
		return [robot for robot in self._robots if robot.type == robot_type]

	def all_types(self) -> List[str]:
		types: List[str] = []
		for robot in self._robots:
			if robot.type not in types:
				types.append(robot.type)
		return types

	def find_free_by_type(self, robot_type: str) -> Optional[RobotRecord]:
		for robot in self.list_by_type(robot_type):
			if not robot.is_reserved:
				return robot
		return None

	def find_by_id(self, robot_id: str) -> Optional[RobotRecord]:
		return next((robot for robot in self._robots if robot.id == robot_id), None)

	def find_by_alias(self, alias: str) -> Optional[RobotRecord]:
		return next((robot for robot in self._robots if robot.alias == alias), None)

	def reserve(self, robot: RobotRecord, user: str, duration_minutes: Optional[Duration] = None) -> RobotRecord:
		"""Book ``robot`` for ``user`` starting now and persist the fleet.

		Does not check whether ``robot`` is already reserved. The duration is
		used as given, so a negative value yields ``end_time < start_time``.
		"""

		if duration_minutes is None:
			duration_minutes = self.default_duration_minutes

		start_time = self._now_ms()
		end_time = start_time + int(round(duration_minutes * MS_PER_MINUTE))
		reserved = robot.with_reservation(user, start_time, end_time)

		self._robots[self._index_of(robot)] = reserved
		self.save()

		logger.info(
			"robot_reserved",
			robot_id=reserved.id,
			user=user,
			start_time=start_time,
			end_time=end_time,
		)
		return reserved

	def _index_of(self, robot: RobotRecord) -> int:
		for index, candidate in enumerate(self._robots):
			if candidate is robot:
				return index
		raise ValueError(f"robot {robot.id} is not part of the loaded fleet")

	def reserve_by_type(
		self, robot_type: str, user: str, duration_minutes: Optional[Duration] = None
	) -> ReservationOutcome:
		robot = self.find_free_by_type(robot_type)
		if robot is None:
			logger.info("reservation_rejected", reason="unavailable", robot_type=robot_type)
			return ReservationOutcome(status=ReservationStatus.UNAVAILABLE, message=NOT_FOUND_BY_TYPE_MESSAGE)
		return ReservationOutcome(
			status=ReservationStatus.RESERVED,
			robot=self.reserve(robot, user, duration_minutes),
		)

	def reserve_by_id(
		self, robot_id: str, user: str, duration_minutes: Optional[Duration] = None
	) -> ReservationOutcome:
		return self._reserve_found(self.find_by_id(robot_id), "id", robot_id, user, duration_minutes)

	def reserve_by_alias(
		self, alias: str, user: str, duration_minutes: Optional[Duration] = None
	) -> ReservationOutcome:
		return self._reserve_found(self.find_by_alias(alias), "alias", alias, user, duration_minutes)

	def _reserve_found(
		self,
		robot: Optional[RobotRecord],
		key: str,
		value: str,
		user: str,
		duration_minutes: Optional[Duration],
	) -> ReservationOutcome:
		if robot is None:
			logger.info("reservation_rejected", reason="not_found", key=key, value=value)
			return ReservationOutcome(status=ReservationStatus.NOT_FOUND, message=not_found_message(key, value))
		if robot.is_reserved:
			logger.info("reservation_rejected", reason="in_use", robot_id=robot.id, used_by=robot.used_by)
			return ReservationOutcome(status=ReservationStatus.IN_USE, robot=robot)
		return ReservationOutcome(
			status=ReservationStatus.RESERVED,
			robot=self.reserve(robot, user, duration_minutes),
		)

	def clear_expired(self) -> bool:
		"""Free every reservation whose end time has passed. In memory only."""

		now_ms = self._now_ms()
		cleared = []
		for index, robot in enumerate(self._robots):
			if robot.is_expired(now_ms):
				self._robots[index] = robot.without_reservation()
				cleared.append(robot.id)

		if cleared:
			logger.info("expired_reservations_cleared", robot_ids=cleared)
		return bool(cleared)
