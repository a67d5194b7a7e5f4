"""File-backed robot storage: one CSV file rewritten in full on every save."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Sequence

import structlog
from pydantic import ValidationError

from robot_booking.enterprise.core import FormatError, RobotRecord

from .csv_codec import CsvCodec

logger = structlog.get_logger(__name__)


class RobotStorage:
	"""Reads and rewrites the robot CSV file."""

	def __init__(self, path: Path | str, codec: CsvCodec | None = None, encoding: str = "utf-8") -> None:
		self.path = Path(path)
		self.codec = codec or CsvCodec()
		self.encoding = encoding

	def read(self) -> List[RobotRecord]:
		raw = self.path.read_bytes()
		try:
			text = raw.decode(self.encoding)
		except UnicodeDecodeError as exc:
			raise FormatError(f"{self.path} is not valid {self.encoding}: {exc}") from exc

		records: List[RobotRecord] = []
		for index, row in enumerate(self.codec.parse(text), start=1):
			try:
				records.append(RobotRecord.from_row(row))
			except ValidationError as exc:
				raise FormatError(f"{self.path} record {index}: {exc}") from exc
		logger.debug("robots_read", path=str(self.path), count=len(records))
		return records

	def write(self, records: Sequence[RobotRecord]) -> None:
		text = self.codec.stringify([record.to_row() for record in records])
		# write beside the target and swap so a failed write keeps the old file
		tmp = self.path.with_name(f"{self.path.name}.tmp")
		tmp.write_text(text, encoding=self.encoding, newline="")
		os.replace(tmp, self.path)
		logger.info("robots_saved", path=str(self.path), count=len(records))
