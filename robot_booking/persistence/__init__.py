"""Persistence layer backed by a flat CSV file."""

from .csv_codec import CsvCodec
from .storage import RobotStorage

__all__ = [
    "CsvCodec",
    "RobotStorage",
]
