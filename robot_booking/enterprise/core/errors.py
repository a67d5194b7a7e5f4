"""Exceptions raised by the robot booking tool."""

from __future__ import annotations


class BookingError(ValueError):
    """Base class for errors the booking tool raises itself."""


class FormatError(BookingError):
    """Storage text could not be decoded or is not well-formed CSV."""


class UnknownCommandError(BookingError):
    """The command line named a command that does not exist."""
