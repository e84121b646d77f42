"""Exceptions raised by the railway model and its file readers."""

from __future__ import annotations


class InvalidTrackError(ValueError):
    """A section cannot join a track because one of its end-points is taken."""


class InvalidRouteError(ValueError):
    """A chain of segments does not describe a traversable route.

    ``index`` is the position of the second segment of the offending pair,
    or None when the failure is not tied to a pair.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


class FormatError(ValueError):
    """A line of a track or route file could not be read."""

    def __init__(self, line_number: int, reason: str) -> None:
        super().__init__(f"Error on line {line_number}: {reason}")
        self.line_number = line_number
        self.reason = reason


class TrackFormatError(FormatError):
    """A track file is malformed."""


class RouteFormatError(FormatError):
    """A route file is malformed."""


class AllocationError(ValueError):
    """A train's sub-route cannot be allocated."""
