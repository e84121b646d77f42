"""Constants used by the command-line interface."""

DEFAULT_TRACK_FILE: str = "track.txt"
"""Track file read when none is given on the command line."""

ALLOCATION_SEPARATOR: str = ":"
"""Separates the route file and offsets in an allocation request."""
