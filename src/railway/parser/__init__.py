"""Readers for the plain-text track and route formats."""

from railway.parser.route_reader import format_route, parse_route, read_route
from railway.parser.track_reader import parse_track, read_track

__all__ = [
    "format_route",
    "parse_route",
    "parse_track",
    "read_route",
    "read_track",
]
