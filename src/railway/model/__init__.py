"""Domain model for railway tracks and train routes."""

from railway.model.errors import (
    AllocationError,
    FormatError,
    InvalidRouteError,
    InvalidTrackError,
    RouteFormatError,
    TrackFormatError,
)
from railway.model.junction import Branch, EndPoint, Junction, JunctionBranch
from railway.model.location import Location
from railway.model.route import Route, longest_disjoint_prefix
from railway.model.section import Section
from railway.model.segment import Segment
from railway.model.track import Track

__all__ = [
    "AllocationError",
    "Branch",
    "EndPoint",
    "FormatError",
    "InvalidRouteError",
    "InvalidTrackError",
    "Junction",
    "JunctionBranch",
    "Location",
    "Route",
    "RouteFormatError",
    "Section",
    "Segment",
    "Track",
    "TrackFormatError",
    "longest_disjoint_prefix",
]
