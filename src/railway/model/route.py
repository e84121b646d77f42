"""Routes: continuous paths made of segments, and route intersection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from railway.model.errors import InvalidRouteError
from railway.model.junction import Branch
from railway.model.segment import Segment
from railway.model.track import Track


class Route:
    """An immutable route along a railway track.

    A route is a sequence of segments where each segment starts at the
    junction where the previous one ends. A train passing through a junction
    must either arrive on the FACING branch and leave on another branch, or
    arrive on a non-FACING branch and leave on the FACING one.

    The empty route is valid and has length zero.
    """

    __slots__ = ("_segments",)

    def __init__(self, segments: Iterable[Segment] = ()) -> None:
        segments = tuple(segments)
        if any(segment is None for segment in segments):
            raise TypeError("segments cannot contain None")
        for index in range(1, len(segments)):
            _check_transition(segments[index - 1], segments[index], index)
        self._segments = segments

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    @property
    def length(self) -> int:
        return sum(segment.length for segment in self._segments)

    def on_track(self, track: Track) -> bool:
        """Return True if every segment lies on a section of ``track``."""
        if track is None:
            raise TypeError("track cannot be None")
        return all(track.contains(segment.section) for segment in self._segments)

    def get_subroute(self, start_offset: int, end_offset: int) -> Route:
        """Return the part of the route between two offsets along it.

        Offsets are distances from the start of the route and must satisfy
        ``0 <= start_offset < end_offset <= self.length``.
        """
        if not (0 <= start_offset < end_offset <= self.length):
            raise ValueError(
                f"Subroute [{start_offset}, {end_offset}] is out of bounds "
                f"for a route of length {self.length}"
            )
        pieces: list[Segment] = []
        # distance along the route to the start of the current segment
        offset = 0
        for segment in self._segments:
            if start_offset - offset < segment.length and end_offset - offset > 0:
                skip = max(start_offset - offset, 0)
                keep = min(end_offset - offset, segment.length) - skip
                start = segment.start_offset + skip
                pieces.append(segment.with_offsets(start, start + keep))
            offset += segment.length
        return Route(pieces)

    def intersects(self, other: Route) -> bool:
        """Return True if some location lies on both routes."""
        if other is None:
            raise TypeError("other cannot be None")
        return longest_disjoint_prefix(self, other) != self

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self) -> int:
        return hash(self._segments)

    def __repr__(self) -> str:
        return f"Route({list(self._segments)!r})"

    def __str__(self) -> str:
        return "\n".join(str(segment) for segment in self._segments)

    def check_invariant(self) -> bool:
        """Return True if the route is internally consistent (tests only)."""
        try:
            for index in range(1, len(self._segments)):
                _check_transition(
                    self._segments[index - 1], self._segments[index], index
                )
        except InvalidRouteError:
            return False
        return True


def _check_transition(previous: Segment, following: Segment, index: int) -> None:
    pivot = previous.last_location()
    if pivot != following.first_location() or not pivot.at_junction():
        raise InvalidRouteError(
            f"The segment ({previous}) is not connected to the next segment "
            f"({following}) at a junction",
            index=index,
        )
    approach = previous.approaching_branch
    departure = following.departing_branch
    if (approach is Branch.FACING) == (departure is Branch.FACING):
        raise InvalidRouteError(
            f"The direction of travel from segment ({previous}) to segment "
            f"({following}) is not possible",
            index=index,
        )


def longest_disjoint_segment_prefix(
    segment_a: Segment, segment_b: Segment
) -> Segment | None:
    """Return the longest leading part of ``segment_a`` not touching ``segment_b``.

    The prefix is taken in ``segment_a``'s own direction of travel. Returns
    None when no part of ``segment_a`` of positive length is disjoint from
    ``segment_b``.
    """
    if segment_a.section != segment_b.section:
        # Only the extremities of segment_a can be junctions shared with a
        # segment on another section.
        if segment_b.contains(segment_a.first_location()):
            return None
        if segment_b.contains(segment_a.last_location()):
            if segment_a.length == 1:
                return None
            return segment_a.with_offsets(
                segment_a.start_offset, segment_a.end_offset - 1
            )
        return segment_a

    if segment_b.departing_end_point != segment_a.departing_end_point:
        segment_b = segment_b.reversed()

    if (
        segment_a.end_offset < segment_b.start_offset
        or segment_b.end_offset < segment_a.start_offset
    ):
        return segment_a
    if segment_b.start_offset <= segment_a.start_offset:
        return None
    if segment_b.start_offset - 1 - segment_a.start_offset < 1:
        return None
    return segment_a.with_offsets(segment_a.start_offset, segment_b.start_offset - 1)


def longest_disjoint_prefix(route_a: Route, route_b: Route) -> Route:
    """Return the longest prefix of ``route_a`` sharing no location with ``route_b``.

    Each segment of ``route_a`` is trimmed against every segment of
    ``route_b`` in turn. The walk stops at the first segment that had to be
    trimmed, keeping whatever part of it survived.
    """
    if route_a is None or route_b is None:
        raise TypeError("routes cannot be None")
    prefix: list[Segment] = []
    for segment_a in route_a:
        trimmed: Segment | None = segment_a
        for segment_b in route_b:
            trimmed = longest_disjoint_segment_prefix(trimmed, segment_b)
            if trimmed is None:
                return Route(prefix)
        prefix.append(trimmed)
        if trimmed != segment_a:
            return Route(prefix)
    return Route(prefix)
