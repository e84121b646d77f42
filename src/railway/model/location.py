"""Locations: points on a railway track."""

from __future__ import annotations

from railway.model.junction import JunctionBranch
from railway.model.section import Section


class Location:
    """An immutable point on a railway track.

    A location is described by a section, one of its end-points, and an
    offset (in meters) from that end-point, with
    ``0 <= offset < section.length``.

    The same point can be described in several ways. A location at offset
    zero is the junction itself, shared by every section touching it. Any
    other point can be measured from either end of its section, so
    ``Location(s, e, o) == Location(s, s.other_end_point(e), s.length - o)``.
    Equality and hashing both follow this equivalence.
    """

    __slots__ = ("_section", "_end_point", "_offset")

    def __init__(
        self, section: Section, end_point: JunctionBranch, offset: int
    ) -> None:
        if section is None or end_point is None:
            raise TypeError("section and end_point cannot be None")
        if offset < 0 or offset >= section.length:
            raise ValueError(
                "offset must be a non-negative value less than the section "
                f"length ({offset} not in [0, {section.length}))"
            )
        if not section.has_end_point(end_point):
            raise ValueError(
                f"{end_point} is not an end-point of section {section}"
            )
        self._section = section
        self._end_point = end_point
        self._offset = offset

    @property
    def section(self) -> Section:
        return self._section

    @property
    def end_point(self) -> JunctionBranch:
        return self._end_point

    @property
    def offset(self) -> int:
        return self._offset

    def at_junction(self) -> bool:
        return self._offset == 0

    def on_section(self, section: Section) -> bool:
        """Return True if this location lies on ``section``.

        A junction lies on every section that has an end-point at it.
        """
        if self.at_junction():
            junction = self._end_point.junction
            return any(ep.junction == junction for ep in section.end_points)
        return section == self._section

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        if (
            self._offset == 0
            and other._offset == 0
            and self._end_point.junction == other._end_point.junction
        ):
            return True
        if self._end_point == other._end_point and self._offset == other._offset:
            return True
        return (
            self._section == other._section
            and self._end_point != other._end_point
            and self._section.length == self._offset + other._offset
        )

    def __hash__(self) -> int:
        if self._offset == 0:
            return hash(self._end_point.junction)
        # Same value whichever end the offset is measured from.
        nearest = min(self._offset, self._section.length - self._offset)
        return hash((self._section, nearest))

    def __repr__(self) -> str:
        return (
            f"Location({self._section!r}, {self._end_point!r}, {self._offset!r})"
        )

    def __str__(self) -> str:
        if self._offset == 0:
            return str(self._end_point.junction)
        return (
            f"Distance {self._offset} from {self._end_point.junction} "
            f"along the {self._end_point.branch} branch"
        )

    def check_invariant(self) -> bool:
        """Return True if the location is internally consistent (tests only)."""
        return (
            self._section is not None
            and self._end_point is not None
            and self._section.has_end_point(self._end_point)
            and 0 <= self._offset < self._section.length
        )
