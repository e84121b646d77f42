"""Segments: directed stretches of a single section."""

from __future__ import annotations

from dataclasses import dataclass

from railway.model.junction import Branch, JunctionBranch
from railway.model.location import Location
from railway.model.section import Section


@dataclass(frozen=True)
class Segment:
    """A directed, contiguous part of one section.

    Offsets are measured from ``departing_end_point``; the segment holds every
    location at a distance ``x`` from it with
    ``start_offset <= x <= end_offset``. Travel along the segment is towards
    the section's other end-point, the approaching end-point.
    """

    section: Section
    departing_end_point: JunctionBranch
    start_offset: int
    end_offset: int

    def __post_init__(self) -> None:
        if self.section is None or self.departing_end_point is None:
            raise TypeError("section and departing_end_point cannot be None")
        if not self.section.has_end_point(self.departing_end_point):
            raise ValueError(
                f"{self.departing_end_point} is not an end-point of section "
                f"{self.section}"
            )
        if not (
            0 <= self.start_offset < self.end_offset <= self.section.length
        ):
            raise ValueError(
                f"Offsets {self.start_offset} and {self.end_offset} are not "
                "within bounds (0 <= start_offset < end_offset <= "
                f"{self.section.length} does not hold)"
            )

    @property
    def approaching_end_point(self) -> JunctionBranch:
        return self.section.other_end_point(self.departing_end_point)

    @property
    def departing_branch(self) -> Branch:
        return self.departing_end_point.branch

    @property
    def approaching_branch(self) -> Branch:
        return self.approaching_end_point.branch

    @property
    def length(self) -> int:
        return self.end_offset - self.start_offset

    def first_location(self) -> Location:
        return Location(self.section, self.departing_end_point, self.start_offset)

    def last_location(self) -> Location:
        # A location's offset must be below the section length, so the far
        # end is expressed as the approaching junction.
        if self.end_offset == self.section.length:
            return Location(self.section, self.approaching_end_point, 0)
        return Location(self.section, self.departing_end_point, self.end_offset)

    def contains(self, location: Location) -> bool:
        """Return True if ``location`` lies on this segment."""
        if location.at_junction():
            # A junction can only be one of the segment's two extremities.
            return location == self.first_location() or (
                location == self.last_location()
            )
        if self.section != location.section:
            return False
        offset = location.offset
        if location.end_point != self.departing_end_point:
            offset = self.section.length - offset
        return self.start_offset <= offset <= self.end_offset

    def reversed(self) -> Segment:
        """Return the same stretch of track travelled in the other direction."""
        length = self.section.length
        return Segment(
            self.section,
            self.approaching_end_point,
            length - self.end_offset,
            length - self.start_offset,
        )

    def with_offsets(self, start_offset: int, end_offset: int) -> Segment:
        """Return a segment on the same section and in the same direction."""
        return Segment(
            self.section, self.departing_end_point, start_offset, end_offset
        )

    def __str__(self) -> str:
        return (
            f"[{self.start_offset}, {self.end_offset}] w.r.t. "
            f"{self.departing_end_point} on section {self.section}"
        )

    def check_invariant(self) -> bool:
        """Return True if the segment is internally consistent (tests only)."""
        return (
            self.section is not None
            and self.section.has_end_point(self.departing_end_point)
            and 0 <= self.start_offset < self.end_offset <= self.section.length
        )
