"""Sections: undirected stretches of track between two end-points."""

from __future__ import annotations

from railway.model.junction import JunctionBranch


class Section:
    """An immutable section of railway track.

    A section has a positive length (in meters) and two distinct end-points.
    Both end-points may sit on the same junction, forming a loop, provided
    they use different branches.

    Sections are identified by their length and the *set* of their
    end-points, so ``Section(5, a, b) == Section(5, b, a)``.
    """

    __slots__ = ("_length", "_end_points")

    def __init__(
        self,
        length: int,
        end_point1: JunctionBranch,
        end_point2: JunctionBranch,
    ) -> None:
        if end_point1 is None or end_point2 is None:
            raise TypeError("End-points must not be None")
        if length <= 0:
            raise ValueError(
                "Section length cannot be less than or equal to zero"
            )
        if end_point1 == end_point2:
            raise ValueError("End-points must be distinct")
        self._length = length
        self._end_points = (end_point1, end_point2)

    @property
    def length(self) -> int:
        return self._length

    @property
    def end_points(self) -> frozenset[JunctionBranch]:
        return frozenset(self._end_points)

    def other_end_point(self, end_point: JunctionBranch) -> JunctionBranch:
        """Return the end-point at the opposite end of the section."""
        first, second = self._end_points
        if end_point == first:
            return second
        if end_point == second:
            return first
        raise ValueError(f"{end_point} is not an end-point of section {self}")

    def has_end_point(self, end_point: JunctionBranch) -> bool:
        return end_point in self._end_points

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Section):
            return NotImplemented
        return (
            self._length == other._length
            and self.end_points == other.end_points
        )

    def __hash__(self) -> int:
        return hash((self._length, self.end_points))

    def __repr__(self) -> str:
        first, second = self._end_points
        return f"Section({self._length!r}, {first!r}, {second!r})"

    def __str__(self) -> str:
        first, second = self._end_points
        return f"{self._length} {first} {second}"

    def check_invariant(self) -> bool:
        """Return True if the section is internally consistent (tests only)."""
        return (
            self._length > 0
            and len(self._end_points) == 2
            and None not in self._end_points
            and self._end_points[0] != self._end_points[1]
        )
