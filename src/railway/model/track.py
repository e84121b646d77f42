"""The railway track: a mutable collection of sections."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from railway.model.errors import InvalidTrackError
from railway.model.junction import Branch, Junction, JunctionBranch
from railway.model.section import Section

logger = logging.getLogger(__name__)


class Track:
    """A railway track made up of sections.

    No two sections of a track may share an end-point, so each junction has
    at most one section per branch. The track keeps an index from each
    end-point to the section that claims it; every mutation keeps that index
    in step with the stored sections.

    A track is not thread-safe. Callers that mutate it from several threads
    must provide their own lock.
    """

    def __init__(self) -> None:
        self._sections: set[Section] = set()
        self._owners: dict[JunctionBranch, Section] = {}

    def add_section(self, section: Section) -> None:
        """Add a section to the track.

        Adding a section equal to one already on the track does nothing.
        Raises InvalidTrackError, leaving the track unchanged, if either
        end-point of the section is already connected to another section.
        """
        if section is None:
            raise TypeError("Cannot add a None section to the track")
        if section in self._sections:
            return

        for end_point in section.end_points:
            if end_point in self._owners:
                raise InvalidTrackError(
                    f"The junction {end_point.junction} is already connected "
                    f"to a section along branch {end_point.branch}"
                )

        self._sections.add(section)
        for end_point in section.end_points:
            self._owners[end_point] = section
        logger.debug("Added section %s", section)

    def remove_section(self, section: Section) -> None:
        """Remove a section from the track, if present."""
        if section is None or section not in self._sections:
            return
        self._sections.remove(section)
        for end_point in section.end_points:
            del self._owners[end_point]
        logger.debug("Removed section %s", section)

    def contains(self, section: Section) -> bool:
        return section in self._sections

    def junctions(self) -> set[Junction]:
        """Return every junction touched by a section of the track."""
        return {end_point.junction for end_point in self._owners}

    def section_at(self, junction: Junction, branch: Branch) -> Section | None:
        """Return the section connected to ``junction`` on ``branch``, or None."""
        return self._owners.get(JunctionBranch(junction, branch))

    def __contains__(self, section: object) -> bool:
        return section in self._sections

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __str__(self) -> str:
        return "\n".join(str(section) for section in self._sections)

    def check_invariant(self) -> bool:
        """Return True if the track is internally consistent (tests only)."""
        if None in self._sections:
            return False
        expected: dict[JunctionBranch, Section] = {}
        for section in self._sections:
            for end_point in section.end_points:
                if end_point in expected:
                    return False
                expected[end_point] = section
        return (
            expected == self._owners
            and len(self._owners) == 2 * len(self._sections)
        )
