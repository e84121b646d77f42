"""Helpers for building tracks, segments and routes in tests."""

from __future__ import annotations

from railway.model import Branch, Junction, JunctionBranch, Section, Segment

FACING = Branch.FACING
NORMAL = Branch.NORMAL
REVERSE = Branch.REVERSE


def ep(name: str, branch: Branch) -> JunctionBranch:
    """Shorthand for an end-point."""
    return JunctionBranch(Junction(name), branch)


def seg(section: Section, departing: JunctionBranch, start: int | None = None,
        end: int | None = None) -> Segment:
    """A segment of ``section``; defaults to the whole section."""
    return Segment(
        section,
        departing,
        0 if start is None else start,
        section.length if end is None else end,
    )

# Junction b joins a (on NORMAL), c (on FACING) and d (on REVERSE).
JUNCTION_TRACK_TEXT = (
    "10 a FACING b NORMAL\n"
    "8 b FACING c NORMAL\n"
    "6 b REVERSE d NORMAL\n"
)
