"""Shared test fixtures for the railway test suite."""

from __future__ import annotations

import pytest
from track_builders import FACING, NORMAL, REVERSE, ep

from railway.model import Section, Track

# --- Pytest fixtures ---


@pytest.fixture
def ab() -> Section:
    """Section of length 10 from (a, FACING) to (b, NORMAL)."""
    return Section(10, ep("a", FACING), ep("b", NORMAL))


@pytest.fixture
def bc() -> Section:
    """Section of length 8 from (b, FACING) to (c, NORMAL)."""
    return Section(8, ep("b", FACING), ep("c", NORMAL))


@pytest.fixture
def bd() -> Section:
    """Section of length 6 from (b, REVERSE) to (d, NORMAL)."""
    return Section(6, ep("b", REVERSE), ep("d", NORMAL))


@pytest.fixture
def junction_track(ab, bc, bd) -> Track:
    """The three sections meeting at junction b."""
    track = Track()
    for section in (ab, bc, bd):
        track.add_section(section)
    return track
