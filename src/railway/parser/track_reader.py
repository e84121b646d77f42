"""Reader for track files.

Each line of a track file describes one section::

    <length> <junction1> <branch1> <junction2> <branch2>

A file may not list the same section twice, nor two sections sharing an
end-point. The first problem found aborts the read with a TrackFormatError
naming the offending line.
"""

from __future__ import annotations

import logging
from pathlib import Path

from railway.model.errors import InvalidTrackError, TrackFormatError
from railway.model.section import Section
from railway.model.track import Track
from railway.parser.common import (
    LineTokens,
    check_distinct,
    check_end_of_line,
    read_end_points,
    read_section_length,
)

logger = logging.getLogger(__name__)


def parse_track(text: str) -> Track:
    """Parse the contents of a track file."""
    track = Track()
    for line_number, line in enumerate(text.splitlines(), start=1):
        tokens = LineTokens(line_number, line, TrackFormatError)
        section = _parse_section(tokens)
        if track.contains(section):
            raise tokens.fail(f"duplicate section detected: {section}")
        try:
            track.add_section(section)
        except InvalidTrackError as e:
            raise tokens.fail(
                f"cannot add section {section} to the track: {e}"
            ) from e
    logger.debug("Parsed track with %d sections", len(track))
    return track


def read_track(path: str | Path) -> Track:
    """Read a track file from disk."""
    return parse_track(Path(path).read_text())


def _parse_section(tokens: LineTokens) -> Section:
    length = read_section_length(tokens)
    first, second = read_end_points(tokens)
    check_end_of_line(tokens)
    check_distinct(tokens, first, second)
    return Section(length, first, second)
