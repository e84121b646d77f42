"""Reader and writer for route files.

Each line of a route file describes one segment::

    <length> <junction1> <branch1> <junction2> <branch2> <start> <end>

The first five tokens name the segment's section, with ``(junction1,
branch1)`` as its departing end-point; the offsets are measured from that
end-point. Segments are chained into a Route in file order.
"""

from __future__ import annotations

import logging
from pathlib import Path

from railway.model.errors import InvalidRouteError, RouteFormatError
from railway.model.route import Route
from railway.model.section import Section
from railway.model.segment import Segment
from railway.parser.common import (
    LineTokens,
    check_distinct,
    check_end_of_line,
    read_end_points,
    read_offset,
    read_section_length,
)

logger = logging.getLogger(__name__)


def parse_route(text: str) -> Route:
    """Parse the contents of a route file."""
    segments = [
        _parse_segment(LineTokens(line_number, line, RouteFormatError))
        for line_number, line in enumerate(text.splitlines(), start=1)
    ]
    try:
        route = Route(segments)
    except InvalidRouteError as e:
        # Segment i comes from line i + 1.
        line_number = (e.index or 0) + 1
        raise RouteFormatError(line_number, f"invalid route: {e}") from e
    logger.debug("Parsed route with %d segments", len(route))
    return route


def read_route(path: str | Path) -> Route:
    """Read a route file from disk."""
    return parse_route(Path(path).read_text())


def format_route(route: Route) -> str:
    """Render a route in route file form, one segment per line."""
    out_lines: list[str] = []
    for segment in route:
        departing = segment.departing_end_point
        approaching = segment.approaching_end_point
        out_lines.append(
            f"{segment.section.length} "
            f"{departing.junction} {departing.branch} "
            f"{approaching.junction} {approaching.branch} "
            f"{segment.start_offset} {segment.end_offset}"
        )
    return "".join(f"{line}\n" for line in out_lines)


def _parse_segment(tokens: LineTokens) -> Segment:
    length = read_section_length(tokens)
    departing, approaching = read_end_points(tokens)
    start_offset = read_offset(tokens)
    end_offset = read_offset(tokens)
    check_end_of_line(tokens)
    check_distinct(tokens, departing, approaching)
    if not (0 <= start_offset < end_offset <= length):
        raise tokens.fail(
            "the segment start and end offsets are not within bounds"
        )
    return Segment(Section(length, departing, approaching), departing,
                   start_offset, end_offset)
