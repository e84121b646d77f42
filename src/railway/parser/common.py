"""Token readers shared by the track and route file parsers.

Both formats are line oriented: each line is split on whitespace and its
tokens are consumed left to right. Every reader raises the ``error`` class it
is given, so a track file reports TrackFormatError and a route file reports
RouteFormatError with the same reasons.
"""

from __future__ import annotations

import re
from collections import deque

from railway.model.errors import FormatError
from railway.model.junction import Branch, Junction, JunctionBranch

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


class LineTokens:
    """The whitespace-separated tokens of one input line."""

    def __init__(
        self, line_number: int, line: str, error: type[FormatError]
    ) -> None:
        self.line_number = line_number
        self.error = error
        self._tokens = deque(line.split())

    def fail(self, reason: str) -> FormatError:
        """Build the format error for this line."""
        return self.error(self.line_number, reason)

    def next_int(self) -> int | None:
        """Consume the next token if it is an integer, else return None."""
        if not self._tokens or not _INTEGER_PATTERN.match(self._tokens[0]):
            return None
        return int(self._tokens.popleft())

    def next_token(self) -> str | None:
        if not self._tokens:
            return None
        return self._tokens.popleft()

    def has_more(self) -> bool:
        return bool(self._tokens)


def read_section_length(tokens: LineTokens) -> int:
    length = tokens.next_int()
    if length is None:
        raise tokens.fail("invalid or missing section length")
    if length <= 0:
        raise tokens.fail("section length is less than or equal to zero")
    return length


def read_end_point(tokens: LineTokens) -> JunctionBranch:
    """Read a junction name followed by a branch token."""
    name = tokens.next_token()
    branch_token = tokens.next_token()
    if name is None or branch_token is None:
        raise tokens.fail("missing or incomplete end-point")
    try:
        branch = Branch.parse(branch_token)
    except ValueError:
        raise tokens.fail(f"invalid branch: {branch_token}") from None
    return JunctionBranch(Junction(name), branch)


def read_offset(tokens: LineTokens) -> int:
    offset = tokens.next_int()
    if offset is None:
        raise tokens.fail("invalid or missing offset")
    if offset < 0:
        raise tokens.fail(f"offset {offset} is less than zero")
    return offset


def read_end_points(tokens: LineTokens) -> tuple[JunctionBranch, JunctionBranch]:
    """Read the two distinct end-points of a section."""
    first = read_end_point(tokens)
    second = read_end_point(tokens)
    return first, second


def check_end_of_line(tokens: LineTokens) -> None:
    if tokens.has_more():
        raise tokens.fail("additional information at end of line")


def check_distinct(
    tokens: LineTokens, first: JunctionBranch, second: JunctionBranch
) -> None:
    if first == second:
        raise tokens.fail("the end-points of a section must be distinct")
