"""Junctions and the branches that connect them to sections."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Branch(Enum):
    """The three ways a section can be connected to a junction."""

    FACING = "FACING"
    NORMAL = "NORMAL"
    REVERSE = "REVERSE"

    @classmethod
    def parse(cls, token: str) -> Branch:
        """Return the branch named by an exact upper-case token."""
        try:
            return cls[token]
        except KeyError:
            raise ValueError(f"invalid branch: {token}") from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Junction:
    """A named node of a railway track.

    Within a track a junction has between one and three branches, at most
    one of each kind.
    """

    name: str

    def __post_init__(self) -> None:
        if self.name is None:
            raise TypeError("Junction name cannot be None")
        if not self.name:
            raise ValueError("Junction name cannot be empty")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class JunctionBranch:
    """A junction together with one of its branches: a section end-point."""

    junction: Junction
    branch: Branch

    def __post_init__(self) -> None:
        if self.junction is None or self.branch is None:
            raise TypeError("junction and branch cannot be None")

    def __str__(self) -> str:
        return f"({self.junction}, {self.branch})"


EndPoint = JunctionBranch
