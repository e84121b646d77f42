"""Allocation of non-overlapping sub-routes to trains on a track.

A train is given a full route and the stretch of it, between two offsets,
that it currently occupies. The register only accepts a train whose route
lies on the track and whose occupied stretch shares no location with the
stretch of any other registered train.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from railway.model.errors import AllocationError
from railway.model.route import Route
from railway.model.track import Track

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Train:
    """A registered train and the part of its route it occupies."""

    id: int
    route: Route
    start_offset: int
    end_offset: int
    subroute: Route = field(compare=False, repr=False)


class TrainRegister:
    """Trains allocated to a single track."""

    def __init__(self, track: Track) -> None:
        if track is None:
            raise TypeError("track cannot be None")
        self.track = track
        self._trains: dict[int, Train] = {}
        self._next_id = 0

    def add(self, route: Route, start_offset: int, end_offset: int) -> int:
        """Register a train occupying ``route`` between two offsets.

        Returns the new train's id. Raises AllocationError if the route is
        not on the track, the offsets are out of range, or the occupied
        stretch intersects another train's.
        """
        if not route.on_track(self.track):
            raise AllocationError("The route is not on the track")
        subroute = self._subroute(route, start_offset, end_offset)
        self._check_clear(subroute)

        train = Train(self._next_id, route, start_offset, end_offset, subroute)
        self._trains[train.id] = train
        self._next_id += 1
        logger.info(
            "Train %d allocated [%d, %d] of a route of length %d",
            train.id, start_offset, end_offset, route.length,
        )
        return train.id

    def update(self, train_id: int, start_offset: int, end_offset: int) -> Train:
        """Move a train to a new stretch of its route.

        The train's previous allocation is kept if the new one is rejected.
        """
        old = self._trains[train_id]
        subroute = self._subroute(old.route, start_offset, end_offset)
        self._check_clear(subroute, ignore=train_id)

        train = Train(train_id, old.route, start_offset, end_offset, subroute)
        self._trains[train_id] = train
        logger.info(
            "Train %d moved to [%d, %d]", train_id, start_offset, end_offset
        )
        return train

    def remove(self, train_id: int) -> None:
        del self._trains[train_id]
        logger.info("Train %d removed", train_id)

    def get(self, train_id: int) -> Train:
        return self._trains[train_id]

    def subroutes(self) -> list[Route]:
        """Return the occupied stretch of every train, in id order."""
        return [train.subroute for train in self]

    def __iter__(self) -> Iterator[Train]:
        return iter(sorted(self._trains.values(), key=lambda t: t.id))

    def __len__(self) -> int:
        return len(self._trains)

    def __contains__(self, train_id: object) -> bool:
        return train_id in self._trains

    @staticmethod
    def _subroute(route: Route, start_offset: int, end_offset: int) -> Route:
        if not (0 <= start_offset < end_offset <= route.length):
            raise AllocationError(
                f"Invalid offsets [{start_offset}, {end_offset}] for a route "
                f"of length {route.length}"
            )
        return route.get_subroute(start_offset, end_offset)

    def _check_clear(self, subroute: Route, ignore: int | None = None) -> None:
        for train in self._trains.values():
            if train.id == ignore:
                continue
            if train.subroute.intersects(subroute):
                raise AllocationError(
                    f"The route intersects the route of train {train.id}"
                )
