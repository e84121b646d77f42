"""Tests for route validity, sub-routes and route intersection."""

import pytest
from track_builders import FACING, NORMAL, REVERSE, ep, seg

from railway.model import (
    InvalidRouteError,
    Route,
    Section,
    Segment,
    Track,
    longest_disjoint_prefix,
)
from railway.model.route import longest_disjoint_segment_prefix


@pytest.fixture
def route_abc(ab, bc) -> Route:
    """a -> b -> c, arriving at b on NORMAL and leaving on FACING."""
    return Route([seg(ab, ep("a", FACING)), seg(bc, ep("b", FACING))])


@pytest.fixture
def route_cba(ab, bc) -> Route:
    """c -> b -> a, arriving at b on FACING and leaving on NORMAL."""
    return Route([seg(bc, ep("c", NORMAL)), seg(ab, ep("b", NORMAL))])


# --- Construction and validity ---


class TestValidity:
    def test_empty_route(self):
        route = Route([])
        assert route.length == 0
        assert len(route) == 0
        assert route.check_invariant()

    def test_single_segment(self, ab):
        route = Route([Segment(ab, ep("a", FACING), 0, 5)])
        assert route.length == 5

    def test_normal_to_facing_accepted(self, route_abc):
        assert route_abc.length == 18
        assert route_abc.check_invariant()

    def test_facing_to_normal_accepted(self, route_cba):
        assert route_cba.length == 18

    def test_reverse_to_facing_accepted(self, bd, bc):
        route = Route([seg(bd, ep("d", NORMAL)), seg(bc, ep("b", FACING))])
        assert route.length == 14

    def test_normal_to_reverse_rejected(self, ab, bd):
        with pytest.raises(InvalidRouteError, match="not possible") as info:
            Route([seg(ab, ep("a", FACING)), seg(bd, ep("b", REVERSE))])
        assert info.value.index == 1

    def test_facing_to_facing_rejected(self, bc):
        # Arrive at b on FACING and leave on FACING: a reversal.
        with pytest.raises(InvalidRouteError, match="not possible"):
            Route([seg(bc, ep("c", NORMAL)), seg(bc, ep("b", FACING))])

    def test_gap_between_segments_rejected(self, ab, bc):
        with pytest.raises(InvalidRouteError, match="not connected"):
            Route([Segment(ab, ep("a", FACING), 0, 5), seg(bc, ep("b", FACING))])

    def test_join_away_from_junction_rejected(self, ab):
        # The segments meet, but in the middle of a section.
        with pytest.raises(InvalidRouteError, match="at a junction"):
            Route([
                Segment(ab, ep("a", FACING), 0, 5),
                Segment(ab, ep("a", FACING), 5, 10),
            ])

    def test_error_index_points_at_later_segment(self, ab, bc, bd):
        segments = [
            seg(bd, ep("d", NORMAL)),
            seg(bc, ep("b", FACING)),
            Segment(ab, ep("a", FACING), 0, 3),
        ]
        with pytest.raises(InvalidRouteError) as info:
            Route(segments)
        assert info.value.index == 2

    def test_none_segment_rejected(self, ab):
        with pytest.raises(TypeError):
            Route([seg(ab, ep("a", FACING)), None])

    def test_loop_route(self):
        loop = Section(20, ep("x", NORMAL), ep("x", REVERSE))
        spur = Section(5, ep("x", FACING), ep("y", NORMAL))
        route = Route([
            seg(spur, ep("y", NORMAL)),
            seg(loop, ep("x", NORMAL)),
            seg(spur, ep("x", FACING)),
        ])
        assert route.length == 30

    def test_equality_and_hash(self, ab, bc, route_abc):
        same = Route([seg(ab, ep("a", FACING)), seg(bc, ep("b", FACING))])
        assert same == route_abc
        assert hash(same) == hash(route_abc)
        assert Route([]) != route_abc

    def test_iteration(self, route_abc, ab, bc):
        assert [s.section for s in route_abc] == [ab, bc]


# --- Track membership ---


def test_on_track(junction_track, route_abc):
    assert route_abc.on_track(junction_track)


def test_not_on_track(route_abc, ab):
    track = Track()
    track.add_section(ab)
    assert not route_abc.on_track(track)


def test_empty_route_is_on_any_track():
    assert Route([]).on_track(Track())


def test_on_track_rejects_none(route_abc):
    with pytest.raises(TypeError):
        route_abc.on_track(None)


# --- Sub-routes ---


class TestSubroute:
    def test_whole_route(self, route_abc):
        assert route_abc.get_subroute(0, route_abc.length) == route_abc

    def test_spanning_a_junction(self, route_abc, ab, bc):
        part = route_abc.get_subroute(5, 14)
        assert list(part) == [
            Segment(ab, ep("a", FACING), 5, 10),
            Segment(bc, ep("b", FACING), 0, 4),
        ]
        assert part.length == 9

    def test_within_one_segment(self, route_abc, bc):
        part = route_abc.get_subroute(11, 13)
        assert list(part) == [Segment(bc, ep("b", FACING), 1, 3)]

    def test_ending_exactly_at_junction(self, route_abc, ab):
        part = route_abc.get_subroute(2, 10)
        assert list(part) == [Segment(ab, ep("a", FACING), 2, 10)]

    def test_keeps_each_segment_frame(self, route_cba, bc, ab):
        part = route_cba.get_subroute(6, 12)
        assert list(part) == [
            Segment(bc, ep("c", NORMAL), 6, 8),
            Segment(ab, ep("b", NORMAL), 0, 4),
        ]

    def test_offsets_relative_to_segment_start(self, ab):
        route = Route([Segment(ab, ep("a", FACING), 2, 8)])
        assert list(route.get_subroute(1, 3)) == [Segment(ab, ep("a", FACING), 3, 5)]

    @pytest.mark.parametrize("start, end", [(-1, 4), (4, 4), (6, 5), (0, 19)])
    def test_out_of_bounds(self, route_abc, start, end):
        with pytest.raises(ValueError, match="out of bounds"):
            route_abc.get_subroute(start, end)

    def test_empty_route_has_no_subroute(self):
        with pytest.raises(ValueError):
            Route([]).get_subroute(0, 1)


# --- Segment prefix trimming ---


class TestSegmentPrefix:
    def test_different_sections_disjoint(self, ab, bd):
        a = Segment(ab, ep("a", FACING), 0, 4)
        assert longest_disjoint_segment_prefix(a, seg(bd, ep("b", REVERSE))) == a

    def test_different_sections_share_last_location(self, ab, bc):
        a = seg(ab, ep("a", FACING))
        trimmed = longest_disjoint_segment_prefix(a, seg(bc, ep("b", FACING)))
        assert trimmed == Segment(ab, ep("a", FACING), 0, 9)

    def test_different_sections_share_first_location(self, ab, bc):
        a = seg(ab, ep("b", NORMAL))
        assert longest_disjoint_segment_prefix(a, seg(bc, ep("c", NORMAL))) is None

    def test_unit_segment_sharing_last_location(self, ab, bc):
        a = Segment(ab, ep("a", FACING), 9, 10)
        assert longest_disjoint_segment_prefix(a, seg(bc, ep("b", FACING))) is None

    def test_same_section_disjoint_opposite_direction(self, ab):
        a = Segment(ab, ep("a", FACING), 0, 4)
        b = Segment(ab, ep("b", NORMAL), 0, 5)
        assert longest_disjoint_segment_prefix(a, b) == a

    def test_same_section_overlap_at_start(self, ab):
        a = Segment(ab, ep("a", FACING), 0, 4)
        b = Segment(ab, ep("b", NORMAL), 5, 10)
        assert longest_disjoint_segment_prefix(a, b) is None

    def test_same_section_overlap_later(self, ab):
        a = Segment(ab, ep("a", FACING), 0, 8)
        b = Segment(ab, ep("a", FACING), 5, 10)
        assert longest_disjoint_segment_prefix(a, b) == Segment(
            ab, ep("a", FACING), 0, 4
        )

    def test_same_section_prefix_too_short(self, ab):
        a = Segment(ab, ep("a", FACING), 0, 2)
        b = Segment(ab, ep("a", FACING), 1, 3)
        assert longest_disjoint_segment_prefix(a, b) is None


# --- Route intersection ---


class TestIntersects:
    def test_route_intersects_itself(self, route_abc):
        assert route_abc.intersects(route_abc)

    def test_empty_route_intersects_nothing(self, route_abc):
        assert not Route([]).intersects(route_abc)
        assert not route_abc.intersects(Route([]))
        assert not Route([]).intersects(Route([]))

    def test_disjoint_sections(self, ab, bd):
        first = Route([Segment(ab, ep("a", FACING), 0, 4)])
        second = Route([seg(bd, ep("d", NORMAL))])
        assert not first.intersects(second)
        assert not second.intersects(first)

    def test_single_shared_junction(self, ab, bc):
        into_b = Route([seg(ab, ep("a", FACING))])
        out_of_b = Route([seg(bc, ep("b", FACING))])
        assert into_b.intersects(out_of_b)
        assert out_of_b.intersects(into_b)

    def test_opposite_directions_same_section(self, route_abc, route_cba):
        assert route_abc.intersects(route_cba)
        assert route_cba.intersects(route_abc)

    def test_same_section_touching_at_one_point(self, ab):
        first = Route([Segment(ab, ep("a", FACING), 0, 4)])
        second = Route([Segment(ab, ep("b", NORMAL), 6, 9)])
        assert first.intersects(second)
        assert second.intersects(first)

    def test_same_section_one_unit_apart(self, ab):
        first = Route([Segment(ab, ep("a", FACING), 0, 4)])
        second = Route([Segment(ab, ep("b", NORMAL), 0, 5)])
        assert not first.intersects(second)
        assert not second.intersects(first)

    def test_later_segment_overlap(self, route_abc, bd, bc):
        other = Route([seg(bd, ep("d", NORMAL)), Segment(bc, ep("b", FACING), 0, 3)])
        assert route_abc.intersects(other)
        assert other.intersects(route_abc)

    def test_disjoint_subroutes(self, route_abc):
        front = route_abc.get_subroute(0, 5)
        back = route_abc.get_subroute(12, 18)
        assert not front.intersects(back)
        assert not back.intersects(front)

    def test_adjacent_subroutes_share_a_point(self, route_abc):
        assert route_abc.get_subroute(0, 6).intersects(route_abc.get_subroute(6, 18))

    def test_rejects_none(self, route_abc):
        with pytest.raises(TypeError):
            route_abc.intersects(None)


def test_longest_disjoint_prefix_stops_at_first_trim(route_abc, ab, bc):
    other = Route([Segment(bc, ep("b", FACING), 4, 8)])
    prefix = longest_disjoint_prefix(route_abc, other)
    assert list(prefix) == [seg(ab, ep("a", FACING)), Segment(bc, ep("b", FACING), 0, 3)]


def test_longest_disjoint_prefix_of_disjoint_routes(route_abc, bd):
    other = Route([Segment(bd, ep("d", NORMAL), 0, 2)])
    assert longest_disjoint_prefix(route_abc, other) == route_abc


def test_longest_disjoint_prefix_empty_when_start_shared(route_abc, ab):
    other = Route([Segment(ab, ep("b", NORMAL), 8, 10)])
    assert longest_disjoint_prefix(route_abc, other) == Route([])
