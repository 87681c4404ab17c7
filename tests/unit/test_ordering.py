"""Unit tests for turn ordering along the linestring."""

import math
import random

from polyfollow.core.ordering import compare_turns, sort_turns
from polyfollow.domain import Method, OperationType, Point, SegmentId, Turn, TurnOperation

INTERSECTION = OperationType.INTERSECTION
UNION = OperationType.UNION


class TestCompareTurns:
    """Tests for the explicit three-way comparator."""

    def test_segment_dominates_distance(self, make_turn):
        early = make_turn(0, 0, segment=1, operation=INTERSECTION, distance=0.9)
        late = make_turn(0, 0, segment=2, operation=INTERSECTION, distance=0.1)
        assert compare_turns(early, late) < 0
        assert compare_turns(late, early) > 0

    def test_distance_breaks_segment_ties(self, make_turn):
        near = make_turn(0, 0, segment=3, operation=INTERSECTION, distance=0.2)
        far = make_turn(0, 0, segment=3, operation=UNION, distance=0.7)
        assert compare_turns(near, far) < 0
        assert compare_turns(far, near) > 0

    def test_full_tie(self, make_turn):
        a = make_turn(1, 1, segment=3, operation=INTERSECTION, distance=0.5)
        b = make_turn(2, 2, segment=3, operation=UNION, distance=0.5)
        assert compare_turns(a, b) == 0
        assert compare_turns(b, a) == 0

    def test_nan_distance_ties(self, make_turn):
        """NaN compares neither less nor greater, so it ties."""
        a = make_turn(1, 1, segment=3, operation=INTERSECTION, distance=math.nan)
        b = make_turn(2, 2, segment=3, operation=UNION, distance=0.5)
        assert compare_turns(a, b) == 0
        assert compare_turns(b, a) == 0

    def test_only_first_operation_counts(self):
        def turn(line_segment: int, poly_segment: int) -> Turn:
            return Turn(
                point=Point(0, 0),
                method=Method.CROSSES,
                operations=[
                    TurnOperation(INTERSECTION, SegmentId(0, -1, -1, line_segment), 0.0),
                    TurnOperation(UNION, SegmentId(1, -1, -1, poly_segment), 0.0),
                ],
            )

        assert compare_turns(turn(1, 9), turn(2, 0)) < 0

    def test_ring_and_multi_indices_participate(self):
        def turn(multi: int, ring: int, segment: int) -> Turn:
            return Turn(
                point=Point(0, 0),
                method=Method.CROSSES,
                operations=[TurnOperation(INTERSECTION, SegmentId(0, multi, ring, segment), 0.0)],
            )

        assert compare_turns(turn(0, -1, 9), turn(1, -1, 0)) < 0
        assert compare_turns(turn(0, -1, 9), turn(0, 0, 0)) < 0


class TestSortTurns:
    def test_sorts_in_place(self, make_turn):
        turns = [
            make_turn(3, 0, segment=2, operation=UNION, distance=0.5),
            make_turn(1, 0, segment=0, operation=INTERSECTION, distance=0.75),
            make_turn(0, 0, segment=0, operation=INTERSECTION, distance=0.25),
            make_turn(2, 0, segment=1, operation=UNION, distance=0.0),
        ]
        result = sort_turns(turns)
        assert result is turns
        assert [t.point.x for t in turns] == [0, 1, 2, 3]

    def test_order_independent_of_input_order(self, make_turn):
        turns = [
            make_turn(float(i), 0, segment=i // 3, operation=INTERSECTION, distance=(i % 3) / 3)
            for i in range(12)
        ]
        expected = [t.point for t in turns]
        rng = random.Random(7)
        for _ in range(5):
            shuffled = list(turns)
            rng.shuffle(shuffled)
            sort_turns(shuffled)
            assert [t.point for t in shuffled] == expected

    def test_empty(self):
        assert sort_turns([]) == []
