"""Follow a linestring through a polygon, turn by turn.

The follower walks a linestring from its first to its last vertex, visiting
the turns where it meets the polygon boundary in traversal order. At every
turn it decides whether the walker enters, leaves or stays inside the
polygon, and it stitches the linestring vertices between an entering turn
and the next leaving turn into one output piece.

Key components:
- TraceEvent: Record handed to the optional trace hook at each branch
- FollowResult: Pieces and statistics of one traversal
- Follower: Configured traversal
- follow: Functional entry point
"""

import functools
import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

import structlog

from polyfollow.config import FollowerSettings
from polyfollow.core.geometry import append_no_duplicates, copy_segments, within
from polyfollow.core.ordering import sort_turns
from polyfollow.core.predicates import (
    WithinFn,
    is_entering,
    is_leaving,
    is_staying_inside,
    was_entered,
)
from polyfollow.domain import NO_SEGMENT, OperationType, Point, Polygon, Turn, TurnOperation
from polyfollow.exceptions import FollowError
from polyfollow.utils.logging import FollowLogger, FollowStats

logger = logging.getLogger(__name__)

REQUESTABLE_OPERATIONS = frozenset({OperationType.INTERSECTION, OperationType.UNION})


class PieceSink(Protocol):
    """Anything that accepts emitted pieces."""

    def append(self, piece: list[Point], /) -> Any: ...


@dataclass(frozen=True)
class TraceEvent:
    """One classification branch taken during a traversal.

    Attributes:
        branch: "was entered", "staying inside", "entering", "leaving",
            or "unclassified" for a turn that changes nothing
        index: Position of the turn in traversal order
        turn: The turn being processed
        operation: The linestring's operation at the turn
        entered: Walker state after the branch
        first: True if this was the first turn
    """

    branch: str
    index: int
    turn: Turn
    operation: TurnOperation
    entered: bool
    first: bool


TraceFn = Callable[[TraceEvent], None]


@dataclass
class FollowResult:
    """Outcome of one traversal.

    Attributes:
        operation: The requested overlay operation
        pieces: Emitted pieces in traversal order
        stats: Counters for the traversal
    """

    operation: OperationType
    pieces: list[list[Point]] = field(default_factory=list)
    stats: FollowStats = field(default_factory=FollowStats)

    def is_empty(self) -> bool:
        """Check whether no piece was emitted."""
        return not self.pieces


class Follower:
    """Extracts the polygon-relative pieces of a linestring.

    The follower holds configuration only; every call to apply() runs an
    independent traversal, so one instance can serve many calls.

    Example:
        follower = Follower()
        result = follower.apply(line, polygon, OperationType.INTERSECTION, turns)
        for piece in result.pieces:
            ...
    """

    def __init__(
        self,
        settings: FollowerSettings | None = None,
        within_fn: WithinFn | None = None,
        follow_logger: FollowLogger | None = None,
    ) -> None:
        """Initialize the follower.

        Args:
            settings: Follower settings (defaults if None)
            within_fn: Point-in-polygon predicate overriding the built-in one
            follow_logger: Structured tracer; created from settings when
                branch logging is enabled and none is given
        """
        self.settings = settings or FollowerSettings()
        geometry = self.settings.geometry

        if within_fn is None:
            within_fn = functools.partial(
                within, boundary_tolerance=geometry.boundary_tolerance
            )
        self.within_fn = within_fn
        self.point_tolerance = geometry.point_tolerance

        if follow_logger is None and self.settings.trace.log_branches:
            follow_logger = FollowLogger(structlog.get_logger("polyfollow"))
        self.follow_logger = follow_logger

    def apply(
        self,
        linestring: Sequence[Point],
        polygon: Polygon,
        operation: OperationType,
        turns: list[Turn],
        out: PieceSink | None = None,
        trace: TraceFn | None = None,
    ) -> FollowResult:
        """Follow the linestring and emit its polygon-relative pieces.

        The turns list is sorted in place. Pieces are appended to out (when
        given) as soon as they close, in the order the walker meets them.

        Args:
            linestring: Vertices of the line being followed
            polygon: Polygon the line is followed against
            operation: Requested overlay, intersection or union
            turns: Turns between linestring and polygon boundary, any order
            out: Sink receiving each emitted piece
            trace: Hook called at each classification branch

        Returns:
            FollowResult with the emitted pieces and statistics

        Raises:
            FollowError: If operation is neither intersection nor union
        """
        if operation not in REQUESTABLE_OPERATIONS:
            raise FollowError(f"unsupported operation '{operation.value}'")

        start_time = time.time()
        result = FollowResult(operation=operation)
        stats = result.stats
        tolerance = self.point_tolerance

        def emit(piece: list[Point]) -> None:
            result.pieces.append(piece)
            if out is not None:
                out.append(piece)
            stats.pieces_emitted += 1
            if self.follow_logger is not None:
                self.follow_logger.log_piece(piece)

        def report(branch: str, index: int, turn: Turn, op: TurnOperation) -> None:
            logger.debug(
                "Turn %d at (%s, %s): %s (method=%s, operation=%s, segment=%d)",
                index, turn.point.x, turn.point.y, branch,
                turn.method.value, op.operation.value, op.seg_id.segment_index,
            )
            stats.record_branch(branch)
            if trace is None and self.follow_logger is None:
                return
            event = TraceEvent(branch, index, turn, op, entered, first)
            if trace is not None:
                trace(event)
            if self.follow_logger is not None:
                self.follow_logger(event)

        sort_turns(turns)

        current_piece: list[Point] = []
        current_segment_id = NO_SEGMENT
        entered = False
        first = True

        for index, turn in enumerate(turns):
            op = turn.operations[0]

            if was_entered(turn, first):
                entered = True
                report("was entered", index, turn, op)
            elif is_staying_inside(
                turn, op, entered, first, linestring, polygon, self.within_fn
            ):
                entered = True
                report("staying inside", index, turn, op)
            elif is_entering(op):
                entered = True
                append_no_duplicates(current_piece, turn.point, tolerance)
                current_segment_id = op.seg_id
                report("entering", index, turn, op)
            elif is_leaving(
                turn, op, entered, first, linestring, polygon, self.within_fn
            ):
                entered = False
                stats.vertices_copied += copy_segments(
                    linestring,
                    current_segment_id,
                    op.seg_id.segment_index,
                    current_piece,
                    tolerance,
                )
                append_no_duplicates(current_piece, turn.point, tolerance)
                report("leaving", index, turn, op)

                if current_piece:
                    emit(current_piece)
                    current_piece = []
            else:
                report("unclassified", index, turn, op)

            first = False

        # Line ended inside: no turn brackets the tail
        if entered:
            stats.ended_inside = True
            stats.vertices_copied += copy_segments(
                linestring,
                current_segment_id,
                len(linestring) - 1,
                current_piece,
                tolerance,
            )

        if current_piece:
            emit(current_piece)

        duration_ms = (time.time() - start_time) * 1000
        if self.follow_logger is not None:
            self.follow_logger.log_follow_complete(stats, duration_ms)
        logger.debug(
            "Followed %d turns into %d pieces (%s)",
            stats.turns_seen, stats.pieces_emitted, operation.value,
        )

        return result


def follow(
    linestring: Sequence[Point],
    polygon: Polygon,
    operation: OperationType,
    turns: list[Turn],
    out: PieceSink | None = None,
    trace: TraceFn | None = None,
    settings: FollowerSettings | None = None,
) -> PieceSink:
    """Follow a linestring through a polygon with default machinery.

    Args:
        linestring: Vertices of the line being followed
        polygon: Polygon the line is followed against
        operation: Requested overlay, intersection or union
        turns: Turns between linestring and polygon boundary; sorted in place
        out: Sink receiving each emitted piece (a new list if None)
        trace: Hook called at each classification branch
        settings: Follower settings (defaults if None)

    Returns:
        The sink, holding the emitted pieces
    """
    sink: PieceSink = out if out is not None else []
    Follower(settings).apply(linestring, polygon, operation, turns, out=sink, trace=trace)
    return sink
