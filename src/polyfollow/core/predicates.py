"""Classification predicates for the traversal.

Each predicate looks at one turn, the linestring's operation at that turn
and the walker's state, and decides whether the walker enters the polygon,
leaves it, stays inside, or was already inside. The point-in-polygon test
is the expensive part; it only runs for the first turn and only when the
cheaper conditions leave the answer open.
"""

from collections.abc import Callable, Sequence

from polyfollow.core.geometry import within
from polyfollow.domain import Method, OperationType, Point, Polygon, Turn, TurnOperation

# Point-in-polygon predicate: (point, polygon) -> bool
WithinFn = Callable[[Point, Polygon], bool]

# Blocked only matters for polygon/polygon overlays; for a line it acts as continue
ENTERING_OPERATIONS = frozenset(
    {OperationType.INTERSECTION, OperationType.CONTINUE, OperationType.BLOCKED}
)

# A collinear or equal first turn yields a single event, with no separate enter
ALREADY_ENTERED_METHODS = frozenset({Method.COLLINEAR, Method.EQUAL})


def _starts_within(
    first: bool,
    linestring: Sequence[Point],
    polygon: Polygon,
    within_fn: WithinFn,
) -> bool:
    return first and len(linestring) > 0 and within_fn(linestring[0], polygon)


def is_entering(op: TurnOperation) -> bool:
    """Check whether the linestring proceeds into the region of interest.

    Args:
        op: The linestring's operation at the turn

    Returns:
        True for intersection, continue and blocked operations
    """
    return op.operation in ENTERING_OPERATIONS


def was_entered(turn: Turn, first: bool) -> bool:
    """Check whether the first turn implies the walker is already inside.

    Args:
        turn: The turn being processed
        first: True if no turn has been processed yet

    Returns:
        True for a first turn that is collinear or equal
    """
    return first and turn.method in ALREADY_ENTERED_METHODS


def is_leaving(
    turn: Turn,
    op: TurnOperation,
    entered: bool,
    first: bool,
    linestring: Sequence[Point],
    polygon: Polygon,
    within_fn: WithinFn = within,
) -> bool:
    """Check whether the walker leaves the polygon at this turn.

    Only union operations can leave. A union turn leaves when the walker was
    inside, when the turn is a crossing, or when it is the first turn and
    the linestring starts inside the polygon.

    Args:
        turn: The turn being processed
        op: The linestring's operation at the turn
        entered: Whether the walker is currently inside
        first: True if no turn has been processed yet
        linestring: The linestring being followed
        polygon: The polygon being followed against
        within_fn: Point-in-polygon predicate

    Returns:
        True if the current piece ends at this turn
    """
    if op.operation != OperationType.UNION:
        return False

    return (
        entered
        or turn.method == Method.CROSSES
        or _starts_within(first, linestring, polygon, within_fn)
    )


def is_staying_inside(
    turn: Turn,
    op: TurnOperation,
    entered: bool,
    first: bool,
    linestring: Sequence[Point],
    polygon: Polygon,
    within_fn: WithinFn = within,
) -> bool:
    """Check whether an entering-kind turn leaves the walker where it was.

    Touching or collinear turns met while already inside must not open a new
    piece. Crossings never stay inside; entering and leaving cover them.

    Args:
        turn: The turn being processed
        op: The linestring's operation at the turn
        entered: Whether the walker is currently inside
        first: True if no turn has been processed yet
        linestring: The linestring being followed
        polygon: The polygon being followed against
        within_fn: Point-in-polygon predicate

    Returns:
        True if the turn must not open a piece
    """
    if turn.method == Method.CROSSES:
        return False

    if is_entering(op):
        return entered or _starts_within(first, linestring, polygon, within_fn)

    return False
