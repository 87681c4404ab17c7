"""Ordering of turns along the linestring.

Turns arrive unordered from intersection detection. The follower needs them
in the order a walker from the first to the last vertex meets them: by the
linestring's segment, then by enriched distance along that segment.
"""

from functools import cmp_to_key

from polyfollow.domain import Turn


def compare_turns(left: Turn, right: Turn) -> int:
    """Three-way comparison of two turns in linestring traversal order.

    Segment ids of operations[0] are compared first. Turns on the same
    segment are ordered by enriched distance using `<` only, so a NaN
    distance compares equal to everything and ties are left to the sort.

    Args:
        left: First turn
        right: Second turn

    Returns:
        Negative if left comes first, positive if right does, 0 if tied
    """
    left_op = left.operations[0]
    right_op = right.operations[0]

    by_segment = left_op.seg_id.compare(right_op.seg_id)
    if by_segment != 0:
        return by_segment

    if left_op.distance < right_op.distance:
        return -1
    if right_op.distance < left_op.distance:
        return 1
    return 0


def sort_turns(turns: list[Turn]) -> list[Turn]:
    """Sort turns in place into linestring traversal order.

    The relative order of turns with tied keys is not specified.

    Args:
        turns: Turns to reorder; the list itself is modified

    Returns:
        The same list, for chaining
    """
    turns.sort(key=cmp_to_key(compare_turns))
    return turns
