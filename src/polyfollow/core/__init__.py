"""Core algorithms for polyfollow.

This module contains the pieces of the follower:

- Geometry helpers (point-in-polygon, duplicate-free append, segment copy)
- Turn ordering along the linestring
- Classification predicates (entering, leaving, staying inside)
- The traversal itself

Key functions:
- within: Strict point-in-polygon test with holes
- append_no_duplicates: Append unless repeating the last point
- copy_segments: Copy linestring vertices between two segments
- sort_turns: Sort turns into traversal order
- follow: Run a traversal with default machinery

Key classes:
- Follower: Configured traversal producing FollowResult records
"""

from polyfollow.core.follower import (
    Follower,
    FollowResult,
    TraceEvent,
    follow,
)
from polyfollow.core.geometry import (
    append_no_duplicates,
    copy_segments,
    point_in_ring,
    point_on_ring,
    points_equal,
    within,
)
from polyfollow.core.ordering import compare_turns, sort_turns
from polyfollow.core.predicates import (
    is_entering,
    is_leaving,
    is_staying_inside,
    was_entered,
)

__all__ = [
    # Traversal
    "FollowResult",
    "Follower",
    "TraceEvent",
    # Geometry functions
    "append_no_duplicates",
    # Ordering
    "compare_turns",
    "copy_segments",
    "follow",
    # Predicates
    "is_entering",
    "is_leaving",
    "is_staying_inside",
    "point_in_ring",
    "point_on_ring",
    "points_equal",
    "sort_turns",
    "was_entered",
    "within",
]
