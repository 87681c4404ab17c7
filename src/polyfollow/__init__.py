"""polyfollow - Follow a linestring through a polygon.

Given a linestring, a polygon and the classified turns where the two meet,
polyfollow extracts the maximal pieces of the linestring that belong to an
intersection or union overlay with the polygon.

Example:
    from polyfollow import follow
    pieces = follow(line, polygon, OperationType.INTERSECTION, turns)
"""

from polyfollow.core import Follower, FollowResult, follow

__version__ = "0.1.0"

__all__ = ["FollowResult", "Follower", "__version__", "follow"]
