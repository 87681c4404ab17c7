"""Core geometric types for the follower.

This module defines the geometry records consumed by the traversal:
- Point: An immutable 2D coordinate
- LineString: An ordered sequence of points
- Polygon: An outer ring with optional hole rings
"""

from dataclasses import dataclass, field
from typing import Any

from polyfollow.exceptions import DeserializationError


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts. Equality is exact;
    tolerance-aware comparison lives in the core helpers.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance

        Raises:
            DeserializationError: If a coordinate is missing or not numeric
        """
        try:
            return cls(x=float(data["x"]), y=float(data["y"]))
        except (KeyError, TypeError, ValueError) as e:
            raise DeserializationError("Point", repr(e)) from e


# A linestring is any ordered list of points; its positional indices double
# as segment indices (segment i joins vertex i and vertex i + 1).
LineString = list[Point]


@dataclass
class Polygon:
    """A polygon with one outer ring and zero or more holes.

    Rings are closed implicitly: the last vertex joins the first. A repeated
    closing vertex is accepted and simply yields a zero-length edge.

    Attributes:
        outer: Points of the outer ring
        holes: Point lists of the interior rings
    """

    outer: list[Point]
    holes: list[list[Point]] = field(default_factory=list)

    def rings(self) -> list[list[Point]]:
        """Get all rings, outer ring first.

        Returns:
            List of rings with ring index matching SegmentId.ring_index + 1
        """
        return [self.outer, *self.holes]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the polygon
        """
        return {
            "outer": [p.to_dict() for p in self.outer],
            "holes": [[p.to_dict() for p in hole] for hole in self.holes],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a polygon

        Returns:
            Polygon instance
        """
        try:
            outer = [Point.from_dict(p) for p in data["outer"]]
            holes = [[Point.from_dict(p) for p in hole] for hole in data.get("holes", [])]
        except (KeyError, TypeError) as e:
            raise DeserializationError("Polygon", repr(e)) from e
        return cls(outer=outer, holes=holes)
