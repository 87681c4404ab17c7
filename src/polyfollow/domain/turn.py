"""Turn records produced by intersection detection.

A turn is a classified meeting point between the linestring and the polygon
boundary. Each turn carries one TurnOperation per participating geometry;
operations[0] always describes the linestring.

This module defines:
- SegmentId: Totally ordered identifier of one edge
- OperationType: What a geometry does at a turn
- Method: How the two geometries meet at a turn
- TurnOperation: One geometry's role at a turn
- Turn: The classified intersection event
"""

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Any

from polyfollow.domain.geometry import Point
from polyfollow.exceptions import DeserializationError, TurnError


class OperationType(str, Enum):
    """Operation kind of one geometry at a turn."""

    NONE = "none"
    UNION = "union"
    INTERSECTION = "intersection"
    BLOCKED = "blocked"
    CONTINUE = "continue"


class Method(str, Enum):
    """Topological classification of how two geometries meet.

    - CROSSES: the linestring passes through the boundary
    - TOUCH / TOUCH_INTERIOR: the linestring meets the boundary and turns back
    - COLLINEAR: the linestring runs along a boundary edge
    - EQUAL: both geometries share a vertex and continue collinearly
    """

    NONE = "none"
    DISJOINT = "disjoint"
    CROSSES = "crosses"
    TOUCH = "touch"
    TOUCH_INTERIOR = "touch_interior"
    COLLINEAR = "collinear"
    EQUAL = "equal"
    ERROR = "error"


@total_ordering
@dataclass(frozen=True, slots=True)
class SegmentId:
    """Identity of one edge within a possibly multi-part, holed geometry.

    Ordering is lexicographic over (source_index, multi_index, ring_index,
    segment_index) and is spelled out in compare() rather than borrowed from
    tuple comparison.

    Attributes:
        source_index: Which input geometry the edge belongs to
        multi_index: Part index for multi-geometries (-1 if not multi)
        ring_index: -1 for the outer ring or a linestring, else the hole index
        segment_index: Index of the edge; edge i starts at vertex i
    """

    source_index: int = 0
    multi_index: int = -1
    ring_index: int = -1
    segment_index: int = -1

    def compare(self, other: "SegmentId") -> int:
        """Three-way comparison against another segment id.

        Args:
            other: Segment id to compare with

        Returns:
            Negative if self sorts first, positive if other does, else 0
        """
        for mine, theirs in (
            (self.source_index, other.source_index),
            (self.multi_index, other.multi_index),
            (self.ring_index, other.ring_index),
            (self.segment_index, other.segment_index),
        ):
            if mine != theirs:
                return -1 if mine < theirs else 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SegmentId):
            return NotImplemented
        return self.compare(other) < 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with the four index fields
        """
        return {
            "source": self.source_index,
            "multi": self.multi_index,
            "ring": self.ring_index,
            "segment": self.segment_index,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SegmentId":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with source, multi, ring and segment fields

        Returns:
            SegmentId instance
        """
        try:
            return cls(
                source_index=int(data["source"]),
                multi_index=int(data["multi"]),
                ring_index=int(data["ring"]),
                segment_index=int(data["segment"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise DeserializationError("SegmentId", repr(e)) from e


# Segment id that precedes every real edge of a linestring
NO_SEGMENT = SegmentId(0, -1, -1, -1)


@dataclass(frozen=True, slots=True)
class TurnOperation:
    """One geometry's role at a turn.

    Attributes:
        operation: What this geometry does after the turn
        seg_id: Edge of this geometry on which the turn lies
        distance: Enriched distance, the relative position of the turn along
            seg_id; only compared between turns on the same edge
    """

    operation: OperationType
    seg_id: SegmentId
    distance: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "operation": self.operation.value,
            "seg_id": self.seg_id.to_dict(),
            "distance": self.distance,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TurnOperation":
        """Deserialize from dictionary."""
        try:
            return cls(
                operation=OperationType(data["operation"]),
                seg_id=SegmentId.from_dict(data["seg_id"]),
                distance=float(data.get("distance", 0.0)),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise DeserializationError("TurnOperation", repr(e)) from e


@dataclass
class Turn:
    """A classified intersection event between linestring and polygon boundary.

    Attributes:
        point: Location of the turn
        method: How the geometries meet here
        operations: Per-geometry roles, linestring first

    Raises:
        TurnError: If no operations are given
    """

    point: Point
    method: Method
    operations: list[TurnOperation] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.operations:
            raise TurnError(f"Turn at {self.point.to_tuple()} has no operations")

    @property
    def linestring_operation(self) -> TurnOperation:
        """Get the operation describing the linestring's role."""
        return self.operations[0]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the turn
        """
        return {
            "point": self.point.to_dict(),
            "method": self.method.value,
            "operations": [op.to_dict() for op in self.operations],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Turn":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a turn

        Returns:
            Turn instance
        """
        try:
            point = Point.from_dict(data["point"])
            method = Method(data["method"])
            operations = [TurnOperation.from_dict(op) for op in data["operations"]]
        except (KeyError, TypeError, ValueError) as e:
            raise DeserializationError("Turn", repr(e)) from e
        return cls(point=point, method=method, operations=operations)
