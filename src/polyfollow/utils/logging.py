"""Logging utilities for polyfollow."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from polyfollow.core.follower import TraceEvent
    from polyfollow.domain import Point


@dataclass
class FollowStats:
    """Statistics from one traversal."""

    turns_seen: int = 0
    was_entered_count: int = 0
    staying_inside_count: int = 0
    entering_count: int = 0
    leaving_count: int = 0
    unclassified_count: int = 0
    vertices_copied: int = 0
    pieces_emitted: int = 0
    ended_inside: bool = False

    def record_branch(self, branch: str) -> None:
        """Count one classification branch.

        Args:
            branch: Branch name as carried by TraceEvent.branch
        """
        self.turns_seen += 1
        if branch == "was entered":
            self.was_entered_count += 1
        elif branch == "staying inside":
            self.staying_inside_count += 1
        elif branch == "entering":
            self.entering_count += 1
        elif branch == "leaving":
            self.leaving_count += 1
        else:
            self.unclassified_count += 1


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("polyfollow")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class FollowLogger:
    """Structured tracer for traversals.

    Instances are callable so they can be handed to the follower as its
    trace hook; each call logs the branch and updates the running stats.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = FollowStats()

    def __call__(self, event: "TraceEvent") -> None:
        self.log_branch(event)

    def log_branch(self, event: "TraceEvent") -> None:
        """Log one classification branch."""
        op = event.operation
        self._logger.debug(
            "Turn classified",
            branch=event.branch,
            index=event.index,
            point=event.turn.point.to_tuple(),
            method=event.turn.method.value,
            operation=op.operation.value,
            segment=op.seg_id.segment_index,
            distance=op.distance,
            entered=event.entered,
        )
        self._stats.record_branch(event.branch)

    def log_piece(self, piece: list["Point"]) -> None:
        """Log an emitted piece."""
        self._logger.debug(
            "Piece emitted",
            size=len(piece),
            start=piece[0].to_tuple(),
            end=piece[-1].to_tuple(),
        )
        self._stats.pieces_emitted += 1

    def log_follow_complete(self, stats: FollowStats, duration_ms: float) -> None:
        """Log the summary of one traversal."""
        self._logger.info(
            "Linestring followed",
            turns=stats.turns_seen,
            pieces=stats.pieces_emitted,
            vertices_copied=stats.vertices_copied,
            ended_inside=stats.ended_inside,
            duration_ms=round(duration_ms, 3),
        )

    @property
    def stats(self) -> FollowStats:
        """Get statistics accumulated over every traced call."""
        return self._stats
