"""Unit tests for logging utilities and settings."""

import logging
from unittest.mock import MagicMock

import pytest
import structlog
from pydantic import ValidationError

from polyfollow.config import FollowerSettings, GeometryConfig, get_default_settings
from polyfollow.core.follower import TraceEvent
from polyfollow.domain import Method, OperationType, Point, SegmentId, Turn, TurnOperation
from polyfollow.utils.logging import FollowLogger, FollowStats, configure_logging


def make_event(branch: str) -> TraceEvent:
    op = TurnOperation(OperationType.INTERSECTION, SegmentId(0, -1, -1, 2), 0.5)
    turn = Turn(point=Point(1.0, 2.0), method=Method.CROSSES, operations=[op])
    return TraceEvent(branch=branch, index=0, turn=turn, operation=op, entered=True, first=True)


class TestFollowStats:
    def test_record_branch(self):
        stats = FollowStats()
        for branch in ["entering", "leaving", "entering", "was entered", "staying inside", "other"]:
            stats.record_branch(branch)
        assert stats.turns_seen == 6
        assert stats.entering_count == 2
        assert stats.leaving_count == 1
        assert stats.was_entered_count == 1
        assert stats.staying_inside_count == 1
        assert stats.unclassified_count == 1


class TestFollowLogger:
    """Tests for the structured tracer."""

    def test_log_branch(self):
        mock_logger = MagicMock()
        follow_logger = FollowLogger(mock_logger)

        follow_logger(make_event("entering"))

        mock_logger.debug.assert_called_once()
        _, kwargs = mock_logger.debug.call_args
        assert kwargs["branch"] == "entering"
        assert kwargs["point"] == (1.0, 2.0)
        assert kwargs["method"] == "crosses"
        assert kwargs["segment"] == 2
        assert follow_logger.stats.entering_count == 1

    def test_log_piece(self):
        mock_logger = MagicMock()
        follow_logger = FollowLogger(mock_logger)

        follow_logger.log_piece([Point(0, 0), Point(1, 1), Point(2, 0)])

        _, kwargs = mock_logger.debug.call_args
        assert kwargs["size"] == 3
        assert kwargs["start"] == (0, 0)
        assert kwargs["end"] == (2, 0)
        assert follow_logger.stats.pieces_emitted == 1

    def test_log_follow_complete(self):
        mock_logger = MagicMock()
        follow_logger = FollowLogger(mock_logger)
        stats = FollowStats(turns_seen=4, pieces_emitted=2, vertices_copied=5)

        follow_logger.log_follow_complete(stats, duration_ms=1.23456)

        _, kwargs = mock_logger.info.call_args
        assert kwargs["turns"] == 4
        assert kwargs["pieces"] == 2
        assert kwargs["duration_ms"] == 1.235


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_root_handlers(self):
        root = logging.getLogger()
        handlers = list(root.handlers)
        level = root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers = handlers
        root.setLevel(level)
        structlog.reset_defaults()

    def test_writes_log_file(self, tmp_path):
        log_file = tmp_path / "follow.log"
        logger = configure_logging(log_file=log_file, quiet=True)
        logger.info("Hello", answer=42)
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert log_file.exists()
        assert "Hello" in log_file.read_text(encoding="utf-8")


class TestSettings:
    """Tests for pydantic settings."""

    def test_defaults(self):
        settings = get_default_settings()
        assert settings.geometry.point_tolerance == 0.0
        assert settings.geometry.boundary_tolerance == 1e-9
        assert settings.trace.log_branches is False
        assert settings.logging.log_file is None

    def test_negative_tolerance_rejected(self):
        with pytest.raises(ValidationError):
            GeometryConfig(point_tolerance=-1.0)

    def test_nested_from_dict(self):
        settings = FollowerSettings(**{"geometry": {"point_tolerance": 0.5}})
        assert settings.geometry.point_tolerance == 0.5
