"""Utility functions for polyfollow.

This module provides logging setup and the structured traversal tracer.
"""

from polyfollow.utils.logging import (
    FollowLogger,
    FollowStats,
    configure_logging,
)

__all__ = [
    "FollowLogger",
    "FollowStats",
    "configure_logging",
]
