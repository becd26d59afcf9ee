"""
Unified models library for the Archery Pop project.

This package provides all Pydantic data models used across the system:
- Primitives: Basic geometric types (Point2D, Rectangle)
- Archery Pop: Session, target, scoring and configuration models

Usage:
    >>> from models import Point2D, TargetData, RunState
    >>> from models.archerypop import SessionConfig
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Point2D,
    Rectangle,
)

# ============================================================================
# Archery Pop models
# ============================================================================
from .archerypop import (
    RunState,
    TargetState,
    EndReason,
    TargetData,
    ScoreData,
    TargetView,
    FinalSummary,
    SessionSnapshot,
    SessionConfig,
)

__all__ = [
    # Primitives
    "Point2D",
    "Rectangle",
    # Archery Pop
    "RunState",
    "TargetState",
    "EndReason",
    "TargetData",
    "ScoreData",
    "TargetView",
    "FinalSummary",
    "SessionSnapshot",
    "SessionConfig",
]
