"""
Domain Models Package
Export all domain entities
"""

from .fatigue import (
    # Enums
    FatigueLevel,

    # Entities
    FatigueInput,
    FatigueResult,
    ProjectionSegment,
    TimeProjection,
)

__all__ = [
    # Enums
    "FatigueLevel",

    # Entities
    "FatigueInput",
    "FatigueResult",
    "ProjectionSegment",
    "TimeProjection",
]
