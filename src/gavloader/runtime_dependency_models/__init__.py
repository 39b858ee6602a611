"""
Runtime dependency models.

This package provides Pydantic data models for the coordinates requested
at runtime and the artifacts the resolver returns for them.
"""

from .coordinates import (
    DependencyCoordinate,
    ResolvedArtifact,
    SNAPSHOT_MARKER,
)

__all__ = [
    "DependencyCoordinate",
    "ResolvedArtifact",
    "SNAPSHOT_MARKER",
]
