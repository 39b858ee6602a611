"""
Pydantic data models for dependency coordinates and resolved artifacts.

A coordinate identifies a Maven style component by group, artifact and
version ("GAV"). A resolved artifact pairs a coordinate with the local file
the resolver fetched for it.
"""

import pathlib
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

SNAPSHOT_MARKER = "SNAPSHOT"


class DependencyCoordinate(BaseModel):
    """
    An immutable group/artifact/version triple.

    The version may be absent, in which case the coordinate renders as
    ``group:artifact`` and matches any version on the classpath.
    """

    group_id: Optional[str] = Field(None, alias="groupId", description="Group identifier")
    artifact_id: Optional[str] = Field(None, alias="artifactId", description="Artifact identifier")
    version: Optional[str] = Field(None, description="Version, absent means any")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_gav(cls, gav: str) -> "DependencyCoordinate":
        """
        Parse a ``group:artifact`` or ``group:artifact:version`` string.

        Raises:
            ValueError: If the string does not have two or three non-empty parts
        """
        parts = gav.split(":")
        if len(parts) not in (2, 3) or not all(parts):
            raise ValueError(f"Invalid GAV, expected group:artifact[:version]: {gav!r}")
        return cls(
            group_id=parts[0],
            artifact_id=parts[1],
            version=parts[2] if len(parts) == 3 else None,
        )

    @property
    def gav(self) -> str:
        """The task key ``group:artifact:version`` (version omitted if absent)."""
        parts = [self.group_id or "", self.artifact_id or ""]
        if self.version is not None:
            parts.append(self.version)
        return ":".join(parts)

    @property
    def classpath_target(self) -> Optional[str]:
        """
        The string searched for in classpath entries, ``artifact[-version]``.

        None when there is no artifact id to look for.
        """
        if self.artifact_id is None:
            return None
        if self.version is not None:
            return f"{self.artifact_id}-{self.version}"
        return self.artifact_id

    @property
    def is_snapshot(self) -> bool:
        return self.version is not None and SNAPSHOT_MARKER in self.version

    def __str__(self) -> str:
        return self.gav


class ResolvedArtifact(BaseModel):
    """
    A coordinate together with the local file the resolver produced for it.
    """

    coordinate: DependencyCoordinate
    file: pathlib.Path = Field(..., description="Local path of the fetched artifact")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.coordinate.gav} -> {self.file}"
