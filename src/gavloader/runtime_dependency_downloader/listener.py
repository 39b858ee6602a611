"""
Download listener contract.

The downloader calls the registered listener synchronously, from the thread
that triggered the event, at two points: whenever a download is requested
and whenever a requested or resolved artifact turns out to be on the
classpath already.
"""

import threading
from typing import List, Optional, Protocol, runtime_checkable

from gavloader.runtime_dependency_models import DependencyCoordinate


@runtime_checkable
class DownloadListener(Protocol):
    """Observer of download requests."""

    def on_download_requested(
        self, group_id: Optional[str], artifact_id: Optional[str], version: Optional[str]
    ) -> None:
        """Called for every request, before checking whether anything needs fetching."""
        ...

    def on_already_available(
        self, group_id: Optional[str], artifact_id: Optional[str], version: Optional[str]
    ) -> None:
        """Called when an artifact is skipped because it is already on the classpath."""
        ...


class DependencyAuditListener:
    """
    Records every coordinate a run asks for, and those that were already present.

    Useful to export the list of dependencies an application needs. Safe to
    share between threads.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._requested: List[DependencyCoordinate] = []
        self._already_available: List[DependencyCoordinate] = []

    def on_download_requested(self, group_id, artifact_id, version) -> None:
        coordinate = DependencyCoordinate(group_id=group_id, artifact_id=artifact_id, version=version)
        with self._lock:
            self._requested.append(coordinate)

    def on_already_available(self, group_id, artifact_id, version) -> None:
        coordinate = DependencyCoordinate(group_id=group_id, artifact_id=artifact_id, version=version)
        with self._lock:
            self._already_available.append(coordinate)

    @property
    def requested(self) -> List[DependencyCoordinate]:
        with self._lock:
            return list(self._requested)

    @property
    def already_available(self) -> List[DependencyCoordinate]:
        with self._lock:
            return list(self._already_available)

    def required_gavs(self) -> List[str]:
        """Distinct requested GAVs in first-seen order."""
        seen = {}
        for coordinate in self.requested:
            seen.setdefault(coordinate.gav, None)
        return list(seen)
