"""
Answers whether an artifact is already loadable.

Two sources are consulted: the boot classpath snapshot captured once when
the downloader starts, and the entries added so far to the
:class:`DynamicClassLoader`. Matching is a substring test of
``artifact[-version]`` against each entry, so ``foo-1.0`` also matches an
entry named ``foo-1.0-tests.jar``.
"""

import os
import sys
from typing import Iterable, Optional, Tuple

from gavloader.classpath.dynamic_classloader import DynamicClassLoader
from gavloader.runtime_dependency_models import DependencyCoordinate


class ClasspathIndex:
    """
    Membership queries over the boot and dynamic classpaths.
    """

    def __init__(
        self,
        boot_classpath: Iterable[str],
        class_loader: DynamicClassLoader,
        download_listener=None,
    ):
        """
        Args:
            boot_classpath: Entries present at startup, copied into an immutable snapshot
            class_loader: The dynamic classloader whose entries grow at runtime
            download_listener: Optional listener notified when an artifact is already available
        """
        self._boot_classpath: Tuple[str, ...] = tuple(str(entry) for entry in boot_classpath)
        self.class_loader = class_loader
        self.download_listener = download_listener

    @classmethod
    def from_classpath_string(
        cls,
        classpath: str,
        class_loader: DynamicClassLoader,
        download_listener=None,
    ) -> "ClasspathIndex":
        """Build an index from an ``os.pathsep`` separated classpath string."""
        entries = [entry for entry in classpath.split(os.pathsep) if entry]
        return cls(entries, class_loader, download_listener)

    @staticmethod
    def snapshot_boot_classpath() -> Tuple[str, ...]:
        return tuple(sys.path)

    @property
    def boot_classpath(self) -> Tuple[str, ...]:
        return self._boot_classpath

    def contains_static(self, target: str) -> bool:
        return any(target in entry for entry in self._boot_classpath)

    def contains_dynamic(self, target: str) -> bool:
        return self.class_loader.contains(target)

    def already_available(
        self,
        group_id: Optional[str],
        artifact_id: Optional[str],
        version: Optional[str],
    ) -> bool:
        """
        Check whether the artifact is already on either classpath.

        A missing artifact id carries nothing to look for and counts as available.
        When a match is found the listener is told once, with the coordinate as given.
        """
        target = DependencyCoordinate(
            group_id=group_id, artifact_id=artifact_id, version=version
        ).classpath_target
        if target is None:
            return True

        if self.contains(target):
            self.notify_already_available(group_id, artifact_id, version)
            return True
        return False

    def contains(self, target: str) -> bool:
        """Presence on either classpath, without notifying the listener."""
        return self.contains_static(target) or self.contains_dynamic(target)

    def notify_already_available(
        self,
        group_id: Optional[str],
        artifact_id: Optional[str],
        version: Optional[str],
    ) -> None:
        listener = self.download_listener
        if listener is not None:
            listener.on_already_available(group_id, artifact_id, version)
