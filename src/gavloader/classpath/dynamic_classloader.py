"""
Append-only dynamic import path.

Artifacts fetched at runtime are added here. Each entry is also appended to
the process import path (``sys.path`` by default) so that archives such as
wheels and zip files become importable as soon as they are added.
"""

import importlib
import logging
import os
import sys
import threading
from typing import List, Optional, Tuple, Union

from gavloader.gavloader_exceptions import ClasspathUpdateError
from gavloader.gavloader_logger import GavloaderLogger


class DynamicClassLoader:
    """
    Holds the entries added at runtime.

    Entries are only ever appended; nothing is removed or reordered for the
    lifetime of the loader. All methods are safe to call from several threads.
    """

    def __init__(
        self,
        logger: GavloaderLogger,
        import_path: Optional[List[str]] = None,
    ):
        """
        Args:
            logger: Logger for classpath changes
            import_path: Path list new entries are published to, defaults to ``sys.path``
        """
        self.logger = logger
        self._import_path = sys.path if import_path is None else import_path
        self._entries: List[str] = []
        self._lock = threading.Lock()

    def add(self, file: Union[str, os.PathLike]) -> None:
        """
        Append an artifact file to the dynamic classpath.

        Adding a file that is already present is a no-op.

        Raises:
            ClasspathUpdateError: If the file does not exist or cannot be read
        """
        path = os.path.abspath(os.fspath(file))
        if not os.path.exists(path):
            raise ClasspathUpdateError(path, "file does not exist")
        if not os.access(path, os.R_OK):
            raise ClasspathUpdateError(path, "file is not readable")

        with self._lock:
            if path in self._entries:
                self.logger.log(f"Already on dynamic classpath: {path}", logging.DEBUG)
                return
            if path not in self._import_path:
                self._import_path.append(path)
            self._entries.append(path)

        importlib.invalidate_caches()

    def get_entries(self) -> Tuple[str, ...]:
        """Snapshot of the entries added so far, in insertion order."""
        with self._lock:
            return tuple(self._entries)

    def contains(self, target: str) -> bool:
        """True if any entry added so far contains ``target`` as a substring."""
        return any(target in entry for entry in self.get_entries())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
