"""
Shared fixtures for the gavloader tests.

The resolver is replaced by an in-memory fake and the dynamic classloader
publishes to a private list instead of ``sys.path``.
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Union

import pytest

from gavloader.classpath import DynamicClassLoader
from gavloader.gavloader_config import GavloaderConfig
from gavloader.gavloader_logger import GavloaderLogger
from gavloader.runtime_dependency_downloader import DependencyAuditListener, DependencyDownloader
from gavloader.runtime_dependency_models import DependencyCoordinate, ResolvedArtifact

BOOT_CLASSPATH = [
    "/opt/app/lib/camel-core-engine-4.4.0.jar",
    "/opt/app/lib/slf4j-api-2.0.9.jar",
    "/usr/lib/python3/site-packages",
]


@dataclass
class ResolveCall:
    coordinates: List[DependencyCoordinate]
    repositories: List[str]
    use_cache: bool
    fresh: bool
    transitive: bool


class FakeResolver:
    """
    Resolver returning canned results keyed by the GAV of the first coordinate.

    A result is either a list of ResolvedArtifact or an exception to raise.
    Resolution blocks until ``gate`` is set, which it is by default.
    """

    def __init__(self, results: Dict[str, Union[List[ResolvedArtifact], Exception]] = None):
        self.results = results or {}
        self.gate = threading.Event()
        self.gate.set()
        self.calls: List[ResolveCall] = []
        self._lock = threading.Lock()

    def resolve(
        self,
        coordinates: Sequence[DependencyCoordinate],
        repositories: Sequence[str],
        use_cache: bool,
        fresh: bool,
        transitive: bool,
    ) -> List[ResolvedArtifact]:
        with self._lock:
            self.calls.append(
                ResolveCall(list(coordinates), list(repositories), use_cache, fresh, transitive)
            )
        self.gate.wait(timeout=10)
        result = self.results.get(coordinates[0].gav)
        if result is None:
            raise LookupError(f"Could not find artifact {coordinates[0].gav} in any repository")
        if isinstance(result, Exception):
            raise result
        return list(result)


def wait_until(condition: Callable[[], bool], timeout: float = 5.0) -> bool:
    """Poll ``condition`` until it holds or ``timeout`` expires."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.01)
    return condition()


@pytest.fixture
def logger():
    return GavloaderLogger()


@pytest.fixture
def import_path():
    """Stand-in for sys.path."""
    return []


@pytest.fixture
def class_loader(logger, import_path):
    return DynamicClassLoader(logger, import_path=import_path)


@pytest.fixture
def listener():
    return DependencyAuditListener()


@pytest.fixture
def make_artifact(tmp_path):
    """Create a jar file on disk and return the matching ResolvedArtifact."""

    def _make(group_id: str, artifact_id: str, version: str) -> ResolvedArtifact:
        repo_dir = tmp_path / "repository" / group_id.replace(".", "/") / artifact_id / version
        repo_dir.mkdir(parents=True, exist_ok=True)
        jar = repo_dir / f"{artifact_id}-{version}.jar"
        jar.write_bytes(b"PK\x05\x06" + b"\x00" * 18)
        return ResolvedArtifact(
            coordinate=DependencyCoordinate(group_id=group_id, artifact_id=artifact_id, version=version),
            file=jar,
        )

    return _make


@pytest.fixture
def make_downloader(logger, class_loader, listener):
    """Factory for started downloaders; stops them after the test."""
    created = []

    def _make(resolver: FakeResolver, **config_overrides) -> DependencyDownloader:
        config = GavloaderConfig.from_dict(config_overrides)
        downloader = DependencyDownloader(
            config,
            logger,
            resolver,
            class_loader=class_loader,
            boot_classpath=BOOT_CLASSPATH,
            download_listener=listener,
        )
        downloader.start()
        created.append((downloader, resolver))
        return downloader

    yield _make

    for downloader, resolver in created:
        resolver.gate.set()
        downloader.stop()
