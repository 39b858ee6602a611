"""
Dependency downloader implementation.

Ensures that requested artifacts and their transitive dependencies are on the
classpath, fetching them through the resolver only when they are missing.
"""

import logging
import threading
from concurrent.futures import Future
from contextlib import contextmanager
from functools import partial
from typing import Dict, Iterator, List, Optional, Sequence, Union

from gavloader.classpath import ClasspathIndex, DynamicClassLoader
from gavloader.gavloader_config import GavloaderConfig, split_repos
from gavloader.gavloader_exceptions import (
    DependencyResolutionError,
    DownloaderNotStartedError,
    DownloadTaskError,
    GavloaderException,
)
from gavloader.gavloader_logger import GavloaderLogger
from gavloader.runtime_dependency_config import RepositoryListBuilder
from gavloader.runtime_dependency_downloader.listener import DownloadListener
from gavloader.runtime_dependency_downloader.resolver import DependencyResolver
from gavloader.runtime_dependency_downloader.thread_pool import DownloadThreadPool
from gavloader.runtime_dependency_models import DependencyCoordinate, ResolvedArtifact


class DependencyDownloader:
    """
    Downloads runtime dependencies on demand and adds them to the classpath.

    Requests are fire-and-forget: :meth:`ensure` hands the work to a bounded
    pool of download threads and returns immediately. At most one download
    per GAV is in flight at any time; concurrent requests for the same GAV
    share the same Future.

    Lifecycle: :meth:`start` captures the boot classpath and starts the pool,
    :meth:`stop` shuts the pool down. ``start_downloader()`` does both.
    """

    def __init__(
        self,
        config: GavloaderConfig,
        logger: GavloaderLogger,
        resolver: DependencyResolver,
        class_loader: Optional[DynamicClassLoader] = None,
        boot_classpath: Optional[Sequence[str]] = None,
        download_listener: Optional[DownloadListener] = None,
    ):
        """
        Initialize the dependency downloader.

        Args:
            config: Downloader configuration
            logger: Logger for progress and error messages
            resolver: Resolver that turns coordinates into local files
            class_loader: Dynamic classloader that fetched artifacts are added to,
                a new one publishing to ``sys.path`` when omitted
            boot_classpath: Boot classpath entries, ``sys.path`` at start() when omitted
            download_listener: Optional observer of requests and skipped artifacts
        """
        self.config = config
        self.logger = logger
        self.resolver = resolver
        self.class_loader = class_loader or DynamicClassLoader(logger)
        self.repository_list_builder = RepositoryListBuilder(config.framework_group)
        self.thread_pool = DownloadThreadPool(
            logger,
            max_workers=config.max_workers,
            progress_interval=config.progress_interval,
        )
        self.classpath_index: Optional[ClasspathIndex] = None

        self._boot_classpath = boot_classpath
        self._download_listener = download_listener
        self._repos: List[str] = list(config.repos)
        self._fresh = config.fresh
        self._in_flight: Dict[str, Future] = {}
        self._lock = threading.Lock()

    @property
    def download_listener(self) -> Optional[DownloadListener]:
        return self._download_listener

    @download_listener.setter
    def download_listener(self, listener: Optional[DownloadListener]) -> None:
        self._download_listener = listener
        if self.classpath_index is not None:
            self.classpath_index.download_listener = listener

    @property
    def repos(self) -> List[str]:
        return list(self._repos)

    @repos.setter
    def repos(self, repos: Union[str, Sequence[str], None]) -> None:
        self._repos = split_repos(repos)

    @property
    def fresh(self) -> bool:
        return self._fresh

    @fresh.setter
    def fresh(self, fresh: bool) -> None:
        self._fresh = fresh

    def start(self) -> None:
        """
        Capture the boot classpath and start the download pool.

        Calling start on a running downloader has no effect.
        """
        with self._lock:
            if self.thread_pool.is_running:
                return
            if self.classpath_index is None:
                boot_classpath = self._boot_classpath
                if boot_classpath is None:
                    boot_classpath = ClasspathIndex.snapshot_boot_classpath()
                self.classpath_index = ClasspathIndex(
                    boot_classpath, self.class_loader, self._download_listener
                )
            self.thread_pool.start()

        self.logger.log(
            f"Dependency downloader started with {self.config.max_workers} workers "
            f"and {len(self.classpath_index.boot_classpath)} boot classpath entries",
            logging.DEBUG,
        )

    def stop(self, wait: bool = True, cancel_pending: bool = False) -> None:
        """
        Stop accepting downloads and release the pool.

        Args:
            wait: Block until running downloads have finished
            cancel_pending: Abandon downloads that have not started yet
        """
        self.thread_pool.shutdown(wait=wait, cancel_pending=cancel_pending)
        self.logger.log("Dependency downloader stopped", logging.DEBUG)

    @contextmanager
    def start_downloader(self) -> Iterator["DependencyDownloader"]:
        """
        Starts the downloader and yields it. On exit, waits for running downloads and stops it.

        Usage:
        ```
        with downloader.start_downloader():
            downloader.ensure("org.apache.camel", "camel-kafka", "4.4.0")
        ```
        """
        self.start()
        try:
            yield self
        finally:
            self.stop()

    def ensure(
        self,
        group_id: Optional[str],
        artifact_id: Optional[str],
        version: Optional[str] = None,
    ) -> Optional[Future]:
        """
        Make sure an artifact and its dependencies end up on the classpath.

        The listener is told about the request first, even if nothing needs
        fetching. If the artifact is already available nothing is submitted.
        Otherwise a download task is queued, unless one for the same GAV is
        already in flight, in which case that task's Future is returned.

        Returns:
            The Future of the download task, or None if the artifact was already available

        Raises:
            DownloaderNotStartedError: If the downloader is not running
        """
        listener = self._download_listener
        if listener is not None:
            listener.on_download_requested(group_id, artifact_id, version)

        coordinate = DependencyCoordinate(group_id=group_id, artifact_id=artifact_id, version=version)
        gav = coordinate.gav
        target = coordinate.classpath_target

        # listener callbacks run outside the lock
        with self._lock:
            if self.classpath_index is None or not self.thread_pool.is_running:
                raise DownloaderNotStartedError(f"Dependency downloader is not running, cannot download {gav}")

            future = self._in_flight.get(gav)
            if future is not None:
                self.logger.log(f"Download already in progress: {gav}", logging.DEBUG)
                return future

            if target is None:
                return None

            present = self.classpath_index.contains(target)
            if not present:
                future = self.thread_pool.submit(partial(self._download, coordinate), gav)
                self._in_flight[gav] = future

        if present:
            self.classpath_index.notify_already_available(group_id, artifact_id, version)
            return None

        future.add_done_callback(partial(self._release, gav))
        return future

    def download_dependency(
        self,
        group_id: Optional[str],
        artifact_id: Optional[str],
        version: Optional[str] = None,
    ) -> List[ResolvedArtifact]:
        """
        Blocking variant of :meth:`ensure`.

        Returns:
            The artifacts this call's task added to the classpath, empty if nothing was fetched

        Raises:
            DownloadTimeoutError: If the download exceeds the configured timeout
            GavloaderException: If resolution or the classpath update failed
        """
        future = self.ensure(group_id, artifact_id, version)
        if future is None:
            return []
        gav = DependencyCoordinate(group_id=group_id, artifact_id=artifact_id, version=version).gav
        return self.thread_pool.await_completion(future, gav, self.config.download_timeout)

    def await_all(self) -> None:
        """
        Wait for every download currently in flight.

        All downloads are awaited before the first failure, if any, is raised.
        """
        with self._lock:
            pending = list(self._in_flight.items())

        first_error: Optional[BaseException] = None
        for gav, future in pending:
            try:
                self.thread_pool.await_completion(future, gav, self.config.download_timeout)
            except Exception as e:
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error

    def in_flight(self) -> List[str]:
        """GAV keys of the downloads currently in flight."""
        with self._lock:
            return list(self._in_flight)

    def _release(self, gav: str, future: Future) -> None:
        with self._lock:
            if self._in_flight.get(gav) is future:
                del self._in_flight[gav]

    def _download(self, coordinate: DependencyCoordinate) -> List[ResolvedArtifact]:
        """
        Download task body: resolve the coordinate and add missing artifacts.

        Returns:
            The artifacts added to the classpath
        """
        gav = coordinate.gav
        self.logger.log(f"Downloading: {gav}", logging.DEBUG)

        repositories = self.repository_list_builder.build(
            coordinate.group_id, coordinate.version, self._repos
        )
        try:
            artifacts = self.resolver.resolve(
                [coordinate],
                repositories,
                use_cache=False,
                fresh=self._fresh,
                transitive=True,
            )
        except GavloaderException:
            raise
        except Exception as e:
            raise DependencyResolutionError(gav, str(e)) from e

        self.logger.log(
            f"Resolved {gav} -> [{', '.join(str(a) for a in artifacts)}]",
            logging.DEBUG,
        )

        try:
            return self._add_missing(artifacts)
        except GavloaderException:
            raise
        except Exception as e:
            raise DownloadTaskError(gav, f"{type(e).__name__}: {e}") from e

    def _add_missing(self, artifacts: List[ResolvedArtifact]) -> List[ResolvedArtifact]:
        added = []
        for artifact in artifacts:
            dep = artifact.coordinate
            # only add to classpath if not already present
            if not self.classpath_index.already_available(dep.group_id, dep.artifact_id, dep.version):
                self.class_loader.add(artifact.file)
                self.logger.log(f"Added classpath: {dep.gav}", logging.DEBUG)
                added.append(artifact)
        return added
