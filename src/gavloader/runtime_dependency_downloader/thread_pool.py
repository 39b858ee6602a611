"""
Bounded worker pool for download tasks.

Tasks run on a ThreadPoolExecutor. The pool logs failures and slow
downloads as tasks finish, and offers a wait loop that reports progress
while a caller blocks on a task.
"""

import concurrent.futures
import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from functools import partial
from typing import Any, Callable, Optional

from gavloader.gavloader_exceptions import DownloaderNotStartedError, DownloadTimeoutError
from gavloader.gavloader_logger import GavloaderLogger

# downloads slower than this are reported at INFO
SLOW_DOWNLOAD_SECONDS = 1.0


def format_duration(seconds: float) -> str:
    """Human readable duration, e.g. ``850ms``, ``4.2s`` or ``3m12s``."""
    if seconds < 1:
        return f"{int(seconds * 1000)}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, rest = divmod(int(seconds), 60)
    return f"{minutes}m{rest}s"


class DownloadThreadPool:
    """
    Executes download tasks on a bounded number of threads.
    """

    def __init__(
        self,
        logger: GavloaderLogger,
        max_workers: int = 4,
        progress_interval: float = 5.0,
    ):
        """
        Args:
            logger: Logger for task progress and failures
            max_workers: Maximum number of concurrent downloads
            progress_interval: Seconds between progress lines in await_completion
        """
        self.logger = logger
        self.max_workers = max_workers
        self.progress_interval = progress_interval
        self._executor: Optional[ThreadPoolExecutor] = None
        self._lock = threading.Lock()

    def start(self) -> None:
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.max_workers,
                    thread_name_prefix="gavloader-download",
                )

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._executor is not None

    def submit(self, task: Callable[[], Any], gav: str) -> Future:
        """
        Queue a task. Never blocks on the task itself.

        Raises:
            DownloaderNotStartedError: If the pool is not running
        """
        with self._lock:
            if self._executor is None:
                raise DownloaderNotStartedError(f"Download pool is not running, cannot download {gav}")
            future = self._executor.submit(task)
        future.add_done_callback(partial(self._on_done, gav, time.monotonic()))
        return future

    def _on_done(self, gav: str, started: float, future: Future) -> None:
        if future.cancelled():
            self.logger.log(f"Download cancelled: {gav}", logging.INFO)
            return

        error = future.exception()
        if error is not None:
            self.logger.log(f"Error downloading: {gav} due: {error}", logging.ERROR)
            return

        taken = time.monotonic() - started
        level = logging.INFO if taken > SLOW_DOWNLOAD_SECONDS else logging.DEBUG
        self.logger.log(f"Downloaded: {gav} (took: {format_duration(taken)})", level)

    def await_completion(self, future: Future, gav: str, timeout: Optional[float] = None) -> Any:
        """
        Block until the task finishes, logging progress every ``progress_interval`` seconds.

        Returns:
            The task result

        Raises:
            DownloadTimeoutError: If the task is still running after ``timeout`` seconds
            Exception: Whatever the task raised
        """
        started = time.monotonic()
        while True:
            wait = self.progress_interval
            if timeout is not None:
                remaining = timeout - (time.monotonic() - started)
                if remaining <= 0:
                    raise DownloadTimeoutError(gav, timeout)
                wait = min(wait, remaining)
            try:
                return future.result(timeout=wait)
            except concurrent.futures.TimeoutError:
                elapsed = time.monotonic() - started
                self.logger.log(f"Downloading: {gav} (elapsed: {format_duration(elapsed)})", logging.INFO)

    def shutdown(self, wait: bool = True, cancel_pending: bool = False) -> None:
        """
        Stop accepting tasks and release the threads.

        Args:
            wait: Block until running tasks have finished
            cancel_pending: Cancel tasks that have not started yet
        """
        with self._lock:
            executor = self._executor
            self._executor = None
        if executor is not None:
            executor.shutdown(wait=wait, cancel_futures=cancel_pending)
