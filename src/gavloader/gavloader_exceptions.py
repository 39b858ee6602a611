"""
This file contains the exceptions raised by gavloader.
"""


class GavloaderException(Exception):
    """
    Base class for all gavloader exceptions.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DownloaderNotStartedError(GavloaderException):
    """
    Raised when a download is requested from a downloader that was never started or is stopped.
    """

    pass


class DependencyResolutionError(GavloaderException):
    """
    Raised when the resolver cannot satisfy a coordinate from any repository.
    """

    def __init__(self, gav: str, message: str):
        super().__init__(f"Failed to resolve {gav}: {message}")
        self.gav = gav


class ClasspathUpdateError(GavloaderException):
    """
    Raised when a resolved artifact cannot be added to the dynamic classpath.
    """

    def __init__(self, path: str, message: str):
        super().__init__(f"Cannot add {path} to classpath: {message}")
        self.path = path


class DownloadTimeoutError(GavloaderException):
    """
    Raised to a waiting caller when a download task exceeds the configured timeout.
    """

    def __init__(self, gav: str, timeout: float):
        super().__init__(f"Downloading {gav} did not complete within {timeout} seconds")
        self.gav = gav
        self.timeout = timeout


class DownloadTaskError(GavloaderException):
    """
    Raised when a download task fails after resolution, while adding the resolved artifacts.
    """

    def __init__(self, gav: str, message: str):
        super().__init__(f"Failed to install {gav}: {message}")
        self.gav = gav
