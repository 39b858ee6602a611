"""
gavloader: fetch Maven style dependencies at runtime and put them on the import path.
"""

from gavloader.gavloader_config import GavloaderConfig
from gavloader.gavloader_exceptions import GavloaderException
from gavloader.gavloader_logger import GavloaderLogger
from gavloader.runtime_dependency_downloader import DependencyDownloader

__all__ = ["DependencyDownloader", "GavloaderConfig", "GavloaderException", "GavloaderLogger"]
