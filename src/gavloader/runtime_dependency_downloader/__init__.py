"""
Runtime dependency downloader.

This package handles:
1. Deduplicating concurrent download requests per GAV
2. Running downloads on a bounded worker pool
3. Delegating resolution to the host's resolver
4. Adding newly resolved artifacts to the dynamic classpath
"""

from .downloader import DependencyDownloader
from .listener import DependencyAuditListener, DownloadListener
from .resolver import DependencyResolver
from .thread_pool import DownloadThreadPool

__all__ = [
    "DependencyAuditListener",
    "DependencyDownloader",
    "DependencyResolver",
    "DownloadListener",
    "DownloadThreadPool",
]
