"""
Runtime dependency configuration.

This package handles building the ordered repository lists that download
tasks hand to the resolver.
"""

from .repository_list import (
    APACHE_SNAPSHOT_REPO,
    MAVEN_CENTRAL_REPO,
    RepositoryListBuilder,
)

__all__ = ["APACHE_SNAPSHOT_REPO", "MAVEN_CENTRAL_REPO", "RepositoryListBuilder"]
