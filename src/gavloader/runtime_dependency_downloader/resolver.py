"""
Resolver contract.

Dependency graph resolution (version conflicts, transitive closure and the
repository protocol) is delegated to an implementation of
:class:`DependencyResolver` supplied by the host.
"""

from typing import List, Protocol, Sequence, runtime_checkable

from gavloader.runtime_dependency_models import DependencyCoordinate, ResolvedArtifact


@runtime_checkable
class DependencyResolver(Protocol):
    """Resolves coordinates to local artifact files."""

    def resolve(
        self,
        coordinates: Sequence[DependencyCoordinate],
        repositories: Sequence[str],
        use_cache: bool,
        fresh: bool,
        transitive: bool,
    ) -> List[ResolvedArtifact]:
        """
        Resolve the coordinates, and their dependencies when ``transitive`` is set.

        Args:
            coordinates: Coordinates to resolve
            repositories: Repository URLs, tried in order
            use_cache: Whether the resolver may answer from its local cache only
            fresh: Force re-resolution against the remote repositories
            transitive: Include transitive dependencies in the result

        Returns:
            The resolved artifacts with their local files

        Raises:
            Exception: When no repository satisfies a coordinate or on network failure
        """
        ...
