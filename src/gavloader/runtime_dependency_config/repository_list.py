"""
Repository list construction.

Builds the ordered list of remote repositories the resolver consults for a
coordinate: Maven Central first, then operator supplied repositories, then
the Apache snapshot repository for the framework's own snapshot builds.
"""

from typing import List, Optional, Sequence, Union

from gavloader.gavloader_config import DEFAULT_FRAMEWORK_GROUP, split_repos
from gavloader.runtime_dependency_models.coordinates import SNAPSHOT_MARKER

MAVEN_CENTRAL_REPO = "https://repo1.maven.org/maven2/"
APACHE_SNAPSHOT_REPO = "https://repository.apache.org/snapshots"


class RepositoryListBuilder:
    """
    Builds repository lists for download tasks.

    The builder holds no per-call state and can be shared between worker threads.
    """

    def __init__(
        self,
        framework_group: str = DEFAULT_FRAMEWORK_GROUP,
        central_repo: str = MAVEN_CENTRAL_REPO,
        snapshot_repo: str = APACHE_SNAPSHOT_REPO,
    ):
        self.framework_group = framework_group
        self.central_repo = central_repo
        self.snapshot_repo = snapshot_repo

    def build(
        self,
        group_id: Optional[str],
        version: Optional[str],
        custom_repos: Union[str, Sequence[str], None] = None,
    ) -> List[str]:
        """
        Build the ordered repository list for a coordinate.

        Args:
            group_id: Group of the requested coordinate
            version: Version of the requested coordinate, may be None
            custom_repos: Operator repositories, a comma joined string or a sequence

        Returns:
            Repository URLs in the order the resolver should try them
        """
        repositories = [self.central_repo]
        repositories.extend(split_repos(custom_repos))
        # include snapshots to make it easy to use upcoming releases
        if self._wants_snapshots(group_id, version):
            repositories.append(self.snapshot_repo)
        return repositories

    def _wants_snapshots(self, group_id: Optional[str], version: Optional[str]) -> bool:
        return (
            group_id == self.framework_group
            and version is not None
            and SNAPSHOT_MARKER in version
        )
