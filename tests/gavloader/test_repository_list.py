"""
Tests for repository list construction.
"""

import pytest

from gavloader.runtime_dependency_config import (
    APACHE_SNAPSHOT_REPO,
    MAVEN_CENTRAL_REPO,
    RepositoryListBuilder,
)


class TestRepositoryListBuilder:
    """Tests for RepositoryListBuilder."""

    @pytest.fixture
    def builder(self):
        return RepositoryListBuilder()

    def test_central_only_by_default(self, builder):
        assert builder.build("com.example", "1.0") == [MAVEN_CENTRAL_REPO]

    def test_central_always_first(self, builder):
        repos = builder.build("org.apache.camel", "4.1.0-SNAPSHOT", ["https://repoA/"])
        assert repos[0] == MAVEN_CENTRAL_REPO

    def test_comma_joined_custom_repos_keep_order(self, builder):
        repos = builder.build("com.example", "1.0", "https://repoA/,https://repoB/")
        assert repos == [MAVEN_CENTRAL_REPO, "https://repoA/", "https://repoB/"]

    def test_sequence_entries_are_split(self, builder):
        repos = builder.build("com.example", "1.0", ["https://repoA/,https://repoB/", "https://repoC/"])
        assert repos == [MAVEN_CENTRAL_REPO, "https://repoA/", "https://repoB/", "https://repoC/"]

    def test_no_whitespace_trimming(self, builder):
        repos = builder.build("com.example", "1.0", "https://repoA/, https://repoB/")
        assert repos == [MAVEN_CENTRAL_REPO, "https://repoA/", " https://repoB/"]

    @pytest.mark.parametrize(
        "group_id, version, expected",
        [
            ("org.apache.camel", "4.1.0-SNAPSHOT", True),
            ("org.apache.camel", "4.1.0", False),
            ("com.example", "1.0-SNAPSHOT", False),
            ("org.apache.camel", None, False),
            (None, "4.1.0-SNAPSHOT", False),
        ],
    )
    def test_snapshot_repo_only_for_framework_snapshots(self, builder, group_id, version, expected):
        repos = builder.build(group_id, version)
        assert (APACHE_SNAPSHOT_REPO in repos) is expected

    def test_snapshot_repo_comes_after_custom_repos(self, builder):
        repos = builder.build("org.apache.camel", "4.1.0-SNAPSHOT", "https://repoA/")
        assert repos == [MAVEN_CENTRAL_REPO, "https://repoA/", APACHE_SNAPSHOT_REPO]

    def test_custom_framework_group(self):
        builder = RepositoryListBuilder(framework_group="com.example")
        assert builder.build("com.example", "1.0-SNAPSHOT")[-1] == APACHE_SNAPSHOT_REPO
        assert APACHE_SNAPSHOT_REPO not in builder.build("org.apache.camel", "4.1.0-SNAPSHOT")
