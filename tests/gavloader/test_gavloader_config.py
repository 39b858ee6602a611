"""
Tests for downloader configuration loading.
"""

import pytest

from gavloader.gavloader_config import GavloaderConfig, split_repos
from gavloader.gavloader_exceptions import GavloaderException


class TestGavloaderConfig:
    """Tests for GavloaderConfig."""

    def test_defaults(self):
        config = GavloaderConfig()
        assert config.repos == []
        assert config.fresh is False
        assert config.framework_group == "org.apache.camel"
        assert config.max_workers == 4
        assert config.download_timeout is None

    def test_from_dict_splits_repos(self):
        config = GavloaderConfig.from_dict({"repos": "https://repoA/,https://repoB/", "fresh": True})
        assert config.repos == ["https://repoA/", "https://repoB/"]
        assert config.fresh is True

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(GavloaderException, match="repositories"):
            GavloaderConfig.from_dict({"repositories": "https://repoA/"})

    @pytest.mark.parametrize(
        "overrides",
        [{"max_workers": 0}, {"download_timeout": 0}, {"progress_interval": -1}],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(GavloaderException):
            GavloaderConfig.from_dict(overrides)

    def test_from_toml(self, tmp_path):
        path = tmp_path / "gavloader.toml"
        path.write_text(
            "[downloader]\n"
            'repos = ["https://repoA/", "https://repoB/"]\n'
            "fresh = true\n"
            "max_workers = 2\n"
            "download_timeout = 120.0\n"
        )
        config = GavloaderConfig.from_toml(str(path))
        assert config.repos == ["https://repoA/", "https://repoB/"]
        assert config.fresh is True
        assert config.max_workers == 2
        assert config.download_timeout == 120.0

    def test_from_toml_without_section_uses_defaults(self, tmp_path):
        path = tmp_path / "gavloader.toml"
        path.write_text("[other]\nkey = 1\n")
        assert GavloaderConfig.from_toml(str(path)) == GavloaderConfig()

    def test_from_toml_missing_file(self, tmp_path):
        with pytest.raises(GavloaderException):
            GavloaderConfig.from_toml(str(tmp_path / "missing.toml"))

    def test_from_toml_invalid_syntax(self, tmp_path):
        path = tmp_path / "gavloader.toml"
        path.write_text("[downloader\nrepos = ")
        with pytest.raises(GavloaderException):
            GavloaderConfig.from_toml(str(path))

    def test_to_dict_round_trips(self):
        config = GavloaderConfig(repos="https://repoA/", fresh=True, download_timeout=30.0)
        assert GavloaderConfig.from_dict(config.to_dict()) == config


def test_split_repos_drops_empty_tokens():
    assert split_repos("https://repoA/,,https://repoB/,") == ["https://repoA/", "https://repoB/"]
    assert split_repos("") == []
    assert split_repos(None) == []
