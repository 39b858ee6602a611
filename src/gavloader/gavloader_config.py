"""
Configuration parameters for the gavloader dependency downloader.

The configuration can be built from a dictionary or loaded from a TOML file
containing a ``[downloader]`` table, for example::

    [downloader]
    repos = "https://repo.example.com/maven2/,https://jitpack.io/"
    fresh = false
    max_workers = 4
    download_timeout = 300
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

try:
    import tomllib
except ModuleNotFoundError:
    # Python < 3.11
    import tomli as tomllib

from gavloader.gavloader_exceptions import GavloaderException

DEFAULT_FRAMEWORK_GROUP = "org.apache.camel"


def split_repos(repos: Union[str, Sequence[str], None]) -> List[str]:
    """
    Split comma joined repository configuration into individual URLs, keeping order.

    Empty tokens are dropped. No whitespace trimming is applied.
    """
    if repos is None:
        return []
    if isinstance(repos, str):
        repos = [repos]
    out = []
    for entry in repos:
        # unlike a plain split, empty tokens from stray commas are dropped rather than kept as blank URLs
        out.extend(url for url in entry.split(",") if url)
    return out


@dataclass
class GavloaderConfig:
    """
    Configuration parameters
    """

    repos: List[str] = field(default_factory=list)
    fresh: bool = False
    framework_group: str = DEFAULT_FRAMEWORK_GROUP
    max_workers: int = 4
    download_timeout: Optional[float] = None
    progress_interval: float = 5.0

    def __post_init__(self):
        self.repos = split_repos(self.repos)
        if self.max_workers < 1:
            raise GavloaderException(f"max_workers must be at least 1, got {self.max_workers}")
        if self.download_timeout is not None and self.download_timeout <= 0:
            raise GavloaderException(f"download_timeout must be positive, got {self.download_timeout}")
        if self.progress_interval <= 0:
            raise GavloaderException(f"progress_interval must be positive, got {self.progress_interval}")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GavloaderConfig":
        """
        Create a GavloaderConfig instance from a dictionary.

        Unknown keys are rejected so that typos in configuration files surface early.
        """
        known = {f for f in cls.__dataclass_fields__}
        unknown = set(d) - known
        if unknown:
            raise GavloaderException(f"Unknown downloader configuration keys: {sorted(unknown)}")
        return cls(**d)

    @classmethod
    def from_toml(cls, path: str) -> "GavloaderConfig":
        """
        Load configuration from the ``[downloader]`` table of a TOML file.

        A file without that table yields the default configuration.
        """
        try:
            with open(path, "rb") as f:
                toml_dict = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise GavloaderException(f"Failed to load configuration from {path}: {e}") from e

        section = toml_dict.get("downloader", {})
        if not isinstance(section, dict):
            raise GavloaderException(f"'downloader' in {path} must be a table")
        return cls.from_dict(section)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "repos": list(self.repos),
            "fresh": self.fresh,
            "framework_group": self.framework_group,
            "max_workers": self.max_workers,
            "download_timeout": self.download_timeout,
            "progress_interval": self.progress_interval,
        }
