"""
semv: semantic versioning from git tags.

This package provides core primitives:
- Version / PreRelease: immutable semver values ordered by semver precedence.
- parse_version: tag string -> Version (ParseError for anything else).
- VersionList: sorted, newest-first list built from raw tags.
- next_version: major/minor/patch bump of a Version.
- with_pre_release / with_build: pre-release and build-metadata suffixes.
- Tag sources: GitHub REST API or the local git repository.
- TagVersioning: ties a tag source to the above for the git-semv CLI.

The core (version, parser, version_list, bump, annotate) is pure and
performs no I/O; sources, vcs and config do the talking to the outside.
"""

__version__ = "0.1.0"

from .errors import (
    SemvError,
    ParseError,
    EmptyListError,
    InvalidBumpKind,
    MetadataError,
    TagSourceError,
    ConfigError,
)
from .version import PreRelease, Version, compare
from .parser import DEFAULT_PREFIX, parse_version, try_parse
from .version_list import VersionList
from .bump import BumpKind, next_version
from .annotate import BuildMetadataProvider, DEFAULT_PRE_RELEASE, with_build, with_pre_release
from .sources import TagSource, GitHubTagSource, LocalGitTagSource
from .vcs.git import GitMetadata
from .config import Config, Settings
from .versioning import Versioning, TagVersioning

__all__ = [
    "__version__",
    # Errors
    "SemvError",
    "ParseError",
    "EmptyListError",
    "InvalidBumpKind",
    "MetadataError",
    "TagSourceError",
    "ConfigError",
    # Core
    "PreRelease",
    "Version",
    "compare",
    "DEFAULT_PREFIX",
    "parse_version",
    "try_parse",
    "VersionList",
    "BumpKind",
    "next_version",
    "BuildMetadataProvider",
    "DEFAULT_PRE_RELEASE",
    "with_build",
    "with_pre_release",
    # Collaborators
    "TagSource",
    "GitHubTagSource",
    "LocalGitTagSource",
    "GitMetadata",
    "Config",
    "Settings",
    "Versioning",
    "TagVersioning",
]
