from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Union

from .annotate import BuildMetadataProvider, with_build, with_pre_release
from .bump import BumpKind, next_version
from .config import Settings
from .sources import TagSource
from .vcs.git import GitMetadata
from .version import Version
from .version_list import VersionList


logger = logging.getLogger(__name__)


class Versioning(ABC):
    """Abstract versioning provider."""

    @abstractmethod
    def versions(self, include_pre_release: bool = False) -> VersionList:
        """Return known versions, newest first."""

    @abstractmethod
    def latest(self, include_pre_release: bool = False) -> Version:
        """Return the newest version."""

    @abstractmethod
    def bump_version(self, kind: Union[BumpKind, str] = "patch") -> Version:
        """Return the next version for the bump kind."""


class TagVersioning(Versioning):
    """Semver derived from the tags of one repository.

    - Tags come from a TagSource (GitHub API or local git).
    - Unparsable tags are ignored; no tags at all is an EmptyListError.
    - The bump base is the latest final release when one exists.
    - Pre-release and build suffixes follow the Settings toggles.
    - Does not create or push tags; only computes versions.
    """

    def __init__(
        self,
        source: TagSource,
        settings: Settings,
        metadata: Optional[BuildMetadataProvider] = None,
    ) -> None:
        self.source = source
        self.settings = settings
        self.metadata = metadata or GitMetadata()
        self._all: Optional[VersionList] = None

    def _load(self) -> VersionList:
        if self._all is None:
            tags = self.source.list_tags(self.settings.repository or "")
            self._all = VersionList.from_tags(tags, self.settings.prefix)
            logger.info(f"Parsed {len(self._all)} of {len(tags)} tags as versions")
        return self._all

    def versions(self, include_pre_release: bool = False) -> VersionList:
        found = self._load()
        return found if include_pre_release else found.without_pre_release()

    def latest(self, include_pre_release: bool = False) -> Version:
        return self.versions(include_pre_release).latest()

    def bump_version(self, kind: Union[BumpKind, str] = "patch") -> Version:
        found = self._load()
        releases = found.without_pre_release()
        base = releases.latest() if releases else found.latest()
        nxt = next_version(base, kind)
        if self.settings.wants_pre_release:
            nxt = with_pre_release(nxt, self.settings.pre_name, existing=found.pre_releases_of(nxt))
        if self.settings.wants_build:
            nxt = with_build(nxt, self.metadata, self.settings.build_name)
        logger.info(f"Next {BumpKind.parse(kind).value} version after {base}: {nxt}")
        return nxt
