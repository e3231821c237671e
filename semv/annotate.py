"""Attach pre-release and build suffixes to a version."""
from __future__ import annotations

import re
from typing import Optional, Protocol

from .errors import MetadataError
from .version import PreRelease, Version
from .version_list import VersionList


DEFAULT_PRE_RELEASE = "rc"

_INVALID_IDENTIFIER_CHARS = re.compile(r"[^0-9A-Za-z-]+")


class BuildMetadataProvider(Protocol):
    """Supplies the identifying data used in build metadata."""

    def current_user(self) -> str: ...

    def latest_commit(self) -> str: ...


def with_pre_release(
    version: Version,
    name: str = "",
    existing: Optional[VersionList] = None,
) -> Version:
    """Return a copy of ``version`` marked as a pre-release.

    The identifier is ``name``, or ``rc`` without one. A name that carries
    its own counter (``beta.3``) is used verbatim. Otherwise a counter is
    added: one above the highest counter found among ``existing``
    pre-releases with the same major.minor.patch and identifier, or one
    above the counter ``version`` already carries, else 0.
    """
    pre = PreRelease.parse(name) if name else PreRelease(DEFAULT_PRE_RELEASE)
    if pre.counter is not None:
        return version.replace(pre_release=pre)

    counters = [
        v.pre_release.counter
        for v in (existing or ())
        if v.core == version.core
        and v.pre_release is not None
        and v.pre_release.identifier == pre.identifier
        and v.pre_release.counter is not None
    ]
    current = version.pre_release
    if current is not None and current.identifier == pre.identifier and current.counter is not None:
        counters.append(current.counter)
    counter = max(counters) + 1 if counters else 0
    return version.replace(pre_release=PreRelease(pre.identifier, counter))


def with_build(version: Version, metadata: BuildMetadataProvider, name: str = "") -> Version:
    """Return a copy of ``version`` carrying build metadata.

    The build is ``<commit>.<name>``, or ``<commit>.<user>`` when no name is
    given, e.g. ``v1.2.0+abc1234.alice``.

    Raises:
        MetadataError: If the provider cannot supply the commit or user.
    """
    try:
        commit = metadata.latest_commit()
        label = name or metadata.current_user()
    except MetadataError:
        raise
    except Exception as e:
        raise MetadataError(f"Failed to read build metadata: {e}") from e

    identifiers = [_sanitize(part) for part in (commit, label)]
    identifiers = [part for part in identifiers if part]
    if not identifiers:
        raise MetadataError("Build metadata is empty")
    return version.replace(build=".".join(identifiers))


def _sanitize(part: str) -> str:
    cleaned = ".".join(
        _INVALID_IDENTIFIER_CHARS.sub("-", piece).strip("-")
        for piece in part.strip().split(".")
    )
    return ".".join(piece for piece in cleaned.split(".") if piece)
