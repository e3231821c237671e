"""Derive the next release version."""
from __future__ import annotations

from enum import Enum
from typing import Union

from .errors import InvalidBumpKind
from .version import Version


class BumpKind(str, Enum):
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"

    @classmethod
    def parse(cls, kind: Union["BumpKind", str]) -> "BumpKind":
        if isinstance(kind, cls):
            return kind
        try:
            return cls(kind)
        except ValueError:
            raise InvalidBumpKind(kind) from None


def next_version(base: Version, kind: Union[BumpKind, str]) -> Version:
    """Bump ``base`` along one axis.

    The result is always a final release: pre-release and build are cleared
    and must be re-applied with the annotate helpers.

    Raises:
        InvalidBumpKind: If ``kind`` is not major, minor or patch.
    """
    kind = BumpKind.parse(kind)
    if kind is BumpKind.MAJOR:
        major, minor, patch = base.major + 1, 0, 0
    elif kind is BumpKind.MINOR:
        major, minor, patch = base.major, base.minor + 1, 0
    else:
        major, minor, patch = base.major, base.minor, base.patch + 1
    return Version(major, minor, patch, prefix=base.prefix)
