"""Error kinds raised by semv.

Every failure is a subclass of SemvError so callers can catch the whole
family, or branch on the specific kind.
"""
from __future__ import annotations

from typing import Any


class SemvError(RuntimeError):
    """Base class for semv failures."""


class ParseError(SemvError):
    """A tag does not look like prefix + major.minor.patch[-pre][+build]."""

    def __init__(self, tag: str, reason: str):
        self.tag = tag
        self.reason = reason
        super().__init__(f"Invalid version tag {tag!r}: {reason}")


class EmptyListError(SemvError):
    """No parseable version tags were found."""

    def __init__(self, message: str = "No version tags found"):
        super().__init__(message)


class InvalidBumpKind(SemvError, ValueError):
    """A bump was requested for something other than major, minor or patch."""

    def __init__(self, kind: Any):
        self.kind = kind
        super().__init__(f"Invalid bump kind {kind!r}. Must be: major, minor, or patch")


class MetadataError(SemvError):
    """Build metadata (commit, user) could not be determined."""


class TagSourceError(SemvError):
    """Tags could not be listed from the repository host or local git."""


class ConfigError(SemvError):
    """A configuration file could not be read or written."""
