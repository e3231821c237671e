"""Semantic version value types and their precedence order."""
from __future__ import annotations

from dataclasses import dataclass, replace as _replace
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class PreRelease:
    """A pre-release identifier such as ``rc.0`` or ``beta``.

    The identifier is kept verbatim; a trailing ``.N`` numeric component is
    split off as ``counter`` so that ``rc.2 < rc.10``. The split also happens
    on construction, so ``PreRelease("rc.5") == PreRelease("rc", 5)``.
    """

    identifier: str
    counter: Optional[int] = None

    def __post_init__(self) -> None:
        if self.counter is None:
            head, sep, tail = self.identifier.rpartition(".")
            if sep and head and _is_canonical_number(tail):
                object.__setattr__(self, "identifier", head)
                object.__setattr__(self, "counter", int(tail))

    @classmethod
    def parse(cls, text: str) -> "PreRelease":
        return cls(text)

    def __str__(self) -> str:
        if self.counter is None:
            return self.identifier
        return f"{self.identifier}.{self.counter}"


def _is_canonical_number(text: str) -> bool:
    if not text.isascii() or not text.isdigit():
        return False
    return text == "0" or not text.startswith("0")


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare_pre_release(a: Optional[PreRelease], b: Optional[PreRelease]) -> int:
    # A final release (no pre-release) outranks any pre-release.
    if a is None and b is None:
        return 0
    if a is None:
        return 1
    if b is None:
        return -1
    result = _cmp(a.identifier, b.identifier)
    if result:
        return result
    if a.counter is None or b.counter is None:
        return _cmp(a.counter is not None, b.counter is not None)
    return _cmp(a.counter, b.counter)


@dataclass(frozen=True, eq=False)
class Version:
    """One parsed semantic version.

    ``prefix`` and ``build`` are carried for rendering only: two versions
    that differ in nothing but those compare (and hash) equal.
    """

    major: int
    minor: int
    patch: int
    pre_release: Optional[PreRelease] = None
    build: Optional[str] = None
    prefix: str = ""

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        if isinstance(self.pre_release, str):
            object.__setattr__(self, "pre_release", PreRelease.parse(self.pre_release))

    @property
    def core(self) -> Tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @property
    def is_pre_release(self) -> bool:
        return self.pre_release is not None

    def replace(self, **changes: Any) -> "Version":
        """Return a copy with the given fields changed."""
        return _replace(self, **changes)

    def __str__(self) -> str:
        text = f"{self.prefix}{self.major}.{self.minor}.{self.patch}"
        if self.pre_release is not None:
            text += f"-{self.pre_release}"
        if self.build:
            text += f"+{self.build}"
        return text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) == 0

    def __hash__(self) -> int:
        return hash((self.core, self.pre_release))

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) >= 0


def compare(a: Version, b: Version) -> int:
    """Order two versions by semver precedence.

    Returns -1 if ``a`` sorts before ``b``, 0 if they are equal and 1 if
    ``a`` sorts after ``b``. Major, minor and patch are compared
    numerically; on a tie a pre-release sorts before the final release.
    Build metadata and prefix are ignored.
    """
    result = _cmp(a.core, b.core)
    if result:
        return result
    return compare_pre_release(a.pre_release, b.pre_release)
