"""Sorted collections of versions."""
from __future__ import annotations

from typing import Iterable, Iterator, Sequence, Tuple, overload

from .errors import EmptyListError
from .parser import DEFAULT_PREFIX, try_parse
from .version import Version


class VersionList(Sequence[Version]):
    """An immutable list of versions, newest first.

    Build it with ``from_tags``; unparsable tags are dropped. Filtering keeps
    the relative order, so the list stays sorted for its whole lifetime.
    """

    def __init__(self, versions: Iterable[Version] = ()):
        self._versions: Tuple[Version, ...] = tuple(versions)

    @classmethod
    def from_tags(cls, tags: Iterable[str], prefix: str = DEFAULT_PREFIX) -> "VersionList":
        parsed = [v for v in (try_parse(tag, prefix) for tag in tags) if v is not None]
        # sorted() is stable, so equal versions keep their input order
        return cls(sorted(parsed, reverse=True))

    def without_pre_release(self) -> "VersionList":
        return VersionList(v for v in self._versions if not v.is_pre_release)

    def pre_releases_of(self, base: Version) -> "VersionList":
        """Pre-release versions sharing ``base``'s major.minor.patch."""
        return VersionList(
            v for v in self._versions if v.is_pre_release and v.core == base.core
        )

    def latest(self) -> Version:
        """Return the greatest version.

        Raises:
            EmptyListError: If the list holds no versions.
        """
        if not self._versions:
            raise EmptyListError()
        return self._versions[0]

    def render(self) -> str:
        return "\n".join(str(v) for v in self._versions)

    @overload
    def __getitem__(self, index: int) -> Version: ...

    @overload
    def __getitem__(self, index: slice) -> "VersionList": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return VersionList(self._versions[index])
        return self._versions[index]

    def __iter__(self) -> Iterator[Version]:
        return iter(self._versions)

    def __len__(self) -> int:
        return len(self._versions)

    def __bool__(self) -> bool:
        return bool(self._versions)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VersionList):
            return self._versions == other._versions
        if isinstance(other, (list, tuple)):
            return list(self._versions) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"VersionList([{', '.join(repr(str(v)) for v in self._versions)}])"
