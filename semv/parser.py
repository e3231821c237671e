"""Turn tag strings into Version values."""
from __future__ import annotations

from typing import Optional

from .errors import ParseError
from .version import PreRelease, Version


DEFAULT_PREFIX = "v"


def parse_version(tag: str, prefix: str = DEFAULT_PREFIX) -> Version:
    """Parse ``prefix + major.minor.patch[-pre][+build]``.

    Build metadata is kept verbatim. The pre-release part is kept verbatim
    too, apart from a trailing numeric counter (``rc.3``) which is split off
    for ordering.

    Raises:
        ParseError: If the tag does not have that shape.
    """
    if prefix:
        if not tag.startswith(prefix):
            raise ParseError(tag, f"missing prefix {prefix!r}")
        rest = tag[len(prefix):]
    else:
        rest = tag

    rest, plus, build = rest.partition("+")
    if plus and not build:
        raise ParseError(tag, "empty build metadata")

    numbers, dash, pre = rest.partition("-")
    if dash and not pre:
        raise ParseError(tag, "empty pre-release identifier")

    parts = numbers.split(".")
    if len(parts) != 3:
        raise ParseError(tag, "expected major.minor.patch")
    for part in parts:
        if not part.isascii() or not part.isdigit():
            raise ParseError(tag, f"{part!r} is not a non-negative integer")
    major, minor, patch = (int(p) for p in parts)

    return Version(
        major,
        minor,
        patch,
        pre_release=PreRelease.parse(pre) if dash else None,
        build=build if plus else None,
        prefix=prefix,
    )


def try_parse(tag: str, prefix: str = DEFAULT_PREFIX) -> Optional[Version]:
    """Like parse_version, but returns None for tags that do not parse."""
    try:
        return parse_version(tag, prefix)
    except ParseError:
        return None
