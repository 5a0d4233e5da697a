"""Normalization flag vocabulary and risk-tier presets."""

from __future__ import annotations

from enum import IntFlag
from typing import Iterable


class NormalizationFlags(IntFlag):
    """Independent normalization behaviors, combinable with ``|``.

    The three presets widen strictly: SAFE never changes the referenced
    resource, USUALLY_SAFE can trip path-sensitive servers, UNSAFE may change
    the resource or drop information.
    """

    # Safe
    LOWERCASE_SCHEME = 1 << 0
    LOWERCASE_HOST = 1 << 1
    UPPERCASE_ESCAPES = 1 << 2
    DECODE_UNNECESSARY_ESCAPES = 1 << 3
    REMOVE_DEFAULT_PORT = 1 << 4
    REMOVE_EMPTY_QUERY_SEPARATOR = 1 << 5

    # Usually safe
    REMOVE_TRAILING_SLASH = 1 << 6  # pick one of remove/add trailing slash
    ADD_TRAILING_SLASH = 1 << 7
    REMOVE_DOT_SEGMENTS = 1 << 8

    # Unsafe
    REMOVE_DIRECTORY_INDEX = 1 << 9
    REMOVE_FRAGMENT = 1 << 10
    FORCE_HTTP = 1 << 11
    REMOVE_DUPLICATE_SLASHES = 1 << 12
    REMOVE_WWW = 1 << 13  # pick one of remove/add www
    ADD_WWW = 1 << 14
    SORT_QUERY = 1 << 15

    SAFE = (
        LOWERCASE_SCHEME
        | LOWERCASE_HOST
        | UPPERCASE_ESCAPES
        | DECODE_UNNECESSARY_ESCAPES
        | REMOVE_DEFAULT_PORT
        | REMOVE_EMPTY_QUERY_SEPARATOR
    )
    USUALLY_SAFE = SAFE | REMOVE_TRAILING_SLASH | REMOVE_DOT_SEGMENTS
    UNSAFE = (
        USUALLY_SAFE
        | REMOVE_DIRECTORY_INDEX
        | REMOVE_FRAGMENT
        | FORCE_HTTP
        | REMOVE_DUPLICATE_SLASHES
        | REMOVE_WWW
        | SORT_QUERY
    )

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "NormalizationFlags":
        """Combine flags given by name, e.g. ``["usually_safe", "remove-www"]``."""
        flags = cls(0)
        for raw in names:
            key = raw.strip().upper().replace("-", "_")
            if not key:
                continue
            try:
                flags |= cls[key]
            except KeyError:
                raise ValueError(f"Unknown normalization flag: {raw!r}") from None
        return flags


def contains(flags: NormalizationFlags | int, flag: NormalizationFlags) -> bool:
    """True when every bit of ``flag`` is set in ``flags``."""
    return flags & flag == flag


__all__ = ["NormalizationFlags", "contains"]
