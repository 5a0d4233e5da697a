"""Percent-escape normalization for the path, query and fragment."""

from __future__ import annotations

import re
import string

from ..urls import StructuredURL

_ESCAPE = re.compile(r"%([0-9A-Fa-f]{2})")
# RFC 3986 section 2.3
UNRESERVED = frozenset(string.ascii_letters + string.digits + "-._~")


def _uppercase(value: str) -> str:
    return _ESCAPE.sub(lambda match: match.group(0).upper(), value)


def _decode_unreserved(value: str) -> str:
    def repl(match: re.Match[str]) -> str:
        char = chr(int(match.group(1), 16))
        return char if char in UNRESERVED else match.group(0)

    return _ESCAPE.sub(repl, value)


def uppercase_escapes(url: StructuredURL) -> None:
    """Rewrite ``%3f`` as ``%3F``."""
    url.path = _uppercase(url.path)
    url.raw_query = _uppercase(url.raw_query)
    url.fragment = _uppercase(url.fragment)


def decode_unnecessary_escapes(url: StructuredURL) -> None:
    """Replace escapes of unreserved characters (``%41`` -> ``A``); others stay."""
    url.path = _decode_unreserved(url.path)
    url.raw_query = _decode_unreserved(url.raw_query)
    url.fragment = _decode_unreserved(url.fragment)


__all__ = ["uppercase_escapes", "decode_unnecessary_escapes", "UNRESERVED"]
