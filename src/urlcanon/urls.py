"""Structured, field-addressable URL built on :func:`urllib.parse.urlsplit`.

``urlsplit`` lowercases the scheme, forgets an empty ``?`` and rebuilds
paths in ways that hide what the input actually said, so this module keeps
the raw text of every field and serializes it back verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class URLParseError(ValueError):
    """Raised when a string cannot be parsed as a URL."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"cannot parse {url!r}: {reason}")
        self.url = url
        self.reason = reason


@dataclass
class StructuredURL:
    scheme: str = ""
    userinfo: str = ""
    host: str = ""  # host with optional ":port"
    path: str = ""
    raw_query: str = ""
    fragment: str = ""
    has_authority: bool = False
    force_query: bool = False

    def geturl(self) -> str:
        """Serialize the fields back into a single URL string."""
        parts = []
        if self.scheme:
            parts.append(self.scheme + ":")
        if self.has_authority or self.host or self.userinfo:
            parts.append("//")
            if self.userinfo:
                parts.append(self.userinfo + "@")
            parts.append(self.host)
        path = self.path
        if path and not path.startswith("/") and self.host and not self.host.endswith("/"):
            path = "/" + path
        parts.append(path)
        if self.raw_query or self.force_query:
            parts.append("?" + self.raw_query)
        if self.fragment:
            parts.append("#" + self.fragment)
        return "".join(parts)

    def __str__(self) -> str:
        return self.geturl()


def parse_url(text: str) -> StructuredURL:
    """Parse ``text`` into a :class:`StructuredURL` without decoding any field."""
    url = text.strip()
    if _CONTROL_CHARS.search(url):
        raise URLParseError(text, "invalid control character in URL")
    if url.startswith(":"):
        raise URLParseError(text, "missing protocol scheme")
    if _BAD_ESCAPE.search(url):
        raise URLParseError(text, "invalid URL escape")

    try:
        split = urlsplit(url)
        split.port  # validates the port
    except ValueError as exc:
        raise URLParseError(text, str(exc)) from exc

    # urlsplit lowercases the scheme; keep the original spelling.
    scheme = url[: len(split.scheme)] if split.scheme else ""
    rest = url[len(scheme) + 1 :] if scheme else url

    userinfo, _, host = split.netloc.rpartition("@")
    before_fragment = url.partition("#")[0]

    return StructuredURL(
        scheme=scheme,
        userinfo=userinfo,
        host=host,
        path=split.path,
        raw_query=split.query,
        fragment=split.fragment,
        has_authority=rest.startswith("//"),
        force_query=not split.query and before_fragment.endswith("?"),
    )


__all__ = ["StructuredURL", "URLParseError", "parse_url"]
