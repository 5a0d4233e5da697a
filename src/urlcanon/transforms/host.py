"""Host transforms: case, default port and the ``www.`` prefix."""

from __future__ import annotations

import re

from ..urls import StructuredURL

# A trailing "/" can land in the host when a slash was added to a path-less URL.
_PORT_SUFFIX = re.compile(r":(\d+)/?$")

DEFAULT_HTTP_PORT = "80"


def lowercase_host(url: StructuredURL) -> None:
    url.host = url.host.lower()


def remove_default_port(url: StructuredURL) -> None:
    """Drop an explicit ``:80``; any other port is kept."""
    if not url.host:
        return
    match = _PORT_SUFFIX.search(url.host)
    if match and match.group(1) == DEFAULT_HTTP_PORT:
        url.host = url.host[: match.start()]


def remove_www(url: StructuredURL) -> None:
    if url.host.lower().startswith("www."):
        url.host = url.host[4:]


def add_www(url: StructuredURL) -> None:
    if url.host and not url.host.lower().startswith("www."):
        url.host = "www." + url.host


__all__ = ["lowercase_host", "remove_default_port", "remove_www", "add_www", "DEFAULT_HTTP_PORT"]
