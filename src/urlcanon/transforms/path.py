"""Path transforms.

A URL without a path keeps its only slash in the host field once a trailing
slash has been added to it, so the trailing-slash transforms fall back to the
host when the path is empty.
"""

from __future__ import annotations

import re
from typing import List

from ..urls import StructuredURL

_DIRECTORY_INDEX = re.compile(r"(^|/)(?:default|index)\.\w{1,4}$", re.ASCII)
_DUPLICATE_SLASHES = re.compile(r"/{2,}")


def remove_trailing_slash(url: StructuredURL) -> None:
    if url.path:
        if url.path.endswith("/"):
            url.path = url.path[:-1]
    elif url.host.endswith("/"):
        url.host = url.host[:-1]


def add_trailing_slash(url: StructuredURL) -> None:
    if url.path:
        if not url.path.endswith("/"):
            url.path += "/"
    elif url.host and not url.host.endswith("/"):
        url.host += "/"


def remove_directory_index(url: StructuredURL) -> None:
    """Strip a final ``index.<ext>`` or ``default.<ext>`` segment, keeping its ``/``."""
    if url.path:
        url.path = _DIRECTORY_INDEX.sub(r"\1", url.path)


def remove_dot_segments(url: StructuredURL) -> None:
    """Resolve ``.`` and ``..`` segments.

    Empty segments survive; collapsing them is :func:`remove_duplicate_slashes`'
    job. A ``..`` with nothing left to pop is dropped.
    """
    if not url.path:
        return

    resolved: List[str] = []
    for segment in url.path.split("/"):
        if segment == "..":
            if resolved:
                resolved.pop()
        elif segment != ".":
            resolved.append(segment)

    path = "/".join(resolved)
    # Keep host and path from running together.
    if not url.host.endswith("/") and not path.startswith("/"):
        path = "/" + path
    url.path = path


def remove_duplicate_slashes(url: StructuredURL) -> None:
    if url.path:
        url.path = _DUPLICATE_SLASHES.sub("/", url.path)


__all__ = [
    "remove_trailing_slash",
    "add_trailing_slash",
    "remove_directory_index",
    "remove_dot_segments",
    "remove_duplicate_slashes",
]
