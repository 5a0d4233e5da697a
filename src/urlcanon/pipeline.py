"""Fixed-order normalization pipeline."""

from __future__ import annotations

import logging
from typing import Callable, NamedTuple, Tuple

from . import transforms
from .flags import NormalizationFlags, contains
from .urls import StructuredURL, URLParseError, parse_url

logger = logging.getLogger(__name__)


class Transform(NamedTuple):
    flag: NormalizationFlags
    apply: Callable[[StructuredURL], None]


# Order matters: directory-index removal must run before trailing-slash
# addition, and duplicate-slash collapsing after dot-segment removal.
TRANSFORMS: Tuple[Transform, ...] = (
    Transform(NormalizationFlags.LOWERCASE_SCHEME, transforms.lowercase_scheme),
    Transform(NormalizationFlags.LOWERCASE_HOST, transforms.lowercase_host),
    Transform(NormalizationFlags.UPPERCASE_ESCAPES, transforms.uppercase_escapes),
    Transform(NormalizationFlags.DECODE_UNNECESSARY_ESCAPES, transforms.decode_unnecessary_escapes),
    Transform(NormalizationFlags.REMOVE_DEFAULT_PORT, transforms.remove_default_port),
    Transform(NormalizationFlags.REMOVE_TRAILING_SLASH, transforms.remove_trailing_slash),
    Transform(NormalizationFlags.REMOVE_DIRECTORY_INDEX, transforms.remove_directory_index),
    Transform(NormalizationFlags.ADD_TRAILING_SLASH, transforms.add_trailing_slash),
    Transform(NormalizationFlags.REMOVE_DOT_SEGMENTS, transforms.remove_dot_segments),
    Transform(NormalizationFlags.REMOVE_FRAGMENT, transforms.remove_fragment),
    Transform(NormalizationFlags.FORCE_HTTP, transforms.force_http),
    Transform(NormalizationFlags.REMOVE_DUPLICATE_SLASHES, transforms.remove_duplicate_slashes),
    Transform(NormalizationFlags.REMOVE_WWW, transforms.remove_www),
    Transform(NormalizationFlags.ADD_WWW, transforms.add_www),
    Transform(NormalizationFlags.SORT_QUERY, transforms.sort_query),
    Transform(NormalizationFlags.REMOVE_EMPTY_QUERY_SEPARATOR, transforms.remove_empty_query_separator),
)


def normalize_url(url: StructuredURL, flags: NormalizationFlags | int) -> None:
    """Normalize ``url`` in place with every transform requested by ``flags``."""
    for transform in TRANSFORMS:
        if contains(flags, transform.flag):
            transform.apply(url)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("%s -> %s", transform.flag.name, url.geturl())


def normalize_url_string(url: str, flags: NormalizationFlags | int) -> str:
    """Return the normalized form of ``url``.

    Raises:
        URLParseError: ``url`` is not a valid URL.
    """
    parsed = parse_url(url)
    normalize_url(parsed, flags)
    return parsed.geturl()


def must_normalize_url_string(url: str, flags: NormalizationFlags | int) -> str:
    """Like :func:`normalize_url_string` for input known to be valid.

    A parse failure is treated as a programming error and raised as
    ``RuntimeError``, which ``except ValueError`` handlers do not catch.
    """
    try:
        return normalize_url_string(url, flags)
    except URLParseError as exc:
        raise RuntimeError(str(exc)) from exc


__all__ = [
    "Transform",
    "TRANSFORMS",
    "normalize_url",
    "normalize_url_string",
    "must_normalize_url_string",
]
