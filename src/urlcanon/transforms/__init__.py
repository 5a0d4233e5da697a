"""Per-field normalization transforms. Each mutates a StructuredURL in place."""

from .escapes import decode_unnecessary_escapes, uppercase_escapes
from .host import add_www, lowercase_host, remove_default_port, remove_www
from .path import (
    add_trailing_slash,
    remove_directory_index,
    remove_dot_segments,
    remove_duplicate_slashes,
    remove_trailing_slash,
)
from .query import remove_empty_query_separator, sort_query
from .scheme import force_http, lowercase_scheme, remove_fragment

__all__ = [
    "lowercase_scheme",
    "lowercase_host",
    "uppercase_escapes",
    "decode_unnecessary_escapes",
    "remove_default_port",
    "remove_trailing_slash",
    "remove_directory_index",
    "add_trailing_slash",
    "remove_dot_segments",
    "remove_fragment",
    "force_http",
    "remove_duplicate_slashes",
    "remove_www",
    "add_www",
    "sort_query",
    "remove_empty_query_separator",
]
