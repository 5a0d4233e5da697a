"""Query-string transforms."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List
from urllib.parse import parse_qsl, quote_plus

from ..urls import StructuredURL


def parse_query(raw_query: str) -> Dict[str, List[str]]:
    """Map each parameter name to its values in order of appearance."""
    params: Dict[str, List[str]] = defaultdict(list)
    # Undecodable octets survive as lone surrogates and are re-escaped as-is.
    for name, value in parse_qsl(raw_query, keep_blank_values=True, errors="surrogateescape"):
        params[name].append(value)
    return dict(params)


def _escape(component: str) -> str:
    return quote_plus(component, safe="", errors="surrogateescape")


def sort_query(url: StructuredURL) -> None:
    """Rebuild the query with names, then each name's values, sorted ordinally.

    Names and values are re-escaped, so the original escaping is not kept.
    """
    params = parse_query(url.raw_query)
    if not params:
        return

    pairs = []
    for name in sorted(params):
        for value in sorted(params[name]):
            pairs.append(f"{_escape(name)}={_escape(value)}")
    url.raw_query = "&".join(pairs)


def remove_empty_query_separator(url: StructuredURL) -> None:
    if not url.raw_query:
        url.force_query = False


__all__ = ["parse_query", "sort_query", "remove_empty_query_separator"]
