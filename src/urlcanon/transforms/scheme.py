"""Scheme and fragment transforms."""

from __future__ import annotations

from ..urls import StructuredURL


def lowercase_scheme(url: StructuredURL) -> None:
    url.scheme = url.scheme.lower()


def force_http(url: StructuredURL) -> None:
    if url.scheme.lower() == "https":
        url.scheme = "http"


def remove_fragment(url: StructuredURL) -> None:
    url.fragment = ""


__all__ = ["lowercase_scheme", "force_http", "remove_fragment"]
