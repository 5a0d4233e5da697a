"""URL normalization with composable, risk-tiered flags."""

from .flags import NormalizationFlags
from .pipeline import TRANSFORMS, must_normalize_url_string, normalize_url, normalize_url_string
from .urls import StructuredURL, URLParseError, parse_url

__all__ = [
    "NormalizationFlags",
    "StructuredURL",
    "URLParseError",
    "TRANSFORMS",
    "parse_url",
    "normalize_url",
    "normalize_url_string",
    "must_normalize_url_string",
]
