"""Top-level configuration loader."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from .flags import NormalizationFlags

DEFAULT_CONFIG_PATH = Path("config/default.yaml")
DEFAULT_FLAG_NAMES = ("usually_safe",)


@lru_cache(maxsize=1)
def load_app_config(path: str | Path | None = None) -> Dict[str, Any]:
    """Load application configuration."""
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        return {}
    with config_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    return data


def resolve_flags(config: Mapping[str, Any]) -> NormalizationFlags:
    """Return the flags selected by the ``normalization.flags`` list."""
    section = config.get("normalization") or {}
    if not isinstance(section, Mapping):
        raise ValueError("'normalization' config section must be a mapping")
    names = section.get("flags", DEFAULT_FLAG_NAMES)
    if isinstance(names, str):
        names = names.split(",")
    return NormalizationFlags.from_names(str(name) for name in names)


__all__ = ["load_app_config", "resolve_flags", "DEFAULT_CONFIG_PATH", "DEFAULT_FLAG_NAMES"]
