"""Helpers for loading plot configuration YAML files.

`load_config()` returns the raw mapping (empty when the file is missing) and
`load_plot_config()` validates it into a `PlotConfig`. The default path can be
overridden with the ``PLOTSCRIPT_CONFIG`` environment variable.
"""
from __future__ import annotations

import hashlib
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..core.config import PlotConfig

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path("plot.yaml")


def default_config_path() -> Path:
    env = os.environ.get("PLOTSCRIPT_CONFIG")
    if env:
        return Path(env).expanduser()
    return DEFAULT_PATH


def load_config(path: Optional[str | Path] = None) -> Dict[str, Any]:
    """Load YAML config from ``path`` and return a dict.

    A missing file yields an empty dict; malformed YAML raises ``yaml.YAMLError``.
    """
    p = Path(path) if path is not None else default_config_path()
    if not p.exists():
        logger.debug("Config file not found: %s", str(p))
        return {}
    with p.open("r", encoding="utf-8") as fh:
        cfg = yaml.safe_load(fh) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Top level of {p} must be a mapping, got {type(cfg).__name__}")
    return cfg


def load_plot_config(path: Optional[str | Path] = None) -> PlotConfig:
    p = Path(path) if path is not None else default_config_path()
    if not p.exists():
        raise FileNotFoundError(str(p))
    return PlotConfig.model_validate(load_config(p))


def hash_config(cfg: Dict[str, Any]) -> str:
    data = json.dumps(cfg, sort_keys=True, default=str).encode("utf-8")
    return hashlib.sha256(data).hexdigest()
