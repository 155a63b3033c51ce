from __future__ import annotations
from pathlib import Path
from typing import Any, Dict
import yaml

DEFAULTS: Dict[str, Any] = {"pretty": False, "verbose": False}


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top level must be a mapping")
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def resolve_config(path: str | Path | None, **overrides) -> DotDict:
    """Defaults, then the YAML file (if any), then non-None CLI overrides."""
    cfg = DotDict(DEFAULTS)
    if path is not None:
        cfg.update(load_yaml(path))
    return DotDict(merge_overrides(cfg, **overrides))
