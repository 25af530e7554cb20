from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any, Dict

import yaml

_CONFIG_DIR = Path(os.getenv("SHIRUR_CONFIG_DIR", "configs"))
_CACHE: Dict[Path, Dict[str, Any]] = {}

_DEFAULT_PATHS: Dict[str, Any] = {
    "data": {
        "labels": "data/labels",
    },
    "artifacts": {
        "logs": "artifacts/logs",
    },
}


def set_config_dir(config_dir: str | os.PathLike) -> None:
    """Set the directory where YAML configs reside (default: ./configs).

    This can be overridden by setting env var SHIRUR_CONFIG_DIR or via CLI.
    """
    global _CONFIG_DIR
    _CONFIG_DIR = Path(config_dir)


def config_dir() -> Path:
    return _CONFIG_DIR


def _paths_yaml() -> Path:
    return (_CONFIG_DIR / "paths.yaml").resolve()


def load_yaml_once(path: str | os.PathLike) -> Dict[str, Any]:
    """Load a YAML file and cache its parsed content by absolute path.

    - A missing paths.yaml yields the built-in path layout.
    - Any other missing file yields an empty mapping so code-level defaults apply.
    """
    p = Path(path).resolve()
    if p in _CACHE:
        return _CACHE[p]

    try:
        with open(p, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        data = copy.deepcopy(_DEFAULT_PATHS) if p.name == "paths.yaml" else {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping: {p}")
    _CACHE[p] = data
    return data


def clear_cache() -> None:
    _CACHE.clear()


def _get_from_dot(mapping: Dict[str, Any], dot_key: str) -> Any:
    cur: Any = mapping
    for part in dot_key.split("."):
        if not isinstance(cur, dict) or part not in cur:
            raise KeyError(f"Key not found in config: {dot_key}")
        cur = cur[part]
    return cur


def get_path(dot_key: str) -> str:
    """Look up a directory in paths.yaml, e.g. get_path("data.labels")."""
    val = _get_from_dot(load_yaml_once(_paths_yaml()), dot_key)
    if not isinstance(val, str):
        raise TypeError(f"Config value for '{dot_key}' must be a string path")
    return val


def expand(dot_key: str, *parts: str) -> str:
    """Resolve a file or directory under a configured path, creating the directory.

    expand("artifacts.logs", "suggest.log") makes artifacts/logs/ and returns
    artifacts/logs/suggest.log.
    """
    full = Path(get_path(dot_key)).joinpath(*parts)
    (full if full.suffix == "" else full.parent).mkdir(parents=True, exist_ok=True)
    return str(full)
