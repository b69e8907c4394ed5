"""
Load generation config (YAML). Used by the CLI to get default options and output format.
"""
from pathlib import Path
from typing import Any

import yaml

from .schema import DiamondOptions


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _defaults() -> dict[str, Any]:
    return {
        "diamonds": {
            "type": "linear",
            "randomColorsNumber": 3,
        },
        "output": {
            "format": "css",
            "property": "background",
        },
        "logging": {"level": "WARNING"},
    }


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    merged = {**_defaults(), **data}
    # Generation options merge key-wise so a file can override just one of them
    merged["diamonds"] = {**_defaults()["diamonds"], **(data.get("diamonds") or {})}
    return merged


def options_from_config(config: dict[str, Any]) -> DiamondOptions:
    return DiamondOptions.from_dict(config.get("diamonds") or {})
