from __future__ import annotations
import os
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from hoptree.core.errors import ConfigError
from hoptree.core.settings import BuilderSettings


def _read_yaml_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_settings(path: str | None) -> BuilderSettings:
    """Load builder settings from a YAML file.

    Expected format:
    builder:
      weight_bits: 64
      max_nodes: 1048576

    A missing path (None) yields the defaults.
    """
    if path is None:
        return BuilderSettings()
    if not os.path.exists(path):
        raise ConfigError(path, "Settings file not found")
    try:
        data = _read_yaml_file(path)
    except yaml.YAMLError as exc:
        raise ConfigError(path, "Settings file is not valid YAML", cause=exc) from exc
    if not isinstance(data, dict):
        raise ConfigError(path, "Settings file must contain a mapping")

    section = data.get("builder", {}) or {}
    try:
        return BuilderSettings.model_validate(section)
    except ValidationError as exc:
        raise ConfigError(path, "Invalid builder settings", cause=exc) from exc
