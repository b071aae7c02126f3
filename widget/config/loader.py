"""YAML config loader with environment override and runtime get/set."""

import json
import os
from pathlib import Path
from typing import Any

import yaml

from widget.config.defaults import APP_ID_ENV_VAR
from widget.config.schema import WidgetConfig


def load_config(path: str | Path) -> WidgetConfig:
    """Load and validate config from a YAML file.

    A missing or empty file yields the defaults. If OPENWEATHER_APP_ID is
    set it replaces api.app_id from the file.
    """
    path = Path(path)
    raw: dict[str, Any] = {}
    if path.exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    app_id = os.environ.get(APP_ID_ENV_VAR)
    if app_id:
        raw.setdefault("api", {})
        raw["api"]["app_id"] = app_id

    return WidgetConfig(**raw)


def masked_config_json(config: WidgetConfig) -> str:
    """Config as JSON with the API key hidden."""
    data = json.loads(config.model_dump_json())
    if data["api"]["app_id"]:
        data["api"]["app_id"] = "****" + data["api"]["app_id"][-4:]
    return json.dumps(data, indent=2)


def get_config_value(config: WidgetConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'display.default_city'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: WidgetConfig, dotted_key: str, value: Any) -> WidgetConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new WidgetConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    old_value = target[parts[-1]]
    if isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return WidgetConfig(**data)
