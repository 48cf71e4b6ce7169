"""Configuration helpers for the navbar renderer."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from .models import RenderConfig

_LOGGER = logging.getLogger(__name__)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_DEFAULT_CONFIG_PATH = _PROJECT_ROOT / "configs" / "navbar.json"

_ENV_OVERRIDES = {
    "NAVWALKER_DROPDOWN_RIGHT": "dropdown_right",
    "NAVWALKER_DROPDOWN_UP": "dropdown_up",
    "NAVWALKER_HOVERABLE": "hoverable",
    "NAVWALKER_BOXED": "boxed",
}


def load_render_config(path: Path | None = None) -> RenderConfig:
    """Load dropdown flags from disk and apply environment overrides.

    Unknown keys in the file are ignored; an undecodable file is logged and
    treated as empty so rendering can continue with the defaults.
    """

    config_path = path or _DEFAULT_CONFIG_PATH
    data: Dict[str, Any] = {}

    if config_path.exists():
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            _LOGGER.warning("Unable to decode navbar config at %s: %s", config_path, exc)
        if not isinstance(data, dict):
            _LOGGER.warning("Navbar config at %s is not an object, ignoring it", config_path)
            data = {}

    for variable, key in _ENV_OVERRIDES.items():
        value = os.environ.get(variable)
        if value is not None:
            data[key] = value

    filtered = {key: data[key] for key in RenderConfig.model_fields if key in data}
    return RenderConfig(**filtered)


__all__ = ["load_render_config"]
