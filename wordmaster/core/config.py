from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "WORDMASTER_CONFIG"
BUNDLED_SETTINGS_FILE = Path(__file__).resolve().parent.parent / "data" / "settings.yaml"


@dataclass(frozen=True)
class GameConfig:
    duration_ms: int = 2 * 60 * 1000
    tick_interval_ms: int = 20
    panel_width: int = 500
    panel_height: int = 500
    notice_jitter: int = 150
    warning_threshold_ms: int = 5000
    words_file: Optional[str] = None

    @property
    def center(self) -> tuple[int, int]:
        return (self.panel_width // 2, self.panel_height // 2)


_POSITIVE_INT_KEYS = ("duration_ms", "tick_interval_ms", "panel_width", "panel_height")
_NON_NEGATIVE_INT_KEYS = ("notice_jitter", "warning_threshold_ms")


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"{path.name}: invalid YAML: {e}") from e
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name}: expected a mapping of settings")
    return raw


def _validate(raw: Dict[str, Any], source: str) -> Dict[str, Any]:
    known = {f.name for f in fields(GameConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"{source}: unknown settings {', '.join(unknown)}")

    for key in _POSITIVE_INT_KEYS + _NON_NEGATIVE_INT_KEYS:
        if key not in raw:
            continue
        value = raw[key]
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{source}: '{key}' must be an integer")
        if key in _POSITIVE_INT_KEYS and value <= 0:
            raise ValueError(f"{source}: '{key}' must be positive")
        if value < 0:
            raise ValueError(f"{source}: '{key}' must not be negative")

    words_file = raw.get("words_file")
    if words_file is not None and not isinstance(words_file, str):
        raise ValueError(f"{source}: 'words_file' must be a path string")
    return raw


def load_config(path: Union[str, Path, None] = None) -> GameConfig:
    """Build the game configuration.

    Bundled defaults from ``data/settings.yaml`` are read first, then the
    override file given by ``path`` or the ``WORDMASTER_CONFIG`` environment
    variable. ``~`` in an override's ``words_file`` is expanded and a relative
    path is resolved against the override's directory.
    """
    config = GameConfig()
    if BUNDLED_SETTINGS_FILE.exists():
        config = replace(
            config, **_validate(_read_yaml(BUNDLED_SETTINGS_FILE), BUNDLED_SETTINGS_FILE.name)
        )

    override = path if path is not None else os.environ.get(CONFIG_ENV_VAR)
    if not override:
        return config

    override_path = Path(override).expanduser()
    if not override_path.exists():
        raise FileNotFoundError(f"Config file not found: {override_path}")
    values = _validate(_read_yaml(override_path), override_path.name)
    words_file = values.get("words_file")
    if words_file is not None:
        words_path = Path(words_file).expanduser()
        if not words_path.is_absolute():
            words_path = override_path.parent / words_path
        values["words_file"] = str(words_path)
    logger.info("Loaded settings from %s", override_path)
    return replace(config, **values)
