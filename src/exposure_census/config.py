from __future__ import annotations

from dataclasses import dataclass
import glob
import os
from pathlib import Path
from typing import Any

from .discovery import PatternError, validate_pattern


DEFAULT_CONFIG_PATH = "config.yaml"


class ConfigError(ValueError):
    pass


@dataclass
class AppConfig:
    filepath: str
    log_level: str = "INFO"
    log_file: Path | None = None


def _expand_path(value: str | None, base: Path) -> Path | None:
    if value in (None, ""):
        return None
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = (base / path).resolve()
    return path


def _expand_pattern(value: str, base: Path) -> str:
    # Only the user pattern carries wildcards; the config directory is literal.
    pattern = os.path.expanduser(value)
    if os.path.isabs(pattern):
        return pattern
    return os.path.join(glob.escape(str(base)), pattern)


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ConfigError(f"missing required config key: {key}")
    return data[key]


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load the scan config. JSON documents work too since YAML parses them."""

    try:
        import yaml  # type: ignore
    except Exception as exc:
        raise RuntimeError("PyYAML is required for config loading. Install with: pip install PyYAML") from exc

    cfg_path = Path(path).expanduser().resolve()
    try:
        with cfg_path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"unable to read config file {cfg_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"unable to parse config file {cfg_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"config file {cfg_path} must contain a mapping with a 'filepath' key")

    pattern = _require(raw, "filepath")
    if not isinstance(pattern, str) or not pattern.strip():
        raise ConfigError("config key 'filepath' must be a non-empty glob pattern string")

    try:
        validate_pattern(pattern)
    except PatternError as exc:
        raise ConfigError(f"invalid glob pattern in 'filepath': {exc}") from exc

    base = cfg_path.parent
    filepath = _expand_pattern(pattern, base)

    return AppConfig(
        filepath=filepath,
        log_level=str(raw.get("log_level", "INFO")),
        log_file=_expand_path(raw.get("log_file"), base),
    )
