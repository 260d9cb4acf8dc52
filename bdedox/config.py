"""Configuration loading for bdedox (.bdedox.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".bdedox.yml"
DEFAULT_HTML_DIR = "html"
DEFAULT_BASE_TITLE = "Bloomberg Development Environment"


@dataclass(frozen=True)
class EditConfig:
    """Run-wide settings threaded through every editing pass."""

    html_dir: Path = field(default_factory=lambda: Path(DEFAULT_HTML_DIR))
    base_title: str = DEFAULT_BASE_TITLE
    user_main_page: bool = False
    debug: int = 0
    verbose: int = 0

    def with_overrides(self, **overrides: Any) -> "EditConfig":
        """Return a copy where every non-``None`` override replaces the stored value."""
        values = {key: value for key, value in overrides.items() if value is not None}
        if "html_dir" in values:
            values["html_dir"] = Path(values["html_dir"])
        return replace(self, **values)


def load_config(config_path: Optional[Path] = None) -> EditConfig:
    """Load configuration from disk, returning defaults when no file exists."""
    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        return EditConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    root = config_file.parent
    config = EditConfig()
    html_dir = _as_str(data.get("html_dir"))
    if html_dir:
        config = replace(config, html_dir=root / html_dir)

    base_title = data.get("base_title")
    if base_title is not None:
        config = replace(config, base_title=str(base_title))

    return replace(
        config,
        user_main_page=_as_bool(data.get("user_main_page"), config.user_main_page),
        debug=_as_int(data.get("debug"), config.debug),
        verbose=_as_int(data.get("verbose"), config.verbose),
    )


def _resolve_config_path(config_path: Optional[Path]) -> Path:
    if config_path is None:
        return Path.cwd() / CONFIG_FILENAME
    config_path = Path(config_path).expanduser()
    if config_path.is_dir():
        return config_path / CONFIG_FILENAME
    return config_path


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return default
    return default


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return default


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_BASE_TITLE",
    "DEFAULT_HTML_DIR",
    "EditConfig",
    "load_config",
]
