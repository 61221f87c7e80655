"""Configuration parsing, templates and file handling for install-bridge.json."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from .models import DEFAULT_BADGE_COLOR, DEFAULT_BADGE_LABEL, DEFAULT_BADGE_STYLE, ParseResult
from .validation import validate_config

CONFIG_FILENAME = "install-bridge.json"
BADGE_FILENAME = "install-badge.svg"

_RELEASES_URL = "https://github.com/user/repo/releases"


class ConfigError(RuntimeError):
    """Raised when a configuration file cannot be parsed or fails validation."""

    def __init__(self, message: str, errors: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.errors: List[str] = list(errors)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name} is not valid JSON")


def parse_config(text: Union[str, bytes]) -> ParseResult:
    """Deserialize JSON ``text`` and validate the result.

    ``NaN`` and ``Infinity`` literals are rejected as they are not standard JSON.
    """
    try:
        config = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        return ParseResult(success=False, errors=[f"Invalid JSON: {exc}"])

    validation = validate_config(config)
    if not validation.valid:
        return ParseResult(success=False, errors=list(validation.errors))
    return ParseResult(success=True, config=config)


def create_template(app_name: str = "MyApp") -> Dict[str, Any]:
    """Return a ready-to-edit configuration for ``app_name``."""
    download = f"{_RELEASES_URL}/latest/download/{app_name}"
    return {
        "name": app_name,
        "installers": {
            "darwin": f"{download}-macOS.dmg",
            "win32": f"{download}-windows.exe",
            "linux": f"{download}-linux.AppImage",
        },
        "homepage": "https://github.com/user/repo",
        "fallback": _RELEASES_URL,
        "badge": {
            "label": DEFAULT_BADGE_LABEL,
            "color": DEFAULT_BADGE_COLOR,
            "style": DEFAULT_BADGE_STYLE,
        },
    }


def resolve_config_path(path: Path) -> Path:
    """Map a project directory or config file path to the config file."""
    path = path.expanduser()
    if path.is_dir() or path.suffix.lower() != ".json":
        return (path / CONFIG_FILENAME).resolve()
    return path.resolve()


def load_config(path: Path) -> Dict[str, Any]:
    """Read and validate the configuration stored at ``path``."""
    config_file = resolve_config_path(path)
    if not config_file.exists():
        raise FileNotFoundError(f"No {CONFIG_FILENAME} found at {config_file}")

    result = parse_config(config_file.read_text(encoding="utf-8"))
    if not result.success:
        errors = result.errors or []
        raise ConfigError(f"{config_file.name} is invalid: {'; '.join(errors)}", errors)
    return result.config or {}


def write_config(path: Path, config: Dict[str, Any], *, force: bool = False) -> Path:
    """Serialize ``config`` to disk, refusing to overwrite unless ``force``."""
    config_file = resolve_config_path(path)
    if config_file.exists() and not force:
        raise FileExistsError(f"{config_file} already exists (use --force to overwrite)")
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(json.dumps(config, indent=2) + "\n", encoding="utf-8")
    return config_file


def write_badge(path: Path, svg: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(svg, encoding="utf-8")
    return path


__all__ = [
    "BADGE_FILENAME",
    "CONFIG_FILENAME",
    "ConfigError",
    "create_template",
    "load_config",
    "parse_config",
    "resolve_config_path",
    "write_badge",
    "write_config",
]
