"""Defaults file discovery and loading.

A defaults file is YAML with a top-level ``code`` mapping:

    code:
      charset: alphanumeric
      algorithm: mod36
      groups: 4
      groupSize: 4
      separator: "-"
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from structured_id.exceptions import SettingsError
from structured_id.models.config import CodeConfig

logger = logging.getLogger(__name__)

LOCAL_SETTINGS_NAME = ".structured-id.yaml"

_KNOWN_KEYS = {
    name
    for field_name, field in CodeConfig.model_fields.items()
    for name in (field_name, field.alias)
    if name
}


def discover_settings_path(explicit: Path | None = None) -> Path | None:
    """Find the defaults file to use.

    Search order:
    1. Explicit path (must exist)
    2. .structured-id.yaml in the current directory
    3. ~/.structured-id/config.yaml

    Returns:
        The path, or None if no defaults file exists.

    Raises:
        SettingsError: If an explicit path does not exist.
    """
    if explicit is not None:
        if not explicit.is_file():
            raise SettingsError(f"Settings file not found: {explicit}")
        return explicit

    local = Path.cwd() / LOCAL_SETTINGS_NAME
    if local.is_file():
        return local

    global_settings = global_settings_path()
    if global_settings.is_file():
        return global_settings

    return None


def load_settings(path: Path | None) -> dict[str, Any]:
    """Load configuration defaults from a YAML file.

    Args:
        path: Path to the file, or None for no defaults.

    Returns:
        Option names mapped to values, suitable for ``resolve_config``.

    Raises:
        SettingsError: If the file cannot be parsed or has unknown keys.
    """
    if path is None:
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise SettingsError(f"Could not read settings from {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {path} must contain a mapping")

    code = data.get("code") or {}
    if not isinstance(code, dict):
        raise SettingsError(f"'code' in {path} must be a mapping")

    unknown = sorted(set(code) - _KNOWN_KEYS)
    if unknown:
        raise SettingsError(f"Unknown settings in {path}: {', '.join(unknown)}")

    logger.debug("Loaded settings from %s: %s", path, code)
    return dict(code)


def save_settings(path: Path, config: CodeConfig) -> Path:
    """Write a configuration as a defaults file.

    Args:
        path: Destination path; parent directories are created.
        config: The configuration to save.

    Returns:
        The written path.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump({"code": config.display_settings()}, f, default_flow_style=False)
    logger.info("Saved settings to %s", path)
    return path


def global_settings_path() -> Path:
    """Path of the per-user defaults file."""
    return Path.home() / ".structured-id" / "config.yaml"
