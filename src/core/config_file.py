"""YAML config file parsing for eventsnap.

This module loads and validates the optional ``.eventsnap.yaml`` file.
It returns typed overrides that the runtime config layers over defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, cast

import yaml

from core.errors import EventSnapConfigError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)

_PATH_KEYS = ("source_path", "snapshot_dir", "repo_dir")
_STRING_KEYS = ("tag", "log_level")
_BOOL_KEYS = ("lightweight_tags",)
SUPPORTED_CONFIG_KEYS = _PATH_KEYS + _STRING_KEYS + _BOOL_KEYS


def load_config_file(config_path: Path) -> dict[str, object]:
    """Load and validate a YAML config file from disk.

    Relative paths inside the file are resolved against the file's directory.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Mapping of config field names to typed override values.

    Raises:
        EventSnapConfigError: If the file is missing, unreadable, or invalid.
    """
    config_file = config_path.expanduser().resolve()
    payload = _load_yaml_payload(config_file)
    if payload is None:
        return {}
    root_mapping = _expect_mapping(payload, config_file)
    _validate_keys(root_mapping, config_file)
    overrides: dict[str, object] = {}
    for key, value in root_mapping.items():
        if key in _PATH_KEYS:
            overrides[key] = _parse_path(value, key, config_file)
        elif key in _BOOL_KEYS:
            overrides[key] = _parse_bool(value, key, config_file)
        else:
            overrides[key] = _parse_string(value, key, config_file)
    _LOGGER.debug("config_file_loaded", config_path=str(config_file), keys=sorted(overrides))
    return overrides


def _load_yaml_payload(config_file: Path) -> object:
    if not config_file.is_file():
        raise EventSnapConfigError(
            f"Config file does not exist at {config_file}. Provide a valid YAML file path."
        )
    try:
        text = config_file.read_text(encoding="utf-8")
    except OSError as error:
        raise EventSnapConfigError(
            f"Failed to read config file at {config_file}: {error}. "
            "Check file permissions and retry."
        ) from error
    try:
        return cast(object, yaml.safe_load(text))
    except yaml.YAMLError as error:
        raise EventSnapConfigError(
            f"Failed to parse YAML config at {config_file}: {error}. Fix YAML syntax and retry."
        ) from error


def _expect_mapping(value: object, config_file: Path) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise EventSnapConfigError(
            f"Invalid config at {config_file}: expected a mapping, got {type(value).__name__}."
        )
    normalized_mapping = {}
    for key, payload in value.items():
        if not isinstance(key, str):
            raise EventSnapConfigError(
                f"Invalid config at {config_file}: expected string keys, "
                f"got {type(key).__name__}."
            )
        normalized_mapping[key] = payload
    return normalized_mapping


def _validate_keys(root_mapping: Mapping[str, object], config_file: Path) -> None:
    unknown_keys = sorted(set(root_mapping) - set(SUPPORTED_CONFIG_KEYS))
    if unknown_keys:
        supported_rows = ", ".join(SUPPORTED_CONFIG_KEYS)
        raise EventSnapConfigError(
            f"Unsupported config keys in {config_file}: {', '.join(unknown_keys)}. "
            f"Use only: {supported_rows}."
        )


def _parse_path(value: object, key: str, config_file: Path) -> Path:
    raw_path = _parse_string(value, key, config_file)
    path = Path(raw_path).expanduser()
    if not path.is_absolute():
        path = config_file.parent / path
    return path.resolve()


def _parse_string(value: object, key: str, config_file: Path) -> str:
    if not isinstance(value, str) or not value:
        raise EventSnapConfigError(
            f"Config field '{key}' in {config_file} must be a non-empty string."
        )
    return value


def _parse_bool(value: object, key: str, config_file: Path) -> bool:
    if not isinstance(value, bool):
        raise EventSnapConfigError(
            f"Config field '{key}' in {config_file} must be true or false."
        )
    return value
