"""Runtime configuration model for eventsnap.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path

from core.config_file import load_config_file
from core.constants import (
    DEFAULT_CONFIG_FILE_NAME,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SNAPSHOT_DIR,
    DEFAULT_SOURCE_PATH,
    FALSE_FLAG_VALUES,
    LOG_LEVELS,
    TRUE_FLAG_VALUES,
)
from core.errors import EventSnapConfigError


@dataclass(frozen=True)
class EventSnapConfig:
    """Validated runtime configuration.

    Attributes:
        source_path: File that is archived and compared.
        snapshot_dir: Directory holding numbered snapshots.
        repo_dir: Working directory used for tag lookup.
        tag: Fixed tag override; git is queried when omitted.
        lightweight_tags: Whether tag lookup also considers lightweight tags.
        log_level: Lowercase structured logging level.
    """

    source_path: Path
    snapshot_dir: Path
    repo_dir: Path
    tag: str | None
    lightweight_tags: bool
    log_level: str

    @classmethod
    def defaults(cls) -> "EventSnapConfig":
        """Build config from built-in defaults relative to the working directory."""
        return cls(
            source_path=DEFAULT_SOURCE_PATH.resolve(),
            snapshot_dir=DEFAULT_SNAPSHOT_DIR.resolve(),
            repo_dir=Path.cwd(),
            tag=None,
            lightweight_tags=False,
            log_level=DEFAULT_LOG_LEVEL,
        )

    @classmethod
    def from_env(cls, config_path: str | None = None) -> "EventSnapConfig":
        """Build config from defaults, an optional YAML file, and the environment.

        Args:
            config_path: Explicit config file path; falls back to
                EVENTSNAP_CONFIG, then to ``.eventsnap.yaml`` when present.

        Returns:
            A validated config object.

        Raises:
            EventSnapConfigError: If file or environment values are invalid.
        """
        config = cls.defaults()
        config_file = _resolve_config_file(config_path)
        if config_file is not None:
            config = replace(config, **load_config_file(config_file))
        config = _apply_env_overrides(config)
        return replace(config, log_level=_parse_log_level(config.log_level))


def _resolve_config_file(config_path: str | None) -> Path | None:
    """Pick the config file to load.

    Explicit paths must exist; the default file is optional.
    """
    explicit_path = config_path or os.getenv("EVENTSNAP_CONFIG")
    if explicit_path:
        return Path(explicit_path)
    default_path = Path(DEFAULT_CONFIG_FILE_NAME)
    if default_path.is_file():
        return default_path
    return None


def _apply_env_overrides(config: EventSnapConfig) -> EventSnapConfig:
    """Layer EVENTSNAP_* environment variables over a config."""
    source_value = os.getenv("EVENTSNAP_SOURCE_PATH")
    snapshot_dir_value = os.getenv("EVENTSNAP_SNAPSHOT_DIR")
    repo_dir_value = os.getenv("EVENTSNAP_REPO_DIR")
    tag_value = os.getenv("EVENTSNAP_TAG")
    lightweight_value = os.getenv("EVENTSNAP_LIGHTWEIGHT_TAGS")
    log_level_value = os.getenv("EVENTSNAP_LOG_LEVEL")
    if source_value:
        config = replace(config, source_path=_resolve_path(source_value))
    if snapshot_dir_value:
        config = replace(config, snapshot_dir=_resolve_path(snapshot_dir_value))
    if repo_dir_value:
        config = replace(config, repo_dir=_resolve_path(repo_dir_value))
    if tag_value is not None:
        config = replace(config, tag=tag_value)
    if lightweight_value:
        config = replace(config, lightweight_tags=_parse_flag(lightweight_value))
    if log_level_value:
        config = replace(config, log_level=log_level_value)
    return config


def _resolve_path(raw_value: str) -> Path:
    return Path(raw_value).expanduser().resolve()


def _parse_flag(raw_value: str) -> bool:
    """Parse a boolean environment flag.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed boolean.

    Raises:
        EventSnapConfigError: If value is not a recognized flag.
    """
    normalized = raw_value.strip().lower()
    if normalized in TRUE_FLAG_VALUES:
        return True
    if normalized in FALSE_FLAG_VALUES:
        return False
    raise EventSnapConfigError(
        "Invalid EVENTSNAP_LIGHTWEIGHT_TAGS value: "
        f"expected one of {', '.join(TRUE_FLAG_VALUES + FALSE_FLAG_VALUES)}, "
        f"got '{raw_value}'."
    )


def _parse_log_level(raw_value: str) -> str:
    """Normalize and validate the log level name.

    Raises:
        EventSnapConfigError: If the level is not supported.
    """
    normalized = raw_value.strip().lower()
    if normalized not in LOG_LEVELS:
        raise EventSnapConfigError(
            f"Invalid log level '{raw_value}'. Use one of: {', '.join(LOG_LEVELS)}."
        )
    return normalized
