"""Core constants used across eventsnap modules.

This module centralizes default paths and naming rules.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_SOURCE_PATH = Path("events.yaml")
DEFAULT_SNAPSHOT_DIR = Path("old_data")
DEFAULT_CONFIG_FILE_NAME = ".eventsnap.yaml"
SNAPSHOT_NAME_SEPARATOR = "-"
FIRST_SNAPSHOT_INDEX = 0
MAX_ARCHIVE_ATTEMPTS = 8
GIT_EXECUTABLE = "git"
GIT_DESCRIBE_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_LEVEL = "info"
LOG_LEVELS = {
    "debug": 10,
    "info": 20,
    "warning": 30,
    "error": 40,
}
TRUE_FLAG_VALUES = ("1", "true", "yes", "on")
FALSE_FLAG_VALUES = ("0", "false", "no", "off")
COMPARE_EXIT_IDENTICAL = 0
COMPARE_EXIT_DIFFERENT = 1
CLI_EXIT_ERROR = 2
