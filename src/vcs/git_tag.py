"""Current-tag providers.

This module resolves the release tag that scopes snapshot names.
The default provider asks git for the nearest tag reachable from HEAD.
"""

from __future__ import annotations

from pathlib import Path
import subprocess

from core.constants import GIT_DESCRIBE_TIMEOUT_SECONDS, GIT_EXECUTABLE
from core.errors import EventSnapTagError
from core.logging_config import get_logger
from core.types import TagProvider

_LOGGER = get_logger(__name__)


def git_describe_tag_provider(repo_dir: Path, lightweight: bool = False) -> TagProvider:
    """Build a provider that runs ``git describe --abbrev=0`` in a repository.

    Args:
        repo_dir: Working directory for the git invocation.
        lightweight: Include lightweight tags, not only annotated ones.

    Returns:
        Zero-argument callable returning the current tag.
    """

    def provide_tag() -> str:
        return describe_current_tag(repo_dir, lightweight=lightweight)

    return provide_tag


def static_tag_provider(tag: str) -> TagProvider:
    """Build a provider that always returns a fixed tag."""

    def provide_tag() -> str:
        return tag

    return provide_tag


def describe_current_tag(repo_dir: Path, lightweight: bool = False) -> str:
    """Return the nearest tag reachable from HEAD.

    Args:
        repo_dir: Working directory for the git invocation.
        lightweight: Include lightweight tags, not only annotated ones.

    Returns:
        Tag name without surrounding whitespace.

    Raises:
        EventSnapTagError: If git is missing, fails, times out, or prints nothing.
    """
    command = [GIT_EXECUTABLE, "describe", "--abbrev=0"]
    if lightweight:
        command.append("--tags")
    try:
        result = subprocess.run(
            command,
            cwd=repo_dir,
            capture_output=True,
            text=True,
            timeout=GIT_DESCRIBE_TIMEOUT_SECONDS,
            check=False,
        )
    except FileNotFoundError as error:
        raise EventSnapTagError(
            f"Cannot resolve current tag: '{GIT_EXECUTABLE}' executable not found "
            f"or directory {repo_dir} is missing. Install git or pass --tag."
        ) from error
    except subprocess.TimeoutExpired as error:
        raise EventSnapTagError(
            f"Cannot resolve current tag: git describe timed out after "
            f"{GIT_DESCRIBE_TIMEOUT_SECONDS}s in {repo_dir}."
        ) from error
    except OSError as error:
        raise EventSnapTagError(
            f"Cannot resolve current tag: running git in {repo_dir} failed: {error}. "
            "Point repo_dir at a readable directory or pass --tag."
        ) from error
    if result.returncode != 0:
        raise EventSnapTagError(
            f"Cannot resolve current tag in {repo_dir}: {result.stderr.strip()}. "
            "Create a release tag or pass --tag."
        )
    tag = result.stdout.strip()
    if not tag:
        raise EventSnapTagError(f"git describe returned no tag in {repo_dir}. Pass --tag.")
    _LOGGER.debug("tag_resolved", tag=tag, repo_dir=str(repo_dir), lightweight=lightweight)
    return tag
