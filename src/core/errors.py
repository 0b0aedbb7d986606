"""eventsnap exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class EventSnapError(Exception):
    """Base exception for all eventsnap failures."""


class EventSnapConfigError(EventSnapError):
    """Raised for invalid runtime configuration."""


class EventSnapTagError(EventSnapError):
    """Raised when the current tag cannot be resolved or is unusable."""


class EventSnapStoreError(EventSnapError):
    """Raised for snapshot directory, copy, and lookup failures."""
