# /config/custom_components/yomicycle/yomicycle_lib/errors.py
"""Typed errors raised by the rotation engine and its cycle-state store."""

from __future__ import annotations


class RotationError(Exception):
    """Base class for every error the rotation core raises."""


class ConfigurationError(RotationError):
    """Content table is empty or malformed; nothing can be computed."""


class ValidationError(RotationError):
    """Admin input rejected before anything was written."""


class StorageUnavailable(RotationError):
    """Reading or writing the persisted cycle state failed."""

    def __init__(self, key: str, action: str, reason: str | None = None) -> None:
        self.key = key
        self.action = action
        msg = f"Cycle state '{key}' could not be {action}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
