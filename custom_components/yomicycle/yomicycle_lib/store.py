# /config/custom_components/yomicycle/yomicycle_lib/store.py
"""Cycle-state store: best-effort reads and the four admin mutations."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, Protocol

from .engine import BLANK_OVERRIDE, CycleState, natural_offset, restart_offset
from .errors import StorageUnavailable, ValidationError

_LOGGER = logging.getLogger(__name__)

DEFAULT_READ_TIMEOUT = 10.0


class CycleStateBackend(Protocol):
    """Key-value document store the host provides."""

    async def async_read(self, key: str) -> dict[str, Any] | None:
        """Stored fields for `key`, or None if the record does not exist yet."""

    async def async_write(self, key: str, fields: dict[str, Any]) -> None:
        """Merge `fields` into the record for `key`, creating it if needed."""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CycleStore:
    """
    Handle on one rotation's persisted CycleState.

    Reads never fail: a missing record is a fresh state, and a backend error
    or timeout yields None so the engine falls back to offset 0. Writes always
    raise StorageUnavailable on failure.
    """

    def __init__(
        self,
        backend: CycleStateBackend,
        key: str,
        *,
        clock: Callable[[], datetime] = _utc_now,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
    ) -> None:
        self._backend = backend
        self.key = key
        self._clock = clock
        self._read_timeout = read_timeout

    async def async_load(self) -> CycleState | None:
        try:
            data = await asyncio.wait_for(
                self._backend.async_read(self.key), timeout=self._read_timeout
            )
        except asyncio.TimeoutError:
            _LOGGER.warning("Reading cycle state %s timed out", self.key)
            return None
        except Exception as e:
            _LOGGER.warning("Reading cycle state %s failed: %s", self.key, e)
            return None
        return CycleState.from_dict(data)

    async def async_resync_to_natural_cycle(self) -> None:
        """Day N shows unit N again; any override is dropped."""
        await self._async_write_offset(natural_offset())

    async def async_restart_cycle_from_today(self, hebrew_day: int) -> None:
        """Today becomes cycle position 1; any override is dropped."""
        await self._async_write_offset(restart_offset(hebrew_day))

    async def async_save_override(
        self,
        title: str,
        body: str = "",
        image_url: str | None = None,
        updated_by: str | None = None,
    ) -> None:
        if not title or not title.strip():
            raise ValidationError("Override title must not be empty")

        await self._async_write(
            {
                "override_title": title,
                "override_body": body or "",
                "override_image": image_url or "",
                "updated_at": self._stamp(),
                "updated_by": updated_by,
            },
            "saved",
        )

    async def async_clear_override(self) -> None:
        await self._async_write(
            {**BLANK_OVERRIDE, "updated_at": self._stamp()},
            "cleared",
        )

    # ───────────────── internals ─────────────────

    def _stamp(self) -> str:
        return self._clock().isoformat()

    async def _async_write_offset(self, offset: int) -> None:
        # offset and the blanked override go out in a single merge write,
        # so a stale override can never outlive a resync
        fields: dict[str, Any] = {"offset": offset}
        fields.update(BLANK_OVERRIDE)
        fields["updated_at"] = self._stamp()
        await self._async_write(fields, "resynced")

    async def _async_write(self, fields: dict[str, Any], action: str) -> None:
        try:
            await self._backend.async_write(self.key, fields)
        except StorageUnavailable:
            raise
        except Exception as e:
            raise StorageUnavailable(self.key, action, str(e)) from e
