# /config/custom_components/yomicycle/storage.py
"""Cycle-state backend on top of Home Assistant's JSON storage helper."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from homeassistant.core import HomeAssistant
from homeassistant.helpers.storage import Store

from .const import STORAGE_KEY, STORAGE_VERSION
from .yomicycle_lib.engine import CycleState

_LOGGER = logging.getLogger(__name__)

_KNOWN_FIELDS = frozenset(CycleState().as_dict())


class HassCycleBackend:
    """
    All rotations share one document in .storage/yomicycle.cycles:

        {"rotations": {"tehilim": {"offset": 0, "override_title": "", ...}}}

    Writes merge into the rotation's record; last write wins.
    """

    def __init__(self, hass: HomeAssistant, store: Store | None = None) -> None:
        self._store = store or Store(hass, STORAGE_VERSION, STORAGE_KEY)
        self._data: dict[str, Any] | None = None
        self._lock = asyncio.Lock()

    async def _async_data(self) -> dict[str, Any]:
        # caller holds self._lock
        if self._data is None:
            loaded = await self._store.async_load()
            self._data = loaded if isinstance(loaded, dict) else {}
            self._data.setdefault("rotations", {})
        return self._data

    async def async_read(self, key: str) -> dict[str, Any] | None:
        async with self._lock:
            data = await self._async_data()
            record = data["rotations"].get(key)
            return dict(record) if record else None

    async def async_write(self, key: str, fields: dict[str, Any]) -> None:
        async with self._lock:
            data = await self._async_data()
            current = dict(data["rotations"].get(key) or {})
            current.update({k: v for k, v in fields.items() if k in _KNOWN_FIELDS})

            rotations = dict(data["rotations"])
            rotations[key] = current
            new_data = {**data, "rotations": rotations}

            await self._store.async_save(new_data)
            # only adopt the new document once it is on disk
            self._data = new_data
        _LOGGER.debug("Cycle state %s updated: %s", key, sorted(fields))
