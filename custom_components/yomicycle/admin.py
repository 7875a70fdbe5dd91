# /config/custom_components/yomicycle/admin.py
"""Admin mutations shared by the services and the buttons."""

from __future__ import annotations

import logging
from collections.abc import Awaitable

import homeassistant.util.dt as dt_util
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError, ServiceValidationError
from homeassistant.helpers.dispatcher import async_dispatcher_send

from .const import SIGNAL_CYCLE_UPDATED
from .rotation import RotationRuntime
from .yomicycle_lib.errors import StorageUnavailable, ValidationError

_LOGGER = logging.getLogger(__name__)


async def _async_apply(
    hass: HomeAssistant, runtime: RotationRuntime, write: Awaitable[None], what: str
) -> None:
    key = runtime.description.key
    try:
        await write
    except ValidationError as err:
        raise ServiceValidationError(str(err)) from err
    except StorageUnavailable as err:
        raise HomeAssistantError(f"{key}: {what} failed: {err}") from err

    _LOGGER.info("%s: %s", key, what)
    async_dispatcher_send(hass, SIGNAL_CYCLE_UPDATED.format(key))


async def async_resync_natural_cycle(hass: HomeAssistant, runtime: RotationRuntime) -> None:
    await _async_apply(
        hass,
        runtime,
        runtime.store.async_resync_to_natural_cycle(),
        "resynced to the natural cycle",
    )


async def async_restart_cycle_from_today(
    hass: HomeAssistant, runtime: RotationRuntime, hebrew_day: int | None = None
) -> None:
    if hebrew_day is None:
        hebrew_day = runtime.days.today(dt_util.now()).day
    await _async_apply(
        hass,
        runtime,
        runtime.store.async_restart_cycle_from_today(hebrew_day),
        f"cycle restarted from Hebrew day {hebrew_day}",
    )


async def async_save_override(
    hass: HomeAssistant,
    runtime: RotationRuntime,
    title: str,
    body: str = "",
    image_url: str | None = None,
    user_id: str | None = None,
) -> None:
    await _async_apply(
        hass,
        runtime,
        runtime.store.async_save_override(title, body, image_url, updated_by=user_id),
        "override saved",
    )


async def async_clear_override(hass: HomeAssistant, runtime: RotationRuntime) -> None:
    await _async_apply(
        hass, runtime, runtime.store.async_clear_override(), "override cleared"
    )
