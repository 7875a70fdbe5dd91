# /config/custom_components/yomicycle/sensor.py
from __future__ import annotations

import logging
from typing import Any

import homeassistant.util.dt as dt_util
from homeassistant.components.sensor import SensorEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.dispatcher import async_dispatcher_connect
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.event import async_track_time_change

from .const import DOMAIN, SIGNAL_CYCLE_UPDATED
from .device import YomiCycleDevice
from .rotation import RotationRuntime, async_resolve

_LOGGER = logging.getLogger(__name__)

# Home Assistant rejects states longer than this
MAX_STATE_LENGTH = 255


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """One daily-content sensor per enabled rotation."""
    runtimes: dict[str, RotationRuntime] = hass.data[DOMAIN][entry.entry_id]["runtimes"]
    async_add_entities(
        [DailyContentSensor(hass, runtime) for runtime in runtimes.values()]
    )


class DailyContentSensor(YomiCycleDevice, SensorEntity):
    """Today's unit of a rotation, or the admin override written for today."""

    _attr_should_poll = False
    _attr_name = "Today"

    def __init__(self, hass: HomeAssistant, runtime: RotationRuntime) -> None:
        super().__init__(runtime)
        self.hass = hass
        slug = runtime.description.key
        self._attr_unique_id = f"yomicycle_{slug}_today"
        self.entity_id = f"sensor.{self._attr_unique_id}"
        self._attr_icon = runtime.description.icon
        self._attr_native_value: str | None = None
        self._attr_extra_state_attributes: dict[str, Any] = {}

    async def async_added_to_hass(self) -> None:
        await super().async_added_to_hass()
        await self._update_state()

        async def _tick(now) -> None:
            # midnight, nightfall and clock jumps all show up within a minute
            await self._update_state()

        self._register_listener(
            async_track_time_change(self.hass, _tick, second=0)
        )

        async def _cycle_updated() -> None:
            await self._update_state()

        self._register_listener(
            async_dispatcher_connect(
                self.hass,
                SIGNAL_CYCLE_UPDATED.format(self.rotation_key),
                _cycle_updated,
            )
        )

    async def _update_state(self) -> None:
        resolved = await async_resolve(self._runtime, dt_util.now())
        content = resolved.content

        title = content.title
        if len(title) > MAX_STATE_LENGTH:
            title = title[: MAX_STATE_LENGTH - 1] + "…"

        self._attr_native_value = title
        self._attr_extra_state_attributes = {
            "title": content.title,
            "body": content.body,
            "image_url": content.image_url,
            "updated_at": content.updated_at,
            "source": content.source,
            "day_index": content.day_index,
            "offset": resolved.offset,
            "hebrew_day": resolved.today.day,
            "today_label": resolved.today.label,
        }
        _LOGGER.debug(
            "%s: %s (%s, day %s, offset %s)",
            self.rotation_key,
            content.day_index,
            content.source,
            resolved.today.day,
            resolved.offset,
        )
        self.async_write_ha_state()
