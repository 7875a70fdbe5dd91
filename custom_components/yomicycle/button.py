# custom_components/yomicycle/button.py
from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Final

from homeassistant.components.button import ButtonEntity, ButtonEntityDescription
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import EntityCategory
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .admin import async_restart_cycle_from_today, async_resync_natural_cycle
from .const import DOMAIN
from .device import YomiCycleDevice
from .rotation import RotationRuntime

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class CycleButtonDescription(ButtonEntityDescription):
    """Description for the cycle resync buttons."""
    press_fn: Callable[[HomeAssistant, RotationRuntime], Awaitable[None]]


DESCRIPTIONS: Final[list[CycleButtonDescription]] = [
    CycleButtonDescription(
        key="resync_natural_cycle",
        name="Resync natural cycle",
        icon="mdi:calendar-sync",
        entity_category=EntityCategory.CONFIG,
        press_fn=async_resync_natural_cycle,
    ),
    CycleButtonDescription(
        key="restart_cycle_from_today",
        name="Restart cycle from today",
        icon="mdi:restart",
        entity_category=EntityCategory.CONFIG,
        press_fn=async_restart_cycle_from_today,
    ),
]


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the resync buttons for every enabled rotation."""
    runtimes: dict[str, RotationRuntime] = hass.data[DOMAIN][entry.entry_id]["runtimes"]
    async_add_entities(
        CycleButton(hass, runtime, desc)
        for runtime in runtimes.values()
        for desc in DESCRIPTIONS
    )


class CycleButton(YomiCycleDevice, ButtonEntity):
    """Runs one of the cycle resync operations on press."""

    entity_description: CycleButtonDescription

    def __init__(
        self,
        hass: HomeAssistant,
        runtime: RotationRuntime,
        description: CycleButtonDescription,
    ) -> None:
        super().__init__(runtime)
        self.hass = hass
        self.entity_description = description
        self._attr_unique_id = f"yomicycle_{runtime.description.key}_{description.key}"
        self.entity_id = f"button.{self._attr_unique_id}"

    async def async_press(self) -> None:
        _LOGGER.debug("%s pressed for %s", self.entity_description.key, self.rotation_key)
        await self.entity_description.press_fn(self.hass, self._runtime)
