# custom_components/yomicycle/device.py
from __future__ import annotations

from collections.abc import Callable

from homeassistant.helpers.device_registry import DeviceEntryType, DeviceInfo
from homeassistant.helpers.entity import Entity

from .const import DOMAIN
from .rotation import RotationRuntime


class YomiCycleDevice(Entity):
    """Base mixin for all Yomi Cycle entities: one device per rotation
    + listener management.
    """

    _attr_has_entity_name = True

    def __init__(self, runtime: RotationRuntime) -> None:
        super().__init__()
        self._runtime = runtime
        self._listener_unsubs: list[Callable[[], None]] = []

        desc = runtime.description
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, desc.key)},
            name=desc.name,
            manufacturer="Yomi Cycle",
            model="Daily Content Rotation",
            entry_type=DeviceEntryType.SERVICE,
        )

    @property
    def rotation_key(self) -> str:
        return self._runtime.description.key

    def _register_listener(self, unsub: Callable[[], None]) -> None:
        self._listener_unsubs.append(unsub)

    async def async_will_remove_from_hass(self) -> None:
        """On entity removal, clean up any registered listeners."""
        for unsub in self._listener_unsubs:
            unsub()
        self._listener_unsubs.clear()
        await super().async_will_remove_from_hass()
