from __future__ import annotations

import logging
from pathlib import Path
from zoneinfo import ZoneInfo

import voluptuous as vol
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import Platform
from homeassistant.core import HomeAssistant, ServiceCall
from homeassistant.exceptions import ConfigEntryError, ServiceValidationError
import homeassistant.helpers.config_validation as cv
from zmanim.util.geo_location import GeoLocation

from .admin import (
    async_clear_override,
    async_restart_cycle_from_today,
    async_resync_natural_cycle,
    async_save_override,
)
from .const import (
    ATTR_BODY,
    ATTR_HEBREW_DAY,
    ATTR_IMAGE_URL,
    ATTR_ROTATION,
    ATTR_TITLE,
    CONF_DAY_ROLLOVER,
    CONF_HAVDALAH_OFFSET,
    CONF_ROTATIONS,
    CONF_SKIP_INTRO,
    DATA_DIR,
    DEFAULT_DAY_ROLLOVER,
    DEFAULT_HAVDALAH_OFFSET,
    DEFAULT_ROTATIONS,
    DEFAULT_SKIP_INTRO,
    DOMAIN,
    ROLLOVER_HAVDALAH,
    ROTATIONS,
    SERVICE_CLEAR_OVERRIDE,
    SERVICE_RESTART_CYCLE_FROM_TODAY,
    SERVICE_RESYNC_NATURAL_CYCLE,
    SERVICE_SAVE_OVERRIDE,
)
from .rotation import (
    ROTATION_DESCRIPTIONS,
    HebrewDayProvider,
    RotationRuntime,
    load_rotation_table,
)
from .storage import HassCycleBackend
from .yomicycle_lib.errors import ConfigurationError
from .yomicycle_lib.store import CycleStore

_LOGGER = logging.getLogger(__name__)

PLATFORMS = [Platform.SENSOR, Platform.BUTTON]

DATA_README = """Yomi Cycle content files
========================

Drop a JSON file here to replace a rotation's built-in table:

  orchos_tzadikim.json
  tehilim.json

Format: a list of sections, one per day, in order:

  [
    {"title": "הקדמה", "content": "..."},
    {"title": "שער א - שער הגאוה", "content": "..."}
  ]

Orchos Tzadikim files may start with the introduction; enable
"skip introduction" in the options to leave it out of the cycle.
Restart Home Assistant (or reload the integration) after editing.
"""

ROTATION_SCHEMA = {vol.Required(ATTR_ROTATION): vol.In(ROTATIONS)}

RESYNC_SCHEMA = vol.Schema(ROTATION_SCHEMA)
RESTART_SCHEMA = vol.Schema(
    {
        **ROTATION_SCHEMA,
        vol.Optional(ATTR_HEBREW_DAY): vol.All(vol.Coerce(int), vol.Range(min=1, max=30)),
    }
)
SAVE_OVERRIDE_SCHEMA = vol.Schema(
    {
        **ROTATION_SCHEMA,
        vol.Required(ATTR_TITLE): cv.string,
        vol.Optional(ATTR_BODY, default=""): cv.string,
        vol.Optional(ATTR_IMAGE_URL): cv.string,
    }
)
CLEAR_OVERRIDE_SCHEMA = vol.Schema(ROTATION_SCHEMA)


async def create_data_dir(hass: HomeAssistant) -> Path:
    """Create the content-file directory and its README if missing."""
    data_dir = Path(hass.config.path(DATA_DIR))

    if not data_dir.exists():
        await hass.async_add_executor_job(data_dir.mkdir, 0o755, True)
        _LOGGER.info("Created Yomi Cycle data directory at %s", data_dir)

    readme = data_dir / "README.txt"
    if not readme.exists():
        await hass.async_add_executor_job(readme.write_text, DATA_README, "utf-8")

    return data_dir


def _option(entry: ConfigEntry, key: str, default):
    opts = entry.options or {}
    initial = entry.data or {}
    return opts.get(key, initial.get(key, default))


def _day_provider(hass: HomeAssistant, entry: ConfigEntry) -> HebrewDayProvider:
    tz = ZoneInfo(hass.config.time_zone)
    if _option(entry, CONF_DAY_ROLLOVER, DEFAULT_DAY_ROLLOVER) != ROLLOVER_HAVDALAH:
        return HebrewDayProvider(tz)

    geo = GeoLocation(
        name="YomiCycle",
        latitude=hass.config.latitude,
        longitude=hass.config.longitude,
        time_zone=hass.config.time_zone,
        elevation=0,
    )
    return HebrewDayProvider(
        tz,
        geo=geo,
        havdalah_offset=_option(entry, CONF_HAVDALAH_OFFSET, DEFAULT_HAVDALAH_OFFSET),
    )


# ───────────────────────────────────────────────────────────────────────────────
# Home Assistant integration lifecycle
# ───────────────────────────────────────────────────────────────────────────────

async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up Yomi Cycle from a config entry."""
    data_dir = await create_data_dir(hass)

    entry.async_on_unload(entry.add_update_listener(_async_update_options))

    enabled = _option(entry, CONF_ROTATIONS, DEFAULT_ROTATIONS)
    skip_intro = _option(entry, CONF_SKIP_INTRO, DEFAULT_SKIP_INTRO)

    hass.data.setdefault(DOMAIN, {})
    backend = hass.data[DOMAIN].get("backend")
    if backend is None:
        backend = hass.data[DOMAIN]["backend"] = HassCycleBackend(hass)

    days = _day_provider(hass, entry)

    runtimes: dict[str, RotationRuntime] = {}
    for key in enabled:
        desc = ROTATION_DESCRIPTIONS.get(key)
        if desc is None:
            _LOGGER.warning("Unknown rotation %s in options, ignoring", key)
            continue
        try:
            table = await hass.async_add_executor_job(
                load_rotation_table, desc, data_dir, skip_intro
            )
        except ConfigurationError as err:
            raise ConfigEntryError(f"{desc.name}: {err}") from err

        runtimes[key] = RotationRuntime(
            description=desc,
            table=table,
            store=CycleStore(backend, key),
            days=days,
        )
        _LOGGER.debug("Rotation %s ready with %d units", key, len(table))

    hass.data[DOMAIN][entry.entry_id] = {"runtimes": runtimes}

    _async_register_services(hass)

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    return True


async def _async_update_options(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Called when the user hits Submit on the Options page."""
    _LOGGER.debug("Yomi Cycle: reloading entry %s", entry.entry_id)
    await hass.config_entries.async_reload(entry.entry_id)


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    unloaded = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if unloaded:
        hass.data.get(DOMAIN, {}).pop(entry.entry_id, None)
        for service in (
            SERVICE_RESYNC_NATURAL_CYCLE,
            SERVICE_RESTART_CYCLE_FROM_TODAY,
            SERVICE_SAVE_OVERRIDE,
            SERVICE_CLEAR_OVERRIDE,
        ):
            hass.services.async_remove(DOMAIN, service)
    return unloaded


# ───────────────────────────────────────────────────────────────────────────────
# Admin services
# ───────────────────────────────────────────────────────────────────────────────

def _runtime_for(hass: HomeAssistant, call: ServiceCall) -> RotationRuntime:
    key = call.data[ATTR_ROTATION]
    for entry_data in hass.data.get(DOMAIN, {}).values():
        if isinstance(entry_data, dict) and key in entry_data.get("runtimes", {}):
            return entry_data["runtimes"][key]
    raise ServiceValidationError(f"Rotation '{key}' is not enabled")


def _async_register_services(hass: HomeAssistant) -> None:
    if hass.services.has_service(DOMAIN, SERVICE_RESYNC_NATURAL_CYCLE):
        return

    async def _resync(call: ServiceCall) -> None:
        await async_resync_natural_cycle(hass, _runtime_for(hass, call))

    async def _restart(call: ServiceCall) -> None:
        await async_restart_cycle_from_today(
            hass, _runtime_for(hass, call), call.data.get(ATTR_HEBREW_DAY)
        )

    async def _save(call: ServiceCall) -> None:
        await async_save_override(
            hass,
            _runtime_for(hass, call),
            call.data[ATTR_TITLE],
            call.data.get(ATTR_BODY, ""),
            call.data.get(ATTR_IMAGE_URL),
            user_id=call.context.user_id,
        )

    async def _clear(call: ServiceCall) -> None:
        await async_clear_override(hass, _runtime_for(hass, call))

    hass.services.async_register(
        DOMAIN, SERVICE_RESYNC_NATURAL_CYCLE, _resync, schema=RESYNC_SCHEMA
    )
    hass.services.async_register(
        DOMAIN, SERVICE_RESTART_CYCLE_FROM_TODAY, _restart, schema=RESTART_SCHEMA
    )
    hass.services.async_register(
        DOMAIN, SERVICE_SAVE_OVERRIDE, _save, schema=SAVE_OVERRIDE_SCHEMA
    )
    hass.services.async_register(
        DOMAIN, SERVICE_CLEAR_OVERRIDE, _clear, schema=CLEAR_OVERRIDE_SCHEMA
    )
