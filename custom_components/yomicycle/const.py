# /config/custom_components/yomicycle/const.py
from __future__ import annotations

from typing import Final

DOMAIN: Final = "yomicycle"

# Rotations
ROTATION_ORCHOS_TZADIKIM: Final = "orchos_tzadikim"
ROTATION_TEHILIM: Final = "tehilim"
ROTATIONS: Final[list[str]] = [ROTATION_ORCHOS_TZADIKIM, ROTATION_TEHILIM]

# Config entry keys
CONF_ROTATIONS: Final = "rotations"
CONF_DAY_ROLLOVER: Final = "day_rollover"
CONF_HAVDALAH_OFFSET: Final = "havdalah_offset"
CONF_SKIP_INTRO: Final = "skip_intro"

ROLLOVER_MIDNIGHT: Final = "midnight"
ROLLOVER_HAVDALAH: Final = "havdalah"

DEFAULT_ROTATIONS: Final[list[str]] = list(ROTATIONS)
DEFAULT_DAY_ROLLOVER: Final = ROLLOVER_MIDNIGHT
DEFAULT_HAVDALAH_OFFSET: Final = 72
DEFAULT_SKIP_INTRO: Final = False

# Persistence
STORAGE_KEY: Final = f"{DOMAIN}.cycles"
STORAGE_VERSION: Final = 1

# Admin-supplied full texts live here (www/yomicycle-data/<rotation>.json)
DATA_DIR: Final = "www/yomicycle-data"

# Services
SERVICE_RESYNC_NATURAL_CYCLE: Final = "resync_natural_cycle"
SERVICE_RESTART_CYCLE_FROM_TODAY: Final = "restart_cycle_from_today"
SERVICE_SAVE_OVERRIDE: Final = "save_override"
SERVICE_CLEAR_OVERRIDE: Final = "clear_override"

ATTR_ROTATION: Final = "rotation"
ATTR_HEBREW_DAY: Final = "hebrew_day"
ATTR_TITLE: Final = "title"
ATTR_BODY: Final = "body"
ATTR_IMAGE_URL: Final = "image_url"

# Dispatcher signal sent after any admin write, formatted with the rotation key
SIGNAL_CYCLE_UPDATED: Final = f"{DOMAIN}_cycle_updated_{{}}"
