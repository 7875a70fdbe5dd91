# /config/custom_components/yomicycle/rotation.py
"""The two rotations, their content tables, and what each needs at runtime."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from zoneinfo import ZoneInfo

from zmanim.util.geo_location import GeoLocation
from zmanim.zmanim_calendar import ZmanimCalendar

from .const import ROTATION_ORCHOS_TZADIKIM, ROTATION_TEHILIM
from .data import orchos_tzadikim_data as otz
from .data import tehilim_data as teh
from .yomicycle_lib.content import (
    ContentTable,
    load_table_file,
    table_from_pairs,
    table_from_sections,
)
from .yomicycle_lib.engine import DisplayedContent, resolve_today
from .yomicycle_lib.hebrew import (
    HebrewToday,
    clean_geresh,
    effective_date,
    hebrew_today,
    int_to_hebrew,
)
from .yomicycle_lib.store import CycleStore

_LOGGER = logging.getLogger(__name__)


# ─── Built-in tables ────────────────────────────────────────────────────────

def _heb(n: int) -> str:
    return clean_geresh(int_to_hebrew(n))


def orchos_tzadikim_sections() -> list[dict[str, str]]:
    """Introduction plus every gate, the long gate as two parts."""
    sections = [dict(otz.INTRODUCTION)]
    for number, topic, text in otz.GATES:
        title = f"שער {_heb(number)} - שער {topic}"
        if number == otz.SPLIT_GATE:
            for suffix in otz.PART_SUFFIXES:
                sections.append({"title": f"{title} {suffix}", "content": text})
        else:
            sections.append({"title": title, "content": text})
    return sections


def orchos_tzadikim_table(skip_intro: bool = False) -> ContentTable:
    return table_from_sections(orchos_tzadikim_sections(), skip_intro=skip_intro)


def tehilim_label(day: int) -> str:
    """Chapter range read on `day`, e.g. 'א - ט' or 'קיט (א - צו)'."""
    if day in teh.VERSE_SPLITS:
        chapter, first, last = teh.VERSE_SPLITS[day]
        return f"{_heb(chapter)} ({_heb(first)} - {_heb(last)})"
    first, last = teh.MONTHLY_DIVISION[day]
    return f"{_heb(first)} - {_heb(last)}"


def tehilim_table() -> ContentTable:
    return table_from_pairs(
        (f"תהילים ליום {_heb(day)} לחודש", tehilim_label(day))
        for day in sorted(teh.MONTHLY_DIVISION)
    )


# ─── Registry ───────────────────────────────────────────────────────────────

@dataclass(frozen=True, kw_only=True)
class RotationDescription:
    key: str
    name: str
    icon: str
    data_file: str
    builtin: Callable[[bool], ContentTable]
    # whether a data file starts with an introduction section
    file_has_intro: bool = False


ROTATION_DESCRIPTIONS: dict[str, RotationDescription] = {
    ROTATION_ORCHOS_TZADIKIM: RotationDescription(
        key=ROTATION_ORCHOS_TZADIKIM,
        name="Orchos Tzadikim Daily",
        icon="mdi:book-open-page-variant",
        data_file=f"{ROTATION_ORCHOS_TZADIKIM}.json",
        builtin=orchos_tzadikim_table,
        file_has_intro=True,
    ),
    ROTATION_TEHILIM: RotationDescription(
        key=ROTATION_TEHILIM,
        name="Tehilim Monthly",
        icon="mdi:book-open-variant",
        data_file=f"{ROTATION_TEHILIM}.json",
        builtin=lambda skip_intro: tehilim_table(),
    ),
}


def load_rotation_table(
    desc: RotationDescription, data_dir: Path, skip_intro: bool
) -> ContentTable:
    """Admin-supplied file when present, else the built-in table. Blocking."""
    path = data_dir / desc.data_file
    if path.exists():
        table = load_table_file(path, skip_intro=skip_intro and desc.file_has_intro)
        _LOGGER.info("Loaded %d units for %s from %s", len(table), desc.key, path)
        return table
    return desc.builtin(skip_intro)


# ─── Hebrew day source ──────────────────────────────────────────────────────

def _round_ceil(dt: datetime) -> datetime:
    """Always bump to the *next* full minute (Motzi-style)."""
    return (dt + timedelta(minutes=1)).replace(second=0, microsecond=0)


class HebrewDayProvider:
    """
    Today's Hebrew day and label. With a geo location the day flips at
    sunset + havdalah offset; without one it flips at midnight.
    """

    def __init__(
        self,
        tz: ZoneInfo,
        geo: GeoLocation | None = None,
        havdalah_offset: int = 0,
    ) -> None:
        self._tz = tz
        self._geo = geo
        self._havdalah_offset = timedelta(minutes=havdalah_offset)

    def switch_time(self, now: datetime) -> datetime | None:
        if self._geo is None:
            return None
        sunset = ZmanimCalendar(geo_location=self._geo, date=now.date()).sunset()
        if sunset is None:
            return None
        return _round_ceil(sunset.astimezone(self._tz) + self._havdalah_offset)

    def today(self, now: datetime) -> HebrewToday:
        local = now.astimezone(self._tz)
        return hebrew_today(effective_date(local, self.switch_time(local)))


# ─── Runtime ────────────────────────────────────────────────────────────────

@dataclass
class RotationRuntime:
    description: RotationDescription
    table: ContentTable
    store: CycleStore
    days: HebrewDayProvider


@dataclass(frozen=True)
class ResolvedToday:
    content: DisplayedContent
    today: HebrewToday
    offset: int


async def async_resolve(runtime: RotationRuntime, now: datetime) -> ResolvedToday:
    """Read the cycle state and work out what shows right now."""
    today = runtime.days.today(now)
    state = await runtime.store.async_load()
    content = resolve_today(today.day, today.label, state, runtime.table)
    return ResolvedToday(
        content=content,
        today=today,
        offset=state.offset if state is not None else 0,
    )
