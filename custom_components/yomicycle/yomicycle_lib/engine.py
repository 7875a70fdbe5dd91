# /config/custom_components/yomicycle/yomicycle_lib/engine.py

"""
Daily rotation engine.

Maps a Hebrew day-of-month plus the persisted cycle state onto the content
unit shown today. An admin can shift the cycle with an offset, resync it to
the calendar, or put hand-written content on top of today's entry. Such an
override only wins while its title still contains today's date label, so it
falls away by itself once the Hebrew date turns.

Everything here is pure: no I/O, no clock, no randomness.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any, Final

from .content import ContentUnit
from .errors import ConfigurationError

SOURCE_AUTOMATIC: Final = "automatic"
SOURCE_OVERRIDE: Final = "override"

TITLE_SEPARATOR: Final = " - "

# Written to blank out an override; the record itself is never deleted
BLANK_OVERRIDE: Final[dict[str, str]] = {
    "override_title": "",
    "override_body": "",
    "override_image": "",
}


@dataclass(frozen=True)
class CycleState:
    """Persisted per-rotation record. Empty override strings mean "no override"."""

    offset: int = 0
    override_title: str = ""
    override_body: str = ""
    override_image: str = ""
    updated_at: str | None = None
    updated_by: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "CycleState":
        """Build from a stored document, dropping fields we don't know."""
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}

        try:
            kwargs["offset"] = int(kwargs.get("offset") or 0)
        except (TypeError, ValueError):
            kwargs["offset"] = 0
        for key in ("override_title", "override_body", "override_image"):
            kwargs[key] = kwargs.get(key) or ""
        return cls(**kwargs)

    def as_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @property
    def has_override(self) -> bool:
        return bool(self.override_title)


@dataclass(frozen=True)
class DisplayedContent:
    """
    What the presentation side renders for today; either override or automatic.

    `updated_at` is the override's write time. Automatic content is computed,
    never written, so it carries None and `day_index` instead.
    """

    title: str
    body: str
    source: str
    image_url: str | None = None
    updated_at: str | None = None
    day_index: int | None = None

    @property
    def is_override(self) -> bool:
        return self.source == SOURCE_OVERRIDE


def cycle_index(hebrew_day: int, offset: int, length: int) -> int:
    """0-based position in a table of `length` units for (day, offset)."""
    if length <= 0:
        raise ConfigurationError("Content table is empty")
    # Python's % already lands in [0, length) for negative left operands
    return (hebrew_day - offset - 1) % length


def override_matches_date(state: CycleState | None, today_label: str) -> bool:
    """True while the saved override was written for today's date label."""
    if state is None or not state.override_title or not today_label:
        return False
    return today_label in state.override_title


def automatic_title(unit: ContentUnit, today_label: str) -> str:
    return f"{unit.title}{TITLE_SEPARATOR}{today_label}"


def automatic_content(
    hebrew_day: int,
    today_label: str,
    offset: int,
    table: Sequence[ContentUnit],
) -> DisplayedContent:
    """Today's computed entry, ignoring any override."""
    unit = table[cycle_index(hebrew_day, offset, len(table))]
    return DisplayedContent(
        title=automatic_title(unit, today_label),
        body=unit.body,
        source=SOURCE_AUTOMATIC,
        day_index=unit.day_index,
    )


def resolve_today(
    hebrew_day: int,
    today_label: str,
    state: CycleState | None,
    table: Sequence[ContentUnit],
) -> DisplayedContent:
    """
    Content to display right now.

    `state` is None when the stored record could not be read; the rotation
    then runs with offset 0 and no override rather than failing.
    """
    if not table:
        raise ConfigurationError("Content table is empty")

    offset = state.offset if state is not None else 0

    if override_matches_date(state, today_label):
        return DisplayedContent(
            title=state.override_title,
            body=state.override_body,
            source=SOURCE_OVERRIDE,
            image_url=state.override_image or None,
            updated_at=state.updated_at,
        )

    return automatic_content(hebrew_day, today_label, offset, table)


def natural_offset() -> int:
    """Offset that maps day N to unit N."""
    return 0


def restart_offset(hebrew_day: int) -> int:
    """Offset that makes `hebrew_day` cycle position 1."""
    return hebrew_day - 1

