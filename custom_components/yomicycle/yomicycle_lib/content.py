# /config/custom_components/yomicycle/yomicycle_lib/content.py
"""Content tables: the fixed, pre-authored units a rotation cycles through."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, overload

from .errors import ConfigurationError


@dataclass(frozen=True)
class ContentUnit:
    """One authored item of a rotation; `day_index` is 1-based and never reassigned."""

    day_index: int
    title: str
    body: str


class ContentTable(Sequence[ContentUnit]):
    """Immutable, ordered list of content units, validated once at load time."""

    def __init__(self, units: Iterable[ContentUnit]) -> None:
        self._units: tuple[ContentUnit, ...] = tuple(units)
        if not self._units:
            raise ConfigurationError("Content table is empty")
        for position, unit in enumerate(self._units, start=1):
            if unit.day_index != position:
                raise ConfigurationError(
                    f"Content table out of order: position {position} "
                    f"holds day_index {unit.day_index}"
                )
            if not unit.title:
                raise ConfigurationError(f"Content unit {position} has no title")

    @overload
    def __getitem__(self, index: int) -> ContentUnit: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[ContentUnit, ...]: ...

    def __getitem__(self, index):
        return self._units[index]

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[ContentUnit]:
        return iter(self._units)

    def __repr__(self) -> str:
        return f"ContentTable({len(self._units)} units)"


def table_from_pairs(pairs: Iterable[tuple[str, str]]) -> ContentTable:
    """Number (title, body) pairs 1..N."""
    return ContentTable(
        ContentUnit(day_index=i, title=title, body=body)
        for i, (title, body) in enumerate(pairs, start=1)
    )


def table_from_sections(
    sections: Iterable[Mapping[str, Any]],
    *,
    skip_intro: bool = False,
) -> ContentTable:
    """
    Build a table from parsed `{"title": ..., "content": ...}` sections.

    With `skip_intro` the first section (an introduction) is dropped before
    numbering, so the first gate becomes day 1. Other keys are ignored.
    """
    raw = list(sections)
    if skip_intro:
        raw = raw[1:]

    pairs: list[tuple[str, str]] = []
    for n, section in enumerate(raw, start=1):
        if not isinstance(section, Mapping):
            raise ConfigurationError(f"Section {n} is not an object")
        title = section.get("title")
        body = section.get("content", section.get("body"))
        if not isinstance(title, str) or not title.strip():
            raise ConfigurationError(f"Section {n} has no title")
        if not isinstance(body, str):
            raise ConfigurationError(f"Section {n} ({title}) has no content")
        pairs.append((title.strip(), body.strip()))

    return table_from_pairs(pairs)


def load_table_file(path: str | Path, *, skip_intro: bool = False) -> ContentTable:
    """Read a JSON list of sections from disk. Blocking; run in an executor."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as err:
        raise ConfigurationError(f"Cannot read content file {path}: {err}") from err

    # Accept both a bare list and {"sections": [...]}
    if isinstance(data, Mapping):
        data = data.get("sections")
    if not isinstance(data, list):
        raise ConfigurationError(f"Content file {path} must hold a list of sections")

    return table_from_sections(data, skip_intro=skip_intro)
