# tests/conftest.py

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Any

import pytest

from custom_components.yomicycle.yomicycle_lib.content import table_from_pairs
from custom_components.yomicycle.yomicycle_lib.store import CycleStore

FIXED_NOW = datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc)


class MemoryBackend:
    """Dict-backed cycle-state backend with merge writes."""

    def __init__(self, records: dict[str, dict[str, Any]] | None = None) -> None:
        self.records: dict[str, dict[str, Any]] = records or {}
        self.writes: list[tuple[str, dict[str, Any]]] = []

    async def async_read(self, key):
        record = self.records.get(key)
        return dict(record) if record is not None else None

    async def async_write(self, key, fields):
        self.writes.append((key, dict(fields)))
        self.records.setdefault(key, {}).update(fields)


class BrokenBackend(MemoryBackend):
    """Every call fails, like an unreachable store."""

    async def async_read(self, key):
        raise OSError("disk unavailable")

    async def async_write(self, key, fields):
        raise OSError("disk unavailable")


class SlowBackend(MemoryBackend):
    async def async_read(self, key):
        await asyncio.sleep(1)
        return await super().async_read(key)


@pytest.fixture
def gates():
    """30 units titled Gate 1 .. Gate 30."""
    return table_from_pairs((f"Gate {n}", f"Passage {n}") for n in range(1, 31))


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture
def store(backend):
    return CycleStore(backend, "orchos_tzadikim", clock=lambda: FIXED_NOW)


@pytest.fixture
def broken_store():
    return CycleStore(BrokenBackend(), "orchos_tzadikim", clock=lambda: FIXED_NOW)


@pytest.fixture
def slow_store():
    return CycleStore(SlowBackend(), "orchos_tzadikim", read_timeout=0.05)
