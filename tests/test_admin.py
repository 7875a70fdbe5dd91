# tests/test_admin.py

import asyncio
from datetime import date

import pytest
from homeassistant.exceptions import HomeAssistantError, ServiceValidationError

from custom_components.yomicycle import admin
from custom_components.yomicycle.const import ROTATION_ORCHOS_TZADIKIM, SIGNAL_CYCLE_UPDATED
from custom_components.yomicycle.rotation import ROTATION_DESCRIPTIONS, RotationRuntime
from custom_components.yomicycle.yomicycle_lib.errors import StorageUnavailable, ValidationError
from custom_components.yomicycle.yomicycle_lib.hebrew import HebrewToday

SIGNAL = SIGNAL_CYCLE_UPDATED.format(ROTATION_ORCHOS_TZADIKIM)


class FixedDays:
    def __init__(self, day):
        self.day = day

    def today(self, now):
        return HebrewToday(day=self.day, label="", date=date(2025, 10, 7))


def _runtime(store, day=15):
    return RotationRuntime(
        description=ROTATION_DESCRIPTIONS[ROTATION_ORCHOS_TZADIKIM],
        table=None,
        store=store,
        days=FixedDays(day),
    )


@pytest.fixture
def signals(monkeypatch):
    sent = []
    monkeypatch.setattr(
        admin, "async_dispatcher_send", lambda hass, signal: sent.append(signal)
    )
    return sent


def test_restart_defaults_to_todays_hebrew_day(store, signals):
    asyncio.run(admin.async_restart_cycle_from_today(None, _runtime(store, day=15)))
    assert asyncio.run(store.async_load()).offset == 14
    assert signals == [SIGNAL]


def test_restart_with_explicit_day(store, signals):
    asyncio.run(admin.async_restart_cycle_from_today(None, _runtime(store, day=15), 3))
    assert asyncio.run(store.async_load()).offset == 2


def test_save_override_records_user(store, signals):
    asyncio.run(
        admin.async_save_override(None, _runtime(store), "X", "Y", user_id="user-1")
    )
    state = asyncio.run(store.async_load())
    assert (state.override_title, state.updated_by) == ("X", "user-1")
    assert signals == [SIGNAL]


def test_resync_and_clear_signal(store, signals):
    runtime = _runtime(store)
    asyncio.run(admin.async_resync_natural_cycle(None, runtime))
    asyncio.run(admin.async_clear_override(None, runtime))
    assert signals == [SIGNAL, SIGNAL]


def test_blank_title_is_service_validation_error(store, backend, signals):
    with pytest.raises(ServiceValidationError) as info:
        asyncio.run(admin.async_save_override(None, _runtime(store), "  "))
    assert isinstance(info.value.__cause__, ValidationError)
    assert backend.writes == []
    assert signals == []


@pytest.mark.parametrize(
    "action",
    [
        lambda rt: admin.async_resync_natural_cycle(None, rt),
        lambda rt: admin.async_restart_cycle_from_today(None, rt),
        lambda rt: admin.async_save_override(None, rt, "X"),
        lambda rt: admin.async_clear_override(None, rt),
    ],
)
def test_storage_failure_is_home_assistant_error(broken_store, signals, action):
    with pytest.raises(HomeAssistantError) as info:
        asyncio.run(action(_runtime(broken_store)))
    assert not isinstance(info.value, ServiceValidationError)
    assert isinstance(info.value.__cause__, StorageUnavailable)
    assert ROTATION_ORCHOS_TZADIKIM in str(info.value)
    assert signals == []


def test_entity_ids_follow_rotation_key(store):
    from custom_components.yomicycle.button import DESCRIPTIONS, CycleButton
    from custom_components.yomicycle.sensor import DailyContentSensor

    runtime = _runtime(store)
    assert DailyContentSensor(None, runtime).entity_id == "sensor.yomicycle_orchos_tzadikim_today"
    assert [CycleButton(None, runtime, d).entity_id for d in DESCRIPTIONS] == [
        "button.yomicycle_orchos_tzadikim_resync_natural_cycle",
        "button.yomicycle_orchos_tzadikim_restart_cycle_from_today",
    ]
