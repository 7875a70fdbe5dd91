# tests/test_storage.py

import asyncio

import pytest

from custom_components.yomicycle.storage import HassCycleBackend
from custom_components.yomicycle.yomicycle_lib.engine import CycleState
from custom_components.yomicycle.yomicycle_lib.errors import StorageUnavailable
from custom_components.yomicycle.yomicycle_lib.store import CycleStore


class FakeStore:
    """Stands in for homeassistant.helpers.storage.Store."""

    def __init__(self, data=None, fail_save=False):
        self.data = data
        self.saved = []
        self.fail_save = fail_save
        self.loads = 0

    async def async_load(self):
        self.loads += 1
        return self.data

    async def async_save(self, data):
        if self.fail_save:
            raise OSError("read-only file system")
        self.saved.append(data)
        self.data = data


def test_missing_document_reads_as_not_found():
    backend = HassCycleBackend(None, store=FakeStore())
    assert asyncio.run(backend.async_read("tehilim")) is None


def test_write_merges_fields():
    fake = FakeStore({"rotations": {"tehilim": {"offset": 4, "override_title": "t"}}})
    backend = HassCycleBackend(None, store=fake)

    asyncio.run(backend.async_write("tehilim", {"override_title": ""}))

    record = asyncio.run(backend.async_read("tehilim"))
    assert record == {"offset": 4, "override_title": ""}
    assert fake.saved[-1] == {"rotations": {"tehilim": {"offset": 4, "override_title": ""}}}


def test_rotations_kept_apart():
    backend = HassCycleBackend(None, store=FakeStore())
    asyncio.run(backend.async_write("tehilim", {"offset": 1}))
    asyncio.run(backend.async_write("orchos_tzadikim", {"offset": 2}))
    assert asyncio.run(backend.async_read("tehilim")) == {"offset": 1}
    assert asyncio.run(backend.async_read("orchos_tzadikim")) == {"offset": 2}


def test_unknown_fields_dropped():
    backend = HassCycleBackend(None, store=FakeStore())
    asyncio.run(backend.async_write("tehilim", {"offset": 3, "youtubeId": "x"}))
    assert asyncio.run(backend.async_read("tehilim")) == {"offset": 3}


def test_document_loaded_once():
    fake = FakeStore()
    backend = HassCycleBackend(None, store=fake)
    asyncio.run(backend.async_read("tehilim"))
    asyncio.run(backend.async_write("tehilim", {"offset": 1}))
    asyncio.run(backend.async_read("tehilim"))
    assert fake.loads == 1


def test_failed_save_leaves_state_untouched():
    fake = FakeStore({"rotations": {"tehilim": {"offset": 7}}}, fail_save=True)
    store = CycleStore(HassCycleBackend(None, store=fake), "tehilim")

    with pytest.raises(StorageUnavailable):
        asyncio.run(store.async_resync_to_natural_cycle())

    assert asyncio.run(store.async_load()) == CycleState(offset=7)


class GatedStore(FakeStore):
    """First load blocks until the test opens the gate."""

    def __init__(self, data=None):
        super().__init__(data)
        self.gate = asyncio.Event()

    async def async_load(self):
        await self.gate.wait()
        return await super().async_load()


def test_write_not_lost_behind_slow_first_load():
    async def scenario():
        fake = GatedStore()
        backend = HassCycleBackend(None, store=fake)

        read = asyncio.create_task(backend.async_read("tehilim"))
        await asyncio.sleep(0)
        write = asyncio.create_task(
            backend.async_write("orchos_tzadikim", {"override_title": "X - today"})
        )
        await asyncio.sleep(0)
        fake.gate.set()
        await asyncio.gather(read, write)

        await backend.async_write("tehilim", {"offset": 3})
        return fake, await backend.async_read("orchos_tzadikim")

    fake, record = asyncio.run(scenario())
    assert record == {"override_title": "X - today"}
    assert fake.loads == 1
    assert fake.saved[-1]["rotations"] == {
        "orchos_tzadikim": {"override_title": "X - today"},
        "tehilim": {"offset": 3},
    }
