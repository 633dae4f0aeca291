from __future__ import annotations

import threading
from datetime import UTC, datetime

import pytest

from pyfueltrack.exceptions import RecordNotFoundError, StoreError, VehicleNotFoundError
from pyfueltrack.models.vehicle import Vehicle
from pyfueltrack.store import InMemoryRecordStore, RecordStore
from factories import charge, dt, fuel, service


def _clock() -> datetime:
    return datetime(2026, 1, 1, tzinfo=UTC)


def _store_with_vehicle() -> tuple[InMemoryRecordStore, int]:
    store = InMemoryRecordStore(clock=_clock)
    vehicle = store.add_vehicle(Vehicle(brand="BYD", model="Atto 3"))
    assert vehicle.id is not None
    return store, vehicle.id


def test_satisfies_protocol() -> None:
    assert isinstance(InMemoryRecordStore(), RecordStore)


def test_ids_are_assigned_per_table() -> None:
    store, vid = _store_with_vehicle()
    first = store.add_fuel_record(fuel(1000, 40.0, vehicle_id=vid))
    second = store.add_fuel_record(fuel(1400, 30.0, vehicle_id=vid))
    session = store.add_charging_record(charge(0, 100, 15.0, vehicle_id=vid))
    assert (first.id, second.id, session.id) == (1, 2, 1)


def test_add_vehicle_stamps_times() -> None:
    store, vid = _store_with_vehicle()
    vehicle = store.get_vehicle(vid)
    assert vehicle.created_at == _clock()
    assert vehicle.updated_at == _clock()


def test_lists_are_newest_first_and_scoped_to_vehicle() -> None:
    store, vid = _store_with_vehicle()
    other = store.add_vehicle(Vehicle(brand="VW", model="Golf")).id
    assert other is not None
    store.add_fuel_record(fuel(1000, 40.0, when=dt(2025, 1, 1), vehicle_id=vid))
    store.add_fuel_record(fuel(1400, 30.0, when=dt(2025, 2, 1), vehicle_id=vid))
    store.add_fuel_record(fuel(5000, 30.0, when=dt(2025, 3, 1), vehicle_id=other))

    listed = store.list_fuel_records(vid)
    assert [r.mileage for r in listed] == [1400.0, 1000.0]


def test_returned_lists_are_independent_snapshots() -> None:
    store, vid = _store_with_vehicle()
    store.add_fuel_record(fuel(1000, 40.0, vehicle_id=vid))
    snapshot = store.list_fuel_records(vid)
    snapshot.clear()
    assert len(store.list_fuel_records(vid)) == 1


def test_records_require_existing_vehicle() -> None:
    store = InMemoryRecordStore()
    with pytest.raises(VehicleNotFoundError) as excinfo:
        store.add_fuel_record(fuel(1000, 40.0, vehicle_id=42))
    assert excinfo.value.vehicle_id == 42
    assert excinfo.value.operation == "add_fuel_record"
    assert isinstance(excinfo.value, StoreError)


def test_delete_vehicle_cascades() -> None:
    store, vid = _store_with_vehicle()
    keep = store.add_vehicle(Vehicle(brand="VW", model="Golf")).id
    assert keep is not None
    store.add_fuel_record(fuel(1000, 40.0, vehicle_id=vid))
    store.add_charging_record(charge(0, 100, 15.0, vehicle_id=vid))
    store.add_maintenance_record(service(120.0, vehicle_id=vid))
    store.add_fuel_record(fuel(1000, 40.0, vehicle_id=keep))

    store.delete_vehicle(vid)

    with pytest.raises(VehicleNotFoundError):
        store.list_fuel_records(vid)
    assert store._fuel and all(r.vehicle_id == keep for r in store._fuel.values())  # noqa: SLF001
    assert not store._charging  # noqa: SLF001
    assert not store._maintenance  # noqa: SLF001


def test_update_vehicle_keeps_identity_and_creation_time() -> None:
    store, vid = _store_with_vehicle()
    original = store.get_vehicle(vid)
    updated = store.update_vehicle(original.model_copy(update={"model": "Seal", "created_at": dt(1999, 1, 1)}))
    assert updated.id == vid
    assert updated.model == "Seal"
    assert updated.created_at == original.created_at


def test_update_unknown_vehicle() -> None:
    store = InMemoryRecordStore()
    with pytest.raises(VehicleNotFoundError):
        store.update_vehicle(Vehicle(id=5, brand="x", model="y"))
    with pytest.raises(VehicleNotFoundError):
        store.update_vehicle(Vehicle(brand="x", model="y"))


def test_update_fuel_record_replaces_whole_record() -> None:
    store, vid = _store_with_vehicle()
    stored = store.add_fuel_record(fuel(1000, 40.0, vehicle_id=vid))
    store.update_fuel_record(stored.model_copy(update={"liters": 38.0, "is_full_tank": False}))
    [reloaded] = store.list_fuel_records(vid)
    assert reloaded.liters == 38.0
    assert reloaded.is_full_tank is False


def test_update_or_delete_unknown_record() -> None:
    store, vid = _store_with_vehicle()
    with pytest.raises(RecordNotFoundError):
        store.update_fuel_record(fuel(1000, 40.0, vehicle_id=vid))
    with pytest.raises(RecordNotFoundError) as excinfo:
        store.delete_charging_record(3)
    assert excinfo.value.kind == "charging"
    assert excinfo.value.record_id == 3
    with pytest.raises(RecordNotFoundError):
        store.delete_maintenance_record(1)
    with pytest.raises(RecordNotFoundError):
        store.delete_fuel_record(1)


def test_delete_record() -> None:
    store, vid = _store_with_vehicle()
    stored = store.add_maintenance_record(service(99.0, vehicle_id=vid))
    assert stored.id is not None
    store.delete_maintenance_record(stored.id)
    assert store.list_maintenance_records(vid) == []


def test_concurrent_adds_get_unique_ids() -> None:
    store, vid = _store_with_vehicle()
    ids: list[int | None] = []
    lock = threading.Lock()

    def worker() -> None:
        for _ in range(50):
            record = store.add_fuel_record(fuel(1000, 1.0, vehicle_id=vid))
            with lock:
                ids.append(record.id)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(set(ids)) == 200
    assert len(store.list_fuel_records(vid)) == 200
