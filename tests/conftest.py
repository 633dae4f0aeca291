from __future__ import annotations

import pytest

from pyfueltrack import FuelTracker, InMemoryRecordStore, Vehicle, VehicleType


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def tracker(store: InMemoryRecordStore) -> FuelTracker:
    return FuelTracker(store)


@pytest.fixture
def vehicle_id(tracker: FuelTracker) -> int:
    vehicle = tracker.add_vehicle(Vehicle(brand="Toyota", model="Corolla", year=2019, vehicle_type=VehicleType.HYBRID))
    assert vehicle.id is not None
    return vehicle.id
