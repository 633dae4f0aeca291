"""Thread-safe in-memory record store.

Every public method runs inside one exclusive lock region. Records are
frozen models, so handing out fresh lists is enough to give callers an
independent snapshot.
"""

from __future__ import annotations

import itertools
import logging
import threading
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from pyfueltrack.exceptions import RecordNotFoundError, VehicleNotFoundError
from pyfueltrack.models.records import ChargingRecord, FuelRecord, MaintenanceRecord
from pyfueltrack.models.vehicle import Vehicle
from pyfueltrack.normalize import utcnow

_logger = logging.getLogger(__name__)

TRecord = TypeVar("TRecord", FuelRecord, ChargingRecord, MaintenanceRecord)


def _newest_first(records: list[TRecord]) -> list[TRecord]:
    return sorted(records, key=lambda r: r.created_at, reverse=True)


class InMemoryRecordStore:
    """In-memory implementation of :class:`pyfueltrack.store.RecordStore`.

    Ids are assigned per table from a monotonic counter starting at 1.
    Deleting a vehicle deletes every record that belongs to it. Vehicle
    timestamps are set by the store clock.
    """

    def __init__(self, *, clock: Callable[[], datetime] = utcnow) -> None:
        self._clock = clock
        self._lock = threading.RLock()
        self._vehicles: dict[int, Vehicle] = {}
        self._fuel: dict[int, FuelRecord] = {}
        self._charging: dict[int, ChargingRecord] = {}
        self._maintenance: dict[int, MaintenanceRecord] = {}
        self._vehicle_ids = itertools.count(1)
        self._fuel_ids = itertools.count(1)
        self._charging_ids = itertools.count(1)
        self._maintenance_ids = itertools.count(1)

    def _require_vehicle(self, vehicle_id: int, operation: str) -> None:
        if vehicle_id not in self._vehicles:
            raise VehicleNotFoundError(vehicle_id, operation=operation)

    # ------------------------------------------------------------------
    # Vehicles
    # ------------------------------------------------------------------

    def add_vehicle(self, vehicle: Vehicle) -> Vehicle:
        with self._lock:
            now = self._clock()
            stored = vehicle.model_copy(
                update={"id": next(self._vehicle_ids), "created_at": now, "updated_at": now}
            )
            self._vehicles[stored.id] = stored  # type: ignore[index]
            _logger.debug("Added vehicle id=%s", stored.id)
            return stored

    def get_vehicle(self, vehicle_id: int) -> Vehicle:
        with self._lock:
            self._require_vehicle(vehicle_id, "get_vehicle")
            return self._vehicles[vehicle_id]

    def list_vehicles(self) -> list[Vehicle]:
        with self._lock:
            return sorted(self._vehicles.values(), key=lambda v: v.created_at, reverse=True)

    def update_vehicle(self, vehicle: Vehicle) -> Vehicle:
        """Replace the descriptive fields of an existing vehicle.

        ``id`` and ``created_at`` are kept from the stored vehicle.
        """
        with self._lock:
            if vehicle.id is None:
                raise VehicleNotFoundError(-1, operation="update_vehicle")
            self._require_vehicle(vehicle.id, "update_vehicle")
            current = self._vehicles[vehicle.id]
            stored = vehicle.model_copy(update={"created_at": current.created_at, "updated_at": self._clock()})
            self._vehicles[vehicle.id] = stored
            return stored

    def delete_vehicle(self, vehicle_id: int) -> None:
        with self._lock:
            self._require_vehicle(vehicle_id, "delete_vehicle")
            for table in (self._fuel, self._charging, self._maintenance):
                owned = [record_id for record_id, record in table.items() if record.vehicle_id == vehicle_id]
                for record_id in owned:
                    del table[record_id]
            del self._vehicles[vehicle_id]
            _logger.debug("Deleted vehicle id=%s with all records", vehicle_id)

    # ------------------------------------------------------------------
    # Fuel
    # ------------------------------------------------------------------

    def add_fuel_record(self, record: FuelRecord) -> FuelRecord:
        with self._lock:
            self._require_vehicle(record.vehicle_id, "add_fuel_record")
            stored = record.model_copy(update={"id": next(self._fuel_ids)})
            self._fuel[stored.id] = stored  # type: ignore[index]
            return stored

    def list_fuel_records(self, vehicle_id: int) -> list[FuelRecord]:
        with self._lock:
            self._require_vehicle(vehicle_id, "list_fuel_records")
            return _newest_first([r for r in self._fuel.values() if r.vehicle_id == vehicle_id])

    def update_fuel_record(self, record: FuelRecord) -> FuelRecord:
        with self._lock:
            if record.id is None or record.id not in self._fuel:
                raise RecordNotFoundError("fuel", -1 if record.id is None else record.id, operation="update_fuel_record")
            self._require_vehicle(record.vehicle_id, "update_fuel_record")
            self._fuel[record.id] = record
            return record

    def delete_fuel_record(self, record_id: int) -> None:
        with self._lock:
            if self._fuel.pop(record_id, None) is None:
                raise RecordNotFoundError("fuel", record_id, operation="delete_fuel_record")

    # ------------------------------------------------------------------
    # Charging
    # ------------------------------------------------------------------

    def add_charging_record(self, record: ChargingRecord) -> ChargingRecord:
        with self._lock:
            self._require_vehicle(record.vehicle_id, "add_charging_record")
            stored = record.model_copy(update={"id": next(self._charging_ids)})
            self._charging[stored.id] = stored  # type: ignore[index]
            return stored

    def list_charging_records(self, vehicle_id: int) -> list[ChargingRecord]:
        with self._lock:
            self._require_vehicle(vehicle_id, "list_charging_records")
            return _newest_first([r for r in self._charging.values() if r.vehicle_id == vehicle_id])

    def delete_charging_record(self, record_id: int) -> None:
        with self._lock:
            if self._charging.pop(record_id, None) is None:
                raise RecordNotFoundError("charging", record_id, operation="delete_charging_record")

    # ------------------------------------------------------------------
    # Maintenance
    # ------------------------------------------------------------------

    def add_maintenance_record(self, record: MaintenanceRecord) -> MaintenanceRecord:
        with self._lock:
            self._require_vehicle(record.vehicle_id, "add_maintenance_record")
            stored = record.model_copy(update={"id": next(self._maintenance_ids)})
            self._maintenance[stored.id] = stored  # type: ignore[index]
            return stored

    def list_maintenance_records(self, vehicle_id: int) -> list[MaintenanceRecord]:
        with self._lock:
            self._require_vehicle(vehicle_id, "list_maintenance_records")
            return _newest_first([r for r in self._maintenance.values() if r.vehicle_id == vehicle_id])

    def delete_maintenance_record(self, record_id: int) -> None:
        with self._lock:
            if self._maintenance.pop(record_id, None) is None:
                raise RecordNotFoundError("maintenance", record_id, operation="delete_maintenance_record")
