"""High-level tracker exposing the analytics by vehicle id."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from pyfueltrack import analytics
from pyfueltrack.config import TrackerConfig
from pyfueltrack.csv_io import export_fuel_records_csv, parse_fuel_records_csv
from pyfueltrack.exceptions import StoreError
from pyfueltrack.models.records import ChargingRecord, FuelRecord, MaintenanceRecord
from pyfueltrack.models.stats import (
    ConsumptionTrendPoint,
    ElectricConsumption,
    ExpenseStatPoint,
    FuelConsumption,
)
from pyfueltrack.models.vehicle import Vehicle
from pyfueltrack.store.base import RecordStore

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class FuelTracker:
    """Operating-cost tracker backed by a :class:`RecordStore`.

    Usage::

        tracker = FuelTracker(InMemoryRecordStore())
        car = tracker.add_vehicle(Vehicle(brand="Toyota", model="Corolla"))
        tracker.add_fuel_record(FuelRecord(vehicle_id=car.id, liters=40.0, ...))
        tracker.fuel_consumption(car.id)

    Each analytics call fetches a fresh snapshot from the store and then
    computes on it without further I/O. Store failures propagate as
    :class:`StoreError`; missing data yields ``0.0``, ``None`` or ``[]``.
    """

    def __init__(self, store: RecordStore, config: TrackerConfig | None = None) -> None:
        self._store = store
        self._config = config or TrackerConfig()

    @property
    def config(self) -> TrackerConfig:
        return self._config

    def _call_store(self, operation: str, func: Callable[..., T], *args: object) -> T:
        try:
            return func(*args)
        except StoreError:
            raise
        except Exception as exc:
            raise StoreError(f"record store failed during {operation}: {exc}", operation=operation) from exc

    # ------------------------------------------------------------------
    # Vehicles
    # ------------------------------------------------------------------

    def add_vehicle(self, vehicle: Vehicle) -> Vehicle:
        return self._call_store("add_vehicle", self._store.add_vehicle, vehicle)

    def get_vehicle(self, vehicle_id: int) -> Vehicle:
        return self._call_store("get_vehicle", self._store.get_vehicle, vehicle_id)

    def list_vehicles(self) -> list[Vehicle]:
        return self._call_store("list_vehicles", self._store.list_vehicles)

    def update_vehicle(self, vehicle: Vehicle) -> Vehicle:
        return self._call_store("update_vehicle", self._store.update_vehicle, vehicle)

    def delete_vehicle(self, vehicle_id: int) -> None:
        """Delete a vehicle together with all of its records."""
        self._call_store("delete_vehicle", self._store.delete_vehicle, vehicle_id)

    # ------------------------------------------------------------------
    # Records
    # ------------------------------------------------------------------

    def add_fuel_record(self, record: FuelRecord) -> FuelRecord:
        return self._call_store("add_fuel_record", self._store.add_fuel_record, record)

    def list_fuel_records(self, vehicle_id: int) -> list[FuelRecord]:
        return self._call_store("list_fuel_records", self._store.list_fuel_records, vehicle_id)

    def update_fuel_record(self, record: FuelRecord) -> FuelRecord:
        return self._call_store("update_fuel_record", self._store.update_fuel_record, record)

    def delete_fuel_record(self, record_id: int) -> None:
        self._call_store("delete_fuel_record", self._store.delete_fuel_record, record_id)

    def add_charging_record(self, record: ChargingRecord) -> ChargingRecord:
        return self._call_store("add_charging_record", self._store.add_charging_record, record)

    def list_charging_records(self, vehicle_id: int) -> list[ChargingRecord]:
        return self._call_store("list_charging_records", self._store.list_charging_records, vehicle_id)

    def delete_charging_record(self, record_id: int) -> None:
        self._call_store("delete_charging_record", self._store.delete_charging_record, record_id)

    def add_maintenance_record(self, record: MaintenanceRecord) -> MaintenanceRecord:
        return self._call_store("add_maintenance_record", self._store.add_maintenance_record, record)

    def list_maintenance_records(self, vehicle_id: int) -> list[MaintenanceRecord]:
        return self._call_store("list_maintenance_records", self._store.list_maintenance_records, vehicle_id)

    def delete_maintenance_record(self, record_id: int) -> None:
        self._call_store("delete_maintenance_record", self._store.delete_maintenance_record, record_id)

    # ------------------------------------------------------------------
    # Consumption
    # ------------------------------------------------------------------

    def fuel_summary(self, vehicle_id: int) -> FuelConsumption | None:
        result = analytics.calculate_fuel_consumption(self.list_fuel_records(vehicle_id))
        if result is None:
            _logger.debug("Not enough full-tank data for vehicle_id=%s", vehicle_id)
        return result

    def fuel_consumption(self, vehicle_id: int) -> float:
        """Liters per 100 km, ``0.0`` when undetermined."""
        result = self.fuel_summary(vehicle_id)
        return 0.0 if result is None else result.consumption_per_100km

    def electric_summary(self, vehicle_id: int) -> ElectricConsumption | None:
        result = analytics.calculate_electric_consumption(self.list_charging_records(vehicle_id))
        if result is None:
            _logger.debug("No measurable charging sessions for vehicle_id=%s", vehicle_id)
        return result

    def electric_consumption(self, vehicle_id: int) -> float:
        """kWh per 100 km, ``0.0`` when undetermined."""
        result = self.electric_summary(vehicle_id)
        return 0.0 if result is None else result.consumption_per_100km

    def fuel_trend(self, vehicle_id: int) -> list[ConsumptionTrendPoint]:
        return analytics.fuel_trend(self.list_fuel_records(vehicle_id))

    def electric_trend(self, vehicle_id: int) -> list[ConsumptionTrendPoint]:
        return analytics.electric_trend(self.list_charging_records(vehicle_id))

    # ------------------------------------------------------------------
    # Expenses
    # ------------------------------------------------------------------

    def monthly_expenses(self, vehicle_id: int) -> list[ExpenseStatPoint]:
        return analytics.monthly_expenses(
            self.list_fuel_records(vehicle_id),
            self.list_charging_records(vehicle_id),
            self.list_maintenance_records(vehicle_id),
        )

    def recent_expenses(self, vehicle_id: int, limit: int | None = None) -> list[ExpenseStatPoint]:
        """Most recent fuel/charging costs, oldest first.

        *limit* defaults to :attr:`TrackerConfig.recent_expense_limit`.
        """
        if limit is None:
            limit = self._config.recent_expense_limit
        return analytics.recent_expenses(
            self.list_fuel_records(vehicle_id),
            self.list_charging_records(vehicle_id),
            limit,
        )

    # ------------------------------------------------------------------
    # CSV
    # ------------------------------------------------------------------

    def export_fuel_records_csv(self, vehicle_id: int) -> str:
        return export_fuel_records_csv(
            self.list_fuel_records(vehicle_id),
            date_format=self._config.csv_date_format,
        )

    def import_fuel_records_csv(self, vehicle_id: int, text: str) -> int:
        """Insert every parseable row of *text* and return how many were added.

        Raises :class:`VehicleNotFoundError` before parsing when the vehicle
        does not exist. Rows are inserted one by one without a transaction:
        if the store fails part way, the rows already added stay stored and
        the store error propagates.
        """
        self.get_vehicle(vehicle_id)
        records = parse_fuel_records_csv(
            text,
            vehicle_id,
            date_format=self._config.csv_date_format,
            min_fields=self._config.csv_min_fields,
        )
        for record in records:
            self.add_fuel_record(record)
        _logger.debug("Imported %d fuel records for vehicle_id=%s", len(records), vehicle_id)
        return len(records)
