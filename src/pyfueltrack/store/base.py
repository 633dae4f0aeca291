"""Record store protocol.

The tracker only depends on this interface. Listing order is not part of
the contract; calculators sort where order matters.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pyfueltrack.models.records import ChargingRecord, FuelRecord, MaintenanceRecord
from pyfueltrack.models.vehicle import Vehicle


@runtime_checkable
class RecordStore(Protocol):
    """Durable storage of vehicles and their records, keyed by vehicle id.

    Implementations raise :class:`pyfueltrack.exceptions.StoreError` (or a
    subclass) on failure.
    """

    # Vehicles

    def add_vehicle(self, vehicle: Vehicle) -> Vehicle: ...

    def get_vehicle(self, vehicle_id: int) -> Vehicle: ...

    def list_vehicles(self) -> list[Vehicle]: ...

    def update_vehicle(self, vehicle: Vehicle) -> Vehicle: ...

    def delete_vehicle(self, vehicle_id: int) -> None: ...

    # Fuel

    def add_fuel_record(self, record: FuelRecord) -> FuelRecord: ...

    def list_fuel_records(self, vehicle_id: int) -> list[FuelRecord]: ...

    def update_fuel_record(self, record: FuelRecord) -> FuelRecord: ...

    def delete_fuel_record(self, record_id: int) -> None: ...

    # Charging

    def add_charging_record(self, record: ChargingRecord) -> ChargingRecord: ...

    def list_charging_records(self, vehicle_id: int) -> list[ChargingRecord]: ...

    def delete_charging_record(self, record_id: int) -> None: ...

    # Maintenance

    def add_maintenance_record(self, record: MaintenanceRecord) -> MaintenanceRecord: ...

    def list_maintenance_records(self, vehicle_id: int) -> list[MaintenanceRecord]: ...

    def delete_maintenance_record(self, record_id: int) -> None: ...
