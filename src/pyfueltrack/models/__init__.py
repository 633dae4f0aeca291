"""Data models for vehicles, records and derived statistics."""

from pyfueltrack.models._base import TrackerBaseModel, TrackerEnum, UtcTimestamp, parse_utc_timestamp
from pyfueltrack.models.records import (
    ChargingRecord,
    ChargingType,
    FuelRecord,
    FuelType,
    MaintenanceRecord,
)
from pyfueltrack.models.stats import (
    ConsumptionTrendPoint,
    ElectricConsumption,
    ExpenseStatPoint,
    FuelConsumption,
)
from pyfueltrack.models.vehicle import Vehicle, VehicleType

__all__ = [
    "ChargingRecord",
    "ChargingType",
    "ConsumptionTrendPoint",
    "ElectricConsumption",
    "ExpenseStatPoint",
    "FuelConsumption",
    "FuelRecord",
    "FuelType",
    "MaintenanceRecord",
    "TrackerBaseModel",
    "TrackerEnum",
    "UtcTimestamp",
    "Vehicle",
    "VehicleType",
    "parse_utc_timestamp",
]
