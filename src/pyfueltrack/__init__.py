"""pyfueltrack - Vehicle fuel, charging and expense analytics."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyfueltrack")
except PackageNotFoundError:
    __version__ = "0+local"
from pyfueltrack.config import TrackerConfig
from pyfueltrack.exceptions import (
    FuelTrackError,
    RecordNotFoundError,
    StoreError,
    TrackerConfigError,
    VehicleNotFoundError,
)
from pyfueltrack.models import (
    ChargingRecord,
    ChargingType,
    ConsumptionTrendPoint,
    ElectricConsumption,
    ExpenseStatPoint,
    FuelConsumption,
    FuelRecord,
    FuelType,
    MaintenanceRecord,
    Vehicle,
    VehicleType,
)
from pyfueltrack.store import InMemoryRecordStore, RecordStore
from pyfueltrack.tracker import FuelTracker

__all__ = [
    "__version__",
    "ChargingRecord",
    "ChargingType",
    "ConsumptionTrendPoint",
    "ElectricConsumption",
    "ExpenseStatPoint",
    "FuelConsumption",
    "FuelRecord",
    "FuelTrackError",
    "FuelTracker",
    "FuelType",
    "InMemoryRecordStore",
    "MaintenanceRecord",
    "RecordNotFoundError",
    "RecordStore",
    "StoreError",
    "TrackerConfig",
    "TrackerConfigError",
    "Vehicle",
    "VehicleNotFoundError",
    "VehicleType",
]
