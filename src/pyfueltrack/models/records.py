"""Fuel, charging and maintenance record models.

All records belong to exactly one vehicle through ``vehicle_id``.
Amounts are taken as entered: ``amount`` is expected to be close to
``price * quantity`` but nothing enforces it.
"""

from __future__ import annotations

from pydantic import Field

from pyfueltrack.models._base import TrackerBaseModel, TrackerEnum, UtcTimestamp
from pyfueltrack.normalize import utcnow


class FuelType(TrackerEnum):
    """Fuel grade dispensed at a fill-up."""

    GASOLINE_92 = "Gasoline92"
    GASOLINE_95 = "Gasoline95"
    GASOLINE_98 = "Gasoline98"
    DIESEL = "Diesel"


class ChargingType(TrackerEnum):
    """Charging mode of a session."""

    SLOW = "Slow"
    FAST = "Fast"


class FuelRecord(TrackerBaseModel):
    """A single fuel purchase."""

    id: int | None = None
    vehicle_id: int
    fuel_type: FuelType = FuelType.GASOLINE_92
    price_per_liter: float = 0.0
    amount: float = 0.0
    """Total amount paid."""
    liters: float = 0.0
    mileage: float = 0.0
    """Odometer reading in km at the time of the fill."""
    is_full_tank: bool = False
    note: str | None = None
    created_at: UtcTimestamp = Field(default_factory=utcnow)


class ChargingRecord(TrackerBaseModel):
    """A single charging session.

    Each session carries its own odometer readings, so its efficiency can
    be computed without looking at neighbouring sessions.
    """

    id: int | None = None
    vehicle_id: int
    charging_type: ChargingType = ChargingType.SLOW
    price_per_kwh: float = 0.0
    amount: float = 0.0
    kwh: float = 0.0
    mileage_before: float = 0.0
    mileage_after: float = 0.0
    duration_minutes: int | None = Field(default=None, ge=0)
    note: str | None = None
    created_at: UtcTimestamp = Field(default_factory=utcnow)

    @property
    def distance(self) -> float:
        """Distance driven that this session refers to (may be non-positive)."""
        return self.mileage_after - self.mileage_before


class MaintenanceRecord(TrackerBaseModel):
    """A service or repair event."""

    id: int | None = None
    vehicle_id: int
    maintenance_type: str
    """Free-text label, e.g. ``"oil change"``."""
    mileage: float = 0.0
    cost: float = 0.0
    shop: str | None = None
    note: str | None = None
    created_at: UtcTimestamp = Field(default_factory=utcnow)
