"""Vehicle model."""

from __future__ import annotations

from pydantic import Field, field_validator

from pyfueltrack.models._base import TrackerBaseModel, TrackerEnum, UtcTimestamp
from pyfueltrack.normalize import utcnow


class VehicleType(TrackerEnum):
    """Propulsion kind."""

    FUEL = "Fuel"
    ELECTRIC = "Electric"
    HYBRID = "Hybrid"


class Vehicle(TrackerBaseModel):
    """A vehicle owning fuel, charging and maintenance records.

    ``id`` is ``None`` until the record store assigns one; it never
    changes afterwards. Descriptive fields may be replaced through
    :meth:`pyfueltrack.store.RecordStore.update_vehicle`.
    """

    id: int | None = None
    brand: str
    model: str
    year: int | None = None
    vehicle_type: VehicleType = VehicleType.FUEL
    fuel_tank_capacity: float | None = Field(default=None, ge=0)
    """Tank capacity in liters."""
    battery_capacity: float | None = Field(default=None, ge=0)
    """Usable battery capacity in kWh."""
    created_at: UtcTimestamp = Field(default_factory=utcnow)
    updated_at: UtcTimestamp = Field(default_factory=utcnow)

    @field_validator("brand", "model")
    @classmethod
    def _strip_names(cls, value: str) -> str:
        return value.strip()

    @property
    def display_name(self) -> str:
        if self.year is None:
            return f"{self.brand} {self.model}"
        return f"{self.brand} {self.model} ({self.year})"

    @property
    def uses_fuel(self) -> bool:
        return self.vehicle_type in (VehicleType.FUEL, VehicleType.HYBRID)

    @property
    def uses_electricity(self) -> bool:
        return self.vehicle_type in (VehicleType.ELECTRIC, VehicleType.HYBRID)
