"""Derived statistics. None of these are persisted."""

from __future__ import annotations

from pydantic import model_validator

from pyfueltrack.models._base import TrackerBaseModel


class ConsumptionTrendPoint(TrackerBaseModel):
    """One efficiency sample for charting.

    ``consumption`` is l/100km for fuel trends and kWh/100km for electric
    trends.
    """

    date: str
    """``YYYY-MM-DD`` label of the closing record."""
    consumption: float
    mileage: float
    """Odometer reading at the closing record."""


class ExpenseStatPoint(TrackerBaseModel):
    """Costs for one period, split by category.

    ``period`` is ``YYYY-MM`` for the monthly rollup and ``YYYY-MM-DD``
    for the recent-activity view. When ``total_cost`` is omitted it is
    computed from the four buckets.
    """

    period: str
    fuel_cost: float = 0.0
    charging_cost: float = 0.0
    maintenance_cost: float = 0.0
    other_cost: float = 0.0
    total_cost: float = 0.0

    @model_validator(mode="before")
    @classmethod
    def _fill_total(cls, values: object) -> object:
        if not isinstance(values, dict) or values.get("total_cost") is not None:
            return values
        merged = dict(values)
        merged["total_cost"] = sum(
            float(merged.get(key) or 0.0)
            for key in ("fuel_cost", "charging_cost", "maintenance_cost", "other_cost")
        )
        return merged


class FuelConsumption(TrackerBaseModel):
    """Aggregate full-to-full fuel efficiency over a vehicle's history."""

    consumption_per_100km: float
    total_distance: float
    total_fuel: float
    total_cost: float
    average_price: float | None = None
    """Cost per liter, ``None`` when no fuel was counted."""


class ElectricConsumption(TrackerBaseModel):
    """Aggregate charging efficiency over a vehicle's history."""

    consumption_per_100km: float
    total_distance: float
    total_kwh: float
    total_cost: float
    average_price: float | None = None
    """Cost per kWh, ``None`` when no energy was counted."""
