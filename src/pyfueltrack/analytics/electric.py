"""Electric consumption from charging sessions.

Every session records the odometer before and after, so each one is
measured on its own.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pyfueltrack.analytics.trend import TrendSample, build_trend, per_100km
from pyfueltrack.models.records import ChargingRecord
from pyfueltrack.models.stats import ConsumptionTrendPoint, ElectricConsumption


def measured_sessions(records: Iterable[ChargingRecord]) -> Iterator[ChargingRecord]:
    """Yield sessions that cover a positive distance."""
    return (r for r in records if r.distance > 0)


def calculate_electric_consumption(records: Iterable[ChargingRecord]) -> ElectricConsumption | None:
    """Aggregate kWh/100km over all measured sessions.

    Returns ``None`` when no session covers a positive distance.
    """
    total_distance = 0.0
    total_kwh = 0.0
    total_cost = 0.0
    for record in measured_sessions(records):
        total_distance += record.distance
        total_kwh += record.kwh
        total_cost += record.amount

    if total_distance <= 0:
        return None

    return ElectricConsumption(
        consumption_per_100km=per_100km(total_kwh, total_distance),
        total_distance=total_distance,
        total_kwh=total_kwh,
        total_cost=total_cost,
        average_price=total_cost / total_kwh if total_kwh > 0 else None,
    )


def electric_consumption_per_100km(records: Iterable[ChargingRecord]) -> float:
    """kWh per 100 km, ``0.0`` when it cannot be determined."""
    result = calculate_electric_consumption(records)
    if result is None:
        return 0.0
    return result.consumption_per_100km


def electric_trend(records: Iterable[ChargingRecord]) -> list[ConsumptionTrendPoint]:
    """One kWh/100km point per measured session, oldest first."""
    return build_trend(
        TrendSample(
            timestamp=record.created_at,
            energy=record.kwh,
            distance=record.distance,
            mileage=record.mileage_after,
        )
        for record in measured_sessions(records)
    )
