"""Fuel consumption using the full-to-full method.

Only fills that topped the tank up are measurement boundaries. Between two
consecutive full fills, the liters added at the later fill equal the fuel
burned over the distance between them. Partial fills are ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from pyfueltrack.analytics.trend import TrendSample, build_trend, per_100km
from pyfueltrack.models.records import FuelRecord
from pyfueltrack.models.stats import ConsumptionTrendPoint, FuelConsumption

_logger = logging.getLogger(__name__)


def full_tank_records(records: Iterable[FuelRecord]) -> list[FuelRecord]:
    """Return the full-tank records sorted by odometer, then timestamp."""
    return sorted(
        (r for r in records if r.is_full_tank),
        key=lambda r: (r.mileage, r.created_at),
    )


def full_tank_intervals(records: Iterable[FuelRecord]) -> Iterator[tuple[FuelRecord, float]]:
    """Yield ``(closing_record, distance)`` for each measurable interval.

    Pairs whose odometer did not advance are skipped.
    """
    full = full_tank_records(records)
    for prev, curr in zip(full, full[1:]):
        distance = curr.mileage - prev.mileage
        if distance <= 0:
            _logger.debug("Skipping full-tank pair with distance %.1f at mileage %.1f", distance, curr.mileage)
            continue
        yield curr, distance


def calculate_fuel_consumption(records: Iterable[FuelRecord]) -> FuelConsumption | None:
    """Aggregate fuel efficiency over all full-to-full intervals.

    Returns ``None`` when fewer than two full-tank records exist or no
    interval covers a positive distance. Input order does not matter.
    """
    records = list(records)
    if sum(1 for r in records if r.is_full_tank) < 2:
        return None

    total_distance = 0.0
    total_fuel = 0.0
    total_cost = 0.0
    for curr, distance in full_tank_intervals(records):
        total_distance += distance
        total_fuel += curr.liters
        total_cost += curr.amount

    if total_distance <= 0:
        return None

    return FuelConsumption(
        consumption_per_100km=per_100km(total_fuel, total_distance),
        total_distance=total_distance,
        total_fuel=total_fuel,
        total_cost=total_cost,
        average_price=total_cost / total_fuel if total_fuel > 0 else None,
    )


def fuel_consumption_per_100km(records: Iterable[FuelRecord]) -> float:
    """Liters per 100 km, ``0.0`` when it cannot be determined."""
    result = calculate_fuel_consumption(records)
    if result is None:
        return 0.0
    return result.consumption_per_100km


def fuel_trend(records: Iterable[FuelRecord]) -> list[ConsumptionTrendPoint]:
    """One local l/100km point per full-to-full interval.

    Each point uses only the closing fill's liters, not a running total.
    """
    return build_trend(
        TrendSample(
            timestamp=curr.created_at,
            energy=curr.liters,
            distance=distance,
            mileage=curr.mileage,
        )
        for curr, distance in full_tank_intervals(records)
    )
