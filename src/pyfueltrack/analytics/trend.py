"""Shared trend-series contract.

Both calculators reduce their records to :class:`TrendSample` values;
this module turns samples into :class:`ConsumptionTrendPoint` lists in
ascending chronological order. Samples covering no distance are dropped.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import NamedTuple

from pyfueltrack.models.stats import ConsumptionTrendPoint

DATE_LABEL_FORMAT = "%Y-%m-%d"


class TrendSample(NamedTuple):
    """Energy used over one measured stretch of driving."""

    timestamp: datetime
    """When the stretch was closed (the refill or the charging session)."""
    energy: float
    """Liters or kWh."""
    distance: float
    mileage: float
    """Odometer at the end of the stretch."""


def per_100km(energy: float, distance: float) -> float:
    """Return *energy* per 100 km, or ``0.0`` when *distance* is not positive."""
    if distance <= 0:
        return 0.0
    return energy / distance * 100.0


def build_trend(samples: Iterable[TrendSample]) -> list[ConsumptionTrendPoint]:
    """Convert *samples* into plot-ready points sorted by timestamp.

    The sort is stable, so samples sharing a timestamp keep their input
    order.
    """
    valid = sorted((s for s in samples if s.distance > 0), key=lambda s: s.timestamp)
    return [
        ConsumptionTrendPoint(
            date=sample.timestamp.strftime(DATE_LABEL_FORMAT),
            consumption=per_100km(sample.energy, sample.distance),
            mileage=sample.mileage,
        )
        for sample in valid
    ]
