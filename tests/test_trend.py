from __future__ import annotations

import pytest

from pyfueltrack.analytics.trend import TrendSample, build_trend, per_100km
from factories import dt


def test_per_100km() -> None:
    assert per_100km(7.0, 100.0) == pytest.approx(7.0)
    assert per_100km(7.0, 0.0) == 0.0
    assert per_100km(7.0, -5.0) == 0.0


def test_build_trend_sorts_by_timestamp_and_drops_empty_stretches() -> None:
    samples = [
        TrendSample(timestamp=dt(2025, 5, 2), energy=30.0, distance=500.0, mileage=3000.0),
        TrendSample(timestamp=dt(2025, 4, 1), energy=20.0, distance=0.0, mileage=2500.0),
        TrendSample(timestamp=dt(2025, 3, 9), energy=14.0, distance=200.0, mileage=2500.0),
    ]
    trend = build_trend(samples)
    assert [(p.date, p.mileage) for p in trend] == [("2025-03-09", 2500.0), ("2025-05-02", 3000.0)]
    assert trend[0].consumption == pytest.approx(7.0)
    assert trend[1].consumption == pytest.approx(6.0)


def test_build_trend_keeps_input_order_for_equal_timestamps() -> None:
    samples = [
        TrendSample(timestamp=dt(2025, 1, 1), energy=1.0, distance=10.0, mileage=10.0),
        TrendSample(timestamp=dt(2025, 1, 1), energy=2.0, distance=10.0, mileage=20.0),
    ]
    assert [p.mileage for p in build_trend(samples)] == [10.0, 20.0]


def test_build_trend_empty() -> None:
    assert build_trend([]) == []
