"""Pure consumption and expense calculators.

These functions take already-fetched record snapshots, perform no I/O and
never mutate their input.
"""

from pyfueltrack.analytics.electric import (
    calculate_electric_consumption,
    electric_consumption_per_100km,
    electric_trend,
)
from pyfueltrack.analytics.expenses import monthly_expenses, recent_expenses
from pyfueltrack.analytics.fuel import (
    calculate_fuel_consumption,
    fuel_consumption_per_100km,
    fuel_trend,
)
from pyfueltrack.analytics.trend import TrendSample, build_trend

__all__ = [
    "TrendSample",
    "build_trend",
    "calculate_electric_consumption",
    "calculate_fuel_consumption",
    "electric_consumption_per_100km",
    "electric_trend",
    "fuel_consumption_per_100km",
    "fuel_trend",
    "monthly_expenses",
    "recent_expenses",
]
