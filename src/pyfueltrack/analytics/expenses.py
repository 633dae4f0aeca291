"""Expense aggregation across fuel, charging and maintenance records."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from datetime import datetime

from pyfueltrack.models.records import ChargingRecord, FuelRecord, MaintenanceRecord
from pyfueltrack.models.stats import ExpenseStatPoint

MONTH_LABEL_FORMAT = "%Y-%m"
DAY_LABEL_FORMAT = "%Y-%m-%d"


@dataclasses.dataclass
class _MonthBucket:
    fuel_cost: float = 0.0
    charging_cost: float = 0.0
    maintenance_cost: float = 0.0
    # No record type feeds this bucket yet.
    other_cost: float = 0.0

    def to_point(self, period: str) -> ExpenseStatPoint:
        return ExpenseStatPoint(
            period=period,
            fuel_cost=self.fuel_cost,
            charging_cost=self.charging_cost,
            maintenance_cost=self.maintenance_cost,
            other_cost=self.other_cost,
            total_cost=self.fuel_cost + self.charging_cost + self.maintenance_cost + self.other_cost,
        )


def monthly_expenses(
    fuel_records: Iterable[FuelRecord] = (),
    charging_records: Iterable[ChargingRecord] = (),
    maintenance_records: Iterable[MaintenanceRecord] = (),
) -> list[ExpenseStatPoint]:
    """Sum costs per calendar month, oldest month first.

    Months without any record are absent from the result.
    """
    buckets: dict[str, _MonthBucket] = {}

    def bucket(when: datetime) -> _MonthBucket:
        return buckets.setdefault(when.strftime(MONTH_LABEL_FORMAT), _MonthBucket())

    for fuel in fuel_records:
        bucket(fuel.created_at).fuel_cost += fuel.amount
    for charge in charging_records:
        bucket(charge.created_at).charging_cost += charge.amount
    for service in maintenance_records:
        bucket(service.created_at).maintenance_cost += service.cost

    # YYYY-MM sorts chronologically as text.
    return [buckets[month].to_point(month) for month in sorted(buckets)]


def _newest(records: Iterable[FuelRecord | ChargingRecord], limit: int) -> list[FuelRecord | ChargingRecord]:
    return sorted(records, key=lambda r: r.created_at, reverse=True)[:limit]


def recent_expenses(
    fuel_records: Iterable[FuelRecord],
    charging_records: Iterable[ChargingRecord],
    limit: int,
) -> list[ExpenseStatPoint]:
    """Per-transaction costs of the most recent fuel and charging records.

    Up to *limit* records are taken from each source, merged newest-first,
    cut to *limit* points overall and returned oldest-first. The cut happens
    after the merge, so the source with more recent activity can fill every
    slot.
    """
    if limit <= 0:
        return []

    selected: list[tuple[datetime, ExpenseStatPoint]] = []
    for fuel in _newest(fuel_records, limit):
        selected.append(
            (
                fuel.created_at,
                ExpenseStatPoint(
                    period=fuel.created_at.strftime(DAY_LABEL_FORMAT),
                    fuel_cost=fuel.amount,
                    total_cost=fuel.amount,
                ),
            )
        )
    for charge in _newest(charging_records, limit):
        selected.append(
            (
                charge.created_at,
                ExpenseStatPoint(
                    period=charge.created_at.strftime(DAY_LABEL_FORMAT),
                    charging_cost=charge.amount,
                    total_cost=charge.amount,
                ),
            )
        )

    selected.sort(key=lambda item: item[0], reverse=True)
    newest_first = [point for _, point in selected[:limit]]
    newest_first.reverse()
    return newest_first
