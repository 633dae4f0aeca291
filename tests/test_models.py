"""Tests for pydantic record models and enums."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from pyfueltrack.models import (
    ChargingRecord,
    ChargingType,
    ExpenseStatPoint,
    FuelRecord,
    FuelType,
    MaintenanceRecord,
    Vehicle,
    VehicleType,
)

# ------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------


class TestEnums:
    def test_default_is_first_member(self) -> None:
        assert FuelType.default() == FuelType.GASOLINE_92
        assert ChargingType.default() == ChargingType.SLOW
        assert VehicleType.default() == VehicleType.FUEL

    def test_values(self) -> None:
        assert [ft.value for ft in FuelType] == ["Gasoline92", "Gasoline95", "Gasoline98", "Diesel"]
        assert VehicleType("Hybrid") is VehicleType.HYBRID

    def test_unknown_value_rejected(self) -> None:
        with pytest.raises(ValueError):
            FuelType("Kerosene")


# ------------------------------------------------------------------
# Timestamps
# ------------------------------------------------------------------


class TestTimestamps:
    def test_naive_datetime_becomes_utc(self) -> None:
        record = FuelRecord(vehicle_id=1, created_at=datetime(2025, 3, 1, 8, 30))
        assert record.created_at == datetime(2025, 3, 1, 8, 30, tzinfo=UTC)

    def test_aware_datetime_converted_to_utc(self) -> None:
        cet = timezone(timedelta(hours=1))
        record = FuelRecord(vehicle_id=1, created_at=datetime(2025, 3, 1, 0, 30, tzinfo=cet))
        assert record.created_at == datetime(2025, 2, 28, 23, 30, tzinfo=UTC)
        assert record.created_at.strftime("%Y-%m") == "2025-02"

    def test_iso_string_and_epoch(self) -> None:
        from_iso = FuelRecord(vehicle_id=1, created_at="2025-03-01T08:30:00+00:00")
        from_epoch = FuelRecord(vehicle_id=1, created_at=1_740_817_800)
        from_ms = FuelRecord(vehicle_id=1, created_at=1_740_817_800_000)
        assert from_iso.created_at == from_epoch.created_at == from_ms.created_at

    def test_garbage_timestamp_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FuelRecord(vehicle_id=1, created_at="not a date")

    @pytest.mark.parametrize("value", [float("inf"), 1e20, -1e20])
    def test_out_of_range_epoch_rejected(self, value: float) -> None:
        with pytest.raises(ValidationError):
            FuelRecord(vehicle_id=1, created_at=value)

    def test_default_timestamp_is_aware(self) -> None:
        assert MaintenanceRecord(vehicle_id=1, maintenance_type="tires").created_at.tzinfo is not None


# ------------------------------------------------------------------
# Records
# ------------------------------------------------------------------


class TestRecords:
    def test_records_are_frozen(self) -> None:
        record = FuelRecord(vehicle_id=1, liters=10.0)
        with pytest.raises(ValidationError):
            record.liters = 20.0  # type: ignore[misc]

    def test_amount_not_checked_against_price(self) -> None:
        record = FuelRecord(vehicle_id=1, price_per_liter=2.0, liters=10.0, amount=1.0)
        assert record.amount == 1.0

    def test_charging_distance(self) -> None:
        assert ChargingRecord(vehicle_id=1, mileage_before=100, mileage_after=250).distance == 150.0
        assert ChargingRecord(vehicle_id=1, mileage_before=250, mileage_after=100).distance == -150.0

    def test_negative_duration_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ChargingRecord(vehicle_id=1, duration_minutes=-5)

    def test_enum_from_string(self) -> None:
        record = FuelRecord.model_validate({"vehicle_id": 1, "fuel_type": "Diesel"})
        assert record.fuel_type is FuelType.DIESEL


# ------------------------------------------------------------------
# Vehicle
# ------------------------------------------------------------------


class TestVehicle:
    def test_energy_flags(self) -> None:
        hybrid = Vehicle(brand="Toyota", model="Prius", vehicle_type=VehicleType.HYBRID)
        ev = Vehicle(brand="BYD", model="Dolphin", vehicle_type=VehicleType.ELECTRIC, battery_capacity=60.4)
        assert hybrid.uses_fuel and hybrid.uses_electricity
        assert not ev.uses_fuel and ev.uses_electricity

    def test_display_name(self) -> None:
        assert Vehicle(brand=" Mazda ", model="3").display_name == "Mazda 3"
        assert Vehicle(brand="Mazda", model="3", year=2020).display_name == "Mazda 3 (2020)"

    def test_negative_capacity_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Vehicle(brand="x", model="y", fuel_tank_capacity=-1)


# ------------------------------------------------------------------
# ExpenseStatPoint
# ------------------------------------------------------------------


def test_expense_point_total_computed_when_missing() -> None:
    point = ExpenseStatPoint(period="2025-03", fuel_cost=10.0, maintenance_cost=5.5)
    assert point.total_cost == pytest.approx(15.5)


def test_expense_point_explicit_total_kept() -> None:
    assert ExpenseStatPoint(period="2025-03", fuel_cost=10.0, total_cost=10.0).total_cost == 10.0
