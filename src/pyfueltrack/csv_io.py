"""Fuel-record CSV export and import.

The format is one header line followed by one row per record::

    date,fuel_type,price_per_liter,liters,amount,mileage,full_tank,note

Fields are joined with bare commas and never quoted, so a note that
contains a comma or a newline does not survive a round trip. Timestamps
are written with second precision.

Import also accepts the Chinese grade and yes/no labels written by the
earlier desktop app. It is lenient at field level: unknown fuel labels
fall back to the first grade, unparseable numbers become ``0.0`` and
unparseable dates become the import time. Rows with too few fields are dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from pyfueltrack.config import CSV_DATE_FORMAT, CSV_MIN_FIELDS
from pyfueltrack.models.records import FuelRecord, FuelType
from pyfueltrack.normalize import float_or_zero, parse_timestamp, utcnow

_logger = logging.getLogger(__name__)

CSV_HEADER = "date,fuel_type,price_per_liter,liters,amount,mileage,full_tank,note"

FULL_TANK_LABEL = "Yes"
PARTIAL_FILL_LABEL = "No"


_FUEL_TYPE_LABELS: dict[FuelType, str] = {
    FuelType.GASOLINE_92: "92 Gasoline",
    FuelType.GASOLINE_95: "95 Gasoline",
    FuelType.GASOLINE_98: "98 Gasoline",
    FuelType.DIESEL: "Diesel",
}
# Labels written by the earlier desktop app; accepted on import only.
_LEGACY_FUEL_TYPE_LABELS: dict[str, FuelType] = {
    "92号汽油": FuelType.GASOLINE_92,
    "95号汽油": FuelType.GASOLINE_95,
    "98号汽油": FuelType.GASOLINE_98,
    "柴油": FuelType.DIESEL,
}
_LABEL_TO_FUEL_TYPE: dict[str, FuelType] = {
    **_LEGACY_FUEL_TYPE_LABELS,
    **{label: ft for ft, label in _FUEL_TYPE_LABELS.items()},
}
_FULL_TANK_LABELS = frozenset({FULL_TANK_LABEL, "是"})


def fuel_type_label(fuel_type: FuelType) -> str:
    return _FUEL_TYPE_LABELS[fuel_type]


def parse_fuel_type_label(label: str) -> FuelType:
    """Map an export label back to a grade, defaulting to the first grade."""
    fuel_type = _LABEL_TO_FUEL_TYPE.get(label.strip())
    if fuel_type is None:
        return FuelType.default()  # type: ignore[return-value]
    return fuel_type


def format_fuel_row(record: FuelRecord, *, date_format: str = CSV_DATE_FORMAT) -> str:
    return ",".join(
        (
            record.created_at.strftime(date_format),
            fuel_type_label(record.fuel_type),
            f"{record.price_per_liter:.2f}",
            f"{record.liters:.2f}",
            f"{record.amount:.2f}",
            f"{record.mileage:.1f}",
            FULL_TANK_LABEL if record.is_full_tank else PARTIAL_FILL_LABEL,
            record.note or "",
        )
    )


def export_fuel_records_csv(records: Iterable[FuelRecord], *, date_format: str = CSV_DATE_FORMAT) -> str:
    """Render *records* as CSV text, newest record first."""
    ordered = sorted(records, key=lambda r: r.created_at, reverse=True)
    lines = [CSV_HEADER]
    lines.extend(format_fuel_row(record, date_format=date_format) for record in ordered)
    return "\n".join(lines) + "\n"


def parse_fuel_row(
    line: str,
    vehicle_id: int,
    *,
    now: datetime,
    date_format: str = CSV_DATE_FORMAT,
    min_fields: int = CSV_MIN_FIELDS,
) -> FuelRecord | None:
    """Parse one data row, or return ``None`` when it has too few fields."""
    fields = line.split(",")
    if len(fields) < min_fields:
        return None

    note = fields[7].strip() if len(fields) > 7 else ""
    return FuelRecord(
        vehicle_id=vehicle_id,
        fuel_type=parse_fuel_type_label(fields[1]),
        price_per_liter=float_or_zero(fields[2]),
        liters=float_or_zero(fields[3]),
        amount=float_or_zero(fields[4]),
        mileage=float_or_zero(fields[5]),
        is_full_tank=fields[6].strip() in _FULL_TANK_LABELS,
        note=note or None,
        created_at=parse_timestamp(fields[0], date_format) or now,
    )


def parse_fuel_records_csv(
    text: str,
    vehicle_id: int,
    *,
    now: datetime | None = None,
    date_format: str = CSV_DATE_FORMAT,
    min_fields: int = CSV_MIN_FIELDS,
) -> list[FuelRecord]:
    """Parse CSV *text* into unsaved records for *vehicle_id*.

    The first line is always treated as the header. Blank lines are
    skipped silently; short rows are skipped and logged.
    """
    if now is None:
        now = utcnow()
    records: list[FuelRecord] = []
    for line_no, line in enumerate(text.splitlines()[1:], start=2):
        if not line.strip():
            continue
        record = parse_fuel_row(line, vehicle_id, now=now, date_format=date_format, min_fields=min_fields)
        if record is None:
            _logger.debug("Dropping CSV line %d: fewer than %d fields", line_no, min_fields)
            continue
        records.append(record)
    return records
