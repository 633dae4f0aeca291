#!/usr/bin/env python3
"""Print consumption and expense reports for a fuel-record CSV export.

The CSV is imported into a throwaway in-memory store attached to a single
vehicle, then every report the library offers is printed.

Usage
-----
::

    python scripts/fuel_report.py fuel.csv

Options::

    --brand NAME         Vehicle brand shown in the header (default: "Vehicle")
    --model NAME         Vehicle model shown in the header (default: "")
    --recent N           Number of points in the recent-expense view
    --json               Output as machine-readable JSON
    --output FILE        Write output to FILE instead of stdout
    --verbose, -v        Enable debug logging
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyfueltrack import FuelTracker, InMemoryRecordStore, TrackerConfig, Vehicle  # noqa: E402

# ── helpers ──────────────────────────────────────────────────


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def build_report(tracker: FuelTracker, vehicle_id: int, recent: int | None) -> dict[str, Any]:
    summary = tracker.fuel_summary(vehicle_id)
    return {
        "vehicle": tracker.get_vehicle(vehicle_id).display_name,
        "records": len(tracker.list_fuel_records(vehicle_id)),
        "summary": summary.model_dump() if summary is not None else None,
        "trend": [p.model_dump() for p in tracker.fuel_trend(vehicle_id)],
        "monthly": [p.model_dump() for p in tracker.monthly_expenses(vehicle_id)],
        "recent": [p.model_dump() for p in tracker.recent_expenses(vehicle_id, recent)],
    }


def render_text(report: dict[str, Any]) -> str:
    out: list[str] = [_section(f"{report['vehicle']} ({report['records']} fuel records)")]

    summary = report["summary"]
    out.append(_section("CONSUMPTION"))
    if summary is None:
        out.append("  not enough full-tank records")
    else:
        out.append(f"  l/100km        : {summary['consumption_per_100km']:.2f}")
        out.append(f"  distance (km)  : {summary['total_distance']:.1f}")
        out.append(f"  fuel (l)       : {summary['total_fuel']:.2f}")
        out.append(f"  cost           : {summary['total_cost']:.2f}")
        if summary["average_price"] is not None:
            out.append(f"  price / l      : {summary['average_price']:.3f}")

    out.append(_section("TREND"))
    for point in report["trend"]:
        out.append(f"  {point['date']}  {point['mileage']:>10.1f} km  {point['consumption']:6.2f} l/100km")

    out.append(_section("MONTHLY EXPENSES"))
    for point in report["monthly"]:
        out.append(f"  {point['period']}  {point['total_cost']:10.2f}")

    out.append(_section("RECENT EXPENSES"))
    for point in report["recent"]:
        out.append(f"  {point['period']}  {point['total_cost']:10.2f}")
    return "\n".join(out)


def main() -> int:
    parser = argparse.ArgumentParser(description="Report on a pyfueltrack CSV export")
    parser.add_argument("csv_file", type=Path, help="CSV file produced by the fuel-record export")
    parser.add_argument("--brand", default="Vehicle", help="Vehicle brand shown in the header")
    parser.add_argument("--model", default="", help="Vehicle model shown in the header")
    parser.add_argument("--recent", type=int, default=None, help="Points in the recent-expense view")
    parser.add_argument("--json", dest="json_mode", action="store_true", help="Output JSON")
    parser.add_argument("--output", "-o", help="Write output to FILE instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        text = args.csv_file.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Cannot read {args.csv_file}: {exc}", file=sys.stderr)
        return 1

    tracker = FuelTracker(InMemoryRecordStore(), TrackerConfig.from_env())
    vehicle = tracker.add_vehicle(Vehicle(brand=args.brand, model=args.model))
    if vehicle.id is None:
        print("Record store did not assign a vehicle id", file=sys.stderr)
        return 1
    imported = tracker.import_fuel_records_csv(vehicle.id, text)
    logging.getLogger(__name__).debug("Imported %d rows from %s", imported, args.csv_file)

    report = build_report(tracker, vehicle.id, args.recent)
    payload = json.dumps(report, indent=2, ensure_ascii=False) if args.json_mode else render_text(report)

    if args.output:
        Path(args.output).write_text(payload + "\n", encoding="utf-8")
        print(f"Report written to {args.output}", file=sys.stderr)
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
