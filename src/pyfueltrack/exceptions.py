"""Custom exception hierarchy for pyfueltrack.

Insufficient data is never an error: calculators report ``0.0``, an
empty list or ``None`` instead. Only configuration and record-store
failures raise.
"""

from __future__ import annotations


class FuelTrackError(Exception):
    """Base exception for all pyfueltrack errors."""


class TrackerConfigError(FuelTrackError):
    """Invalid configuration value."""


class StoreError(FuelTrackError):
    """The record store failed or is unreachable.

    The tracker never retries; retry policy belongs to the store.
    """

    def __init__(self, message: str, *, operation: str = "") -> None:
        self.operation = operation
        super().__init__(message)


class VehicleNotFoundError(StoreError):
    """No vehicle with the requested id exists."""

    def __init__(self, vehicle_id: int, *, operation: str = "") -> None:
        self.vehicle_id = vehicle_id
        super().__init__(f"vehicle {vehicle_id} does not exist", operation=operation)


class RecordNotFoundError(StoreError):
    """No record of the requested kind and id exists."""

    def __init__(self, kind: str, record_id: int, *, operation: str = "") -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} record {record_id} does not exist", operation=operation)
