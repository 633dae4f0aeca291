"""Tracker configuration for pyfueltrack."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyfueltrack.exceptions import TrackerConfigError

CSV_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CSV_MIN_FIELDS = 7


@dataclasses.dataclass(frozen=True)
class TrackerConfig:
    """Tracker configuration.

    Parameters
    ----------
    recent_expense_limit : int
        Number of points returned by ``recent_expenses`` when the caller
        does not pass a limit.
    csv_date_format : str
        ``strftime`` format of the CSV date column.
    csv_min_fields : int
        Rows with fewer comma-separated fields are dropped on import.
    """

    recent_expense_limit: int = 10
    csv_date_format: str = CSV_DATE_FORMAT
    csv_min_fields: int = CSV_MIN_FIELDS

    def __post_init__(self) -> None:
        if self.recent_expense_limit < 0:
            raise TrackerConfigError(f"recent_expense_limit must be >= 0, got {self.recent_expense_limit}")
        if self.csv_min_fields < 1:
            raise TrackerConfigError(f"csv_min_fields must be >= 1, got {self.csv_min_fields}")
        if not self.csv_date_format.strip():
            raise TrackerConfigError("csv_date_format must not be empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> TrackerConfig:
        """Create configuration from environment variables.

        Reads ``FUELTRACK_RECENT_LIMIT`` and ``FUELTRACK_CSV_DATE_FORMAT``.
        Explicit keyword arguments override environment values.

        Raises
        ------
        TrackerConfigError
            When an environment value cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        limit_env = env.get("FUELTRACK_RECENT_LIMIT")
        if limit_env is not None and "recent_expense_limit" not in overrides:
            try:
                config_kwargs["recent_expense_limit"] = int(limit_env)
            except ValueError as exc:
                raise TrackerConfigError(f"FUELTRACK_RECENT_LIMIT must be an integer, got {limit_env!r}") from exc

        date_format_env = env.get("FUELTRACK_CSV_DATE_FORMAT")
        if date_format_env is not None:
            config_kwargs["csv_date_format"] = date_format_env

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
