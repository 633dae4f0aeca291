"""Base model and enum for tracker records.

Every record model inherits from :class:`TrackerBaseModel` which
provides frozen instances and lenient handling of unknown keys.

Timestamps use the :data:`UtcTimestamp` annotated type which accepts
naive datetimes, aware datetimes in any zone, ISO strings, or epoch
seconds/milliseconds and always stores an aware UTC datetime.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict

from pyfueltrack.normalize import ensure_utc

# Threshold to distinguish seconds from milliseconds.
_MS_THRESHOLD = 1_000_000_000_000


def parse_utc_timestamp(value: Any) -> Any:
    """Coerce *value* to a UTC datetime where it is recognisable.

    Unrecognised values are passed through so pydantic reports the error.
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            ts = int(value)
            if ts >= _MS_THRESHOLD:
                ts = ts // 1000
            return datetime.fromtimestamp(ts, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return value
    if isinstance(value, str):
        try:
            return ensure_utc(datetime.fromisoformat(value.strip()))
        except ValueError:
            return value
    return value


UtcTimestamp = Annotated[datetime, BeforeValidator(parse_utc_timestamp)]
"""Annotated type that normalises every accepted timestamp to aware UTC."""


class TrackerEnum(StrEnum):
    """Base for closed record-kind enums.

    Members are stored by name-like string values. Parsing raw labels
    from files happens only in :mod:`pyfueltrack.csv_io`.
    """

    @classmethod
    def default(cls) -> TrackerEnum:
        """Return the first declared member."""
        return next(iter(cls))


class TrackerBaseModel(BaseModel):
    """Base for all tracker models.

    Instances are immutable snapshots; updates go through
    ``model_copy(update=...)`` and replace the whole record in the store.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )
