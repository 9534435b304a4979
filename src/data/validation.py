"""
src/data/validation.py
──────────────────────
Input validation for ad-hoc (not yet persisted) readings.

Required numeric fields may arrive as numbers or numeric strings. Every
missing or non-numeric field is collected before failing, so the caller sees
the full list at once.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from src.data.models import Reading

REQUIRED_FIELDS: tuple[str, ...] = (
    "airTemperature",
    "processTemperature",
    "rotationalSpeed",
    "torque",
    "toolWear",
)


class ValidationError(ValueError):
    """Raised when required numeric fields are missing or non-numeric."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"Missing or non-numeric: {', '.join(self.fields)}")


def _to_float(value: Any) -> float | None:
    # bool is an int subclass; a flag is not a measurement
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        # Python digit separators ("1_000") are not JSON numbers
        if not value or "_" in value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def parse_realtime_input(payload: Mapping[str, Any]) -> Reading:
    """
    Build a live Reading from a raw JSON-like payload.

    `machineType` defaults to M; `failureStatus` is always False since a live
    reading has not been classified yet.

    Raises:
        ValidationError: naming every missing or non-numeric required field.
    """
    values: dict[str, float] = {}
    invalid: list[str] = []
    for name in REQUIRED_FIELDS:
        number = _to_float(payload.get(name))
        if number is None:
            invalid.append(name)
        else:
            values[name] = number

    if invalid:
        raise ValidationError(invalid)

    return Reading(
        machineType=payload.get("machineType"),
        failureStatus=False,
        **values,
    )
