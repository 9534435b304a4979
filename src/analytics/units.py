"""
src/analytics/units.py
──────────────────────
Small numeric helpers shared by the scoring, anomaly and prediction modules.
"""
from __future__ import annotations

import math
import sys

import numpy as np

RPM_TO_RAD_S = math.pi / 30.0

# Saturation bound for values that overflow to ±inf
INT_LIMIT = sys.maxsize


def shaft_power_w(torque_nm: float, speed_rpm: float) -> float:
    """Mechanical power P = τ·ω, with ω converted from rpm to rad/s."""
    return torque_nm * speed_rpm * RPM_TO_RAD_S


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves rounded upward (2.5 → 3, -2.5 → -2).

    Total over floats: ±inf saturates to ±INT_LIMIT and NaN maps to 0.
    """
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return INT_LIMIT if value > 0 else -INT_LIMIT
    return int(np.floor(value + 0.5))


def format_number(value: float) -> str:
    """Render a reading value without a trailing '.0' (245.0 → '245', 212.3456 → '212.3456')."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    # Shortest exact round-trip; non-finite values render as 'inf' / 'nan'
    return repr(value)


def format_watts(power: float) -> str:
    """Rounded watts for messages; overflowed power renders as 'inf'."""
    if math.isfinite(power):
        return str(round_half_up(power))
    return format_number(power)
