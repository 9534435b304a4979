"""
src/analytics/health_index.py
──────────────────────────────
Deductive health score calculation.

Score ∈ [0, 100] where 100 = nominal condition, 0 = failed.

Starting from a baseline of 100, each signal deducts points:
  tool wear            (wear / 253) × 40          strongest single signal
  temperature delta    min(|Δ − 10| × 2, 20)      only when Δ ∉ [8, 12]
  speed deviation      |rpm − 2027| / 2027 × 15
  torque deviation     |τ − 40.2| / 40.2 × 10
  range penalties      +15 each for air / process temperature outside the
                       critical band

Deductions are unbounded individually; only the final result is clamped.
A reading already known to be a failure scores 0 regardless of its signals.
"""

from __future__ import annotations

import numpy as np

from config.machine import HEALTH_REFERENCE, HealthReference
from src.analytics.units import round_half_up
from src.data.models import Reading

# ── Deduction helpers ─────────────────────────────────────────────────────────


def _tool_wear_deduction(tool_wear: float, ref: HealthReference) -> float:
    # Ratios above 1.0 push the deduction past the weight
    return (tool_wear / ref.tool_wear_max_min) * ref.weights.tool_wear


def _temp_delta_deduction(delta: float, ref: HealthReference) -> float:
    """Penalize a process/air differential outside the nominal 8–12 K band."""
    if ref.temp_delta_band.contains(delta):
        return 0.0
    w = ref.weights
    return min(abs(delta - ref.temp_delta_nominal_k) * w.temp_delta_per_k, w.temp_delta_cap)


def _speed_deduction(speed: float, ref: HealthReference) -> float:
    return abs(speed - ref.speed_mid_rpm) / ref.speed_mid_rpm * ref.weights.speed


def _torque_deduction(torque: float, ref: HealthReference) -> float:
    return abs(torque - ref.torque_mid_nm) / ref.torque_mid_nm * ref.weights.torque


def _range_penalty(reading: Reading, ref: HealthReference) -> float:
    """Flat penalty per temperature outside its critical band (independent, additive)."""
    penalty = 0.0
    if not ref.air_temp_k.contains(reading.air_temperature):
        penalty += ref.weights.range_penalty
    if not ref.process_temp_k.contains(reading.process_temperature):
        penalty += ref.weights.range_penalty
    return penalty


# ── Main API ──────────────────────────────────────────────────────────────────


def compute_deductions(reading: Reading, ref: HealthReference = HEALTH_REFERENCE) -> dict[str, float]:
    """
    Break a reading's score down into its individual deductions.

    Keys: tool_wear, temp_delta, speed, torque, range_penalty.
    """
    return {
        "tool_wear": _tool_wear_deduction(reading.tool_wear, ref),
        "temp_delta": _temp_delta_deduction(reading.temp_delta, ref),
        "speed": _speed_deduction(reading.rotational_speed, ref),
        "torque": _torque_deduction(reading.torque, ref),
        "range_penalty": _range_penalty(reading, ref),
    }


def compute_health_score(reading: Reading, ref: HealthReference = HEALTH_REFERENCE) -> int:
    """Compute the integer health score (0–100) of a single reading."""
    if reading.failure_status:
        return 0

    total = sum(compute_deductions(reading, ref).values())
    score = float(np.clip(100.0 - total, 0.0, 100.0))
    return round_half_up(score)
