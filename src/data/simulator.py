"""
src/data/simulator.py
─────────────────────
Synthetic AI4I-like machine records for demos and tests.

Generates:
  - `size` records spread over the last `days` days, oldest first
  - machine build quality mix L 60% / M 30% / H 10%
  - failure flags derived from critical anomaly rules, labelled with the
    failure type of the first critical alert

Design:
  - Reproducible with SIMULATION_SEED
  - Signal distributions follow the published AI4I 2020 statistics
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import numpy as np

from config.alerts import ALERT_TYPE_LABELS, NO_FAILURE_LABEL
from config.machine import CRITICAL_RANGES, NORMAL_RANGES
from config.settings import settings
from src.analytics.anomaly import detect_anomalies
from src.analytics.health_index import compute_health_score
from src.data.models import MachineRecord, MachineType, Reading


@dataclass(frozen=True)
class SignalProfile:
    mean: float
    std: float


# ── Baseline operating profile ────────────────────────────────────────────────

PROFILE: dict[str, SignalProfile] = {
    "air_temperature": SignalProfile(300.0, 2.0),
    "temp_delta": SignalProfile(10.0, 1.0),
    "rotational_speed": SignalProfile(1538.0, 179.0),
    "torque": SignalProfile(40.0, 10.0),
}

TYPE_MIX: dict[MachineType, float] = {
    MachineType.LOW: 0.6,
    MachineType.MEDIUM: 0.3,
    MachineType.HIGH: 0.1,
}


def _generate_reading(rng: np.random.Generator) -> Reading:
    p = PROFILE
    speed_band = CRITICAL_RANGES["rotational_speed"]
    air = rng.normal(p["air_temperature"].mean, p["air_temperature"].std)
    process = air + rng.normal(p["temp_delta"].mean, p["temp_delta"].std)
    speed = rng.normal(p["rotational_speed"].mean, p["rotational_speed"].std)
    torque = rng.normal(p["torque"].mean, p["torque"].std)
    wear = rng.uniform(NORMAL_RANGES["tool_wear"].low, NORMAL_RANGES["tool_wear"].high)
    machine_type = rng.choice([t.value for t in TYPE_MIX], p=list(TYPE_MIX.values()))

    return Reading(
        machine_type=MachineType(str(machine_type)),
        air_temperature=round(float(air), 1),
        process_temperature=round(float(process), 1),
        rotational_speed=round(float(np.clip(speed, speed_band.low, speed_band.high))),
        torque=round(float(np.clip(torque, NORMAL_RANGES["torque"].low, CRITICAL_RANGES["torque"].high)), 1),
        tool_wear=round(float(wear)),
    )


def _label_failure(reading: Reading) -> tuple[bool, str]:
    """Failed iff a critical rule fires; the first critical alert names the type."""
    for alert in detect_anomalies(reading):
        if alert.is_critical:
            return True, ALERT_TYPE_LABELS[alert.type]
    return False, NO_FAILURE_LABEL


# ── Public API ────────────────────────────────────────────────────────────────

def generate_history(
    seed: int = settings.SIMULATION_SEED,
    size: int = settings.SIMULATION_SIZE,
    days: int = settings.HISTORY_DAYS,
) -> list[MachineRecord]:
    """Generate `size` records with timestamps in the last `days` days, oldest first."""
    rng = np.random.default_rng(seed)
    end_ts = datetime.now(tz=UTC).replace(microsecond=0)
    offsets = np.sort(rng.uniform(0.0, days * 86_400.0, size))[::-1]

    records: list[MachineRecord] = []
    for i, offset in enumerate(offsets):
        reading = _generate_reading(rng)
        failed, failure_type = _label_failure(reading)
        reading = reading.model_copy(update={"failure_status": failed})
        records.append(MachineRecord(
            **reading.model_dump(),
            machine_id=f"{reading.machine_type.value}{i + 1:05d}",
            timestamp=end_ts - timedelta(seconds=float(offset)),
            failure_type=failure_type,
            health_score=compute_health_score(reading),
        ))
    return records


def generate_realtime_reading(seed: int | None = None) -> Reading:
    """
    Generate a single live reading (failure flag off).
    Uses a seed based on the current time when none is given.
    """
    if seed is None:
        seed = int(datetime.now(tz=UTC).timestamp()) % 10_000
    return _generate_reading(np.random.default_rng(seed))
