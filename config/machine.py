"""
config/machine.py
─────────────────
Reference ranges and rule thresholds for AI4I milling machines.

Ranges are the observed spread of the AI4I 2020 dataset:
  air temperature      295–304 K   (critical band 293–306 K)
  process temperature  305–314 K   (critical band 303–316 K)
  rotational speed     1168–2886 rpm
  torque               3.8–76.6 Nm
  tool wear            0–253 min

The midpoints and the 253 min wear reference are empirical constants tied to
that dataset and are kept verbatim.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Band:
    """Closed interval [low, high]."""
    low: float
    high: float

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high


@dataclass(frozen=True)
class ScoringWeights:
    tool_wear: float = 40.0
    temp_delta_per_k: float = 2.0
    temp_delta_cap: float = 20.0
    speed: float = 15.0
    torque: float = 10.0
    range_penalty: float = 15.0


@dataclass(frozen=True)
class HealthReference:
    tool_wear_max_min: float
    speed_mid_rpm: float
    torque_mid_nm: float
    temp_delta_nominal_k: float
    temp_delta_band: Band
    air_temp_k: Band
    process_temp_k: Band
    weights: ScoringWeights


@dataclass(frozen=True)
class AnomalyThresholds:
    tool_wear_warning_min: float      # TWF emitted above this
    tool_wear_critical_min: float     # TWF critical above this
    hdf_temp_delta_k: float           # HDF when delta below this ...
    hdf_speed_rpm: float              # ... and speed below this
    power_warning_w: Band             # PWF outside this band
    power_critical_w: Band            # PWF critical outside this band
    overstrain_min_nm: float          # OSF when wear × torque above this
    air_temp_max_k: float             # TEMP above this


# ── Reference ranges ──────────────────────────────────────────────────────────
NORMAL_RANGES: dict[str, Band] = {
    "air_temperature": Band(295.0, 304.0),
    "process_temperature": Band(305.0, 314.0),
    "rotational_speed": Band(1168.0, 2886.0),
    "torque": Band(3.8, 76.6),
    "tool_wear": Band(0.0, 253.0),
}

CRITICAL_RANGES: dict[str, Band] = {
    "air_temperature": Band(293.0, 306.0),
    "process_temperature": Band(303.0, 316.0),
    "rotational_speed": Band(1100.0, 3000.0),
    "torque": Band(2.0, 80.0),
}

# ── Health score reference ────────────────────────────────────────────────────
HEALTH_REFERENCE = HealthReference(
    tool_wear_max_min=253.0,
    speed_mid_rpm=2027.0,
    torque_mid_nm=40.2,
    temp_delta_nominal_k=10.0,
    temp_delta_band=Band(8.0, 12.0),
    air_temp_k=CRITICAL_RANGES["air_temperature"],
    process_temp_k=CRITICAL_RANGES["process_temperature"],
    weights=ScoringWeights(),
)

# ── Anomaly rule thresholds ───────────────────────────────────────────────────
ANOMALY_THRESHOLDS = AnomalyThresholds(
    tool_wear_warning_min=200.0,
    tool_wear_critical_min=240.0,
    hdf_temp_delta_k=8.6,
    hdf_speed_rpm=1380.0,
    power_warning_w=Band(3_500.0, 9_000.0),
    power_critical_w=Band(2_000.0, 10_000.0),
    overstrain_min_nm=11_000.0,
    air_temp_max_k=306.0,
)

# ── Status bands (lower bound closed) ─────────────────────────────────────────
STATUS_GOOD_MIN = 80
STATUS_WARNING_MIN = 60
STATUS_POOR_MIN = 40

# Live readings scoring below this are treated as failing
FAILURE_SCORE_THRESHOLD = 20
