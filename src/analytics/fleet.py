"""
src/analytics/fleet.py
──────────────────────
Batch enrichment and fleet-level statistics over persisted readings.

The query layer hands over records that already carry a real failure flag
(and usually a stored health score). Each record is enriched with its score,
status and alerts; the summary aggregates a batch with pandas.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence

import pandas as pd

from src.analytics.anomaly import detect_anomalies
from src.analytics.health_index import compute_health_score
from src.analytics.status import classify_status
from src.analytics.units import round_half_up
from src.data.models import EnrichedRecord, FleetSummary, HealthStatus, MachineRecord

SIGNAL_COLUMNS = [
    "air_temperature",
    "process_temperature",
    "rotational_speed",
    "torque",
    "tool_wear",
    "health_score",
]


def enrich_record(record: MachineRecord) -> EnrichedRecord:
    """Attach score, status and alerts to a persisted record."""
    if isinstance(record, EnrichedRecord):
        return record

    # A stored score is authoritative; compute one only when it is absent
    score = record.health_score if record.health_score is not None else compute_health_score(record)
    data = record.model_dump()
    data.update(
        health_score=score,
        status=classify_status(score, record.failure_status),
        alerts=detect_anomalies(record),
    )
    return EnrichedRecord(**data)


def enrich_records(records: Iterable[MachineRecord]) -> list[EnrichedRecord]:
    return [enrich_record(r) for r in records]


def to_dataframe(records: Sequence[MachineRecord]) -> pd.DataFrame:
    """Convert records to a DataFrame (alerts excluded)."""
    return pd.DataFrame([r.model_dump(mode="json", exclude={"alerts"}) for r in records])


def compute_summary_stats(records: Iterable[MachineRecord]) -> FleetSummary:
    """
    Aggregate a batch of records.

    Status counts use the classifier with each record's failure flag, so a
    failed record is always CRITICAL even if its stored score is high.
    """
    enriched = enrich_records(records)
    empty_breakdown = {s.value: 0 for s in HealthStatus}
    if not enriched:
        return FleetSummary(status_breakdown=empty_breakdown)

    df = to_dataframe(enriched)
    total = len(df)
    failed = int(df["failure_status"].sum())

    counts = df["status"].value_counts()
    breakdown = {k: int(counts.get(k, 0)) for k in empty_breakdown}

    by_type = df.groupby("failure_type").size().sort_values(ascending=False)
    averages = df[SIGNAL_COLUMNS].mean().round(2)

    return FleetSummary(
        total=total,
        failed=failed,
        operational=total - failed,
        average_health_score=round_half_up(float(df["health_score"].mean())),
        status_breakdown=breakdown,
        failure_rate=f"{failed / total * 100:.2f}",
        failure_by_type={str(k): int(v) for k, v in by_type.items()},
        averages={k: float(v) for k, v in averages.items()},
    )


def compute_fleet_health(records: Iterable[MachineRecord]) -> int:
    """Fleet-level health score: minimum of individual scores."""
    enriched = enrich_records(records)
    if not enriched:
        return 100
    return min(r.health_score for r in enriched)
