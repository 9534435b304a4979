"""
src/analytics/status.py
────────────────────────
Status classification from a health score.

  failure flagged   → CRITICAL
  score ≥ 80        → GOOD
  60 ≤ score < 80   → WARNING
  40 ≤ score < 60   → POOR
  score < 40        → CRITICAL
"""
from __future__ import annotations

from config.machine import STATUS_GOOD_MIN, STATUS_POOR_MIN, STATUS_WARNING_MIN
from src.data.models import HealthStatus


def classify_status(score: float, failure_status: bool = False) -> HealthStatus:
    """Bucket a health score; a failure flag always wins."""
    if failure_status:
        return HealthStatus.CRITICAL
    if score >= STATUS_GOOD_MIN:
        return HealthStatus.GOOD
    if score >= STATUS_WARNING_MIN:
        return HealthStatus.WARNING
    if score >= STATUS_POOR_MIN:
        return HealthStatus.POOR
    return HealthStatus.CRITICAL
