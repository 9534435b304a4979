"""
src/analytics/anomaly.py
────────────────────────
Rule-based anomaly detection for a single machine reading.

Each rule looks at the same reading independently and may emit one alert:

  TWF   tool wear > 200 min             critical above 240 min
  HDF   Δtemp < 8.6 K and speed < 1380   warning
  PWF   power ∉ [3500, 9000] W          critical outside [2000, 10000] W
  OSF   wear × torque > 11000           critical
  TEMP  air temperature > 306 K         warning

Rules run in the order above and the output keeps that order. Callers pick
"the primary anomaly" as the first critical alert (or the first alert), so
the order is part of the contract.
"""
from __future__ import annotations

import logging
from collections.abc import Callable

from config.alerts import AlertSeverity, AlertType
from config.machine import ANOMALY_THRESHOLDS, AnomalyThresholds
from src.analytics.units import format_number, format_watts, shaft_power_w
from src.data.models import Alert, Reading

logger = logging.getLogger(__name__)

Rule = Callable[[Reading, AnomalyThresholds], Alert | None]


def _tool_wear_rule(reading: Reading, thr: AnomalyThresholds) -> Alert | None:
    wear = reading.tool_wear
    if wear <= thr.tool_wear_warning_min:
        return None
    severity = AlertSeverity.CRITICAL if wear > thr.tool_wear_critical_min else AlertSeverity.WARNING
    return Alert(
        type=AlertType.TWF,
        severity=severity,
        message=f"Tool wear at {format_number(wear)} min — replacement recommended",
    )


def _heat_dissipation_rule(reading: Reading, thr: AnomalyThresholds) -> Alert | None:
    if reading.temp_delta < thr.hdf_temp_delta_k and reading.rotational_speed < thr.hdf_speed_rpm:
        return Alert(
            type=AlertType.HDF,
            severity=AlertSeverity.WARNING,
            message="Heat dissipation anomaly detected",
        )
    return None


def _power_rule(reading: Reading, thr: AnomalyThresholds) -> Alert | None:
    power = shaft_power_w(reading.torque, reading.rotational_speed)
    warn, crit = thr.power_warning_w, thr.power_critical_w
    if warn.contains(power):
        return None
    severity = AlertSeverity.WARNING if crit.contains(power) else AlertSeverity.CRITICAL
    return Alert(
        type=AlertType.PWF,
        severity=severity,
        message=f"Power output anomaly: {format_watts(power)}W",
    )


def _overstrain_rule(reading: Reading, thr: AnomalyThresholds) -> Alert | None:
    if reading.tool_wear * reading.torque > thr.overstrain_min_nm:
        return Alert(
            type=AlertType.OSF,
            severity=AlertSeverity.CRITICAL,
            message="Overstrain risk — high torque with worn tool",
        )
    return None


def _temperature_rule(reading: Reading, thr: AnomalyThresholds) -> Alert | None:
    if reading.air_temperature > thr.air_temp_max_k:
        return Alert(
            type=AlertType.TEMP,
            severity=AlertSeverity.WARNING,
            message=f"Air temperature elevated: {format_number(reading.air_temperature)}K",
        )
    return None


# Evaluation order == emission order
RULES: tuple[Rule, ...] = (
    _tool_wear_rule,
    _heat_dissipation_rule,
    _power_rule,
    _overstrain_rule,
    _temperature_rule,
)


# ── Main API ──────────────────────────────────────────────────────────────────


def detect_anomalies(reading: Reading, thr: AnomalyThresholds = ANOMALY_THRESHOLDS) -> list[Alert]:
    """
    Run every rule against the reading.

    Returns:
        Alerts in rule order (possibly empty). Nothing is merged or deduplicated.
    """
    alerts = [alert for rule in RULES if (alert := rule(reading, thr)) is not None]
    if alerts:
        logger.debug(
            "anomalies detected",
            extra={"alert_types": ",".join(a.type.value for a in alerts)},
        )
    return alerts


def primary_alert(alerts: list[Alert]) -> Alert | None:
    """First critical alert if any, else the first alert, else None."""
    for alert in alerts:
        if alert.is_critical:
            return alert
    return alerts[0] if alerts else None
