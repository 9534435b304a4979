"""
src/analytics/predictor.py
──────────────────────────
Realtime prediction for a single ad-hoc reading.

Pipeline:
  1. Validate the raw payload (all required fields, failure flag forced off)
  2. Health score and anomaly alerts, computed independently
  3. Derived failure flag: score < 20 or any critical alert
  4. Status from (score, derived flag)
  5. Diagnosis, shaft power, tool-life RUL and temperature differential

RUL here is tool-life based: minutes of wear left before the 253 min
reference, and none once wear has entered the critical TWF band.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from config.alerts import NO_FAILURE_PREDICTED
from config.machine import ANOMALY_THRESHOLDS, FAILURE_SCORE_THRESHOLD, HEALTH_REFERENCE
from src.analytics.anomaly import detect_anomalies, primary_alert
from src.analytics.health_index import compute_health_score
from src.analytics.status import classify_status
from src.analytics.units import format_number, round_half_up, shaft_power_w
from src.data.models import Alert, Prediction, Reading
from src.data.validation import ValidationError, parse_realtime_input

logger = logging.getLogger(__name__)


def tool_wear_remaining(tool_wear: float) -> float:
    """Minutes of tool life left; 0 once wear is past the critical threshold."""
    if tool_wear > ANOMALY_THRESHOLDS.tool_wear_critical_min:
        return 0.0
    return max(0.0, HEALTH_REFERENCE.tool_wear_max_min - tool_wear)


def rul_estimate(remaining: float) -> str:
    if remaining > 0:
        return f"~{format_number(remaining)} min of tool life remaining"
    return "Tool replacement required immediately"


def predicted_failure(alerts: list[Alert]) -> str:
    alert = primary_alert(alerts)
    return alert.message if alert is not None else NO_FAILURE_PREDICTED


def predict_reading(reading: Reading) -> Prediction:
    """Run the full pipeline on an already-validated live reading."""
    health_score = compute_health_score(reading)
    alerts = detect_anomalies(reading)
    failure = health_score < FAILURE_SCORE_THRESHOLD or any(a.is_critical for a in alerts)
    remaining = tool_wear_remaining(reading.tool_wear)

    return Prediction(
        health_score=health_score,
        status=classify_status(health_score, failure),
        failure_status=failure,
        predicted_failure=predicted_failure(alerts),
        alerts=alerts,
        power=round_half_up(shaft_power_w(reading.torque, reading.rotational_speed)),
        tool_wear_remaining=remaining,
        rul_estimate=rul_estimate(remaining),
        temp_differential=f"{reading.temp_delta:.2f}",
        inputs=reading,
    )


def predict_realtime(payload: Mapping[str, Any]) -> Prediction:
    """
    Validate a raw payload and predict its health.

    Raises:
        ValidationError: before any scoring, naming every bad field.
    """
    try:
        reading = parse_realtime_input(payload)
    except ValidationError as exc:
        logger.warning("realtime input rejected", extra={"fields": ",".join(exc.fields)})
        raise

    prediction = predict_reading(reading)
    logger.debug(
        "realtime prediction",
        extra={
            "health_score": prediction.health_score,
            "status": prediction.status.value,
            "alert_count": len(prediction.alerts),
        },
    )
    return prediction
