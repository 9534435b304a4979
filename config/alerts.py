"""
config/alerts.py
────────────────
Alert types and severity levels.

Alert types follow the AI4I 2020 failure taxonomy:
  TWF  Tool Wear Failure
  HDF  Heat Dissipation Failure
  PWF  Power Failure
  OSF  Overstrain Failure
  TEMP air temperature outside the critical band
"""

from enum import Enum


class AlertSeverity(str, Enum):
    WARNING = "warning"
    CRITICAL = "critical"


class AlertType(str, Enum):
    TWF = "TWF"
    HDF = "HDF"
    PWF = "PWF"
    OSF = "OSF"
    TEMP = "TEMP"


ALERT_TYPE_LABELS: dict[str, str] = {
    AlertType.TWF: "Tool Wear Failure",
    AlertType.HDF: "Heat Dissipation Failure",
    AlertType.PWF: "Power Failure",
    AlertType.OSF: "Overstrain Failure",
    AlertType.TEMP: "Temperature Out Of Range",
}

NO_FAILURE_LABEL = "No Failure"
NO_FAILURE_PREDICTED = "No Failure Predicted"
