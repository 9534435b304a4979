"""
src/data/models.py
──────────────────
Pydantic v2 data models for machine readings, alerts, predictions and
fleet summaries.

All models are frozen and serialize with camelCase aliases
(`airTemperature`, `healthScore`, ...) while exposing snake_case attributes.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from config.alerts import NO_FAILURE_LABEL, AlertSeverity, AlertType


class MachineType(str, Enum):
    LOW = "L"
    MEDIUM = "M"
    HIGH = "H"


class HealthStatus(str, Enum):
    GOOD = "GOOD"
    WARNING = "WARNING"
    POOR = "POOR"
    CRITICAL = "CRITICAL"


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_json_dict(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class Reading(_FrozenModel):
    machine_type: MachineType = MachineType.MEDIUM
    air_temperature: float
    process_temperature: float
    rotational_speed: float
    torque: float
    tool_wear: float
    failure_status: bool = False

    @field_validator("machine_type", mode="before")
    @classmethod
    def default_machine_type(cls, value: Any) -> Any:
        # Unknown or missing build quality falls back to M
        if isinstance(value, MachineType):
            return value
        if isinstance(value, str) and value.strip().upper() in {"L", "M", "H"}:
            return value.strip().upper()
        return MachineType.MEDIUM

    @property
    def temp_delta(self) -> float:
        """Process minus air temperature, in kelvin."""
        return self.process_temperature - self.air_temperature


class Alert(_FrozenModel):
    type: AlertType
    severity: AlertSeverity
    message: str

    @property
    def is_critical(self) -> bool:
        return self.severity == AlertSeverity.CRITICAL


class Prediction(_FrozenModel):
    health_score: int = Field(ge=0, le=100)
    status: HealthStatus
    failure_status: bool
    predicted_failure: str
    alerts: list[Alert] = Field(default_factory=list)
    power: int
    tool_wear_remaining: float = Field(ge=0.0)
    rul_estimate: str
    temp_differential: str
    inputs: Reading


class MachineRecord(Reading):
    """A persisted reading, as supplied by the query layer."""
    machine_id: str
    timestamp: datetime
    failure_type: str = NO_FAILURE_LABEL
    health_score: int | None = Field(default=None, ge=0, le=100)


class EnrichedRecord(MachineRecord):
    health_score: int = Field(ge=0, le=100)
    status: HealthStatus
    alerts: list[Alert] = Field(default_factory=list)


class FleetSummary(_FrozenModel):
    total: int = 0
    failed: int = 0
    operational: int = 0
    average_health_score: int = 0
    status_breakdown: dict[str, int] = Field(default_factory=dict)
    failure_rate: str = "0.00"
    failure_by_type: dict[str, int] = Field(default_factory=dict)
    averages: dict[str, float] = Field(default_factory=dict)
