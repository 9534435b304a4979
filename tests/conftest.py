"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the machine health test suite.
"""
import os
from datetime import datetime, timezone

import pytest

# Keep simulated fleets small in tests
os.environ.setdefault("SIMULATION_SIZE", "50")
os.environ.setdefault("HISTORY_DAYS", "7")
os.environ.setdefault("SIMULATION_SEED", "42")


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def nominal_payload() -> dict:
    """Raw JSON body for a healthy medium-quality machine."""
    return {
        "machineType": "M",
        "airTemperature": 300.0,
        "processTemperature": 310.5,
        "rotationalSpeed": 1500,
        "torque": 40.0,
        "toolWear": 100,
    }


@pytest.fixture
def nominal_reading(nominal_payload):
    from src.data.models import Reading
    return Reading(**nominal_payload)


@pytest.fixture
def failed_reading(nominal_payload):
    from src.data.models import Reading
    return Reading(**nominal_payload, failureStatus=True)


@pytest.fixture
def worn_reading(nominal_payload):
    """Tool wear deep in the critical TWF band."""
    from src.data.models import Reading
    return Reading(**{**nominal_payload, "toolWear": 245})


@pytest.fixture
def all_alerts_reading():
    """A reading that trips every anomaly rule at once."""
    from src.data.models import Reading
    return Reading(
        machine_type="L",
        air_temperature=307.0,      # TEMP
        process_temperature=315.0,  # Δ = 8 K, with low speed → HDF
        rotational_speed=1300.0,
        torque=70.0,                # ≈ 9529 W → PWF warning
        tool_wear=250.0,            # TWF critical, wear × torque = 17500 → OSF
    )


@pytest.fixture
def make_record(nominal_payload, now):
    """Factory for persisted records based on the nominal reading."""
    from src.data.models import MachineRecord

    def _make(machine_id: str = "M00001", **overrides):
        data = {**nominal_payload, "machineId": machine_id, "timestamp": now}
        data.update(overrides)
        return MachineRecord(**data)

    return _make
