"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

    # Simulation
    SIMULATION_SEED: int = int(os.getenv("SIMULATION_SEED", "42"))
    SIMULATION_SIZE: int = int(os.getenv("SIMULATION_SIZE", "500"))
    HISTORY_DAYS: int = int(os.getenv("HISTORY_DAYS", "30"))


settings = Settings()
