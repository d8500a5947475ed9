"""Configuration for the demo application."""

import os
from dataclasses import dataclass


@dataclass
class DemoConfig:
    """Settings of the demo user directory."""

    # Simulated backend behaviour
    latency: float = 0.3
    failure_rate: float = 0.0

    # Logging
    debug: bool = False


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def load_demo_config() -> DemoConfig:
    """Load demo configuration from environment variables.

    Reads TYPEAHEAD_LATENCY, TYPEAHEAD_FAILURE_RATE and DEBUG.
    """
    return DemoConfig(
        latency=_env_float("TYPEAHEAD_LATENCY", 0.3),
        failure_rate=_env_float("TYPEAHEAD_FAILURE_RATE", 0.0),
        debug=os.getenv("DEBUG", "false").lower() == "true",
    )
