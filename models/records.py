"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SensorReading:
    """A single temperature reading parsed from the input file."""

    sensor_id: str
    temperature: float
