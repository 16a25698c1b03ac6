"""Routing of readings to per-sensor accumulators."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional

from models.records import SensorReading
from services.accumulator import SensorAccumulator, SensorStatistics

logger = logging.getLogger(__name__)


class AccumulatorRegistry:
    """Maps sensor identifiers to their accumulators.

    Identifiers are compared exactly, so ``"A"`` and ``"a"`` are different
    sensors. Accumulators are created on the first reading for an id and are
    never removed.
    """

    def __init__(self) -> None:
        self._accumulators: Dict[str, SensorAccumulator] = {}

    def __len__(self) -> int:
        return len(self._accumulators)

    def __contains__(self, sensor_id: object) -> bool:
        return sensor_id in self._accumulators

    def __iter__(self) -> Iterator[SensorAccumulator]:
        for sensor_id in self.sensor_ids():
            yield self._accumulators[sensor_id]

    def get(self, sensor_id: str) -> Optional[SensorAccumulator]:
        return self._accumulators.get(sensor_id)

    def sensor_ids(self) -> List[str]:
        return sorted(self._accumulators)

    def record(self, sensor_id: str, value: float) -> None:
        accumulator = self._accumulators.get(sensor_id)
        if accumulator is None:
            accumulator = SensorAccumulator(sensor_id)
            self._accumulators[sensor_id] = accumulator
            logger.debug("Tracking new sensor", extra={"sensor_id": sensor_id})
        accumulator.ingest(value)

    def record_all(self, readings: Iterable[SensorReading]) -> "AccumulatorRegistry":
        for reading in readings:
            self.record(reading.sensor_id, reading.temperature)
        return self

    def report(self) -> List[SensorStatistics]:
        """Statistics for every sensor, ordered by ascending sensor id."""
        return [accumulator.statistics() for accumulator in self]


def build_registry(readings: Iterable[SensorReading]) -> AccumulatorRegistry:
    registry = AccumulatorRegistry().record_all(readings)
    logger.info(
        "Readings ingested",
        extra={
            "sensor_count": len(registry),
            "reading_count": sum(acc.count for acc in registry),
        },
    )
    return registry
