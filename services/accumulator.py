"""Per-sensor streaming statistics."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List


def round2(value: float) -> float:
    """Round to two decimals, halves going toward positive infinity.

    Values too large to scale are already integral and come back unchanged.
    """
    scaled = value * 100
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / 100


class NoReadingsError(ValueError):
    """Raised when statistics are requested for a sensor without readings."""

    def __init__(self, sensor_id: str) -> None:
        super().__init__(f"Sensor {sensor_id!r} has no readings.")
        self.sensor_id = sensor_id


@dataclass(frozen=True)
class SensorStatistics:
    """Derived statistics for one sensor."""

    sensor_id: str
    average: float
    median: float
    modes: List[float] = field(default_factory=list)


class SensorAccumulator:
    """Holds one sensor's readings and derives mean, median and modes.

    The running total keeps ``mean`` constant time. Median and modes need the
    readings in ascending order; the sorted copy is rebuilt lazily whenever a
    reading arrived since the last sort.
    """

    def __init__(self, sensor_id: str) -> None:
        self.sensor_id = sensor_id
        self._values: List[float] = []
        self._total = 0.0
        self._sorted: List[float] = []
        self._dirty = False

    @property
    def count(self) -> int:
        return len(self._values)

    @property
    def total(self) -> float:
        return self._total

    @property
    def values(self) -> tuple[float, ...]:
        """Readings in arrival order."""
        return tuple(self._values)

    def ingest(self, value: float) -> None:
        self._values.append(value)
        self._total += value
        self._dirty = True

    def mean(self) -> float:
        self._require_readings()
        count = len(self._values)
        average = self._total / count
        if not math.isfinite(average):
            # running total overflowed
            average = math.fsum(value / count for value in self._values)
        return round2(average)

    def median(self) -> float:
        ordered = self._ordered()
        n = len(ordered)
        if n % 2:
            middle = ordered[n // 2]
        else:
            low, high = ordered[(n - 1) // 2], ordered[n // 2]
            middle = (low + high) / 2
            if not math.isfinite(middle):
                middle = low / 2 + high / 2
        return round2(middle)

    def modes(self) -> List[float]:
        """Return one value per most frequent run, ascending.

        Values seen only once never count as a mode, so a sensor whose
        readings are all distinct has no modes.
        """
        ordered = self._ordered()
        runs_by_length: Dict[int, List[float]] = {}
        max_length = 2
        index = 0
        while index < len(ordered):
            value = ordered[index]
            end = index + 1
            while end < len(ordered) and ordered[end] == value:
                end += 1
            length = end - index
            if length >= max_length:
                max_length = length
                runs_by_length.setdefault(length, []).append(value)
            index = end
        return runs_by_length.get(max_length, [])

    def statistics(self) -> SensorStatistics:
        return SensorStatistics(
            sensor_id=self.sensor_id,
            average=self.mean(),
            median=self.median(),
            modes=self.modes(),
        )

    def _ordered(self) -> List[float]:
        self._require_readings()
        if self._dirty:
            self._sorted = sorted(self._values)
            self._dirty = False
        return self._sorted

    def _require_readings(self) -> None:
        if not self._values:
            raise NoReadingsError(self.sensor_id)
