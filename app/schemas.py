"""Pydantic schemas for readings and reports."""

from __future__ import annotations

from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.records import SensorReading
from services.accumulator import SensorStatistics


class ReadingIn(BaseModel):
    """One element of the input JSON array."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., description="Sensor identifier, compared case-sensitively.")
    temperature: float = Field(..., allow_inf_nan=False)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_numeric_id(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def to_record(self) -> SensorReading:
        return SensorReading(sensor_id=self.id, temperature=self.temperature)


class SensorReport(BaseModel):
    """Per-sensor output record.

    ``average`` and ``median`` are two-decimal strings unless the report was
    built with ``numeric=True``.
    """

    id: str
    average: Union[str, float]
    median: Union[str, float]
    mode: List[float] = Field(default_factory=list)

    @classmethod
    def from_statistics(cls, stats: SensorStatistics, numeric: bool = False) -> "SensorReport":
        if numeric:
            average: Union[str, float] = stats.average
            median: Union[str, float] = stats.median
        else:
            average = f"{stats.average:.2f}"
            median = f"{stats.median:.2f}"
        return cls(id=stats.sensor_id, average=average, median=median, mode=list(stats.modes))


def build_reports(statistics: List[SensorStatistics], numeric: bool = False) -> List[SensorReport]:
    return [SensorReport.from_statistics(stats, numeric=numeric) for stats in statistics]
