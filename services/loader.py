"""Loading sensor readings from a JSON file."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional

from pydantic import ValidationError

from app.schemas import ReadingIn
from models.records import SensorReading

logger = logging.getLogger(__name__)


class LoadErrorKind(str, Enum):
    """Reasons a reading file could not be turned into readings."""

    file_not_found = "file_not_found"
    parse_error = "parse_error"
    missing_field = "missing_field"


@dataclass(frozen=True)
class LoadError:
    kind: LoadErrorKind
    message: str


@dataclass
class LoadResult:
    """Either the parsed readings or the error that stopped loading."""

    readings: List[SensorReading] = field(default_factory=list)
    error: Optional[LoadError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _failure(kind: LoadErrorKind, message: str, **context: Any) -> LoadResult:
    logger.warning(message, extra={"error_kind": kind.value, **context})
    return LoadResult(error=LoadError(kind=kind, message=message))


def parse_readings(payload: Any) -> LoadResult:
    """Validate an already decoded JSON document into readings."""
    if not isinstance(payload, list):
        return _failure(
            LoadErrorKind.parse_error,
            "Expected a JSON array of readings.",
            reason=type(payload).__name__,
        )

    readings: list[SensorReading] = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            return _failure(
                LoadErrorKind.parse_error,
                f"Record {index} is not a JSON object.",
                record_index=index,
            )
        try:
            reading = ReadingIn.model_validate(item)
        except ValidationError as exc:
            missing = [
                str(error["loc"][0]) for error in exc.errors() if error["type"] == "missing"
            ]
            if missing:
                return _failure(
                    LoadErrorKind.missing_field,
                    f"Record {index} is missing required field(s): {', '.join(missing)}.",
                    record_index=index,
                )
            first = exc.errors()[0]
            field_name = first["loc"][0] if first["loc"] else "record"
            return _failure(
                LoadErrorKind.parse_error,
                f"Record {index} has an invalid {field_name}: {first['msg']}.",
                record_index=index,
                reason=first["type"],
            )
        readings.append(reading.to_record())

    return LoadResult(readings=readings)


def load_readings(path: Path) -> LoadResult:
    """Read ``path`` and parse it into readings.

    Input problems are reported through the returned result rather than
    raised, so callers decide how each kind is surfaced.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return _failure(
            LoadErrorKind.file_not_found,
            f"Input file {str(path)!r} does not exist.",
            input_path=path,
        )
    except OSError as exc:
        return _failure(
            LoadErrorKind.file_not_found,
            f"Input file {str(path)!r} could not be read: {exc.__class__.__name__}.",
            input_path=path,
        )
    except UnicodeDecodeError:
        return _failure(
            LoadErrorKind.parse_error,
            f"Input file {str(path)!r} is not UTF-8 encoded text.",
            input_path=path,
        )

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        return _failure(
            LoadErrorKind.parse_error,
            f"Input file {str(path)!r} is not valid JSON: {exc.msg} "
            f"(line {exc.lineno}, column {exc.colno}).",
            input_path=path,
        )
    except RecursionError:
        return _failure(
            LoadErrorKind.parse_error,
            f"Input file {str(path)!r} is nested too deeply to decode.",
            input_path=path,
        )

    result = parse_readings(payload)
    if result.ok:
        logger.info(
            "Loaded readings",
            extra={"input_path": path, "reading_count": len(result.readings)},
        )
    return result
