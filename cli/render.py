from __future__ import annotations

import json
from typing import Iterable, Optional

import typer

from app.schemas import SensorReport

USAGE_LINES = (
    "Sensor Temperature Statistics",
    "================ Usage is ===========================",
    "          sensor-stats -i <input file>",
)


def echo_usage() -> None:
    typer.secho(USAGE_LINES[0], bold=True)
    for line in USAGE_LINES[1:]:
        typer.echo(line)


def echo_failure(message: str) -> None:
    typer.secho(f"KO: {message}", fg=typer.colors.RED, err=True)


def render_reports(reports: Iterable[SensorReport], indent: Optional[int] = None) -> str:
    payload = [report.model_dump(mode="json") for report in reports]
    if indent is None:
        return json.dumps(payload, separators=(",", ":"))
    return json.dumps(payload, indent=indent)
