from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer

from app.schemas import build_reports
from cli.render import echo_failure, echo_usage, render_reports
from logging_config import configure_logging
from services.loader import LoadError, LoadErrorKind, load_readings
from services.registry import build_registry
from settings import get_settings, normalize_log_level

logger = logging.getLogger(__name__)

EXIT_USAGE = 2

EXIT_CODES = {
    LoadErrorKind.file_not_found: 3,
    LoadErrorKind.parse_error: 4,
    LoadErrorKind.missing_field: 5,
}

app = typer.Typer(
    help="Compute average, median and mode temperatures per sensor.",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


def _fail(error: LoadError) -> NoReturn:
    echo_failure(error.message)
    raise typer.Exit(code=EXIT_CODES[error.kind])


def _check_log_level(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    level = normalize_log_level(value)
    if level is None:
        raise typer.BadParameter(f"Unknown log level {value!r}.")
    return level


@app.command()
def main(
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        help="JSON file holding an array of {id, temperature} readings.",
    ),
    numeric: Optional[bool] = typer.Option(
        None,
        "--numeric/--strings",
        help="Emit average and median as numbers instead of two-decimal strings "
        "(defaults to REPORT_NUMERIC_STATS env or strings).",
    ),
    indent: Optional[int] = typer.Option(
        None,
        "--indent",
        min=1,
        help="Pretty-print the report with this indent (defaults to REPORT_INDENT env).",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        callback=_check_log_level,
        help="Logging level for diagnostics on stderr (defaults to LOG_LEVEL env or INFO).",
    ),
) -> None:
    """Read sensor readings and print per-sensor statistics as a JSON array."""
    configure_logging(log_level)
    if input_path is None:
        echo_usage()
        raise typer.Exit(code=EXIT_USAGE)

    result = load_readings(input_path)
    if not result.ok:
        assert result.error is not None
        _fail(result.error)

    if not result.readings:
        logger.warning("Input holds no readings", extra={"input_path": input_path})

    settings = get_settings()
    use_numeric = settings.numeric_stats if numeric is None else numeric
    use_indent = settings.report_indent if indent is None else indent

    registry = build_registry(result.readings)
    reports = build_reports(registry.report(), numeric=use_numeric)
    typer.echo(render_reports(reports, indent=use_indent))
