"""HTTP route definitions for the service."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Query, status

from app.schemas import ReadingIn, SensorReport, build_reports
from services.registry import build_registry

router = APIRouter()


@router.post(
    "/reports",
    response_model=List[SensorReport],
    summary="Compute per-sensor statistics for a batch of readings.",
)
async def create_report(
    readings: List[ReadingIn],
    numeric: bool = Query(
        False, description="Emit average and median as numbers instead of strings."
    ),
) -> List[SensorReport]:
    registry = build_registry(reading.to_record() for reading in readings)
    return build_reports(registry.report(), numeric=numeric)


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "POST readings to /reports."}
