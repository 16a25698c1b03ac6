"""Unit tests for the per-sensor accumulator."""

from __future__ import annotations

from itertools import permutations

import pytest

from services.accumulator import NoReadingsError, SensorAccumulator, SensorStatistics, round2


def _accumulator(*values: float, sensor_id: str = "sensor-a") -> SensorAccumulator:
    accumulator = SensorAccumulator(sensor_id)
    for value in values:
        accumulator.ingest(value)
    return accumulator


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (2.5, 2.5),
        (0.125, 0.13),
        (-0.125, -0.12),
        (1.0 / 3.0, 0.33),
        (-2.0, -2.0),
        (0.0, 0.0),
    ],
)
def test_round2_rounds_halves_toward_positive_infinity(value: float, expected: float) -> None:
    assert round2(value) == expected


def test_ingest_tracks_running_total_and_arrival_order() -> None:
    accumulator = _accumulator(3.0, 1.0, 2.0)

    assert accumulator.count == 3
    assert accumulator.total == 6.0
    assert accumulator.values == (3.0, 1.0, 2.0)


def test_mean_is_rounded_to_two_decimals() -> None:
    assert _accumulator(10.0, 20.0, 30.0).mean() == 20.0
    assert _accumulator(1.0, 2.0).mean() == 1.5
    assert _accumulator(1.0, 1.0, 2.0).mean() == 1.33
    assert _accumulator(0.1, 0.2).mean() == 0.15


def test_median_odd_count_uses_middle_element() -> None:
    assert _accumulator(3.0, 1.0, 2.0).median() == 2.0


def test_median_even_count_averages_central_pair() -> None:
    assert _accumulator(4.0, 1.0, 3.0, 2.0).median() == 2.5


def test_median_single_reading() -> None:
    assert _accumulator(7.25).median() == 7.25


def test_late_readings_invalidate_sorted_order() -> None:
    accumulator = _accumulator(1.0, 2.0, 3.0)
    assert accumulator.median() == 2.0
    assert accumulator.modes() == []

    accumulator.ingest(10.0)
    accumulator.ingest(0.5)
    accumulator.ingest(0.5)

    assert accumulator.median() == 1.5
    assert accumulator.modes() == [0.5]
    assert accumulator.values == (1.0, 2.0, 3.0, 10.0, 0.5, 0.5)


def test_modes_empty_when_nothing_repeats() -> None:
    assert _accumulator(1.0, 2.0, 3.0).modes() == []


def test_modes_include_every_tied_run() -> None:
    assert _accumulator(3.0, 1.0, 2.0, 1.0, 3.0).modes() == [1.0, 3.0]


def test_modes_report_one_value_per_longest_run() -> None:
    assert _accumulator(1.0, 1.0, 1.0, 2.0, 2.0).modes() == [1.0]


def test_longer_later_run_supersedes_shorter_runs() -> None:
    assert _accumulator(1.0, 1.0, 2.0, 2.0, 2.0).modes() == [2.0]
    assert _accumulator(7.0, 7.0, 7.0, 2.0, 2.0, 5.0, 5.0, 5.0).modes() == [5.0, 7.0]


def test_negative_temperatures() -> None:
    accumulator = _accumulator(-1.5, -3.0, -1.5)

    assert accumulator.mean() == -2.0
    assert accumulator.median() == -1.5
    assert accumulator.modes() == [-1.5]


def test_statistics_are_independent_of_arrival_order() -> None:
    values = (5.5, 1.0, 1.0, 3.25, 5.5, 2.0)
    expected = _accumulator(*values).statistics()

    for ordering in permutations(values):
        assert _accumulator(*ordering).statistics() == expected


def test_statistics_bundle_all_three_measures() -> None:
    stats = _accumulator(10.0, 20.0, 20.0, sensor_id="fridge-1").statistics()

    assert stats == SensorStatistics(
        sensor_id="fridge-1", average=16.67, median=20.0, modes=[20.0]
    )


@pytest.mark.parametrize("query", ["mean", "median", "modes", "statistics"])
def test_queries_without_readings_raise(query: str) -> None:
    accumulator = SensorAccumulator("empty")

    with pytest.raises(NoReadingsError) as excinfo:
        getattr(accumulator, query)()

    assert excinfo.value.sensor_id == "empty"
    assert isinstance(excinfo.value, ValueError)


def test_round2_leaves_values_too_large_to_scale_unchanged() -> None:
    assert round2(1e307) == 1e307
    assert round2(-1.7e308) == -1.7e308


def test_huge_readings_do_not_overflow() -> None:
    accumulator = _accumulator(1e307)
    assert accumulator.mean() == 1e307

    accumulator = _accumulator(1.7e308, 1.7e308)
    assert accumulator.mean() == 1.7e308
    assert accumulator.median() == 1.7e308
    assert accumulator.modes() == [1.7e308]


def test_mean_recovers_after_running_total_overflows() -> None:
    accumulator = _accumulator(1.7e308, 1.7e308, -1.7e308)

    assert accumulator.mean() == pytest.approx(1.7e308 / 3)
    assert accumulator.median() == 1.7e308
