"""
Unit tests for synthetic rainfall generation.
"""

import random

import numpy as np
import pandas as pd
import pytest

from seattlerain import (DailyRecord, InvalidParameterError, InvalidRangeError, MissingParameterError,
                         MonthlyParameters, RainGenerator, generate_rainfall_series)
from seattlerain.config import END_DATE, START_DATE

from conftest import SequenceSource


class TestScenarios:
    """Deterministic scenarios with a fixed random source."""

    def test_always_rainy_minimum_multiplier(self, april_table, zero_source):
        """Source pinned at 0.0: always rainy, minimum multiplier, no heavy rain."""
        data = generate_rainfall_series("2023-04-01", "2023-04-03", table=april_table, random_source=zero_source)

        assert data == [DailyRecord("2023-04-01", 0.5),
                        DailyRecord("2023-04-02", 0.5),
                        DailyRecord("2023-04-03", 0.5)]

    def test_never_rainy(self, seattle_table, dry_source):
        """Draws at or above every probability give an all-dry series."""
        data = generate_rainfall_series(table=seattle_table, random_source=dry_source)

        assert all(day.rainfall == 0 for day in data)
        # one draw per dry day
        assert dry_source.calls == len(data)

    def test_single_day(self, april_table, zero_source):
        """Equal start and end dates give exactly one record."""
        data = generate_rainfall_series("2023-04-15", "2023-04-15", table=april_table, random_source=zero_source)

        assert data == [DailyRecord("2023-04-15", 0.5)]

    def test_heavy_rain_doubles(self, april_table):
        """A high third draw doubles the rainfall."""
        source = SequenceSource(0.0, 0.0, 0.95)
        data = generate_rainfall_series("2023-04-01", "2023-04-01", table=april_table, random_source=source)

        assert data[0].rainfall == 1.0

    def test_maximum_multiplier_approaches_two(self, april_table):
        """The multiplier stays below 2 times the baseline."""
        source = SequenceSource(0.0, 0.999999, 0.0)
        data = generate_rainfall_series("2023-04-01", "2023-04-01", table=april_table, random_source=source)

        assert data[0].rainfall == 2.0

    def test_baseline_uses_days_in_month(self):
        """A 31-day month divides the average by 31 x probability."""
        table = {5: MonthlyParameters(62, 0.5)}
        source = SequenceSource(0.0, 0.0, 0.0)
        data = generate_rainfall_series("2023-05-01", "2023-05-01", table=table, random_source=source)

        # 62 / (31 * 0.5) * 0.5
        assert data[0].rainfall == 2.0

    def test_half_rounds_up(self, april_table):
        """A rainy day of exactly 1.25 mm rounds up to 1.3."""
        source = SequenceSource(0.0, 0.5, 0.0)
        data = generate_rainfall_series("2023-04-01", "2023-04-01", table=april_table, random_source=source)

        assert data == [DailyRecord("2023-04-01", 1.3)]

    def test_dry_day_uses_one_draw(self):
        """Draws for a dry day stop after the rainy-day check."""
        table = {4: MonthlyParameters(30, 0.5)}
        source = SequenceSource(0.7, 0.0, 0.0, 0.0)
        data = generate_rainfall_series("2023-04-01", "2023-04-02", table=table, random_source=source)

        assert [day.rainfall for day in data] == [0.0, 1.0]
        assert source.calls == 4


class TestSeries:
    """Properties of generated series."""

    def test_default_window(self):
        """The default window covers April 1 to September 30, 2023."""
        data = generate_rainfall_series(seed=1)

        assert len(data) == 183
        assert data[0].date == START_DATE
        assert data[-1].date == END_DATE

    def test_one_record_per_day(self):
        data = generate_rainfall_series("2023-06-20", "2023-07-10", seed=7)
        expected = pd.date_range("2023-06-20", "2023-07-10").strftime("%Y-%m-%d").tolist()

        assert [day.date for day in data] == expected

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_rainfall_non_negative_and_rounded(self, seed):
        data = generate_rainfall_series(seed=seed)

        assert all(day.rainfall >= 0 for day in data)
        assert all(round(day.rainfall, 1) == day.rainfall for day in data)

    def test_seed_is_reproducible(self):
        assert generate_rainfall_series(seed=42) == generate_rainfall_series(seed=42)

    def test_accepts_stdlib_random(self):
        """`random.Random` is a valid random source."""
        data = generate_rainfall_series("2023-08-01", "2023-08-31", random_source=random.Random(3))

        assert len(data) == 31

    def test_accepts_date_objects(self, april_table, zero_source):
        data = generate_rainfall_series(pd.Timestamp("2023-04-01"), pd.Timestamp("2023-04-02").date(),
                                        table=april_table, random_source=zero_source)

        assert [day.date for day in data] == ["2023-04-01", "2023-04-02"]

    def test_generator_keeps_source(self):
        source = np.random.default_rng(5)
        generator = RainGenerator(random_source=source)

        assert generator.random_source is source
        assert len(generator.generate("2023-09-01", "2023-09-30")) == 30


class TestErrors:
    """Validation before generation."""

    def test_start_after_end(self, zero_source):
        with pytest.raises(InvalidRangeError):
            generate_rainfall_series("2023-04-03", "2023-04-01", random_source=zero_source)

        assert zero_source.calls == 0

    def test_missing_month(self, april_table, zero_source):
        with pytest.raises(MissingParameterError) as err:
            generate_rainfall_series("2023-04-29", "2023-05-02", table=april_table, random_source=zero_source)

        assert err.value.month == 5
        assert zero_source.calls == 0

    def test_outside_seattle_window(self):
        with pytest.raises(MissingParameterError) as err:
            generate_rainfall_series("2023-03-31", "2023-04-02", seed=0)

        assert err.value.month == 3

    @pytest.mark.parametrize("prob", [0, -0.1, 1.01, float("nan")])
    def test_invalid_probability(self, prob):
        with pytest.raises(InvalidParameterError):
            MonthlyParameters(30, prob)

    def test_negative_average(self):
        with pytest.raises(InvalidParameterError):
            MonthlyParameters(-1, 0.5)

    @pytest.mark.parametrize("avg, prob", [(float("inf"), 0.5), (True, 0.5), (30, True)])
    def test_non_numeric_or_infinite(self, avg, prob):
        with pytest.raises(InvalidParameterError):
            MonthlyParameters(avg, prob)

    def test_invalid_month_key(self):
        with pytest.raises(InvalidParameterError):
            RainGenerator(table={13: MonthlyParameters(30, 0.5)})

    def test_seed_and_source(self, zero_source):
        with pytest.raises(AssertionError):
            RainGenerator(random_source=zero_source, seed=1)
