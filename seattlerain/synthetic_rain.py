import logging
import numpy
import pandas
from typing import Optional, Protocol
from . import config
from ._utils import DateLike, _round, _to_timestamp
from .climate import ClimateTable, MonthlyParameters, check_climate_table, seattle_climate_table
from .errors import InvalidRangeError, MissingParameterError
from .records import DailyRecord

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """anything with a `random()` method returning floats in [0, 1) - `numpy.random.Generator`,
    `random.Random` or a fixed sequence in tests"""

    def random(self) -> float:
        ...


class RainGenerator:
    """Generates synthetic daily rainfall from monthly climatological parameters."""

    def __init__(self,
                 table: Optional[ClimateTable] = None,
                 random_source: Optional[RandomSource] = None,
                 seed: Optional[int] = None):
        """
        Args:
            table: mapping of month number to [`MonthlyParameters`](./climate.html). defaults to the Seattle
                April - September climatology
            random_source: source of uniform draws in [0, 1). defaults to `numpy.random.default_rng(seed)`
            seed: seed for the default random source. cannot be combined with `random_source`
        """
        assert random_source is None or seed is None, "pass either 'random_source' or 'seed', not both"

        self.table = seattle_climate_table() if table is None else check_climate_table(table)
        """validated climatological parameter table"""

        self.random_source = numpy.random.default_rng(seed) if random_source is None else random_source
        """the source of uniform draws"""

    def generate(self,
                 start_date: DateLike = config.START_DATE,
                 end_date: DateLike = config.END_DATE) -> list[DailyRecord]:
        """
        generate one record per calendar day between `start_date` and `end_date`, both inclusive.

        each day is independently rainy with the month's rainy-day probability. a rainy day gets the
        expected rainfall per rainy day times a random multiplier between 0.5 and 2, and is occasionally
        doubled to model heavy rain.

        Args:
            start_date: first day of the series
            end_date: last day of the series

        Returns:
            list of [`DailyRecord`](./records.html) in date order
        """
        start, end = _to_timestamp(start_date), _to_timestamp(end_date)
        if start > end:
            raise InvalidRangeError(start_date, end_date)

        dates = pandas.date_range(start, end, freq="D")
        for month in sorted(set(dates.month)):
            if month not in self.table:
                raise MissingParameterError(month)

        data = [DailyRecord(day.strftime("%Y-%m-%d"), self._day_rainfall(self.table[day.month], day.days_in_month))
                for day in dates]

        logger.debug("generated %d days of rainfall from %s to %s", len(data), data[0].date, data[-1].date)
        return data

    def _day_rainfall(self, params: MonthlyParameters, days_in_month: int) -> float:
        """
        :param params: parameters of the day's month
        :param days_in_month: number of days in the day's month
        :return: rainfall in mm rounded to 1 decimal place
        """
        if self.random_source.random() >= params.rainy_day_probability:
            return 0.0

        # expected rainfall per rainy day if the monthly total were spread evenly over the rainy days
        baseline = params.average_rainfall_mm / (days_in_month * params.rainy_day_probability)
        rainfall = baseline * (config.MULTIPLIER_LOW + self.random_source.random() * config.MULTIPLIER_SPAN)

        if self.random_source.random() >= 1 - config.HEAVY_RAIN_PROBABILITY:
            rainfall *= config.HEAVY_RAIN_FACTOR

        return _round(max(float(rainfall), 0.0), config.N_DIGITS)


def generate_rainfall_series(start_date: DateLike = config.START_DATE,
                             end_date: DateLike = config.END_DATE,
                             table: Optional[ClimateTable] = None,
                             random_source: Optional[RandomSource] = None,
                             seed: Optional[int] = None) -> list[DailyRecord]:
    """
    generate synthetic daily rainfall. see [`RainGenerator.generate()`](#RainGenerator.generate)

    Args:
        start_date: first day of the series
        end_date: last day of the series
        table: mapping of month number to `MonthlyParameters`. defaults to Seattle
        random_source: source of uniform draws in [0, 1)
        seed: seed for the default random source

    Returns:
        list of `DailyRecord` in date order
    """
    return RainGenerator(table, random_source, seed).generate(start_date, end_date)
