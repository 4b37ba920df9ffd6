import logging
import warnings
import pandas
from dataclasses import dataclass
from operator import attrgetter
from typing import Iterable, Union, Mapping, Sequence
from ._utils import _format_mm, _month_name, _round
from .errors import EmptyInputError
from .records import DailyRecord, MonthlyRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RainfallStats:
    """Summary statistics of a daily rainfall series."""

    total_rainfall: float
    """sum of daily rainfall in mm, rounded to 1 decimal place"""

    average_rainfall: float
    """mean daily rainfall in mm, rounded to 1 decimal place"""

    rainiest_day: DailyRecord
    """the day with the most rainfall. the earliest one wins a tie"""

    rainiest_month: MonthlyRecord
    """the month with the most rainfall. the earliest one wins a tie"""

    dry_days: int
    """number of days with no rainfall"""

    wet_days: int
    """number of days with some rainfall"""

    def as_dict(self) -> dict:
        """statistics keyed the way the rendering layer expects them"""
        return {
            "totalRainfall": self.total_rainfall,
            "avgRainfall": self.average_rainfall,
            "rainiestDay": {"date": self.rainiest_day.date, "rainfall": self.rainiest_day.rainfall},
            "rainiestMonth": {"month": self.rainiest_month.month, "rainfall": self.rainiest_month.rainfall},
            "dryDays": self.dry_days,
            "wetDays": self.wet_days,
        }


@dataclass(frozen=True)
class RainfallReport:
    """Daily series, monthly totals and statistics handed to the chart and statistics collaborators."""

    daily_data: tuple[DailyRecord, ...]
    monthly_data: tuple[MonthlyRecord, ...]
    stats: RainfallStats

    def daily_frame(self) -> pandas.DataFrame:
        """`DataFrame` with `date` and `rainfall` columns, one row per day"""
        return pandas.DataFrame({"date": [day.date for day in self.daily_data],
                                 "rainfall": [day.rainfall for day in self.daily_data]})

    def monthly_frame(self) -> pandas.DataFrame:
        """`DataFrame` with `month` and `rainfall` columns, one row per month"""
        return pandas.DataFrame({"month": [month.month for month in self.monthly_data],
                                 "rainfall": [month.rainfall for month in self.monthly_data]})


def summarize_rainfall(data: Iterable[Union[DailyRecord, Mapping, Sequence]]) -> RainfallReport:
    """
    aggregate a daily rainfall series into monthly totals and summary statistics.

    Args:
        data: daily records in date order. `DailyRecord`, mappings with `date` and `rainfall` keys or
            `(date, rainfall)` pairs

    Returns:
        [`RainfallReport`](#RainfallReport) with a copy of the daily series, the monthly totals in order of
            first appearance, and the statistics
    """
    daily_data = tuple(DailyRecord.from_value(day) for day in data)
    if not daily_data:
        raise EmptyInputError()

    if any(later.date <= earlier.date for earlier, later in zip(daily_data, daily_data[1:])):
        warnings.warn("daily records are not in strictly increasing date order")

    # keyed by YYYY-MM, kept in the order each month is first seen
    monthly_totals = {}
    for day in daily_data:
        year_month = day.date[:7]
        monthly_totals[year_month] = monthly_totals.get(year_month, 0) + day.rainfall

    monthly_data = tuple(MonthlyRecord(_month_name(year_month), _round(total))
                         for year_month, total in monthly_totals.items())

    total_rainfall = sum(day.rainfall for day in daily_data)
    dry_days = sum(1 for day in daily_data if day.rainfall == 0)

    # sorted() is stable with reverse=True, so ties keep their original order
    stats = RainfallStats(total_rainfall=_round(total_rainfall),
                          average_rainfall=_round(total_rainfall / len(daily_data)),
                          rainiest_day=sorted(daily_data, key=attrgetter("rainfall"), reverse=True)[0],
                          rainiest_month=sorted(monthly_data, key=attrgetter("rainfall"), reverse=True)[0],
                          dry_days=dry_days,
                          wet_days=len(daily_data) - dry_days)

    logger.debug("summarized %d days into %d months", len(daily_data), len(monthly_data))
    return RainfallReport(daily_data=daily_data, monthly_data=monthly_data, stats=stats)


def format_statistics(stats: RainfallStats) -> dict[str, str]:
    """
    text for the statistics panel

    :param stats: statistics from `summarize_rainfall`
    :return: display strings keyed by statistic name
    """
    return {
        "total_rainfall": "{v} mm".format(v=_format_mm(stats.total_rainfall)),
        "average_rainfall": "{v} mm".format(v=_format_mm(stats.average_rainfall)),
        "rainiest_day": "{d} ({v} mm)".format(d=stats.rainiest_day.date, v=_format_mm(stats.rainiest_day.rainfall)),
        "rainiest_month": "{m} ({v} mm)".format(m=stats.rainiest_month.month,
                                                 v=_format_mm(stats.rainiest_month.rainfall)),
        "dry_days": "{n} days".format(n=stats.dry_days),
        "wet_days": "{n} days".format(n=stats.wet_days),
    }
