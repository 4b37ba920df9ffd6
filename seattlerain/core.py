import logging
import time
from typing import Optional
from . import config
from ._utils import DateLike
from .climate import ClimateTable
from .rain import RainfallReport, summarize_rainfall
from .records import DailyRecord
from .synthetic_rain import RandomSource, generate_rainfall_series

logger = logging.getLogger(__name__)


def fetch_rainfall_data(start_date: DateLike = config.START_DATE,
                        end_date: DateLike = config.END_DATE,
                        table: Optional[ClimateTable] = None,
                        random_source: Optional[RandomSource] = None,
                        seed: Optional[int] = None,
                        latency: float = config.SIMULATED_LATENCY) -> list[DailyRecord]:
    """
    stand-in for a weather service call. waits `latency` seconds, then generates synthetic rainfall
    for Seattle. nothing is requested over the network.

    Args:
        start_date: first day of the series
        end_date: last day of the series
        table: mapping of month number to `MonthlyParameters`. defaults to Seattle
        random_source: source of uniform draws in [0, 1)
        seed: seed for the default random source
        latency: simulated response time in seconds. `0` skips the wait

    Returns:
        list of `DailyRecord` in date order
    """
    assert latency >= 0, "'latency' should not be negative"

    logger.info("fetching rainfall for (%s, %s) from %s to %s",
                config.SEATTLE_LAT, config.SEATTLE_LON, start_date, end_date)
    if latency:
        time.sleep(latency)

    return generate_rainfall_series(start_date, end_date, table=table, random_source=random_source, seed=seed)


def simulate(start_date: DateLike = config.START_DATE,
             end_date: DateLike = config.END_DATE,
             table: Optional[ClimateTable] = None,
             random_source: Optional[RandomSource] = None,
             seed: Optional[int] = None,
             latency: float = 0) -> RainfallReport:
    """
    generate a synthetic daily series and summarize it. see
    [`fetch_rainfall_data()`](#fetch_rainfall_data) and [`summarize_rainfall()`](./rain.html#summarize_rainfall)

    Returns:
        `RainfallReport` for the date range
    """
    data = fetch_rainfall_data(start_date, end_date, table=table, random_source=random_source, seed=seed,
                               latency=latency)
    return summarize_rainfall(data)
