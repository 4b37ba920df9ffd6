import math
import toml
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Union
from .config import MONTHLY_AVERAGES, RAINY_DAY_PROBABILITY
from .errors import InvalidParameterError


@dataclass(frozen=True)
class MonthlyParameters:
    """Climatological parameters for one calendar month."""

    average_rainfall_mm: float
    """average rainfall total for the month in mm"""

    rainy_day_probability: float
    """probability that any given day in the month is rainy. must be in (0, 1]"""

    def __post_init__(self):
        avg, prob = self.average_rainfall_mm, self.rainy_day_probability
        if isinstance(avg, bool) or not isinstance(avg, (int, float)) or not math.isfinite(avg) or avg < 0:
            raise InvalidParameterError(
                "'average_rainfall_mm' should be a non-negative number, got {avg!r}".format(avg=avg))
        if isinstance(prob, bool) or not isinstance(prob, (int, float)) or not 0 < prob <= 1:
            raise InvalidParameterError(
                "'rainy_day_probability' should be in (0, 1], got {prob!r}".format(prob=prob))


ClimateTable = Mapping[int, MonthlyParameters]


def seattle_climate_table() -> dict[int, MonthlyParameters]:
    """
    Seattle climatology for April through September.

    Returns:
        `dict` mapping month number to [`MonthlyParameters`](#MonthlyParameters)
    """
    return {month: MonthlyParameters(MONTHLY_AVERAGES[month], RAINY_DAY_PROBABILITY[month])
            for month in MONTHLY_AVERAGES}


def check_climate_table(table: ClimateTable) -> dict[int, MonthlyParameters]:
    """
    validate a climatological parameter table

    :param table: mapping of month number (1-12) to `MonthlyParameters`
    :return: a copy of the table with `int` keys
    """
    checked = {}
    for month, params in table.items():
        if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
            raise InvalidParameterError("month keys should be integers 1-12, got {m!r}".format(m=month))
        if not isinstance(params, MonthlyParameters):
            raise InvalidParameterError(
                "parameters for month {m} should be 'MonthlyParameters', got {t}".format(
                    m=month, t=type(params).__name__))
        checked[month] = params
    return checked


def load_climate_table(path: Union[str, Path]) -> dict[int, MonthlyParameters]:
    """
    load a climatological parameter table from a toml file. every month is its own table:

    ```toml
    [4]
    average_rainfall_mm = 74.7
    rainy_day_probability = 0.5
    ```

    Args:
        path: path to the toml file

    Returns:
        `dict` mapping month number to [`MonthlyParameters`](#MonthlyParameters)
    """
    try:
        info = toml.load(path)
    except toml.TomlDecodeError as err:
        raise InvalidParameterError("'{path}' is not valid toml: {err}".format(path=path, err=err)) from err

    table = {}
    for key, values in info.items():
        try:
            month = int(key)
        except ValueError as err:
            raise InvalidParameterError("month keys should be integers 1-12, got {k!r}".format(k=key)) from err

        if not isinstance(values, dict):
            raise InvalidParameterError("month {m} should be a table".format(m=month))

        try:
            table[month] = MonthlyParameters(values["average_rainfall_mm"], values["rainy_day_probability"])
        except KeyError as err:
            raise InvalidParameterError("month {m} is missing {k}".format(m=month, k=err)) from err

    return check_climate_table(table)
