import math
from dataclasses import dataclass
from typing import Mapping, Sequence, Union
from ._utils import _to_date_string
from .errors import InvalidRecordError


@dataclass(frozen=True)
class DailyRecord:
    """Rainfall on one calendar day."""

    date: str
    """ISO 8601 date - `YYYY-MM-DD`"""

    rainfall: float
    """rainfall in mm, rounded to 1 decimal place"""

    def __post_init__(self):
        if not isinstance(self.date, str) or _to_date_string(self.date) != self.date:
            raise InvalidRecordError("{date!r} is not a YYYY-MM-DD date".format(date=self.date))
        if (isinstance(self.rainfall, bool) or not isinstance(self.rainfall, (int, float))
                or not math.isfinite(self.rainfall) or self.rainfall < 0):
            raise InvalidRecordError(
                "rainfall on {date} should be a non-negative number, got {r!r}".format(
                    date=self.date, r=self.rainfall))

    @classmethod
    def from_value(cls, value: Union["DailyRecord", Mapping, Sequence]) -> "DailyRecord":
        """
        build a record from another record, a mapping with `date` and `rainfall` keys or a
        `(date, rainfall)` pair
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            try:
                date, rainfall = value["date"], value["rainfall"]
            except KeyError as err:
                raise InvalidRecordError("record is missing {k}".format(k=err)) from err
        elif isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
            date, rainfall = value
        else:
            raise InvalidRecordError("'{value!r}' is not a valid daily record".format(value=value))

        try:
            rainfall = float(rainfall)
        except (TypeError, ValueError) as err:
            raise InvalidRecordError("rainfall on {date} is not a number".format(date=date)) from err

        return cls(_to_date_string(date), rainfall)


@dataclass(frozen=True)
class MonthlyRecord:
    """Rainfall total for one calendar month."""

    month: str
    """full English month name"""

    rainfall: float
    """sum of daily rainfall in the month in mm, rounded to 1 decimal place"""
