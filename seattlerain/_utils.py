import datetime
from decimal import Decimal, ROUND_HALF_UP
import pandas
from typing import Union
from .config import MONTH_NAMES, N_DIGITS
from .errors import InvalidRecordError

DateLike = Union[str, datetime.date, pandas.Timestamp]


def _to_timestamp(value: DateLike) -> pandas.Timestamp:
    """

    :param value: ISO 8601 date string, `date`, `datetime` or `Timestamp`
    :return: the value normalized to midnight
    """
    try:
        timestamp = pandas.Timestamp(value)
    except (TypeError, ValueError) as err:
        raise InvalidRecordError("'{value}' is not a valid date".format(value=value)) from err

    if pandas.isnull(timestamp):
        raise InvalidRecordError("'{value}' is not a valid date".format(value=value))
    return timestamp.normalize()


def _to_date_string(value: DateLike) -> str:
    if isinstance(value, str):
        try:
            return datetime.date.fromisoformat(value).isoformat()
        except ValueError as err:
            raise InvalidRecordError("'{value}' is not a YYYY-MM-DD date".format(value=value)) from err
    return _to_timestamp(value).strftime("%Y-%m-%d")


def _month_name(year_month: str) -> str:
    """

    :param year_month: year-month key of the form `YYYY-MM`
    :return: full English month name
    """
    return MONTH_NAMES[int(year_month[5:7]) - 1]


def _format_mm(value: float) -> str:
    """format a 1 decimal place amount without a trailing `.0`"""
    return "{value:.1f}".format(value=value).rstrip("0").rstrip(".")


def _round(value: float, n_digits: int = N_DIGITS) -> float:
    """
    round half up on the exact binary value of `value`

    :param value: amount to round
    :param n_digits: number of decimal places
    :return: rounded amount
    """
    return float(Decimal(value).quantize(Decimal(1).scaleb(-n_digits), rounding=ROUND_HALF_UP))
