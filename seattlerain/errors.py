class RainfallError(ValueError):
    """base class for errors raised while generating or summarizing rainfall data"""


class InvalidRangeError(RainfallError):
    """start date falls after end date"""

    def __init__(self, start_date, end_date):
        self.start_date = start_date
        self.end_date = end_date
        super().__init__("'start_date' {start} is after 'end_date' {end}".format(start=start_date, end=end_date))


class MissingParameterError(RainfallError):
    """a month covered by the date range has no climatological parameters"""

    def __init__(self, month: int):
        self.month = month
        super().__init__("no climatological parameters for month {month}".format(month=month))


class InvalidParameterError(RainfallError):
    """a climatological parameter is out of its valid range or malformed"""


class InvalidRecordError(RainfallError):
    """a daily record has a malformed date or a negative rainfall value"""


class EmptyInputError(RainfallError):
    """aggregation was given zero daily records"""

    def __init__(self, message: str = "cannot summarize an empty rainfall series"):
        super().__init__(message)
