"""
# seattlerain

Synthetic daily rainfall for Seattle, April to September 2023, with monthly totals and summary statistics
ready for charting.

## Method

1. For each calendar day in the date range, look up the climatological parameters of its month: the average
    monthly rainfall total and the probability that a day is rainy.
2. Draw a uniform value. The day is dry if it is not below the rainy-day probability.
3. A rainy day gets the *baseline*, the monthly average divided by the expected number of rainy days
    (`days in month x probability`), times a random multiplier between 50% and 200%.
4. With probability 0.08 a rainy day is doubled to model heavy rain.
5. Amounts are rounded to 0.1 mm.

The daily series is then summed by month, in the order months first appear, and summarized: total and average
rainfall, rainiest day, rainiest month, and dry and wet day counts. Ties go to the earliest day or month.

The random source is injectable. Anything with a `random()` method returning floats in [0, 1) works, so a fixed
sequence gives a deterministic series.

## Usage

```python
import seattlerain

report = seattlerain.simulate(seed=42)
report.monthly_frame()
seattlerain.format_statistics(report.stats)
```
"""

from .climate import MonthlyParameters, load_climate_table, seattle_climate_table
from .core import fetch_rainfall_data, simulate
from .errors import (RainfallError, InvalidRangeError, MissingParameterError, InvalidParameterError,
                     InvalidRecordError, EmptyInputError)
from .rain import RainfallReport, RainfallStats, format_statistics, summarize_rainfall
from .records import DailyRecord, MonthlyRecord
from .synthetic_rain import RainGenerator, generate_rainfall_series
