# config.py
"""
Defaults for simulating Seattle rainfall.

The monthly averages and rainy-day probabilities are Seattle climatology for the
April to September window. The generation constants shape the day-level variation
around those averages.
"""

SEATTLE_LAT = 47.6062
SEATTLE_LON = -122.3321

START_DATE = "2023-04-01"
END_DATE = "2023-09-30"

# average rainfall total by month (mm)
MONTHLY_AVERAGES = {
    4: 74.7,
    5: 48.8,
    6: 40.9,
    7: 17.5,
    8: 23.6,
    9: 38.9,
}

# chance that any given day of the month is rainy
RAINY_DAY_PROBABILITY = {
    4: 0.5,
    5: 0.4,
    6: 0.33,
    7: 0.2,
    8: 0.25,
    9: 0.35,
}

# rainy-day amount is the per-rainy-day baseline times a multiplier in
# [MULTIPLIER_LOW, MULTIPLIER_LOW + MULTIPLIER_SPAN)
MULTIPLIER_LOW = 0.5
MULTIPLIER_SPAN = 1.5

HEAVY_RAIN_PROBABILITY = 0.08
HEAVY_RAIN_FACTOR = 2

# seconds
SIMULATED_LATENCY = 1.5

N_DIGITS = 1

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]
