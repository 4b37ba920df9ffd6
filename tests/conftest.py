import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from seattlerain import MonthlyParameters, seattle_climate_table  # noqa: E402


class SequenceSource:
    """random source that replays `values` in a loop"""

    def __init__(self, *values):
        self.values = values
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def zero_source():
    return SequenceSource(0.0)


@pytest.fixture
def dry_source():
    # never below any rainy-day probability in (0, 1]
    return SequenceSource(0.999999)


@pytest.fixture
def april_table():
    return {4: MonthlyParameters(30, 1.0)}


@pytest.fixture
def seattle_table():
    return seattle_climate_table()
