"""
Shared pytest fixtures for date range tests.
"""

import pytest

from datespan import Continue, Date, date_range
from datespan.conventions import registry


@pytest.fixture(autouse=True)
def restore_default_calendar():
    """Reset the module-level default calendar after each test."""
    original = registry.get_default_calendar()
    yield
    registry.set_default_calendar(original)


@pytest.fixture
def jan_1_to_5():
    """Provide 2020-01-01..2020-01-05 with step 1."""
    return date_range(Date(2020, 1, 1), Date(2020, 1, 5))


@pytest.fixture
def sample_ranges():
    """Provide ranges covering both directions, several steps and empty cases."""
    return [
        date_range(Date(2020, 1, 1), Date(2020, 1, 5), 1),
        date_range(Date(2020, 1, 1), Date(2020, 1, 5), 2),
        date_range(Date(2020, 1, 1), Date(2020, 1, 6), 2),
        date_range(Date(2020, 1, 5), Date(2020, 1, 1), -1),
        date_range(Date(2020, 1, 6), Date(2020, 1, 1), -2),
        date_range(Date(2020, 1, 5), Date(2020, 1, 1), 1),
        date_range(Date(2020, 1, 1), Date(2020, 1, 5), -3),
        date_range(Date(2019, 12, 25), Date(2020, 3, 2), 7),
        date_range(Date(2020, 1, 1), Date(2020, 1, 1), 5),
        date_range(Date(2020, 2, 28), Date(2020, 3, 1), 1),
    ]


@pytest.fixture
def drain():
    """Provide a function collecting every element by continuing after each one."""

    def collect(item, acc):
        return Continue(acc + [item])

    def _drain(enumerable):
        return enumerable.reduce(Continue([]), collect).acc

    return _drain
