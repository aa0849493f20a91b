# tests/test_dates/conftest.py

"""
Shared fixtures for calendar tests.

Month lengths are spelled out here by hand so the tests never derive their
expectations from the code under test.
"""

import pytest


COMMON_LENGTHS = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
LEAP_LENGTHS = [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def expected_dates(lengths):
    """List of (month, day) for every ordinal day, index 0 = day 1."""
    return [(month, day)
            for month, length in enumerate(lengths, start=1)
            for day in range(1, length + 1)]


@pytest.fixture
def common_dates():
    """All 365 (month, day) pairs of a common year."""
    return expected_dates(COMMON_LENGTHS)


@pytest.fixture
def leap_dates():
    """All 366 (month, day) pairs of a leap year."""
    return expected_dates(LEAP_LENGTHS)


@pytest.fixture(params=[
    (None, COMMON_LENGTHS),
    (2023, COMMON_LENGTHS),
    (1900, COMMON_LENGTHS),
    (2004, LEAP_LENGTHS),
    (2000, LEAP_LENGTHS),
], ids=["no-year", "2023", "1900", "2004", "2000"])
def year_kind(request):
    """(year, month lengths) for each year kind the resolver distinguishes."""
    return request.param
