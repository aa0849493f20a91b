# tests/test_dates/test_resolver.py

import pytest
import numpy as np

from doykit.config import DoyConfig
from doykit.dates.resolver import (
    resolve_date_of_year,
    date_of_year,
    ordinal_day_of,
    year_tables,
)
from doykit.dates.structures import DateOfYear
from doykit.validation.errors import (
    ErrorKind,
    InvalidArgumentError,
    MissingArgumentError,
    OutOfRangeError,
    InternalInconsistencyError,
)


class TestResolveDateOfYear:
    """Tests for resolve_date_of_year."""

    # ========== Concrete Scenarios ==========

    @pytest.mark.parametrize("ordinal_day,year,expected", [
        (1, None, (1, 1)),
        (365, None, (12, 31)),
        (60, None, (3, 1)),
        (60, 2023, (3, 1)),
        (60, 2004, (2, 29)),
        (59, 2004, (2, 28)),
        (61, 2004, (3, 1)),
        (366, 2000, (12, 31)),
        (365, 2000, (12, 30)),
        (32, None, (2, 1)),
        (256, None, (9, 13)),
        (256, 2024, (9, 12)),
    ])
    def test_scenarios(self, ordinal_day, year, expected):
        result = resolve_date_of_year(ordinal_day, year)
        assert result.ok
        assert result.error is None
        assert result.as_tuple() == expected

    def test_returns_dateofyear(self):
        result = resolve_date_of_year(1)
        assert isinstance(result, DateOfYear)
        assert result.kind is None

    def test_every_day_common(self, common_dates):
        """Every day of a year without a stated year resolves as a common year."""
        for ordinal_day, expected in enumerate(common_dates, start=1):
            assert resolve_date_of_year(ordinal_day).as_tuple() == expected

    def test_every_day_leap(self, leap_dates):
        for ordinal_day, expected in enumerate(leap_dates, start=1):
            assert resolve_date_of_year(ordinal_day, year=2024).as_tuple() == expected

    # ========== Boundaries ==========

    def test_month_boundaries(self, year_kind):
        """Cumulative totals are the last day of a month; the next day starts the next month."""
        year, lengths = year_kind
        total = 0
        for month, length in enumerate(lengths, start=1):
            total += length
            assert resolve_date_of_year(total, year).as_tuple() == (month, length)
            if month < 12:
                assert resolve_date_of_year(total + 1, year).as_tuple() == (month + 1, 1)

    def test_monotonic(self, year_kind):
        year, lengths = year_kind
        resolved = [resolve_date_of_year(d, year).as_tuple() for d in range(1, sum(lengths) + 1)]
        assert all(a < b for a, b in zip(resolved, resolved[1:]))

    def test_day_within_month_length(self, year_kind):
        year, lengths = year_kind
        for d in range(1, sum(lengths) + 1):
            month, day = resolve_date_of_year(d, year).as_tuple()
            assert 1 <= day <= lengths[month - 1]

    # ========== Failures ==========

    @pytest.mark.parametrize("ordinal_day,year", [
        (366, None),
        (366, 2023),
        (366, 1900),
        (367, 2004),
        (0, None),
        (-5, None),
        (0, 2004),
    ])
    def test_out_of_range(self, ordinal_day, year):
        result = resolve_date_of_year(ordinal_day, year)
        assert not result.ok
        assert result.kind is ErrorKind.OUT_OF_RANGE
        assert isinstance(result.error, OutOfRangeError)
        assert result.as_tuple() == (-1, -1)

    @pytest.mark.parametrize("ordinal_day", ["abc", "60", True, [60], 60.5, float("nan"), complex(60, 0)])
    def test_invalid_ordinal_day(self, ordinal_day):
        result = resolve_date_of_year(ordinal_day)
        assert result.kind is ErrorKind.INVALID_ARGUMENT
        assert result.as_tuple() == (-1, -1)

    def test_missing_ordinal_day(self):
        result = resolve_date_of_year(None)
        assert result.kind is ErrorKind.MISSING_ARGUMENT
        assert result.as_tuple() == (-1, -1)

    @pytest.mark.parametrize("year", [0, -2004, "2004", 2004.5, False])
    def test_invalid_year(self, year):
        """Zero is a real (invalid) year, not "no year"."""
        result = resolve_date_of_year(60, year)
        assert result.kind is ErrorKind.INVALID_ARGUMENT
        assert result.error.routine == "resolve_date_of_year"
        assert result.as_tuple() == (-1, -1)

    def test_numeric_types_accepted(self):
        assert resolve_date_of_year(np.int64(60), np.int32(2004)).as_tuple() == (2, 29)
        assert resolve_date_of_year(60.0).as_tuple() == (3, 1)

    def test_error_message(self):
        result = resolve_date_of_year(366)
        message = str(result.error)
        assert "resolve_date_of_year" in message
        assert "OutOfRange" in message
        assert "366" in message

    def test_custom_sentinel(self):
        result = resolve_date_of_year(400, config=DoyConfig(sentinel=0))
        assert result.as_tuple() == (0, 0)

    def test_internal_inconsistency(self, monkeypatch, caplog):
        """A broken cumulative table is reported as an internal inconsistency."""
        monkeypatch.setattr(
            "doykit.dates.resolver.cumulative_days", lambda lengths: (0,) * 13
        )
        with caplog.at_level("ERROR", logger="doykit.dates.resolver"):
            result = resolve_date_of_year(60)
        assert result.kind is ErrorKind.INTERNAL_INCONSISTENCY
        assert isinstance(result.error, InternalInconsistencyError)
        assert result.as_tuple() == (-1, -1)
        assert "InternalInconsistency" in caplog.text


class TestDateOfYear:
    """Tests for the raising wrapper and DateOfYear.unwrap."""

    def test_success(self):
        assert date_of_year(60, year=2004) == (2, 29)
        assert date_of_year(1) == (1, 1)

    def test_raises_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            date_of_year(366)

    def test_raises_invalid(self):
        with pytest.raises(InvalidArgumentError):
            date_of_year("abc")

    def test_raises_missing(self):
        with pytest.raises(MissingArgumentError):
            date_of_year(None)


class TestOrdinalDayOf:
    """Tests for the inverse conversion."""

    @pytest.mark.parametrize("month,day,year,expected", [
        (1, 1, None, 1),
        (3, 1, None, 60),
        (2, 29, 2004, 60),
        (12, 31, None, 365),
        (12, 31, 2000, 366),
    ])
    def test_known(self, month, day, year, expected):
        assert ordinal_day_of(month, day, year) == expected

    def test_inverts_resolver(self, year_kind):
        year, lengths = year_kind
        for d in range(1, sum(lengths) + 1):
            month, day = date_of_year(d, year)
            assert ordinal_day_of(month, day, year) == d

    @pytest.mark.parametrize("month,day,year", [
        (2, 29, None),
        (2, 29, 1900),
        (13, 1, None),
        (0, 1, None),
        (4, 31, None),
        (1, 0, None),
    ])
    def test_out_of_range(self, month, day, year):
        with pytest.raises(OutOfRangeError):
            ordinal_day_of(month, day, year)

    def test_invalid(self):
        with pytest.raises(InvalidArgumentError):
            ordinal_day_of("3", 1)
        with pytest.raises(InvalidArgumentError):
            ordinal_day_of(3, 1.5)
        with pytest.raises(InvalidArgumentError):
            ordinal_day_of(3, 1, year=0)

    def test_missing(self):
        with pytest.raises(MissingArgumentError):
            ordinal_day_of(None, 1)


class TestYearTables:

    def test_common(self):
        lengths, cumulative, max_day = year_tables()
        assert max_day == 365
        assert cumulative[0] == 0
        assert cumulative[-1] == 365
        assert lengths[1] == 28

    def test_leap(self):
        lengths, cumulative, max_day = year_tables(2004)
        assert max_day == 366
        assert cumulative[-1] == 366
        assert lengths[1] == 29

    def test_strictly_increasing(self):
        for year in (None, 2023, 2024):
            _, cumulative, _ = year_tables(year)
            assert all(a < b for a, b in zip(cumulative, cumulative[1:]))


class TestOversizedInput:
    """Integers beyond the int-to-str digit limit still produce a result."""

    def test_huge_ordinal_day_returns_out_of_range(self):
        result = resolve_date_of_year(10 ** 5000)
        assert result.kind is ErrorKind.OUT_OF_RANGE
        assert result.as_tuple() == (-1, -1)
        assert "digits" in str(result.error)

    def test_huge_negative_ordinal_day(self):
        result = resolve_date_of_year(-(10 ** 5000))
        assert result.kind is ErrorKind.OUT_OF_RANGE
