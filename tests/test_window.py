"""
Unit tests for the report date window
"""

import time

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock, patch

from contribution_stats.analyzer import ContributionAnalyzer
from contribution_stats.errors import ConfigurationError
from contribution_stats.models import ReportMonth
from contribution_stats.window import compute_window_start, is_before, month_of, parse_timestamp


class TestComputeWindowStart:
    """Test cases for compute_window_start."""

    def test_single_month_is_start_of_current_month(self):
        now = datetime(2024, 3, 17, 15, 30, tzinfo=timezone.utc)
        assert compute_window_start(now, 1) == datetime(2024, 3, 1, tzinfo=timezone.utc)

    def test_two_months_starts_previous_month(self):
        now = datetime(2024, 3, 17, 15, 30, tzinfo=timezone.utc)
        assert compute_window_start(now, 2) == datetime(2024, 2, 1, tzinfo=timezone.utc)

    def test_end_of_month_does_not_overflow(self):
        """March 31st minus one month must land in February, not March."""
        now = datetime(2024, 3, 31, 23, 59, tzinfo=timezone.utc)
        assert compute_window_start(now, 2) == datetime(2024, 2, 1, tzinfo=timezone.utc)

    def test_crosses_year_boundary(self):
        now = datetime(2024, 1, 10, tzinfo=timezone.utc)
        assert compute_window_start(now, 3) == datetime(2023, 11, 1, tzinfo=timezone.utc)
        assert compute_window_start(now, 13) == datetime(2023, 1, 1, tzinfo=timezone.utc)

    def test_keeps_timezone_of_now(self):
        tz = timezone(timedelta(hours=2))
        now = datetime(2024, 5, 1, 0, 30, tzinfo=tz)
        start = compute_window_start(now, 1)
        assert start == datetime(2024, 5, 1, tzinfo=tz)
        assert start.utcoffset() == timedelta(hours=2)

    def test_naive_now_is_local_time(self):
        start = compute_window_start(datetime(2024, 6, 20, 12, 0), 2)
        assert start.tzinfo is not None
        assert start.replace(tzinfo=None) == datetime(2024, 5, 1)

    @pytest.mark.parametrize('months', [0, -1])
    def test_rejects_months_below_one(self, months):
        with pytest.raises(ConfigurationError):
            compute_window_start(datetime(2024, 6, 20, tzinfo=timezone.utc), months)


@pytest.mark.skipif(not hasattr(time, 'tzset'), reason="requires time.tzset")
class TestLocalMidnightAcrossDST:
    """Test cases for the window boundary when DST differs between now and the boundary month."""

    @pytest.fixture(autouse=True)
    def berlin_time(self, monkeypatch):
        monkeypatch.setenv('TZ', 'Europe/Berlin')
        time.tzset()
        yield
        monkeypatch.undo()
        time.tzset()

    def test_naive_now_uses_offset_of_boundary_month(self):
        start = compute_window_start(datetime(2024, 4, 15, 12, 0), 4)
        assert start.replace(tzinfo=None) == datetime(2024, 1, 1)
        assert start.utcoffset() == timedelta(hours=1)

    def test_analyzer_default_now_is_local_midnight(self):
        with patch('contribution_stats.analyzer.core.datetime') as mock_datetime:
            mock_datetime.now.return_value = datetime(2024, 4, 15, 12, 0)
            analyzer = ContributionAnalyzer('u', months=4, api_client=Mock())

        assert analyzer.window_start == datetime(2024, 1, 1, tzinfo=timezone(timedelta(hours=1)))
        assert analyzer.window_start.utcoffset() == timedelta(hours=1)


class TestTimestampHelpers:
    """Test cases for timestamp parsing and comparison."""

    def test_parse_timestamp(self):
        parsed = parse_timestamp('2024-01-15T10:20:30Z')
        assert parsed == datetime(2024, 1, 15, 10, 20, 30, tzinfo=timezone.utc)

    def test_parse_none(self):
        assert parse_timestamp(None) is None

    def test_is_before_is_strict(self):
        limit = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert is_before(parse_timestamp('2023-12-31T23:59:59Z'), limit)
        assert not is_before(parse_timestamp('2024-01-01T00:00:00Z'), limit)

    def test_month_of(self):
        assert month_of(parse_timestamp('2024-02-29T08:00:00Z')) == ReportMonth(2024, 2)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
