"""
Unit tests for report data models
"""

import pytest
from contribution_stats.models import ReportMonth, PullRequestRecord, MonthStats


class TestReportMonth:
    """Test cases for ReportMonth."""

    def test_str_includes_month_name_and_year(self):
        assert str(ReportMonth(2024, 1)) == 'January 2024'
        assert str(ReportMonth(2023, 12)) == 'December 2023'

    def test_ordering_is_chronological(self):
        months = [ReportMonth(2024, 2), ReportMonth(2023, 12), ReportMonth(2024, 1)]
        assert sorted(months) == [ReportMonth(2023, 12), ReportMonth(2024, 1), ReportMonth(2024, 2)]


class TestPullRequestRecord:
    """Test cases for PullRequestRecord."""

    def test_initialization(self):
        record = PullRequestRecord(repo='api', number=7, title='Fix bug', owner='octo')
        assert record.month_merged is None
        assert record.months_reviewed == []
        assert record.key == ('octo', 'api', 7)
        assert record.full_name == 'octo/api'

    def test_add_reviewed_month_keeps_discovery_order(self):
        record = PullRequestRecord(repo='api', number=7, title='Fix bug')

        assert record.add_reviewed_month(ReportMonth(2024, 2)) is True
        assert record.add_reviewed_month(ReportMonth(2024, 1)) is True
        assert record.add_reviewed_month(ReportMonth(2024, 2)) is False

        assert record.months_reviewed == [ReportMonth(2024, 2), ReportMonth(2024, 1)]

    def test_key_ignores_classification_fields(self):
        first = PullRequestRecord(repo='api', number=7, title='Fix bug')
        second = PullRequestRecord(repo='api', number=7, title='Fix bug (renamed)',
                                   month_merged=ReportMonth(2024, 1))
        assert first.key == second.key


class TestMonthStats:
    """Test cases for MonthStats deduplication."""

    def test_add_deduplicates_within_category(self):
        stats = MonthStats(month=ReportMonth(2024, 1))
        record = PullRequestRecord(repo='api', number=7, title='Fix bug')

        assert stats.add('reviewed', record) is True
        assert stats.add('reviewed', record) is False
        assert stats.reviewed == [record]

    def test_same_pr_allowed_in_different_categories(self):
        stats = MonthStats(month=ReportMonth(2024, 1))
        record = PullRequestRecord(repo='api', number=7, title='Fix bug')

        assert stats.add('merged', record) is True
        assert stats.add('reviewed', record) is True
        assert stats.merged == [record]
        assert stats.reviewed == [record]

    def test_same_number_in_other_repo_is_distinct(self):
        stats = MonthStats(month=ReportMonth(2024, 1))

        stats.add('own_merged', PullRequestRecord(repo='api', number=7, title='A'))
        stats.add('own_merged', PullRequestRecord(repo='web', number=7, title='B'))

        assert len(stats.own_merged) == 2

    def test_same_repo_name_under_other_owner_is_distinct(self):
        stats = MonthStats(month=ReportMonth(2024, 1))

        assert stats.add('reviewed', PullRequestRecord(repo='api', number=7, title='A', owner='octo'))
        assert stats.add('reviewed', PullRequestRecord(repo='api', number=7, title='A', owner='fork'))

        assert [pr.owner for pr in stats.reviewed] == ['octo', 'fork']

    def test_keys_are_not_a_constructor_argument(self):
        with pytest.raises(TypeError):
            MonthStats(month=ReportMonth(2024, 1), _keys={})

    def test_unknown_category_raises(self):
        stats = MonthStats(month=ReportMonth(2024, 1))
        with pytest.raises(KeyError):
            stats.add('commented', PullRequestRecord(repo='api', number=1, title='A'))

    def test_is_empty(self):
        stats = MonthStats(month=ReportMonth(2024, 1))
        assert stats.is_empty
        stats.add('merged', PullRequestRecord(repo='api', number=1, title='A'))
        assert not stats.is_empty


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
