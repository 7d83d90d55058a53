"""GitHub Contribution Stats - monthly report of merged, approved and reviewed PRs."""

from .models import ReportMonth, PullRequestRecord, MonthStats
from .stats import StatsAggregator
from .api_client import GitHubAPIClient
from .analyzer import ContributionAnalyzer
from .output import ReportFormatter

__all__ = [
    'ReportMonth',
    'PullRequestRecord',
    'MonthStats',
    'StatsAggregator',
    'GitHubAPIClient',
    'ContributionAnalyzer',
    'ReportFormatter',
]
