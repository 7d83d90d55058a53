"""Output formatting and display for the contribution report."""

from typing import List

from .models import PullRequestRecord
from .stats import StatsAggregator


class ReportFormatter:
    """Prints the aggregated statistics month by month."""

    def __init__(self, username: str):
        """Initialize the report formatter.

        Args:
            username: The username being reported on
        """
        self.username = username

    def print_report(self, stats: StatsAggregator):
        """Print every month in chronological order with its three categories."""
        print("\n" + "="*80)
        print(f"CONTRIBUTION REPORT FOR {self.username}")
        print("="*80)

        if not len(stats):
            print("\nNo contribution activity found.")
            return

        for month, month_stats in stats.items():
            print(f"month: {month}")
            self._print_category("own merged", month_stats.own_merged)
            self._print_category("merged/approved", month_stats.merged)
            self._print_category("reviewed", month_stats.reviewed)

    def _print_category(self, label: str, prs: List[PullRequestRecord]):
        print(f"  {label}: {len(prs)}")
        for pr in prs:
            print(f"    {self.format_pr(pr)}")

    @staticmethod
    def format_pr(pr: PullRequestRecord) -> str:
        """Render all fields of a record on one line."""
        merged = str(pr.month_merged) if pr.month_merged else '-'
        reviewed = ', '.join(str(m) for m in pr.months_reviewed) or '-'
        return f"{pr.full_name}#{pr.number} {pr.title} (merged: {merged}; reviewed: {reviewed})"
