"""Month-bucketed aggregation of classified pull requests."""

import logging
from threading import Lock
from typing import Dict, Iterator, List, Tuple

from .models import MonthStats, PullRequestRecord, ReportMonth


class StatsAggregator:
    """Owns the mapping from month to MonthStats.

    Buckets are created lazily on first reference and never removed. Inserts
    are deduplicated per month and category, and are safe to call from
    several repository scans running in parallel.
    """

    def __init__(self):
        self._stats: Dict[ReportMonth, MonthStats] = {}
        # Thread safety for parallel repository scans
        self._lock = Lock()

    def bucket(self, month: ReportMonth) -> MonthStats:
        """Return the bucket for a month, creating it if needed."""
        with self._lock:
            return self._bucket(month)

    def _bucket(self, month: ReportMonth) -> MonthStats:
        stats = self._stats.get(month)
        if stats is None:
            stats = MonthStats(month=month)
            self._stats[month] = stats
            logging.debug(f"Created stats bucket for {month}")
        return stats

    def _add(self, category: str, month: ReportMonth, pr: PullRequestRecord) -> bool:
        with self._lock:
            return self._bucket(month).add(category, pr)

    def add_own_merged(self, month: ReportMonth, pr: PullRequestRecord) -> bool:
        return self._add('own_merged', month, pr)

    def add_merged_or_approved(self, month: ReportMonth, pr: PullRequestRecord) -> bool:
        return self._add('merged', month, pr)

    def add_reviewed(self, month: ReportMonth, pr: PullRequestRecord) -> bool:
        return self._add('reviewed', month, pr)

    def months(self) -> List[ReportMonth]:
        with self._lock:
            return sorted(self._stats)

    def items(self) -> List[Tuple[ReportMonth, MonthStats]]:
        """Return (month, stats) pairs in chronological order."""
        with self._lock:
            return sorted(self._stats.items(), key=lambda item: item[0])

    def __contains__(self, month: ReportMonth) -> bool:
        with self._lock:
            return month in self._stats

    def __iter__(self) -> Iterator[ReportMonth]:
        return iter(self.months())

    def __len__(self) -> int:
        with self._lock:
            return len(self._stats)
