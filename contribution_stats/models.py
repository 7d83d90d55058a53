"""Data models for the monthly contribution report."""

import calendar
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Set, Tuple


class ReportMonth(NamedTuple):
    """A calendar month, ordered chronologically."""
    year: int
    month: int

    def __str__(self) -> str:
        return f"{calendar.month_name[self.month]} {self.year}"


@dataclass
class PullRequestRecord:
    """One pull request under analysis.

    Acts as the accumulator for the classification steps: the merged month and
    the reviewed months are filled in while reviews and comments are scanned,
    and the record is only handed to the aggregator once classification ends.
    """
    repo: str
    number: int
    title: str
    month_merged: Optional[ReportMonth] = None
    months_reviewed: List[ReportMonth] = field(default_factory=list)
    owner: str = ''

    @property
    def key(self) -> Tuple[str, str, int]:
        """Identity used for deduplication inside a month bucket."""
        return (self.owner, self.repo, self.number)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}" if self.owner else self.repo

    def add_reviewed_month(self, month: ReportMonth) -> bool:
        """Record a month with review activity, keeping discovery order.

        Returns:
            True if the month was not recorded before
        """
        if month in self.months_reviewed:
            return False
        self.months_reviewed.append(month)
        return True


@dataclass
class MonthStats:
    """Contribution statistics for a single month."""
    month: ReportMonth
    own_merged: List[PullRequestRecord] = field(default_factory=list)
    merged: List[PullRequestRecord] = field(default_factory=list)  # merged or approved by me
    reviewed: List[PullRequestRecord] = field(default_factory=list)
    _keys: Dict[str, Set[Tuple[str, str, int]]] = field(init=False, default_factory=lambda: {
        'own_merged': set(),
        'merged': set(),
        'reviewed': set(),
    }, repr=False, compare=False)

    def add(self, category: str, pr: PullRequestRecord) -> bool:
        """Append a pull request to a category unless it is already listed.

        Args:
            category: One of 'own_merged', 'merged' or 'reviewed'
            pr: The pull request record

        Returns:
            True if the record was appended, False if it was a duplicate
        """
        keys = self._keys[category]
        if pr.key in keys:
            return False
        keys.add(pr.key)
        getattr(self, category).append(pr)
        return True

    @property
    def is_empty(self) -> bool:
        return not (self.own_merged or self.merged or self.reviewed)
