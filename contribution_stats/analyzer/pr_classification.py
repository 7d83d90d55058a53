"""PR classification methods for ContributionAnalyzer."""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from ..errors import UnexpectedResponseError
from ..models import PullRequestRecord
from ..stats import StatsAggregator
from ..window import is_before, month_of, parse_timestamp


def _login(user: Optional[Dict], what: str) -> str:
    """Return the login of a user object, failing loudly if it is missing."""
    if not user or not user.get('login'):
        raise UnexpectedResponseError(f"Missing login for {what}")
    return user['login']


def record_reviews(record: PullRequestRecord, reviews: List[Dict], username: str,
                   window_start: datetime):
    """Add the months of the user's submitted reviews to the record.

    Pending reviews have no submission time and are ignored, as are reviews
    submitted before the window start.
    """
    for review in reviews:
        if _login(review.get('user'), f"review {review.get('id')}") != username:
            continue

        submitted_at = parse_timestamp(review.get('submitted_at'))
        if submitted_at is None or is_before(submitted_at, window_start):
            continue

        record.add_reviewed_month(month_of(submitted_at))


def record_comments(record: PullRequestRecord, comments: List[Dict], username: str,
                    window_start: datetime, approval_marker: str):
    """Add the user's conversation comments to the record.

    A comment containing the approval marker counts as merging the PR in the
    comment's month, unless a merge month is already known. Every other
    comment counts as review activity.
    """
    for comment in comments:
        if _login(comment.get('user'), f"comment {comment.get('id')}") != username:
            continue

        created_at = parse_timestamp(comment['created_at'])
        if is_before(created_at, window_start):
            continue

        month = month_of(created_at)
        if approval_marker in (comment.get('body') or '') and record.month_merged is None:
            record.month_merged = month
        else:
            record.add_reviewed_month(month)


def commit_record(stats: StatsAggregator, record: PullRequestRecord):
    """Fold a classified record into the aggregator.

    A PR merged by the user in month M is not counted as reviewed in M.
    """
    if record.month_merged is not None:
        if stats.add_merged_or_approved(record.month_merged, record):
            print(f"    merged or approved by me in {record.month_merged}")

    for month in record.months_reviewed:
        if month == record.month_merged:
            continue
        if stats.add_reviewed(month, record):
            print(f"    reviewed by me in {month}")


def _classify_pr(self, owner: str, name: str, pr: Dict) -> bool:
    """Classify a single PR and fold it into the statistics.

    Args:
        owner: Repository owner
        name: Repository name
        pr: PR data from the GitHub API list endpoint

    Returns:
        False if the PR was last updated before the window start, which means
        no further pages need to be fetched for this repository
    """
    pr_number = pr['number']
    pr_title = pr['title']
    print(f"pr nr {pr_number}, state {pr.get('state')}: {pr_title}")

    # PRs are sorted by update time, everything after this one is older
    if is_before(parse_timestamp(pr['updated_at']), self.window_start):
        logging.debug(f"PR #{pr_number} last updated before {self.window_start:%Y-%m-%d}")
        return False

    pr_author = _login(pr.get('user'), f"author of PR #{pr_number}")
    record = PullRequestRecord(repo=name, number=pr_number, title=pr_title, owner=owner)

    merged_at = parse_timestamp(pr.get('merged_at'))
    if merged_at is not None:
        # Recently updated (e.g. commented) but merged too long ago
        if is_before(merged_at, self.window_start):
            return True

        print("  is merged")
        merge_month = month_of(merged_at)

        if pr_author == self.username:
            # Own PRs are never counted as reviewed or approved
            if self.stats.add_own_merged(merge_month, record):
                print(f"    own merged in {merge_month}")
            return True

        if self._resolve_merged_by(owner, name, pr_number) == self.username:
            record.month_merged = merge_month

    elif pr_author == self.username:
        print("  skipping my own open PR")
        return True

    self._scan_activity(owner, name, record)
    commit_record(self.stats, record)
    return True


def _resolve_merged_by(self, owner: str, name: str, pr_number: int) -> str:
    """Fetch a PR to find out who merged it (not part of the list payload)."""
    details = self.api_client.get_pull_request(owner, name, pr_number)
    return _login(details.get('merged_by'), f"merging actor of PR #{pr_number}")


def _scan_activity(self, owner: str, name: str, record: PullRequestRecord):
    """Collect the user's reviews and comments on a PR into the record."""
    reviews = self.api_client.list_reviews(owner, name, record.number)
    record_reviews(record, reviews, self.username, self.window_start)

    comments = self.api_client.list_issue_comments(owner, name, record.number)
    record_comments(record, comments, self.username, self.window_start, self.approval_marker)

    logging.debug(f"PR #{record.number}: merged month {record.month_merged}, "
                  f"reviewed months {[str(m) for m in record.months_reviewed]}")
