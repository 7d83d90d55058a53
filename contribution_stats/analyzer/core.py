"""Main contribution analyzer."""

import logging
from datetime import datetime
from typing import Dict, List, Tuple
from concurrent.futures import ThreadPoolExecutor, as_completed

from ..api_client import GitHubAPIClient
from ..stats import StatsAggregator
from ..window import compute_window_start
from .repo_matching import matches_repository

DEFAULT_APPROVAL_MARKER = '/approve'


class ContributionAnalyzer:
    """Builds monthly contribution statistics for a user across repositories."""

    def __init__(
        self,
        username: str,
        token: str = None,
        repositories: List[Tuple[str, str]] = None,
        months: int = 2,
        approval_marker: str = DEFAULT_APPROVAL_MARKER,
        now: datetime = None,
        api_client: GitHubAPIClient = None,
        max_workers: int = 1
    ):
        """Initialize the analyzer.

        Args:
            username: GitHub username whose activity is reported
            token: GitHub personal access token
            repositories: Allowed (owner, name) pairs
            months: Number of calendar months to look back, 1 = current month only
            approval_marker: Comment text that counts as approving a PR
            now: Reference time for the report window (defaults to the current time)
            api_client: Preconfigured API client, mainly for tests
            max_workers: Number of repositories scanned concurrently
        """
        self.username = username
        self.api_client = api_client or GitHubAPIClient(token)
        self.repositories = repositories or []
        self.months = months
        self.approval_marker = approval_marker
        self.max_workers = max(1, max_workers)

        self.window_start = compute_window_start(now or datetime.now(), months)
        self.stats = StatsAggregator()

        logging.info(f"Initialized analyzer for user '{username}', "
                     f"window starts {self.window_start:%Y-%m-%d}")

    def analyze(self) -> StatsAggregator:
        """Scan every allowed repository the user can access.

        Returns:
            The aggregated statistics
        """
        matched = self.find_repositories()
        logging.info(f"Starting analysis of {len(matched)} repository/repositories")

        if self.max_workers == 1 or len(matched) <= 1:
            for repo in matched:
                self.analyze_repository(repo['owner']['login'], repo['name'])
            return self.stats

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(matched))) as executor:
            futures = [
                executor.submit(self.analyze_repository, repo['owner']['login'], repo['name'])
                for repo in matched
            ]
            # Any failure aborts the run
            for future in as_completed(futures):
                future.result()

        return self.stats

    def find_repositories(self) -> List[Dict]:
        """Return the accessible repositories that are in the allow-list."""
        repos = self.api_client.list_user_repositories()
        matched = [repo for repo in repos if matches_repository(repo, self.repositories)]

        found = {(repo['owner']['login'], repo['name']) for repo in matched}
        for owner, name in self.repositories:
            if (owner, name) not in found:
                logging.warning(f"Repository {owner}/{name} is not accessible with the given token")

        return matched

    def analyze_repository(self, owner: str, name: str):
        """Classify PRs of one repository, newest updates first.

        Paging stops after the first page containing a PR that was last
        updated before the window start. Older PRs on that page are skipped
        one by one.

        Args:
            owner: Repository owner
            name: Repository name
        """
        print(f"repo: {name}")
        logging.info(f"Analyzing repository: {owner}/{name}")

        for page in self.api_client.iter_pull_request_pages(owner, name):
            in_window = True
            for pr in page:
                if not self._classify_pr(owner, name, pr):
                    in_window = False

            if not in_window:
                break

        logging.info(f"Completed analysis of repository: {owner}/{name}")


# Import and attach methods from submodules
from .pr_classification import _classify_pr, _resolve_merged_by, _scan_activity

# Attach methods to class
ContributionAnalyzer._classify_pr = _classify_pr
ContributionAnalyzer._resolve_merged_by = _resolve_merged_by
ContributionAnalyzer._scan_activity = _scan_activity
