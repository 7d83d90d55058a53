"""GitHub API client for making requests and handling pagination."""

import os
import logging
from typing import Dict, Iterator, List

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .errors import RateLimitError

DEFAULT_API_URL = 'https://api.github.com'

PULL_REQUESTS_PER_PAGE = 20
REVIEWS_PER_PAGE = 50
COMMENTS_PER_PAGE = 50
REPOSITORIES_PER_PAGE = 100


class GitHubAPIClient:
    """Handles GitHub REST API requests and Link-header pagination."""

    def __init__(self, token: str = None, base_url: str = DEFAULT_API_URL, retries: int = 0):
        """Initialize the GitHub API client.

        Args:
            token: GitHub personal access token for authentication
            base_url: Root URL of the GitHub REST API
            retries: Retries for 5xx responses (0 = fail on the first error)
        """
        # Use provided token or fall back to environment variable
        self.token = token or os.environ.get('GITHUB_TOKEN')
        self.base_url = base_url.rstrip('/')
        self.session = requests.Session()

        adapter = HTTPAdapter(
            max_retries=Retry(
                total=retries,
                backoff_factor=0.3,
                status_forcelist=[500, 502, 503, 504],
                raise_on_status=False
            )
        )
        self.session.mount('https://', adapter)
        self.session.mount('http://', adapter)

        self.session.headers.update({'Accept': 'application/vnd.github.v3+json'})
        if self.token:
            self.session.headers.update({'Authorization': f'token {self.token}'})
            logging.info("Initialized GitHub API client with token")
        else:
            logging.warning("No GitHub token provided. Rate limits will be much lower.")

    def _check_response(self, response: requests.Response):
        """Raise for error responses, turning rate limiting into RateLimitError."""
        if response.status_code in (403, 429) and response.headers.get('X-RateLimit-Remaining') == '0':
            reset = response.headers.get('X-RateLimit-Reset', 'unknown')
            raise RateLimitError(f"Rate limit exceeded (resets at {reset}): {response.url}")
        response.raise_for_status()

    def iter_pages(self, url: str, params: Dict = None,
                   per_page: int = 100) -> Iterator[List[Dict]]:
        """Lazily fetch the pages of a paginated GitHub API endpoint.

        The next page is taken from the ``Link`` response header, so the
        sequence ends when GitHub stops advertising a ``next`` relation.

        Args:
            url: The API endpoint URL
            params: Query parameters
            per_page: Page size requested from the API

        Yields:
            The list of items on each page
        """
        params = dict(params or {})
        params['per_page'] = per_page
        page = 1

        while True:
            params['page'] = page
            logging.debug(f"Fetching page {page} from {url}")
            response = self.session.get(url, params=dict(params))
            self._check_response(response)

            yield response.json()

            if 'next' not in response.links:
                break
            page += 1

    def get_paginated(self, url: str, params: Dict = None, per_page: int = 100) -> List[Dict]:
        """Fetch all pages of a paginated GitHub API endpoint.

        Args:
            url: The API endpoint URL
            params: Query parameters
            per_page: Page size requested from the API

        Returns:
            List of all items from all pages
        """
        results = []
        for page in self.iter_pages(url, params, per_page):
            results.extend(page)

        logging.debug(f"Fetched {len(results)} total items from {url}")
        return results

    def get_json(self, url: str) -> Dict:
        """Fetch a single resource from the GitHub API.

        Args:
            url: The API endpoint URL

        Returns:
            Decoded JSON body
        """
        response = self.session.get(url)
        self._check_response(response)
        return response.json()

    def list_user_repositories(self) -> List[Dict]:
        """List repositories the authenticated user can access."""
        return self.get_paginated(f"{self.base_url}/user/repos", per_page=REPOSITORIES_PER_PAGE)

    def iter_pull_request_pages(self, owner: str, name: str) -> Iterator[List[Dict]]:
        """Iterate PR pages of a repository, most recently updated first."""
        return self.iter_pages(f"{self.base_url}/repos/{owner}/{name}/pulls", {
            'state': 'all',
            'sort': 'updated',
            'direction': 'desc'
        }, per_page=PULL_REQUESTS_PER_PAGE)

    def get_pull_request(self, owner: str, name: str, number: int) -> Dict:
        return self.get_json(f"{self.base_url}/repos/{owner}/{name}/pulls/{number}")

    def list_reviews(self, owner: str, name: str, number: int) -> List[Dict]:
        return self.get_paginated(f"{self.base_url}/repos/{owner}/{name}/pulls/{number}/reviews",
                                  per_page=REVIEWS_PER_PAGE)

    def list_issue_comments(self, owner: str, name: str, number: int) -> List[Dict]:
        """List conversation comments of a PR (not inline review comments)."""
        return self.get_paginated(f"{self.base_url}/repos/{owner}/{name}/issues/{number}/comments",
                                  per_page=COMMENTS_PER_PAGE)
