"""
Configuration loading for the contribution report.

Settings come from command line flags, falling back to environment
variables (optionally provided through a .env file).
"""

import argparse
import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from .analyzer.core import DEFAULT_APPROVAL_MARKER
from .analyzer.repo_matching import parse_repository_filter
from .api_client import DEFAULT_API_URL
from .errors import ConfigurationError

DEFAULT_MONTHS = 2
DEFAULT_MAX_WORKERS = 1


@dataclass
class ReportConfig:
    """Validated settings for one report run."""
    username: str
    token: str
    repositories: List[Tuple[str, str]]
    months: int = DEFAULT_MONTHS
    approval_marker: str = DEFAULT_APPROVAL_MARKER
    max_workers: int = DEFAULT_MAX_WORKERS
    api_url: str = DEFAULT_API_URL


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Monthly report of PRs you got merged, merged or approved, and reviewed on GitHub."
    )
    parser.add_argument('--user', default=os.environ.get('GITHUB_USERNAME'),
                        help="Your GitHub handle (env: GITHUB_USERNAME)")
    parser.add_argument('--token', default=os.environ.get('GITHUB_TOKEN'),
                        help="Your GitHub token (env: GITHUB_TOKEN)")
    parser.add_argument('--repositories', default=os.environ.get('GITHUB_REPOS'),
                        help="Comma separated list of repositories to inspect, in owner/name format "
                             "(env: GITHUB_REPOS)")
    parser.add_argument('--months', default=os.environ.get('ANALYSIS_MONTHS', str(DEFAULT_MONTHS)),
                        help="Number of months to look back; 1 = current month, 2 = current + last, "
                             f"and so on (env: ANALYSIS_MONTHS, default: {DEFAULT_MONTHS})")
    parser.add_argument('--approval-marker', default=os.environ.get('APPROVAL_MARKER', DEFAULT_APPROVAL_MARKER),
                        help="Comment text counted as approving a PR (env: APPROVAL_MARKER, "
                             f"default: {DEFAULT_APPROVAL_MARKER})")
    parser.add_argument('--workers', default=os.environ.get('MAX_WORKERS', str(DEFAULT_MAX_WORKERS)),
                        help="Repositories scanned in parallel (env: MAX_WORKERS, default: 1)")
    parser.add_argument('--api-url', default=os.environ.get('GITHUB_API_URL', DEFAULT_API_URL),
                        help=f"GitHub REST API root (env: GITHUB_API_URL, default: {DEFAULT_API_URL})")
    return parser


def _positive_int(value: str, name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid {name} value '{value}', expected an integer")
    if number < 1:
        raise ConfigurationError(f"Invalid {name} value '{value}', must be at least 1")
    return number


def load_config(argv: Optional[List[str]] = None) -> ReportConfig:
    """Build the report configuration from flags and the environment.

    Args:
        argv: Command line arguments (defaults to sys.argv)

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If a required setting is missing or malformed
    """
    # Load environment variables from .env file if it exists
    load_dotenv()
    args = build_parser().parse_args(argv)

    if not args.user:
        raise ConfigurationError("missing user (--user or GITHUB_USERNAME)")
    if not args.token:
        raise ConfigurationError("missing token (--token or GITHUB_TOKEN)")
    if not args.repositories:
        raise ConfigurationError("missing repositories (--repositories or GITHUB_REPOS)")

    repositories = parse_repository_filter(args.repositories)
    months = _positive_int(args.months, 'months')
    max_workers = _positive_int(args.workers, 'workers')

    logging.info(f"Using repositories: {', '.join(f'{o}/{n}' for o, n in repositories)}")
    logging.info(f"Using time range: {months} month(s)")

    return ReportConfig(
        username=args.user.strip(),
        token=args.token.strip(),
        repositories=repositories,
        months=months,
        approval_marker=args.approval_marker,
        max_workers=max_workers,
        api_url=args.api_url
    )
