"""Command line entry point for the contribution report."""

import os
import sys
import logging
from typing import List, Optional

import requests

from .analyzer import ContributionAnalyzer
from .api_client import GitHubAPIClient
from .config import load_config
from .errors import ConfigurationError, GitHubAPIError
from .output import ReportFormatter


def configure_logging():
    """Configure logging (can be overridden by LOG_LEVEL environment variable)."""
    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%m/%d/%Y %I:%M:%S %p'
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the script."""
    configure_logging()

    try:
        config = load_config(argv)
    except ConfigurationError as e:
        logging.error(f"Configuration error: {e}")
        return 1

    print("GitHub Contribution Stats")
    print("="*80)
    logging.info(f"Starting analysis for user: {config.username}")

    analyzer = ContributionAnalyzer(
        config.username,
        repositories=config.repositories,
        months=config.months,
        approval_marker=config.approval_marker,
        api_client=GitHubAPIClient(config.token, base_url=config.api_url),
        max_workers=config.max_workers
    )

    try:
        stats = analyzer.analyze()
    except (GitHubAPIError, requests.RequestException) as e:
        logging.error(f"Aborting, GitHub request failed: {e}")
        return 1

    logging.info("Analysis complete, generating report...")
    ReportFormatter(config.username).print_report(stats)
    return 0


if __name__ == "__main__":
    sys.exit(main())
