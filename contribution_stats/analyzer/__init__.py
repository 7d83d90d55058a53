"""Repository scanning and pull request classification."""

from .core import ContributionAnalyzer, DEFAULT_APPROVAL_MARKER
from .repo_matching import parse_repository_filter, matches_repository

__all__ = [
    'ContributionAnalyzer',
    'DEFAULT_APPROVAL_MARKER',
    'parse_repository_filter',
    'matches_repository',
]
