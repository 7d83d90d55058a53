"""Repository allow-list parsing and matching."""

from typing import Dict, List, Tuple

from ..errors import ConfigurationError


def parse_repository_filter(value: str) -> List[Tuple[str, str]]:
    """Parse a comma-separated list of 'owner/name' entries.

    Args:
        value: Raw allow-list, e.g. 'octo/api,octo/web'

    Returns:
        List of (owner, name) tuples in the given order

    Raises:
        ConfigurationError: If the list is empty or an entry is malformed
    """
    allowed = []
    for entry in (value or '').split(','):
        entry = entry.strip()
        if not entry:
            continue

        parts = entry.split('/')
        if len(parts) != 2 or not all(parts):
            raise ConfigurationError(f"Malformed repository '{entry}', expected owner/name format")
        allowed.append((parts[0], parts[1]))

    if not allowed:
        raise ConfigurationError("At least one repository is required")
    return allowed


def matches_repository(repo: Dict, allowed: List[Tuple[str, str]]) -> bool:
    """Check whether a repository descriptor from the API is in the allow-list."""
    return (repo['owner']['login'], repo['name']) in allowed
