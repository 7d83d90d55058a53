"""Exception types raised while building a contribution report."""


class ContributionStatsError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(ContributionStatsError):
    """Raised when a required setting is missing or malformed."""


class GitHubAPIError(ContributionStatsError):
    """Raised when the GitHub API returns something we cannot work with."""


class RateLimitError(GitHubAPIError):
    """Raised when the GitHub API rate limit is exhausted."""


class UnexpectedResponseError(GitHubAPIError):
    """Raised when a record is missing a field the report depends on."""
