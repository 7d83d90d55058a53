#!/usr/bin/env python3
"""
GitHub Contribution Stats
Reports PRs you got merged, merged or approved, and reviewed, per month.
"""

import sys

from contribution_stats.cli import main


if __name__ == "__main__":
    sys.exit(main())
