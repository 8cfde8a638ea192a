#!/usr/bin/env python3
"""
Update the stats section of README.md with language, streak, and
contribution statistics gathered from the GitHub API.

Markers used in README.md:
  <!-- STATS:START --> ... <!-- STATS:END -->
When the markers are missing the whole README is replaced by the block.

Environment variables:
  GITHUB_TOKEN: Personal access token (required)
  GITHUB_USERNAME: GitHub username (falls back to USERNAME, default: fbosch)
  README_PATH: README to update (default: README.md at the repository root)
  LANGUAGE_LIMIT: Number of languages to rank (default: 8)
"""

import sys

from profile_stats.config import MISSING_TOKEN_MESSAGE, UPDATE_FAILED_TEMPLATE, USAGE_MESSAGE
from profile_stats.controller import load_update_config, run_update


def main() -> int:
    config = load_update_config()
    if not config.github_token:
        print(MISSING_TOKEN_MESSAGE, file=sys.stderr)
        print(USAGE_MESSAGE, file=sys.stderr)
        return 1

    try:
        run_update(config)
    except Exception as error:
        print(UPDATE_FAILED_TEMPLATE.format(error=error), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
