#------------------------------------------------------------
#                          config.py
#   Centralizes environment settings, API constants, and paths.

import os
import sys

# Environment variable names for configuration
ENV_GITHUB_TOKEN = "GITHUB_TOKEN"
ENV_GITHUB_USERNAME = "GITHUB_USERNAME"
ENV_USERNAME_FALLBACK = "USERNAME"
ENV_README_PATH = "README_PATH"
ENV_LANGUAGE_LIMIT = "LANGUAGE_LIMIT"

# Default values for configuration parameters
DEFAULT_GITHUB_USERNAME = "fbosch"
DEFAULT_LANGUAGE_LIMIT = 8
DEFAULT_README_FILENAME = "README.md"

# Constants for GitHub API interaction
GITHUB_API_ACCEPT_HEADER = "application/vnd.github+json"
GITHUB_API_BASE_URL = "https://api.github.com"
GITHUB_GRAPHQL_URL = f"{GITHUB_API_BASE_URL}/graphql"
GITHUB_USER_AGENT = "profile-stats"
GITHUB_REPOS_PER_PAGE = 100
GITHUB_MAX_REPO_PAGES = 10
GITHUB_REQUEST_TIMEOUT_SECONDS = 30
GITHUB_SEARCH_PER_PAGE = 1
RETRIEVAL_MAX_WORKERS = 3

# Markers used in README.md to identify the generated stats block.
STATS_START_MARKER = "<!-- STATS:START -->"
STATS_END_MARKER = "<!-- STATS:END -->"

# Messages used for console output.
MISSING_TOKEN_MESSAGE = "Error: GITHUB_TOKEN environment variable is required"
USAGE_MESSAGE = "Usage: GITHUB_TOKEN=your_token_here python scripts/update_stats.py"
FETCHING_MESSAGE = "Fetching GitHub stats..."
UPDATED_MESSAGE = "README.md updated successfully!"
UPDATE_FAILED_TEMPLATE = "Error updating README: {error}"
INVALID_LANGUAGE_LIMIT_TEMPLATE = "WARNING: ignoring non-integer {name}={value!r}"

# Directory paths for the project files.
SCRIPTS_DIR = os.path.dirname(os.path.dirname(__file__))
ROOT_DIR = os.path.dirname(SCRIPTS_DIR)

# This function does resolve the README path to update.
# Relative overrides are taken from the repository root.
def resolve_readme_path() -> str:
    configured = os.environ.get(ENV_README_PATH, "").strip()
    if configured:
        if os.path.isabs(configured):
            return configured
        return os.path.join(ROOT_DIR, configured)
    return os.path.join(ROOT_DIR, DEFAULT_README_FILENAME)

# This function does read the ranked language count from the environment.
# It falls back to the default when the value is not an integer.
def resolve_language_limit() -> int:
    raw = os.environ.get(ENV_LANGUAGE_LIMIT, "").strip()
    if not raw:
        return DEFAULT_LANGUAGE_LIMIT
    try:
        return int(raw)
    except ValueError:
        print(INVALID_LANGUAGE_LIMIT_TEMPLATE.format(name=ENV_LANGUAGE_LIMIT, value=raw), file=sys.stderr)
        return DEFAULT_LANGUAGE_LIMIT

# This function does resolve the profile owner to query.
def resolve_username() -> str:
    username = (
        os.environ.get(ENV_GITHUB_USERNAME, "").strip()
        or os.environ.get(ENV_USERNAME_FALLBACK, "").strip()
    )
    return username or DEFAULT_GITHUB_USERNAME

def resolve_token() -> str:
    return os.environ.get(ENV_GITHUB_TOKEN, "").strip()
