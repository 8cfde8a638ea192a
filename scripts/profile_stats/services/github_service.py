#------------------------------------------------------------
#                      github_service.py
#               Handles GitHub API requests and
#                      response shaping.

import sys
import threading
from typing import Dict, List, Optional
import requests
from ..config import (
    GITHUB_API_ACCEPT_HEADER,
    GITHUB_API_BASE_URL,
    GITHUB_GRAPHQL_URL,
    GITHUB_MAX_REPO_PAGES,
    GITHUB_REPOS_PER_PAGE,
    GITHUB_REQUEST_TIMEOUT_SECONDS,
    GITHUB_SEARCH_PER_PAGE,
    GITHUB_USER_AGENT,
)
from ..models import ContributionDay, ContributionStats, RepositoryLanguageUsage, UpdateConfig
from .streak_service import parse_contribution_days

USER_REPOS_ENDPOINT_TEMPLATE = "/users/{username}/repos"
LANGUAGES_ENDPOINT_TEMPLATE = "/repos/{owner}/{name}/languages"
SEARCH_ISSUES_ENDPOINT = "/search/issues"
PR_SEARCH_QUERY_TEMPLATE = "author:{username} type:pr"
ISSUE_SEARCH_QUERY_TEMPLATE = "author:{username} type:issue"

PAGE_RESULT_MESSAGE = "Page {page}: Found {count} repositories"
LANGUAGE_FETCH_ERROR_TEMPLATE = "Error fetching languages for {name}: {error}"
CONTRIBUTION_FETCH_ERROR_TEMPLATE = "Error fetching contribution stats: {error}"

CONTRIBUTION_CALENDAR_QUERY = """
query($username: String!) {
  user(login: $username) {
    contributionsCollection {
      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            contributionCount
            date
          }
        }
      }
    }
  }
}
"""

class GitHubQueryError(RuntimeError):
    pass

class GitHubService:

    # This function does initialize service state.
    # Without an injected session each worker thread opens its own.
    def __init__(self, config: UpdateConfig, session: Optional[requests.Session] = None):
        self.config = config
        self._session = session
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
        return session

    # This function does build request headers for GitHub API calls.
    # It adds auth headers when a token is configured.
    def headers(self) -> Dict[str, str]:
        headers = {"Accept": GITHUB_API_ACCEPT_HEADER, "User-Agent": GITHUB_USER_AGENT}
        if self.config.github_token:
            headers["Authorization"] = f"Bearer {self.config.github_token}"
        return headers

    def _get_json(self, path: str, params: Optional[dict] = None):
        response = self.session.get(
            f"{GITHUB_API_BASE_URL}{path}",
            params=params,
            headers=self.headers(),
            timeout=GITHUB_REQUEST_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
        return response.json()

    # This function does fetch every repository listed for the user.
    # It pages through API results and returns a combined list.
    def fetch_repos(self) -> List[dict]:
        repos: List[dict] = []
        path = USER_REPOS_ENDPOINT_TEMPLATE.format(username=self.config.github_username)

        for page in range(1, GITHUB_MAX_REPO_PAGES + 1):
            data = self._get_json(path, {"type": "all", "per_page": GITHUB_REPOS_PER_PAGE, "page": page})
            if not data:
                break
            print(PAGE_RESULT_MESSAGE.format(page=page, count=len(data)))
            repos.extend(data)
            if len(data) < GITHUB_REPOS_PER_PAGE:
                break

        return repos

    # This function does fetch the language byte map of one repository.
    def fetch_languages(self, repo: dict) -> Dict[str, int]:
        owner = (repo.get("owner") or {}).get("login") or self.config.github_username
        data = self._get_json(LANGUAGES_ENDPOINT_TEMPLATE.format(owner=owner, name=repo["name"]))
        if not isinstance(data, dict):
            return {}
        return {str(language): int(byte_count or 0) for language, byte_count in data.items()}

    # This function does collect language usage for all repositories.
    # Forks are tagged without a lookup; failed lookups are logged and skipped.
    def fetch_language_usages(self, repos: List[dict]) -> List[RepositoryLanguageUsage]:
        usages: List[RepositoryLanguageUsage] = []
        for repo in repos:
            name = repo.get("name") or ""
            if repo.get("fork"):
                usages.append(RepositoryLanguageUsage(name=name, fork=True))
                continue
            try:
                languages = self.fetch_languages(repo)
            except (requests.RequestException, KeyError, TypeError, ValueError) as error:
                print(LANGUAGE_FETCH_ERROR_TEMPLATE.format(name=name, error=error), file=sys.stderr)
                continue
            usages.append(RepositoryLanguageUsage(name=name, fork=False, languages=languages))
        return usages

    # This function does run a GraphQL query and return its data payload.
    # It raises when the response carries GraphQL errors.
    def graphql(self, query: str, variables: dict) -> dict:
        response = self.session.post(
            GITHUB_GRAPHQL_URL,
            json={"query": query, "variables": variables},
            headers=self.headers(),
            timeout=GITHUB_REQUEST_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise GitHubQueryError(f"Unexpected GraphQL response: {payload!r}")
        if payload.get("errors"):
            raise GitHubQueryError(f"GraphQL errors: {payload['errors']}")
        return payload.get("data") or {}

    # This function does fetch the contribution calendar as ordered days.
    def fetch_contribution_days(self) -> List[ContributionDay]:
        data = self.graphql(CONTRIBUTION_CALENDAR_QUERY, {"username": self.config.github_username})
        user = data.get("user")
        if not user:
            raise GitHubQueryError(f"User not found: {self.config.github_username}")
        calendar = user["contributionsCollection"]["contributionCalendar"]
        return parse_contribution_days(calendar["weeks"])

    def search_total_count(self, query: str) -> int:
        data = self._get_json(SEARCH_ISSUES_ENDPOINT, {"q": query, "per_page": GITHUB_SEARCH_PER_PAGE})
        return int(data.get("total_count") or 0)

    # This function does derive star, fork, PR, and issue totals.
    # Search failures are logged and leave the PR/issue totals at zero.
    def fetch_contribution_stats(self, repos: List[dict]) -> ContributionStats:
        username = self.config.github_username
        owned = [
            repo for repo in repos
            if not repo.get("fork") and (repo.get("owner") or {}).get("login") == username
        ]
        stats = ContributionStats(
            total_stars=sum(int(repo.get("stargazers_count") or 0) for repo in owned),
            contributed_to=sum(1 for repo in repos if repo.get("fork")),
        )

        try:
            stats.total_prs = self.search_total_count(PR_SEARCH_QUERY_TEMPLATE.format(username=username))
            stats.total_issues = self.search_total_count(ISSUE_SEARCH_QUERY_TEMPLATE.format(username=username))
        except (requests.RequestException, TypeError, ValueError) as error:
            print(CONTRIBUTION_FETCH_ERROR_TEMPLATE.format(error=error), file=sys.stderr)

        return stats
