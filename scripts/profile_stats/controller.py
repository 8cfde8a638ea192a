#------------------------------------------------------------
#                        controller.py
#           Coordinates stats retrieval, computation,
#                  and the README section update.

import sys
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import List, Optional
import requests
from .config import (
    FETCHING_MESSAGE,
    RETRIEVAL_MAX_WORKERS,
    STATS_END_MARKER,
    STATS_START_MARKER,
    UPDATED_MESSAGE,
    resolve_language_limit,
    resolve_readme_path,
    resolve_token,
    resolve_username,
)
from .models import ContributionDay, UpdateConfig
from .services.github_service import GitHubQueryError, GitHubService
from .services.language_service import rank_languages
from .services.readme_service import load_readme, save_readme, splice_section
from .services.streak_service import compute_streaks
from .views.markdown_view import render_stats_section

STREAK_FETCH_ERROR_TEMPLATE = "Error fetching streak stats: {error}"
REPO_SUMMARY_MESSAGE = "Found {count} repositories ({forks} forks)"
LANGUAGE_SUMMARY_MESSAGE = "Ranked {count} languages"
STREAK_SUMMARY_MESSAGE = "Streaks: current {current}, longest {longest}, active days {active}"

# This function does build the runtime configuration from the environment.
def load_update_config() -> UpdateConfig:
    return UpdateConfig(
        github_username=resolve_username(),
        github_token=resolve_token(),
        readme_path=resolve_readme_path(),
        language_limit=resolve_language_limit(),
    )

# This function does fetch the contribution calendar for streaks.
# Failures are logged and reported as None so streaks degrade to zero.
def _fetch_contribution_days(github_service: GitHubService) -> Optional[List[ContributionDay]]:
    try:
        return github_service.fetch_contribution_days()
    except (requests.RequestException, GitHubQueryError, KeyError, TypeError, ValueError) as error:
        print(STREAK_FETCH_ERROR_TEMPLATE.format(error=error), file=sys.stderr)
        return None

# This function does gather every statistic and render the stats block.
# Retrieval jobs run in parallel; computation happens once all have finished.
def build_stats_section(
    config: UpdateConfig,
    github_service: GitHubService,
    today: date,
) -> str:
    repos = github_service.fetch_repos()
    print(REPO_SUMMARY_MESSAGE.format(count=len(repos), forks=sum(1 for repo in repos if repo.get("fork"))))

    with ThreadPoolExecutor(max_workers=RETRIEVAL_MAX_WORKERS) as executor:
        usages_future = executor.submit(github_service.fetch_language_usages, repos)
        contributions_future = executor.submit(github_service.fetch_contribution_stats, repos)
        days_future = executor.submit(_fetch_contribution_days, github_service)

        usages = usages_future.result()
        contribution_stats = contributions_future.result()
        days = days_future.result()

    language_stats = rank_languages(usages, limit=config.language_limit)
    print(LANGUAGE_SUMMARY_MESSAGE.format(count=len(language_stats)))

    streak_stats = compute_streaks(days, today)
    print(
        STREAK_SUMMARY_MESSAGE.format(
            current=streak_stats.current_streak,
            longest=streak_stats.longest_streak,
            active=streak_stats.active_days,
        )
    )

    return render_stats_section(
        config.github_username,
        contribution_stats,
        streak_stats,
        language_stats,
        today.year,
    )

# This function does execute the full update workflow end-to-end.
# It fetches stats, renders the block, and writes the README output.
def run_update(
    config: Optional[UpdateConfig] = None,
    github_service: Optional[GitHubService] = None,
    today: Optional[date] = None,
) -> None:
    config = config or load_update_config()
    github_service = github_service or GitHubService(config)
    today = today or date.today()

    print(FETCHING_MESSAGE)
    stats_section = build_stats_section(config, github_service, today)

    readme = load_readme(config.readme_path)
    readme = splice_section(readme, STATS_START_MARKER, STATS_END_MARKER, stats_section)
    save_readme(config.readme_path, readme)
    print(UPDATED_MESSAGE)
