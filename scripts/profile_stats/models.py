#------------------------------------------------------------
#                          models.py
#     Defines dataclasses used by the stats pipeline.

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict
from .config import DEFAULT_LANGUAGE_LIMIT

@dataclass
class RepositoryLanguageUsage:
    name: str
    fork: bool
    languages: Dict[str, int] = field(default_factory=dict)

@dataclass(frozen=True)
class LanguageStat:
    name: str
    percentage: Decimal
    rank: int

@dataclass(frozen=True)
class ContributionDay:
    date: date
    count: int

# Zero-valued instances double as the degraded result
# when the contribution calendar cannot be retrieved.
@dataclass(frozen=True)
class StreakResult:
    current_streak: int = 0
    longest_streak: int = 0
    active_days: int = 0

@dataclass
class ContributionStats:
    total_stars: int = 0
    total_prs: int = 0
    total_issues: int = 0
    contributed_to: int = 0

@dataclass
class UpdateConfig:
    github_username: str
    github_token: str
    readme_path: str
    language_limit: int = DEFAULT_LANGUAGE_LIMIT
