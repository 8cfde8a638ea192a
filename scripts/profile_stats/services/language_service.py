#------------------------------------------------------------
#                     language_service.py
#          Aggregates per-repository language bytes
#                into a ranked percentage list.

from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Dict, Iterable, List
from ..config import DEFAULT_LANGUAGE_LIMIT
from ..models import LanguageStat, RepositoryLanguageUsage

PERCENT_QUANTUM = Decimal("0.1")
HUNDRED = Decimal(100)

def is_fork(usage: RepositoryLanguageUsage) -> bool:
    return usage.fork

# This function does sum language bytes across the kept repositories.
# Keys keep first-encounter order so that equal totals rank stably.
def aggregate_language_bytes(
    usages: Iterable[RepositoryLanguageUsage],
    exclude: Callable[[RepositoryLanguageUsage], bool] = is_fork,
) -> Dict[str, int]:
    totals: Dict[str, int] = {}
    for usage in usages:
        if exclude(usage):
            continue
        for language, byte_count in usage.languages.items():
            totals[language] = totals.get(language, 0) + int(byte_count or 0)
    return totals

def _percentage(byte_count: int, total_bytes: int) -> Decimal:
    return (HUNDRED * byte_count / total_bytes).quantize(PERCENT_QUANTUM, rounding=ROUND_HALF_UP)

# This function does rank languages by aggregated byte count.
# Percentages are relative to the retained top entries only.
def rank_languages(
    usages: Iterable[RepositoryLanguageUsage],
    exclude: Callable[[RepositoryLanguageUsage], bool] = is_fork,
    limit: int = DEFAULT_LANGUAGE_LIMIT,
) -> List[LanguageStat]:
    if limit <= 0:
        return []

    totals = aggregate_language_bytes(usages, exclude)
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)[:limit]

    total_bytes = sum(count for _, count in ranked)
    if total_bytes == 0:
        return []

    return [
        LanguageStat(name=language, percentage=_percentage(count, total_bytes), rank=position)
        for position, (language, count) in enumerate(ranked, start=1)
    ]
