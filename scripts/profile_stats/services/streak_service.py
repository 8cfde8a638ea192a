#------------------------------------------------------------
#                      streak_service.py
#         Derives current/longest streaks and active
#            day counts from a contribution calendar.

from datetime import date
from enum import Enum
from typing import Iterable, List, Optional, Sequence
from dateutil.parser import isoparse
from ..models import ContributionDay, StreakResult

CALENDAR_DAYS_KEY = "contributionDays"
CALENDAR_DATE_KEY = "date"
CALENDAR_COUNT_KEY = "contributionCount"

class ScanState(Enum):
    NOT_STARTED = "not_started"
    COUNTING = "counting"

# This function does flatten GraphQL calendar weeks into ordered days.
# Dates are parsed from ISO-8601 strings; counts default to zero.
def parse_contribution_days(weeks: Iterable[dict]) -> List[ContributionDay]:
    days: List[ContributionDay] = []
    for week in weeks:
        for day in week.get(CALENDAR_DAYS_KEY) or []:
            days.append(
                ContributionDay(
                    date=isoparse(day[CALENDAR_DATE_KEY]).date(),
                    count=int(day.get(CALENDAR_COUNT_KEY) or 0),
                )
            )
    return days

# This function does measure the run of active days ending today.
# Scanning stops once the elapsed days exceed the streak found so far.
# NOTE: the elapsed-days check is tied to the streak length, so when today
# has no activity yet the scan stops at yesterday and the streak reads zero.
def current_streak(days: Sequence[ContributionDay], today: date) -> int:
    streak = 0
    state = ScanState.NOT_STARTED
    for day in reversed(days):
        diff_days = (today - day.date).days
        if diff_days > streak:
            break
        if day.count > 0:
            state = ScanState.COUNTING
            streak += 1
        elif state is ScanState.COUNTING:
            break
    return streak

def longest_streak(days: Iterable[ContributionDay]) -> int:
    longest = 0
    running = 0
    for day in days:
        if day.count > 0:
            running += 1
            longest = max(longest, running)
        else:
            running = 0
    return longest

def active_days(days: Iterable[ContributionDay]) -> int:
    return sum(1 for day in days if day.count > 0)

# This function does compute all streak statistics for a calendar.
# A missing calendar (None) yields the zero-valued result.
def compute_streaks(days: Optional[Sequence[ContributionDay]], today: date) -> StreakResult:
    if not days:
        return StreakResult()
    return StreakResult(
        current_streak=current_streak(days, today),
        longest_streak=longest_streak(days),
        active_days=active_days(days),
    )
