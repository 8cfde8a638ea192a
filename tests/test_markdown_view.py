from decimal import Decimal

from profile_stats.models import ContributionStats, LanguageStat, StreakResult
from profile_stats.views.markdown_view import (
    NO_LANGUAGE_DATA_ROW,
    render_badge_url,
    render_bar,
    render_language_row,
    render_stats_section,
)


def test_bar_is_forty_cells_wide():
    bar = render_bar(Decimal("75.0"))

    assert len(bar) == 40
    assert bar == "█" * 30 + "░" * 10


def test_bar_rounds_half_up():
    assert render_bar(Decimal("6.3")).count("█") == 3
    assert render_bar(Decimal("3.7")).count("█") == 1
    assert render_bar(Decimal("100.0")) == "█" * 40
    assert render_bar(Decimal("0.0")) == "░" * 40


def test_badge_url_uses_language_colour_and_logo():
    url = render_badge_url(LanguageStat(name="C++", percentage=Decimal("12.5"), rank=1))

    assert url == (
        "https://img.shields.io/badge/C%2B%2B-12.5%25-f34b7d?style=flat"
        "&logo=cplusplus&logoColor=white"
    )


def test_badge_url_falls_back_for_unknown_language():
    url = render_badge_url(LanguageStat(name="Brainfuck", percentage=Decimal("1.0"), rank=1))

    assert url == "https://img.shields.io/badge/Brainfuck-1.0%25-858585?style=flat"


def test_language_row_links_to_filtered_repositories():
    row = render_language_row("octocat", LanguageStat(name="Jupyter Notebook", percentage=Decimal("50.0"), rank=1))

    assert 'href="https://github.com/octocat?tab=repositories&q&type=source&language=jupyter%20notebook&sort"' in row
    assert 'alt="Jupyter Notebook"' in row


def test_stats_section_contains_profile_table():
    section = render_stats_section(
        "octocat",
        ContributionStats(total_stars=42, total_prs=7, total_issues=3, contributed_to=2),
        StreakResult(current_streak=4, longest_streak=9, active_days=120),
        [LanguageStat(name="Go", percentage=Decimal("75.0"), rank=1)],
        2025,
    )

    assert "| Total Stars | 42 |" in section
    assert "| Pull Requests | 7 |" in section
    assert "| Issues | 3 |" in section
    assert "| Contributed Repos | 2 |" in section
    assert "| Current Streak | 4 days |" in section
    assert "| Longest Streak | 9 days |" in section
    assert "| Active Days (2025) | 120 days |" in section
    assert "https://img.shields.io/badge/Go-75.0%25-00ADD8?style=flat&logo=go&logoColor=white" in section


def test_stats_section_without_languages_shows_placeholder():
    section = render_stats_section("octocat", ContributionStats(), StreakResult(), [], 2025)

    assert NO_LANGUAGE_DATA_ROW in section
    assert "| Current Streak | 0 days |" in section
