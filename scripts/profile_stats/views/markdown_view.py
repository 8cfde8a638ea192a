#------------------------------------------------------------
#                      markdown_view.py
#              Renders the profile stats block for
#                       the README.

from decimal import Decimal, ROUND_HALF_UP
from typing import List
from urllib.parse import quote
from ..models import ContributionStats, LanguageStat, StreakResult

BAR_WIDTH = 40
BAR_PERCENT_PER_CELL = Decimal("2.5")
BAR_FILLED_CHAR = "█"
BAR_EMPTY_CHAR = "░"
DEFAULT_LANGUAGE_COLOR = "#858585"
URI_COMPONENT_SAFE_CHARS = "-_.!~*'()"
NO_LANGUAGE_DATA_ROW = "<tr><td><em>No language data available yet.</em></td></tr>"

REPO_SEARCH_URL_TEMPLATE = (
    "https://github.com/{username}?tab=repositories&q&type=source&language={language}&sort"
)
BADGE_URL_TEMPLATE = "https://img.shields.io/badge/{language}-{percent}%25-{color}?style=flat"
BADGE_LOGO_SUFFIX_TEMPLATE = "&logo={logo}&logoColor=white"
LANGUAGE_ROW_TEMPLATE = (
    '<tr><td><a href="{search_url}"><img src="{badge_url}" alt="{language}"></a></td>'
    "<td><code>{bar}</code></td></tr>"
)

STATS_SECTION_TEMPLATE = """<div align="center">

<table width="100%">
<tr>
<td valign="top" width="50%" align="left">

**Profile**

| Metric | Count |
|--------|-------|
| Total Stars | {total_stars} |
| Pull Requests | {total_prs} |
| Issues | {total_issues} |
| Contributed Repos | {contributed_to} |
| Current Streak | {current_streak} days |
| Longest Streak | {longest_streak} days |
| Active Days ({year}) | {active_days} days |

</td>
<td valign="top" width="50%" align="left">

<table>
{language_rows}
</table>

</td>
</tr>
</table>

</div>
"""

# GitHub's linguist colours as shown in the GitHub UI.
LANGUAGE_COLOR_MAP = {
    "JavaScript": "#f1e05a",
    "TypeScript": "#3178c6",
    "Python": "#3572A5",
    "Java": "#b07219",
    "C++": "#f34b7d",
    "C": "#555555",
    "C#": "#178600",
    "Ruby": "#701516",
    "Go": "#00ADD8",
    "Rust": "#dea584",
    "PHP": "#4F5D95",
    "Swift": "#ffac45",
    "Kotlin": "#A97BFF",
    "Dart": "#00B4AB",
    "HTML": "#e34c26",
    "CSS": "#563d7c",
    "Shell": "#89e051",
    "Vue": "#41b883",
    "Svelte": "#ff3e00",
    "Scala": "#c22d40",
    "Lua": "#000080",
    "R": "#198CE7",
    "Perl": "#0298c3",
    "Haskell": "#5e5086",
    "Elixir": "#6e4a7e",
    "Clojure": "#db5855",
    "Objective-C": "#438eff",
    "Vim Script": "#199f4b",
    "Jupyter Notebook": "#DA5B0B",
    "Makefile": "#427819",
    "Dockerfile": "#384d54",
    "Nix": "#7e7eff",
}

# shields.io (simple-icons) logo slugs.
LANGUAGE_LOGO_MAP = {
    "TypeScript": "typescript",
    "JavaScript": "javascript",
    "Python": "python",
    "Java": "openjdk",
    "C++": "cplusplus",
    "C": "c",
    "C#": "csharp",
    "Ruby": "ruby",
    "Go": "go",
    "Rust": "rust",
    "PHP": "php",
    "Swift": "swift",
    "Kotlin": "kotlin",
    "Dart": "dart",
    "HTML": "html5",
    "CSS": "css3",
    "SCSS": "sass",
    "Shell": "gnubash",
    "Vue": "vuedotjs",
    "Svelte": "svelte",
    "Scala": "scala",
    "Lua": "lua",
    "R": "r",
    "Perl": "perl",
    "Haskell": "haskell",
    "Elixir": "elixir",
    "Clojure": "clojure",
    "Objective-C": "apple",
    "Vim Script": "vim",
    "Jupyter Notebook": "jupyter",
    "Makefile": "cmake",
    "Dockerfile": "docker",
    "Nix": "nixos",
}

def _encode_component(value: str) -> str:
    return quote(value, safe=URI_COMPONENT_SAFE_CHARS)

# This function does render a fixed-width text bar for a percentage.
# Each cell stands for 2.5 percent, rounded half up.
def render_bar(percentage: Decimal) -> str:
    filled = int((Decimal(percentage) / BAR_PERCENT_PER_CELL).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    filled = max(0, min(BAR_WIDTH, filled))
    return BAR_FILLED_CHAR * filled + BAR_EMPTY_CHAR * (BAR_WIDTH - filled)

def render_badge_url(stat: LanguageStat) -> str:
    color = LANGUAGE_COLOR_MAP.get(stat.name, DEFAULT_LANGUAGE_COLOR).lstrip("#")
    url = BADGE_URL_TEMPLATE.format(
        language=_encode_component(stat.name),
        percent=stat.percentage,
        color=color,
    )
    logo = LANGUAGE_LOGO_MAP.get(stat.name)
    if logo:
        url += BADGE_LOGO_SUFFIX_TEMPLATE.format(logo=logo)
    return url

# This function does render one language row of the badge table.
# The badge links to the user's repositories filtered by that language.
def render_language_row(username: str, stat: LanguageStat) -> str:
    search_url = REPO_SEARCH_URL_TEMPLATE.format(
        username=username,
        language=_encode_component(stat.name).lower(),
    )
    return LANGUAGE_ROW_TEMPLATE.format(
        search_url=search_url,
        badge_url=render_badge_url(stat),
        language=stat.name,
        bar=render_bar(stat.percentage),
    )

# This function does render the full README stats block.
# It combines profile counts, streaks, and the language table.
def render_stats_section(
    username: str,
    contribution_stats: ContributionStats,
    streak_stats: StreakResult,
    language_stats: List[LanguageStat],
    year: int,
) -> str:
    if language_stats:
        language_rows = "\n".join(render_language_row(username, stat) for stat in language_stats)
    else:
        language_rows = NO_LANGUAGE_DATA_ROW

    return STATS_SECTION_TEMPLATE.format(
        total_stars=contribution_stats.total_stars,
        total_prs=contribution_stats.total_prs,
        total_issues=contribution_stats.total_issues,
        contributed_to=contribution_stats.contributed_to,
        current_streak=streak_stats.current_streak,
        longest_streak=streak_stats.longest_streak,
        active_days=streak_stats.active_days,
        year=year,
        language_rows=language_rows,
    )
