from decimal import Decimal

from profile_stats.models import LanguageStat, RepositoryLanguageUsage
from profile_stats.services.language_service import aggregate_language_bytes, rank_languages


def usage(languages, fork=False, name="repo"):
    return RepositoryLanguageUsage(name=name, fork=fork, languages=languages)


def test_forks_are_excluded_and_percentages_use_kept_bytes():
    usages = [
        usage({"Go": 300, "Rust": 100}),
        usage({"Go": 99999}, fork=True),
        usage({"Rust": 100}),
    ]

    ranking = rank_languages(usages, limit=8)

    assert ranking == [
        LanguageStat(name="Go", percentage=Decimal("60.0"), rank=1),
        LanguageStat(name="Rust", percentage=Decimal("40.0"), rank=2),
    ]


def test_custom_predicate_can_include_forks():
    usages = [usage({"Go": 100}), usage({"Rust": 300}, fork=True)]

    ranking = rank_languages(usages, exclude=lambda _usage: False)

    assert [stat.name for stat in ranking] == ["Rust", "Go"]


def test_empty_input_returns_empty_list():
    assert rank_languages([]) == []


def test_only_forks_returns_empty_list():
    assert rank_languages([usage({"Go": 10}, fork=True)]) == []


def test_zero_byte_languages_do_not_divide_by_zero():
    assert rank_languages([usage({"Go": 0, "C": 0})]) == []


def test_repository_without_languages_is_a_no_op():
    ranking = rank_languages([usage({}), usage({"Python": 10})])

    assert ranking == [LanguageStat(name="Python", percentage=Decimal("100.0"), rank=1)]


def test_ties_keep_first_encountered_order():
    usages = [usage({"Zig": 50, "Ada": 50}), usage({"Nim": 50})]

    ranking = rank_languages(usages)

    assert [stat.name for stat in ranking] == ["Zig", "Ada", "Nim"]
    assert [stat.rank for stat in ranking] == [1, 2, 3]


def test_limit_truncates_and_rebases_percentages():
    languages = {f"Lang{index}": 100 - index for index in range(12)}

    ranking = rank_languages([usage(languages)], limit=8)

    assert len(ranking) == 8
    assert ranking[-1].name == "Lang7"
    total = sum(100 - index for index in range(8))
    assert ranking[0].percentage == (Decimal(100) * 100 / total).quantize(Decimal("0.1"))


def test_non_positive_limit_returns_empty_list():
    assert rank_languages([usage({"Go": 1})], limit=0) == []


def test_percentages_round_half_up():
    # 15/16 = 93.75% and 1/16 = 6.25%
    ranking = rank_languages([usage({"A": 15, "B": 1})])

    assert ranking[0].percentage == Decimal("93.8")
    assert ranking[1].percentage == Decimal("6.3")


def test_percentages_sum_to_one_hundred_within_rounding():
    ranking = rank_languages([usage({"A": 1, "B": 1, "C": 1})])

    total = sum(stat.percentage for stat in ranking)
    assert abs(total - Decimal(100)) <= Decimal("0.1") * len(ranking)
    assert all(stat.percentage == Decimal("33.3") for stat in ranking)


def test_aggregate_merges_keys_across_repositories():
    totals = aggregate_language_bytes([usage({"Go": 1, "C": 2}), usage({"C": 3, "Lua": 4})])

    assert totals == {"Go": 1, "C": 5, "Lua": 4}
    assert list(totals) == ["Go", "C", "Lua"]


def test_ranking_is_repeatable():
    usages = [usage({"Go": 7, "Rust": 3}), usage({"C": 5})]

    assert rank_languages(usages) == rank_languages(usages)
