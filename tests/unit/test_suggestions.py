"""Suggestion engine unit tests: ranking, typo correction, popular searches, service."""

from unittest.mock import AsyncMock, patch

import pytest

from community_search.application.services.suggestions import (
    is_single_edit,
    match_popular,
    rank_completions,
    suggest_corrections,
)
from community_search.application.services.suggestion_vocabulary import (
    GLOBAL_POPULAR_SEARCHES,
    popular_searches_for,
)
from community_search.application.use_cases.suggestions import SuggestionService
from community_search.domain.enums import ContentModule


@pytest.mark.parametrize(
    ("word", "target", "expected"),
    [
        ("minecraf", "minecraft", True),
        ("mnecraft", "minecraft", True),
        ("minecraftt", "minecraft", True),
        ("recipf", "recipe", True),
        ("minecraft", "minecraft", False),
        ("mine", "minecraft", False),
        ("hwo", "how", False),
    ],
)
def test_is_single_edit(word: str, target: str, expected: bool) -> None:
    assert is_single_edit(word, target) is expected


def test_misspelling_table_corrects_whole_query() -> None:
    assert suggest_corrections("mincraft") == ["minecraft"]
    assert suggest_corrections("Mincraft redston farm") == ["minecraft redstone farm"]


def test_single_edit_common_word() -> None:
    assert suggest_corrections("buildng") == ["building"]
    assert suggest_corrections("tipz") == ["tips"]


def test_short_or_correct_queries_get_no_correction() -> None:
    assert suggest_corrections("tip") == []
    assert suggest_corrections("minecraft") == []


def test_rank_completions_orders_and_dedupes() -> None:
    titles = [
        "Redstone Basics",
        "Advanced Redstone",
        "redstone",
        "REDSTONE BASICS",
        "Redstone",
        "Mob farms",
    ]
    assert rank_completions(titles, "redstone") == [
        "redstone",
        "Redstone Basics",
        "Advanced Redstone",
    ]


def test_rank_completions_prefers_shorter_titles_on_ties() -> None:
    assert rank_completions(["Redstone Farms Guide", "Redstone Farm"], "red") == [
        "Redstone Farm",
        "Redstone Farms Guide",
    ]


def test_match_popular_filters_and_caps() -> None:
    assert match_popular("guide", popular_searches_for(ContentModule.WIKI)) == [
        "minecraft guide",
        "enchanting guide",
    ]
    assert len(match_popular("e", GLOBAL_POPULAR_SEARCHES)) == 3
    assert match_popular("zzz", GLOBAL_POPULAR_SEARCHES) == []


def _repos(**titles: list[str]) -> dict[ContentModule, AsyncMock]:
    repos = {}
    for module in ContentModule:
        repo = AsyncMock()
        repo.title_completions = AsyncMock(return_value=titles.get(module.value, []))
        repos[module] = repo
    return repos


async def test_suggest_typo_query() -> None:
    """A misspelled query gets the table correction and no popular matches."""
    service = SuggestionService(_repos())
    bundle = await service.suggest("mincraft")
    assert bundle.completions == []
    assert bundle.corrections == ["minecraft"]
    assert bundle.popular == []


async def test_suggest_merges_module_titles() -> None:
    repos = _repos(
        forum=["Redstone lag help", "Server rules"],
        wiki=["Redstone", "Redstone basics"],
    )
    bundle = await SuggestionService(repos).suggest("redstone")
    assert bundle.completions == ["Redstone", "Redstone basics", "Redstone lag help"]
    assert bundle.popular == ["redstone contraptions"]
    assert bundle.search_time_ms >= 0


async def test_completions_capped() -> None:
    repos = _repos(blog=[f"Guide part {i}" for i in range(10)])
    bundle = await SuggestionService(repos, completion_limit=5).suggest("guide")
    assert len(bundle.completions) == 5


async def test_module_scope_limits_sources() -> None:
    repos = _repos(wiki=["Enchanting guide"], blog=["Guide to events"])
    bundle = await SuggestionService(repos).suggest("guide", ContentModule.WIKI)
    assert bundle.completions == ["Enchanting guide"]
    assert bundle.popular == ["minecraft guide", "enchanting guide"]
    repos[ContentModule.BLOG].title_completions.assert_not_awaited()
    repos[ContentModule.WIKI].title_completions.assert_awaited_once_with("guide", limit=10)


@pytest.mark.parametrize("query", ["", "m", "  m  "])
async def test_short_query_returns_empty_bundle(query: str) -> None:
    repos = _repos()
    bundle = await SuggestionService(repos).suggest(query)
    assert bundle.completions == bundle.corrections == bundle.popular == []
    assert bundle.search_time_ms == 0
    for repo in repos.values():
        repo.title_completions.assert_not_awaited()


async def test_failing_module_leaves_others() -> None:
    repos = _repos(blog=["Redstone news"])
    repos[ContentModule.FORUM].title_completions.side_effect = RuntimeError("down")
    bundle = await SuggestionService(repos).suggest("redstone")
    assert bundle.completions == ["Redstone news"]


async def test_failing_pipeline_is_isolated() -> None:
    repos = _repos(wiki=["Minecraft guide"])
    with patch(
        "community_search.application.use_cases.suggestions.suggest_corrections",
        side_effect=RuntimeError("vocabulary unavailable"),
    ):
        bundle = await SuggestionService(repos).suggest("guide")
    assert bundle.corrections == []
    assert bundle.completions == ["Minecraft guide"]
    assert bundle.popular == ["enchanting guide"]
