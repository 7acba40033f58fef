"""Static word lists used by the suggestion engine.

Plain data so the lists can be moved to configuration or storage without
touching the suggestion algorithm.
"""

from types import MappingProxyType

from community_search.domain.enums import ContentModule

# Known misspellings of community/game jargon -> correction
COMMON_CORRECTIONS = MappingProxyType({
    "mincraft": "minecraft",
    "recepie": "recipe",
    "recepies": "recipes",
    "buildin": "building",
    "redston": "redstone",
    "enchantin": "enchanting",
    "encahnt": "enchant",
    "vilager": "villager",
    "vilagers": "villagers",
    "potion": "potions",
    "armour": "armor",
    "favour": "favor",
    "colour": "color",
})

# Candidates for single-edit typo correction, checked in order
COMMON_WORDS: tuple[str, ...] = (
    "minecraft",
    "building",
    "recipe",
    "redstone",
    "enchanting",
    "villager",
    "trading",
    "farming",
    "mining",
    "crafting",
    "tutorial",
    "guide",
    "how",
    "best",
    "tips",
    "tricks",
)

MODULE_POPULAR_SEARCHES = MappingProxyType({
    ContentModule.BLOG: (
        "server news",
        "community updates",
        "patch notes",
        "developer insights",
        "player spotlights",
        "event announcements",
        "maintenance schedules",
        "feature releases",
    ),
    ContentModule.FORUM: (
        "technical support",
        "server rules",
        "player reports",
        "community discussion",
        "suggestions",
        "bug reports",
        "general chat",
        "help needed",
    ),
    ContentModule.WIKI: (
        "minecraft guide",
        "redstone contraptions",
        "building techniques",
        "enchanting guide",
        "villager trading",
        "automatic farms",
        "mob spawner designs",
        "gameplay mechanics",
    ),
})

# Used when no module is given
GLOBAL_POPULAR_SEARCHES: tuple[str, ...] = (
    "minecraft server setup",
    "redstone contraptions",
    "building techniques",
    "enchanting guide",
    "villager trading",
    "automatic farms",
    "mob spawner designs",
    "resource pack creation",
    "plugin development",
    "world generation",
)


def popular_searches_for(module: ContentModule | None) -> tuple[str, ...]:
    """Return the canned popular searches for module (global list when None)."""
    if module is None:
        return GLOBAL_POPULAR_SEARCHES
    return MODULE_POPULAR_SEARCHES[module]
