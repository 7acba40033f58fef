"""DTOs for query suggestions."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SuggestionBundle:
    """Completions, corrections and popular searches for one partial query."""

    completions: list[str] = field(default_factory=list)
    corrections: list[str] = field(default_factory=list)
    popular: list[str] = field(default_factory=list)
    search_time_ms: int = 0
