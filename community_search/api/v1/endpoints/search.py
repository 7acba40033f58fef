"""Search API: cross-module relevance search and query suggestions."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from community_search.api.v1.dependencies import get_search_service, get_suggestion_service
from community_search.application.use_cases.search import SearchService
from community_search.application.use_cases.suggestions import SuggestionService
from community_search.core.limiter import limit_search, limit_suggestions
from community_search.domain.enums import ContentModule
from community_search.schemas.search import SearchRequest, SearchResponse, SuggestionsResponse

router = APIRouter()


@router.post("", response_model=SearchResponse, response_model_exclude_none=True)
@limit_search
async def search(
    request: Request,
    body: SearchRequest,
    search_svc: Annotated[SearchService, Depends(get_search_service)],
) -> SearchResponse:
    """Search forum, blog and wiki; return one ranked page plus facets."""
    outcome = await search_svc.search(body.to_query())
    return SearchResponse.from_outcome(outcome, body)


@router.get("/suggestions", response_model=SuggestionsResponse)
@limit_suggestions
async def suggestions(
    request: Request,
    suggestion_svc: Annotated[SuggestionService, Depends(get_suggestion_service)],
    q: str = Query("", max_length=500),
    module: ContentModule | None = Query(None, description="forum | blog | wiki"),
) -> SuggestionsResponse:
    """Completions, corrections and popular searches for a partial query."""
    bundle = await suggestion_svc.suggest(q, module)
    return SuggestionsResponse.from_bundle(bundle)
