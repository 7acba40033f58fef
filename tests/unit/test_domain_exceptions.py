"""Tests for domain exceptions (error_code, message, details)."""

import pytest

from community_search.domain.exceptions import (
    CommunitySearchException,
    SearchFailedException,
    SqlNotConfiguredException,
    SuggestionsFailedException,
    ValidationException,
)


def test_base_exception_default_error_code() -> None:
    """Base exception uses class name as error_code when not provided."""
    exc = CommunitySearchException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "CommunitySearchException"
    assert exc.details == {}
    assert str(exc) == "Something failed"


def test_base_exception_to_dict() -> None:
    exc = CommunitySearchException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception_with_field() -> None:
    exc = ValidationException("Query too long", field="q")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "q"}


def test_validation_exception_without_field() -> None:
    assert ValidationException("Bad input").details == {}


def test_search_failed_keeps_elapsed_time() -> None:
    exc = SearchFailedException(42, "boom")
    assert exc.error_code == "SEARCH_FAILED"
    assert exc.message == "Search failed"
    assert exc.search_time_ms == 42
    assert exc.details == {"searchTime": 42, "error": "boom"}


def test_suggestions_failed() -> None:
    exc = SuggestionsFailedException(7)
    assert exc.error_code == "SUGGESTIONS_FAILED"
    assert exc.details == {"searchTime": 7}


def test_sql_not_configured() -> None:
    exc = SqlNotConfiguredException()
    assert exc.error_code == "SERVICE_UNAVAILABLE"
    assert "SQL database" in exc.message


@pytest.mark.parametrize(
    "exc",
    [
        ValidationException("x"),
        SearchFailedException(0, "x"),
        SuggestionsFailedException(0),
        SqlNotConfiguredException(),
    ],
)
def test_all_domain_exceptions_share_base(exc: Exception) -> None:
    assert isinstance(exc, CommunitySearchException)
