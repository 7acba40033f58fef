"""Highlighter unit tests: marking, windows, escaping and fragment caps."""

from community_search.application.services.highlighter import extract_fragments, highlight
from community_search.domain.enums import HighlightField
from tests.factories import make_item


def test_title_terms_are_marked() -> None:
    item = make_item(title="Redstone Farm", content="nothing relevant here")
    highlights = highlight(item, "redstone")
    assert highlights[0].field == HighlightField.TITLE
    assert highlights[0].fragments == ("<mark>Redstone</mark> Farm",)


def test_no_highlights_for_short_query() -> None:
    item = make_item(title="ab cd", content="ab cd")
    assert highlight(item, "ab") == ()


def test_fields_without_matches_are_omitted() -> None:
    item = make_item(title="Mob grinder", content="uses redstone dust")
    highlights = highlight(item, "redstone")
    assert [h.field for h in highlights] == [HighlightField.CONTENT]
    assert highlights[0].fragments == ("uses <mark>redstone</mark> dust",)


def test_every_fragment_contains_a_marker() -> None:
    item = make_item(title="Redstone guide", content="Redstone circuits and a guide to farms")
    for h in highlight(item, "redstone guide farms"):
        for fragment in h.fragments:
            assert "<mark>" in fragment


def test_content_window_is_centered_with_ellipses() -> None:
    content = "a" * 200 + " redstone " + "b" * 200
    (body,) = highlight(make_item(title="x", content=content), "redstone")
    fragment = body.fragments[0]
    assert fragment.startswith("...")
    assert fragment.endswith("...")
    assert "<mark>redstone</mark>" in fragment
    # 150 characters of text plus the marker tags and both ellipses
    assert len(fragment) == 150 + len("<mark></mark>") + 6


def test_window_at_text_start_has_no_leading_ellipsis() -> None:
    content = "redstone " + "c" * 300
    fragments = extract_fragments(content, ["redstone"])
    assert fragments[0].startswith("<mark>redstone</mark>")
    assert fragments[0].endswith("...")


def test_at_most_three_fragments() -> None:
    item = make_item(title="x", content="alpha bravo charlie delta")
    (body,) = highlight(item, "alpha bravo charlie delta")
    assert len(body.fragments) == 3


def test_regex_metacharacters_match_literally() -> None:
    item = make_item(title="C++ (advanced) guide", content="Learn c++ today")
    highlights = highlight(item, "c++ (advanced)")
    assert highlights[0].fragments == ("<mark>C++</mark> <mark>(advanced)</mark> guide",)
    assert highlights[1].fragments == ("Learn <mark>c++</mark> today",)


def test_html_in_content_is_stripped_and_text_escaped() -> None:
    item = make_item(title="x", content="<p>1 &lt; 2 &amp; <b>redstone</b></p>")
    (body,) = highlight(item, "redstone")
    fragment = body.fragments[0]
    assert "<p>" not in fragment and "<b>" not in fragment
    assert fragment == "1 &lt; 2 &amp; <mark>redstone</mark>"


def test_title_markup_is_escaped() -> None:
    item = make_item(title="<script>redstone</script>")
    (title,) = highlight(item, "redstone")
    assert title.fragments == ("&lt;script&gt;<mark>redstone</mark>&lt;/script&gt;",)


def test_excerpt_used_when_content_missing() -> None:
    item = make_item(title="x", excerpt="All about redstone", content=None)
    (body,) = highlight(item, "redstone")
    assert body.field == HighlightField.EXCERPT
    assert body.fragments == ("All about <mark>redstone</mark>",)


def test_window_is_located_on_original_text_when_lowercase_grows() -> None:
    # "İ".lower() is two code points, so lowered indexes drift past the match.
    content = "İ" * 20 + " redstone"
    assert extract_fragments(content, ["redstone"], fragment_length=20) == [
        "..." + "İ" * 9 + " <mark>redstone</mark>"
    ]
