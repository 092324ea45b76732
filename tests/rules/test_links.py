from __future__ import annotations

from inbox_sorter.rules.links import extract_unsubscribe_link


def test_extracts_link_with_original_casing() -> None:
    body = "Manage mail here: https://Example.com/UnSubscribe?X=1 thanks"

    assert extract_unsubscribe_link(body) == "https://Example.com/UnSubscribe?X=1"


def test_returns_exact_substring() -> None:
    body = "Click https://example.com/unsubscribe?x=1 to stop."

    assert extract_unsubscribe_link(body) == "https://example.com/unsubscribe?x=1"


def test_returns_first_match_only() -> None:
    body = (
        "First: http://a.example/unsubscribe/1 "
        "second: https://b.example/unsubscribe/2"
    )

    assert extract_unsubscribe_link(body) == "http://a.example/unsubscribe/1"


def test_plain_word_without_url_is_not_a_link() -> None:
    assert extract_unsubscribe_link("Reply STOP to unsubscribe from this list.") is None


def test_url_without_keyword_is_not_a_link() -> None:
    assert extract_unsubscribe_link("Unsubscribe: https://fashion.com/unsub") is None


def test_mailto_is_ignored() -> None:
    assert extract_unsubscribe_link("mailto:unsubscribe@example.com") is None


def test_keyword_directly_after_scheme_does_not_match() -> None:
    # At least one character is required between "://" and the keyword.
    assert extract_unsubscribe_link("https://unsubscribe.example.com/x") is None


def test_match_stops_at_whitespace() -> None:
    body = "https://example.com/list-unsubscribe-now\nBye"

    assert extract_unsubscribe_link(body) == "https://example.com/list-unsubscribe-now"


def test_empty_body() -> None:
    assert extract_unsubscribe_link("") is None
