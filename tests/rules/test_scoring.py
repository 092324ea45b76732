from __future__ import annotations

from inbox_sorter.models import EmailRecord
from inbox_sorter.rules.patterns import DEFAULT_PATTERNS, PatternTables
from inbox_sorter.rules.scoring import Scorer, score_email


def _email(subject: str = "", body: str = "", sender: str = "x@example.com") -> EmailRecord:
    return EmailRecord(
        id="m1",
        from_email=sender,
        subject=subject,
        date="2024-05-01T10:00:00.000Z",
        body=body,
    )


def test_default_tables_have_expected_sizes() -> None:
    assert len(DEFAULT_PATTERNS.marketing_keywords) == 21
    assert len(DEFAULT_PATTERNS.important_keywords) == 21
    assert all(kw == kw.lower() for kw in DEFAULT_PATTERNS.marketing_keywords)
    assert all(kw == kw.lower() for kw in DEFAULT_PATTERNS.important_keywords)


def test_empty_email_scores_zero() -> None:
    score = score_email(_email())

    assert (score.marketing, score.important, score.unsubscribe_link) == (0, 0, None)


def test_keyword_in_subject_and_body_counts_once() -> None:
    score = score_email(_email(subject="Invoice", body="The invoice is attached."))

    assert score.important == 1


def test_matching_is_case_insensitive() -> None:
    score = score_email(_email(subject="URGENT: CONTRACT"))

    assert score.important == 2


def test_marketing_sender_bonus_applies_once() -> None:
    score = score_email(_email(sender="noreply-marketing@no-reply.example.com"))

    assert score.marketing == 2
    assert score.important == 0


def test_important_sender_bonus_applies_once() -> None:
    score = score_email(_email(sender="admin-support@billing.example.com"))

    assert score.important == 2
    assert score.marketing == 0


def test_both_sender_bonuses_can_apply() -> None:
    score = score_email(_email(sender="noreply-billing@shop.example"))

    assert (score.marketing, score.important) == (2, 2)


def test_plain_unsubscribe_word_counts_keywords_but_no_link() -> None:
    score = score_email(_email(body="Reply STOP to unsubscribe."))

    # "unsubscribe" and "subscribe" both match, but there is no URL.
    assert score.marketing == 2
    assert score.unsubscribe_link is None


def test_unsubscribe_link_adds_bonus_and_keeps_casing() -> None:
    score = score_email(_email(body="Opt out: https://Example.com/Unsubscribe?x=1"))

    assert score.unsubscribe_link == "https://Example.com/Unsubscribe?x=1"
    assert score.marketing == 2 + 3


def test_sender_is_not_searched_for_keywords() -> None:
    score = score_email(_email(sender="newsletter@deals.example"))

    assert score.marketing == 0


def test_custom_tables_are_isolated_from_defaults() -> None:
    german = PatternTables(
        marketing_keywords=("angebot", "rabatt"),
        important_keywords=("rechnung",),
        marketing_senders=("newsletter",),
        important_senders=("buchhaltung",),
    )
    email = _email(subject="Rabatt Angebot", body="sale", sender="newsletter@shop.de")

    custom = Scorer(german).score(email)
    default = Scorer().score(email)

    assert (custom.marketing, custom.important) == (4, 0)
    assert (default.marketing, default.important) == (1, 0)
    assert "rabatt" not in DEFAULT_PATTERNS.marketing_keywords
