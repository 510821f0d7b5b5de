"""Tests for core.knowledge_base."""
import re

import pytest

from core.knowledge_base import compile_topic_pattern, list_titles, parse_topics
from core.models import TopicEntry


def test_parse_extracts_code_title_and_raw_line() -> None:
    topics = parse_topics("KA 12 - Caching Strategies: cache-aside, TTLs")

    assert topics == [
        TopicEntry(
            code=12,
            title="Caching Strategies",
            raw_line="KA 12 - Caching Strategies: cache-aside, TTLs",
        )
    ]


def test_title_without_colon_is_whole_remainder() -> None:
    topics = parse_topics("KA 2 - Scaling  ")

    assert topics[0].title == "Scaling"


def test_title_stops_at_first_colon() -> None:
    topics = parse_topics("KA 3 - Security: authn: authz")

    assert topics[0].title == "Security"


def test_non_topic_lines_are_ignored() -> None:
    text = "\n".join([
        "# Heading",
        "",
        "Plain prose mentioning KA 1 - Testing in the middle.",
        "KA one - Not a number",
        "KA 4 -Missing space",
        "KA 5 - : no title",
        "  KA 6 - Indented",
        "KA 7 - Valid: body",
    ])

    assert list_titles(parse_topics(text)) == ["Valid"]


def test_parse_preserves_document_order_and_duplicates() -> None:
    text = "KA 9 - Zeta\nKA 1 - Alpha\nKA 9 - Zeta\n"

    topics = parse_topics(text)

    assert [t.code for t in topics] == [9, 1, 9]
    assert list_titles(topics) == ["Zeta", "Alpha", "Zeta"]


def test_parse_is_idempotent() -> None:
    text = "KA 1 - Testing: unit tests\nprose\nKA 2 - Scaling: load balancing\n"

    assert parse_topics(text) == parse_topics(text)


def test_crlf_line_endings() -> None:
    topics = parse_topics("KA 1 - Testing: unit tests\r\nKA 2 - Scaling\r\n")

    assert list_titles(topics) == ["Testing", "Scaling"]
    assert topics[1].raw_line == "KA 2 - Scaling"


def test_custom_marker() -> None:
    text = "TOPIC 3 - Graphs: BFS\nKA 1 - Testing\n## 4 - Heaps"

    assert list_titles(parse_topics(text, marker="TOPIC")) == ["Graphs"]
    assert list_titles(parse_topics(text, marker="TOPIC|##")) == ["Graphs", "Heaps"]


def test_invalid_marker_raises() -> None:
    with pytest.raises(re.error):
        compile_topic_pattern("KA(")


def test_empty_document() -> None:
    assert parse_topics("") == []


@pytest.mark.parametrize("line, title", [
    ("KA 1 - Testing: unit tests", "Testing"),
    ("KA 2 - Scaling:load balancing", "Scaling"),
    ("KA 3 - Two Words :  spaced body", "Two Words"),
])
def test_body_never_leaks_into_title(line: str, title: str) -> None:
    topics = parse_topics(line)

    assert [t.title for t in topics] == [title]
    assert ":" not in topics[0].title


def test_colon_right_after_separator_is_prose() -> None:
    assert parse_topics("KA 5 - : no title\nKA 6 -  : still none") == []
