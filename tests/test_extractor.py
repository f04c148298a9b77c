"""Tests for the food extractor."""

import asyncio

from real_gains.domain.foods import FoodMention
from real_gains.services.extractor import (
    ExtractorService,
    extract_mentions,
    parse_segment,
    split_segments,
)
from tests.conftest import RecordingSleep


def test_extract_splits_on_conjunctions_and_drops_stop_words() -> None:
    mentions = extract_mentions("I had chicken and rice")

    assert mentions == [FoodMention(name="chicken"), FoodMention(name="rice")]


def test_split_segments_handles_all_delimiters() -> None:
    segments = split_segments("Pasta, cheese with spinach plus   juice")

    assert segments == ["pasta", "cheese", "spinach", "juice"]


def test_stop_words_only_match_whole_segments() -> None:
    segments = split_segments("I ate the theatre popcorn of some sort")

    assert segments == ["theatre", "popcorn", "sort"]


def test_conjunctions_split_inside_words() -> None:
    assert split_segments("sandwich") == ["s", "wich"]
    assert split_segments("rice without salt") == ["rice", "out", "salt"]


def test_extract_does_not_attach_count_to_unit_word() -> None:
    mentions = extract_mentions("100 g chicken")

    assert mentions == [
        FoodMention(name="100"),
        FoodMention(name="g"),
        FoodMention(name="chicken"),
    ]


def test_parse_segment_reads_leading_quantity() -> None:
    assert parse_segment("2 eggs") == FoodMention(name="eggs", quantity=2)
    assert parse_segment("eggs") == FoodMention(name="eggs")


def test_extract_attaches_count_to_following_word() -> None:
    mentions = extract_mentions("2 eggs and 3 apples")

    assert mentions == [
        FoodMention(name="eggs", quantity=2),
        FoodMention(name="apples", quantity=3),
    ]


def test_extract_keeps_trailing_bare_number_as_name() -> None:
    mentions = extract_mentions("toast 2")

    assert mentions == [FoodMention(name="toast"), FoodMention(name="2")]


def test_extract_empty_or_whitespace_input_yields_nothing() -> None:
    assert extract_mentions("") == []
    assert extract_mentions("   \t ") == []
    assert extract_mentions("I had some of the") == []


def test_extractor_service_echoes_raw_text_and_waits() -> None:
    sleep = RecordingSleep()
    service = ExtractorService(latency_seconds=0.5, sleep=sleep)

    parsed = asyncio.run(service.extract("Banana WITH Yogurt"))

    assert parsed.raw == "Banana WITH Yogurt"
    assert [mention.name for mention in parsed.items] == ["banana", "yogurt"]
    assert sleep.delays == [0.5]
