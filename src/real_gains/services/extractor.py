"""Mock natural-language food extractor."""

import asyncio
import logging
import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from real_gains.domain.foods import FoodMention, ParsedDescription

STOP_WORDS = frozenset({"i", "had", "ate", "consumed", "some", "a", "an", "the", "of"})

_DELIMITER = re.compile(r",|and|with|plus|\s+")
_LEADING_QUANTITY = re.compile(r"^(\d+)\s+(.+)$")
_BARE_NUMBER = re.compile(r"^\d+$")

# Unit words never take a count; "100 g chicken" keeps "100" and "g" apart.
UNIT_WORDS = frozenset(
    {
        "g",
        "gram",
        "grams",
        "kg",
        "mg",
        "ml",
        "l",
        "oz",
        "lb",
        "lbs",
        "cup",
        "cups",
        "tbsp",
        "tsp",
    }
)

_logger = logging.getLogger(__name__)


@dataclass
class ExtractorService:
    """Split food descriptions into mentions after a simulated network delay."""

    latency_seconds: float = 0.5
    sleep: Callable[[float], Awaitable[None]] = field(default=asyncio.sleep)
    debug: bool = False

    async def extract(self, description: str) -> ParsedDescription:
        """Extract ordered food mentions from a description."""
        _logger.info("Extracting foods from description (%s chars)", len(description))
        items = extract_mentions(description)
        if self.debug:
            _logger.info(
                "Extracted mentions: %s", [mention.name for mention in items]
            )
        await self.sleep(self.latency_seconds)
        return ParsedDescription(items=items, raw=description)


def split_segments(description: str) -> list[str]:
    """Lower-case, split on delimiters and drop empty or stop-word segments."""
    segments = []
    for part in _DELIMITER.split(description.lower()):
        trimmed = part.strip()
        if trimmed and trimmed not in STOP_WORDS:
            segments.append(trimmed)
    return segments


def parse_segment(segment: str) -> FoodMention:
    """Build a mention, reading a leading integer as the quantity."""
    trimmed = segment.strip()
    match = _LEADING_QUANTITY.match(trimmed)
    if match:
        return FoodMention(name=match.group(2).strip(), quantity=int(match.group(1)))
    return FoodMention(name=trimmed)


def extract_mentions(description: str) -> list[FoodMention]:
    """Return mentions in text order; a bare count attaches to the next word."""
    segments = split_segments(description)
    mentions: list[FoodMention] = []
    index = 0
    while index < len(segments):
        segment = segments[index]
        following = segments[index + 1] if index + 1 < len(segments) else None
        if (
            _BARE_NUMBER.match(segment)
            and following is not None
            and not _BARE_NUMBER.match(following)
            and following not in UNIT_WORDS
        ):
            mentions.append(parse_segment(f"{segment} {following}"))
            index += 2
            continue
        mentions.append(parse_segment(segment))
        index += 1
    return mentions
