"""Tests for the analysis pipeline."""

import asyncio
from dataclasses import dataclass

import pytest

from real_gains.domain.foods import FoodMention
from real_gains.services.analysis import AnalysisService, AnalysisTimeoutError
from real_gains.services.extractor import ExtractorService
from real_gains.services.resolver import NutritionResolver
from tests.conftest import RecordingSleep


@dataclass
class OrderedSleep:
    """Fake sleep that records which stage waited, in order."""

    label: str
    calls: list[str]

    async def __call__(self, seconds: float) -> None:
        self.calls.append(self.label)


def test_analyze_runs_extract_then_resolve() -> None:
    calls: list[str] = []
    service = AnalysisService(
        extractor=ExtractorService(sleep=OrderedSleep("extract", calls)),
        resolver=NutritionResolver(sleep=OrderedSleep("resolve", calls)),
    )

    result = asyncio.run(service.analyze("I had chicken and rice"))

    assert calls == ["extract", "resolve"]
    assert result.parsed.raw == "I had chicken and rice"
    assert result.parsed.items == [
        FoodMention(name="chicken"),
        FoodMention(name="rice"),
    ]
    assert result.nutrition.totals.calories == 335


def test_analyze_description_without_foods_returns_empty_result() -> None:
    service = AnalysisService(
        extractor=ExtractorService(sleep=RecordingSleep()),
        resolver=NutritionResolver(sleep=RecordingSleep()),
    )

    result = asyncio.run(service.analyze("I had some"))

    assert result.parsed.items == []
    assert result.nutrition.items == []
    assert result.nutrition.totals.calories == 0


def test_analyze_raises_timeout_when_pipeline_is_slow() -> None:
    service = AnalysisService(
        extractor=ExtractorService(latency_seconds=1.0),
        resolver=NutritionResolver(latency_seconds=0),
        timeout_seconds=0.01,
    )

    with pytest.raises(AnalysisTimeoutError) as exc_info:
        asyncio.run(service.analyze("rice"))

    assert exc_info.value.timeout_seconds == 0.01
