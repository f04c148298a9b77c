"""Food description analysis pipeline."""

import asyncio
from dataclasses import dataclass

from real_gains.domain.foods import AnalysisResult
from real_gains.services.extractor import ExtractorService
from real_gains.services.resolver import NutritionResolver


class AnalysisTimeoutError(Exception):
    """Raised when the analysis pipeline exceeds its time budget."""

    def __init__(self, timeout_seconds: float) -> None:
        super().__init__(f"Food analysis timed out after {timeout_seconds:g}s")
        self.timeout_seconds = timeout_seconds


@dataclass
class AnalysisService:
    """Run extraction and nutrition resolution for one description."""

    extractor: ExtractorService
    resolver: NutritionResolver
    timeout_seconds: float | None = None

    async def analyze(self, description: str) -> AnalysisResult:
        """Extract mentions, then resolve them, within the optional timeout."""
        if self.timeout_seconds is None:
            return await self._run(description)
        try:
            return await asyncio.wait_for(
                self._run(description), timeout=self.timeout_seconds
            )
        except TimeoutError as exc:
            raise AnalysisTimeoutError(self.timeout_seconds) from exc

    async def _run(self, description: str) -> AnalysisResult:
        parsed = await self.extractor.extract(description)
        nutrition = await self.resolver.resolve(parsed.items)
        return AnalysisResult(parsed=parsed, nutrition=nutrition)
