"""Mock nutrition lookup over the static food catalog."""

import asyncio
import logging
import math
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from real_gains.domain.catalog import DEFAULT_CATALOG, FoodCatalog
from real_gains.domain.foods import (
    OPTIONAL_NUTRIENTS,
    FoodMention,
    NutritionProfile,
    NutritionResult,
    NutritionTotals,
    ResolvedFoodItem,
)

_logger = logging.getLogger(__name__)


@dataclass
class NutritionResolver:
    """Resolve mentions to canonical foods and scale their nutrition."""

    catalog: FoodCatalog = DEFAULT_CATALOG
    latency_seconds: float = 0.7
    strict: bool = False
    sleep: Callable[[float], Awaitable[None]] = field(default=asyncio.sleep)
    debug: bool = False

    async def resolve(self, mentions: Sequence[FoodMention]) -> NutritionResult:
        """Resolve mentions in order and accumulate rounded totals."""
        _logger.info("Resolving nutrition for %s food items", len(mentions))
        items: list[ResolvedFoodItem] = []
        unresolved: list[str] = []
        for mention in mentions:
            canonical = match_food(self.catalog, mention.name, strict=self.strict)
            if canonical is None:
                unresolved.append(_normalize(mention.name))
                continue
            item = scale_item(self.catalog, canonical, mention)
            if self.debug:
                _logger.info(
                    "Resolved %r -> %s (%s %s)",
                    mention.name,
                    canonical,
                    item.quantity,
                    item.unit,
                )
            items.append(item)

        result = NutritionResult(
            items=items,
            totals=sum_totals(items),
            unresolved=unresolved if self.strict else None,
        )
        await self.sleep(self.latency_seconds)
        return result


def match_food(catalog: FoodCatalog, name: str, *, strict: bool = False) -> str | None:
    """Return the canonical food for a name: exact, then substring, then fallback.

    In strict mode an unmatched name returns None instead of the fallback food.
    """
    normalized = _normalize(name)
    if normalized in catalog.profiles:
        return normalized
    for key in catalog.names:
        if key in normalized or normalized in key:
            return key
    if strict:
        return None
    return catalog.fallback_food


def scale_item(
    catalog: FoodCatalog, canonical: str, mention: FoodMention
) -> ResolvedFoodItem:
    """Scale a canonical per-100 profile to the default portion and quantity."""
    per_100 = catalog.profile(canonical)
    portion = catalog.portion(canonical)
    quantity = mention.quantity if mention.quantity is not None else 1
    unit = mention.unit or portion.unit or "g"
    scale_factor = (portion.quantity / 100) * quantity

    optional: dict[str, float] = {}
    for nutrient in OPTIONAL_NUTRIENTS:
        value = getattr(per_100, nutrient)
        if value is not None:
            optional[nutrient] = round_tenth(value * scale_factor)

    nutrition = NutritionProfile(
        calories=round_whole(per_100.calories * scale_factor),
        protein=round_tenth(per_100.protein * scale_factor),
        carbs=round_tenth(per_100.carbs * scale_factor),
        fat=round_tenth(per_100.fat * scale_factor),
        **optional,
    )
    return ResolvedFoodItem(
        food=canonical, nutrition=nutrition, quantity=quantity, unit=unit
    )


def sum_totals(items: Sequence[ResolvedFoodItem]) -> NutritionTotals:
    """Sum item nutrition, rounding only after every item is added."""
    calories = protein = carbs = fat = 0.0
    optional: dict[str, float] = {}
    for item in items:
        nutrition = item.nutrition
        calories += nutrition.calories
        protein += nutrition.protein
        carbs += nutrition.carbs
        fat += nutrition.fat
        for nutrient in OPTIONAL_NUTRIENTS:
            value = getattr(nutrition, nutrient)
            if value is not None:
                optional[nutrient] = optional.get(nutrient, 0.0) + value

    return NutritionTotals(
        calories=round_whole(calories),
        protein=round_tenth(protein),
        carbs=round_tenth(carbs),
        fat=round_tenth(fat),
        **{nutrient: round_tenth(value) for nutrient, value in optional.items()},
    )


def round_whole(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


def round_tenth(value: float) -> float:
    """Round to one decimal place, halves away from zero on the exact value."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _normalize(name: str) -> str:
    return name.strip().lower()
