"""Food and nutrition domain models."""

from dataclasses import dataclass

OPTIONAL_NUTRIENTS = ("fiber", "sugar", "sodium")


@dataclass(frozen=True)
class FoodMention:
    """Candidate food name extracted from free text."""

    name: str
    quantity: int | float | None = None
    unit: str | None = None


@dataclass(frozen=True)
class ParsedDescription:
    """Mentions extracted from a description, with the raw text echoed back."""

    items: list[FoodMention]
    raw: str


@dataclass(frozen=True)
class NutritionProfile:
    """Nutrition values; per 100 g/ml in the catalog, scaled once resolved.

    Protein, carbs, fat, fiber and sugar are grams, sodium is milligrams.
    """

    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None


@dataclass(frozen=True)
class PortionDefault:
    """Assumed serving size for a canonical food."""

    quantity: float
    unit: str


@dataclass(frozen=True)
class ResolvedFoodItem:
    """Mention matched to a canonical food with scaled nutrition."""

    food: str
    nutrition: NutritionProfile
    quantity: int | float
    unit: str


@dataclass(frozen=True)
class NutritionTotals:
    """Totals summed across resolved items and rounded once."""

    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None


@dataclass(frozen=True)
class NutritionResult:
    """Resolved items plus totals for one request."""

    items: list[ResolvedFoodItem]
    totals: NutritionTotals
    unresolved: list[str] | None = None


@dataclass(frozen=True)
class AnalysisResult:
    """Combined output of the extract and resolve stages."""

    parsed: ParsedDescription
    nutrition: NutritionResult
