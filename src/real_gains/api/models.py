"""Pydantic models for the analyze API payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class AnalyzeRequest(BaseModel):
    """Analyze request body; the description type is checked by the route."""

    description: Any = None


class _FromDomain(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class FoodMentionOut(_FromDomain):
    """Parsed food mention."""

    name: str
    quantity: int | float | None = None
    unit: str | None = None


class NutritionOut(_FromDomain):
    """Nutrition values for an item or the totals."""

    calories: int | float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None


class ResolvedFoodItemOut(_FromDomain):
    """Nutrition for a single resolved food."""

    food: str
    nutrition: NutritionOut
    quantity: int | float
    unit: str


class NutritionResultOut(_FromDomain):
    """Resolved items with totals."""

    items: list[ResolvedFoodItemOut]
    totals: NutritionOut
    unresolved: list[str] | None = None


class AnalyzeResponse(BaseModel):
    """Analyze endpoint response."""

    parsed: list[FoodMentionOut]
    nutrition: NutritionResultOut


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str
    message: str
