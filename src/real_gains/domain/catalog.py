"""Static food reference tables."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from real_gains.domain.foods import NutritionProfile, PortionDefault

GENERIC_PORTION = PortionDefault(quantity=100, unit="g")


@dataclass(frozen=True)
class FoodCatalog:
    """Read-only nutrition and portion tables.

    ``entries`` keeps the table order; substring matching scans it front to back.
    """

    entries: tuple[tuple[str, NutritionProfile], ...]
    portions: Mapping[str, PortionDefault]
    fallback_food: str
    profiles: Mapping[str, NutritionProfile] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        profiles = dict(self.entries)
        if len(profiles) != len(self.entries):
            raise ValueError("Duplicate food names in nutrition table")
        if self.fallback_food not in profiles:
            raise ValueError(f"Fallback food {self.fallback_food!r} has no profile")
        missing = [name for name in self.portions if name not in profiles]
        if missing:
            raise ValueError(f"Portion defaults without a profile: {missing}")
        object.__setattr__(self, "profiles", MappingProxyType(profiles))
        object.__setattr__(self, "portions", MappingProxyType(dict(self.portions)))

    @property
    def names(self) -> tuple[str, ...]:
        """Canonical food names in table order."""
        return tuple(name for name, _ in self.entries)

    def profile(self, name: str) -> NutritionProfile:
        """Return the per-100 profile for a canonical food."""
        return self.profiles[name]

    def portion(self, name: str) -> PortionDefault:
        """Return the default portion, or the generic 100 g portion."""
        return self.portions.get(name, GENERIC_PORTION)


_NUTRITION_PER_100: tuple[tuple[str, NutritionProfile], ...] = (
    ("chicken", NutritionProfile(calories=165, protein=31, carbs=0, fat=3.6)),
    ("rice", NutritionProfile(calories=130, protein=2.7, carbs=28, fat=0.3)),
    (
        "apple",
        NutritionProfile(
            calories=52, protein=0.3, carbs=14, fat=0.2, fiber=2.4, sugar=10.3
        ),
    ),
    (
        "banana",
        NutritionProfile(
            calories=89, protein=1.1, carbs=22.8, fat=0.3, fiber=2.6, sugar=12.2
        ),
    ),
    ("egg", NutritionProfile(calories=155, protein=13, carbs=1.1, fat=11)),
    (
        "bread",
        NutritionProfile(calories=265, protein=9.4, carbs=49, fat=3.2, fiber=2.7),
    ),
    ("pasta", NutritionProfile(calories=131, protein=5, carbs=25, fat=1.1)),
    ("potato", NutritionProfile(calories=77, protein=2, carbs=17, fat=0.1, fiber=2.2)),
    ("beef", NutritionProfile(calories=250, protein=26, carbs=0, fat=17)),
    ("salmon", NutritionProfile(calories=208, protein=20, carbs=0, fat=13)),
    ("milk", NutritionProfile(calories=42, protein=3.4, carbs=5, fat=1)),
    ("yogurt", NutritionProfile(calories=59, protein=3.5, carbs=5, fat=3.3)),
    ("cheese", NutritionProfile(calories=402, protein=25, carbs=1.3, fat=33)),
    (
        "broccoli",
        NutritionProfile(calories=34, protein=2.8, carbs=7, fat=0.4, fiber=2.6),
    ),
    (
        "spinach",
        NutritionProfile(calories=23, protein=2.9, carbs=3.6, fat=0.4, fiber=2.2),
    ),
    (
        "carrot",
        NutritionProfile(calories=41, protein=0.9, carbs=10, fat=0.2, fiber=2.8),
    ),
    ("coffee", NutritionProfile(calories=2, protein=0.1, carbs=0, fat=0)),
    ("tea", NutritionProfile(calories=1, protein=0, carbs=0.3, fat=0)),
    ("water", NutritionProfile(calories=0, protein=0, carbs=0, fat=0)),
    (
        "chocolate",
        NutritionProfile(calories=546, protein=4.9, carbs=60, fat=31, sugar=52),
    ),
    ("pizza", NutritionProfile(calories=266, protein=11, carbs=33, fat=10)),
    ("burger", NutritionProfile(calories=295, protein=17, carbs=30, fat=14)),
    ("fries", NutritionProfile(calories=312, protein=3.4, carbs=41, fat=15)),
    (
        "soda",
        NutritionProfile(calories=41, protein=0, carbs=10.6, fat=0, sugar=10.6),
    ),
    (
        "juice",
        NutritionProfile(calories=45, protein=0.5, carbs=10.4, fat=0.1, sugar=9.5),
    ),
)

_PORTIONS: dict[str, PortionDefault] = {
    "chicken": PortionDefault(85, "g"),  # ~3 oz
    "rice": PortionDefault(150, "g"),  # ~1 cup cooked
    "apple": PortionDefault(182, "g"),  # 1 medium
    "banana": PortionDefault(118, "g"),  # 1 medium
    "egg": PortionDefault(50, "g"),  # 1 large
    "bread": PortionDefault(30, "g"),  # 1 slice
    "pasta": PortionDefault(140, "g"),  # ~1 cup cooked
    "potato": PortionDefault(173, "g"),  # 1 medium
    "beef": PortionDefault(85, "g"),  # ~3 oz
    "salmon": PortionDefault(85, "g"),  # ~3 oz
    "milk": PortionDefault(240, "ml"),  # 1 cup
    "yogurt": PortionDefault(170, "g"),  # ~6 oz container
    "cheese": PortionDefault(28, "g"),  # ~1 oz
    "broccoli": PortionDefault(91, "g"),  # 1 cup
    "spinach": PortionDefault(30, "g"),  # 1 cup raw
    "carrot": PortionDefault(61, "g"),  # 1 medium
    "coffee": PortionDefault(240, "ml"),
    "tea": PortionDefault(240, "ml"),
    "water": PortionDefault(240, "ml"),
    "chocolate": PortionDefault(40, "g"),  # ~1.4 oz bar
    "pizza": PortionDefault(107, "g"),  # 1 slice
    "burger": PortionDefault(150, "g"),  # 1 patty
    "fries": PortionDefault(117, "g"),  # medium serving
    "soda": PortionDefault(355, "ml"),  # 12 oz can
    "juice": PortionDefault(240, "ml"),
}

DEFAULT_CATALOG = FoodCatalog(
    entries=_NUTRITION_PER_100,
    portions=_PORTIONS,
    fallback_food="chicken",
)
