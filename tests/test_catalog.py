"""Tests for the static food catalog."""

import pytest

from real_gains.domain.catalog import DEFAULT_CATALOG, GENERIC_PORTION, FoodCatalog
from real_gains.domain.foods import NutritionProfile, PortionDefault


def test_default_catalog_keeps_table_order() -> None:
    names = DEFAULT_CATALOG.names

    assert names[0] == "chicken"
    assert names[1] == "rice"
    assert names[-1] == "juice"
    assert len(names) == 25


def test_every_portion_has_a_profile() -> None:
    for name in DEFAULT_CATALOG.portions:
        assert name in DEFAULT_CATALOG.profiles


def test_catalog_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        DEFAULT_CATALOG.profiles["tofu"] = NutritionProfile(76, 8, 1.9, 4.8)


def test_portion_falls_back_to_generic_portion() -> None:
    catalog = FoodCatalog(
        entries=(("tofu", NutritionProfile(76, 8, 1.9, 4.8)),),
        portions={},
        fallback_food="tofu",
    )

    assert catalog.portion("tofu") == GENERIC_PORTION


def test_catalog_rejects_unknown_fallback() -> None:
    with pytest.raises(ValueError, match="Fallback"):
        FoodCatalog(
            entries=(("tofu", NutritionProfile(76, 8, 1.9, 4.8)),),
            portions={},
            fallback_food="tempeh",
        )


def test_catalog_rejects_portion_without_profile() -> None:
    with pytest.raises(ValueError, match="Portion"):
        FoodCatalog(
            entries=(("tofu", NutritionProfile(76, 8, 1.9, 4.8)),),
            portions={"tempeh": PortionDefault(100, "g")},
            fallback_food="tofu",
        )
