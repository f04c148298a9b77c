"""Dependency container wiring for the application."""

from dataclasses import dataclass

from real_gains.config import Settings, resolve_timeout
from real_gains.domain.catalog import DEFAULT_CATALOG, FoodCatalog
from real_gains.services.analysis import AnalysisService
from real_gains.services.extractor import ExtractorService
from real_gains.services.resolver import NutritionResolver


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: FoodCatalog
    extractor: ExtractorService
    resolver: NutritionResolver
    analysis_service: AnalysisService


def build_container(
    settings: Settings | None = None, catalog: FoodCatalog | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_catalog = catalog or DEFAULT_CATALOG
    extractor = ExtractorService(
        latency_seconds=resolved_settings.parser_latency_seconds,
        debug=resolved_settings.debug,
    )
    resolver = NutritionResolver(
        catalog=resolved_catalog,
        latency_seconds=resolved_settings.lookup_latency_seconds,
        strict=resolved_settings.strict_matching,
        debug=resolved_settings.debug,
    )
    analysis_service = AnalysisService(
        extractor=extractor,
        resolver=resolver,
        timeout_seconds=resolve_timeout(resolved_settings.analyze_timeout_seconds),
    )
    return AppContainer(
        settings=resolved_settings,
        catalog=resolved_catalog,
        extractor=extractor,
        resolver=resolver,
        analysis_service=analysis_service,
    )
