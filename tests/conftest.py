"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest
from fastapi.testclient import TestClient

from real_gains.api.app import create_app
from real_gains.config import Settings
from real_gains.containers import AppContainer, build_container


@dataclass
class RecordingSleep:
    """Fake sleep that records requested delays without waiting."""

    delays: list[float] = field(default_factory=list)

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        parser_latency_seconds=0,
        lookup_latency_seconds=0,
        analyze_timeout_seconds=5,
        strict_matching=False,
        environment="test",
    )


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
