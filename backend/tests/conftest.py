"""Integration/E2E test fixtures.

This conftest loads the full app and is used for API and GraphQL tests.
Unit tests in tests/unit/ have their own isolated conftest that doesn't load the app.
"""

from __future__ import annotations

import os
import pytest
import pytest_asyncio
from typing import AsyncIterator, Generator, cast, Any
from pathlib import Path
from dotenv import load_dotenv

from httpx import AsyncClient, ASGITransport

# Load .env.test for integration tests (overrides .env values)
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

from app import app  # noqa: E402
from infrastructure.ai.stub_provider import StubFoodAnalysisProvider  # noqa: E402
from infrastructure.container import AppContainer, build_container  # noqa: E402
from infrastructure.persistence.in_memory import (  # noqa: E402
    InMemoryNutritionRecordRepository,
    InMemoryUserSettingsRepository,
)


@pytest.fixture(autouse=True)
def _isolated_env(
    request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Force in-memory storage and the stub provider for every test.

    Values from a developer .env (real API keys, MongoDB URI) must not leak
    into tests. Tests that need a specific value set it with
    monkeypatch.setenv. Mongo integration tests opt out with the
    ``mongodb`` marker.
    """
    if request.node.get_closest_marker("mongodb"):
        yield
        return

    monkeypatch.setenv("REPOSITORY_BACKEND", "inmemory")
    monkeypatch.setenv("VISION_PROVIDER", "stub")
    monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)
    monkeypatch.delenv("STRICT_PROFILE_LABELS", raising=False)
    yield


@pytest.fixture
def stub_provider() -> StubFoodAnalysisProvider:
    return StubFoodAnalysisProvider()


@pytest.fixture
def container(stub_provider: StubFoodAnalysisProvider) -> AppContainer:
    """Fresh container with in-memory repositories and the stub provider."""
    return build_container(
        analysis_provider=stub_provider,
        record_repository=InMemoryNutritionRecordRepository(),
        settings_repository=InMemoryUserSettingsRepository(),
    )


@pytest_asyncio.fixture
async def client(container: AppContainer) -> AsyncIterator[AsyncClient]:
    """Async HTTP client for REST/GraphQL tests.

    ASGITransport does not run the lifespan, so the container is injected
    on app.state directly and removed afterwards.
    """
    await container.startup()
    app.state.container = container
    transport = ASGITransport(app=cast(Any, app))
    try:
        async with AsyncClient(
            transport=transport,
            base_url="http://testserver",
        ) as ac:
            yield ac
    finally:
        app.state.container = None
        await container.shutdown()


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip MongoDB integration tests unless REPOSITORY_BACKEND=mongodb."""
    if os.getenv("REPOSITORY_BACKEND", "inmemory").lower() == "mongodb" and os.getenv(
        "MONGODB_URI"
    ):
        return
    skip_mongo = pytest.mark.skip(reason="needs REPOSITORY_BACKEND=mongodb and MONGODB_URI")
    for item in items:
        if item.get_closest_marker("mongodb"):
            item.add_marker(skip_mongo)
