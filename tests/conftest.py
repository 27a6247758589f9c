"""Shared pytest fixtures for dojo tests."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from dojo.app import create_app
from dojo.bootstrap import build_container, resolve_dependencies
from dojo.container import Container
from dojo.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _clear_process_caches(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from the process-wide container, cached settings and DOJO_* env."""
    for name in ("DOJO_HOST", "DOJO_PORT", "DOJO_LOG_LEVEL", "DOJO_GREETING"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    resolve_dependencies.cache_clear()
    yield
    get_settings.cache_clear()
    resolve_dependencies.cache_clear()


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture()
def container() -> Container:
    """Empty container without any capability bindings."""
    return Container()


@pytest.fixture()
def dojo_container(settings: Settings) -> Container:
    """Container with the application bindings."""
    return build_container(settings)


@pytest.fixture()
def client(dojo_container: Container) -> TestClient:
    return TestClient(create_app(dojo_container))
