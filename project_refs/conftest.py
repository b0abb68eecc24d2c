from unittest.mock import AsyncMock, MagicMock

import pytest

from project_refs.cancellation import CancellationToken
from project_refs.handler import ReferenceHandler, reference_handler
from project_refs.memory_store import (
    InMemoryConfiguredProject,
    InMemoryItem,
    InMemoryMetadata,
    InMemoryPackageReferences,
    InMemoryProjectServices,
)
from project_refs.models import ReferenceInfo, ReferenceKind, ReferenceUpdate
from project_refs.settings import ReferenceSettings


def item(item_specification: str, **properties: str) -> InMemoryItem:
    return InMemoryItem(item_specification, InMemoryMetadata(dict(properties)))


def package_update(item_specification: str, action: str) -> ReferenceUpdate:
    info = ReferenceInfo(
        kind=ReferenceKind.PACKAGE, item_specification=item_specification
    )
    return ReferenceUpdate(reference_info=info, action=action)  # type: ignore


@pytest.fixture()
def settings(monkeypatch) -> ReferenceSettings:
    monkeypatch.delenv(
        ReferenceSettings.ENV_NAME_TREAT_AS_USED_PROPERTY, raising=False
    )
    monkeypatch.delenv(
        ReferenceSettings.ENV_NAME_DEFAULT_PACKAGE_VERSION, raising=False
    )
    return ReferenceSettings()


@pytest.fixture()
def configuration() -> InMemoryConfiguredProject:
    return InMemoryConfiguredProject()


@pytest.fixture()
def services(configuration) -> InMemoryProjectServices:
    assert configuration.services
    return configuration.services


@pytest.fixture()
def package_store(services) -> InMemoryPackageReferences:
    assert services.package_references is not None
    return services.package_references


@pytest.fixture()
def package_handler(settings) -> ReferenceHandler:
    return reference_handler(ReferenceKind.PACKAGE, settings)


@pytest.fixture()
def cancelled() -> CancellationToken:
    token = CancellationToken()
    token.cancel()
    return token


@pytest.fixture()
def untouched_configuration() -> MagicMock:
    """Configured project whose stores fail the test if they are awaited."""
    store = MagicMock()
    store.get_unresolved_references = AsyncMock(return_value=[])
    store.add = AsyncMock()
    store.remove = AsyncMock()
    services = MagicMock(
        package_references=store, project_references=store, assembly_references=store
    )
    return MagicMock(services=services)
