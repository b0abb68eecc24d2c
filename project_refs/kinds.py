from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Protocol, Sequence

from project_refs.errors import PreconditionFailedError
from project_refs.models import ReferenceKind
from project_refs.settings import ReferenceSettings
from project_refs.store import (
    AssemblyReferenceStore,
    ConfiguredProjectServices,
    PackageReferenceStore,
    ProjectItem,
    ProjectReferenceStore,
)


class ReferenceKindStrategy(Protocol):
    kind: ReferenceKind

    async def unresolved_references(
        self, services: ConfiguredProjectServices
    ) -> Sequence[ProjectItem]: ...

    async def add(
        self, services: ConfiguredProjectServices, item_specification: str
    ) -> None: ...

    async def remove(
        self, services: ConfiguredProjectServices, item_specification: str
    ) -> None: ...


@dataclass
class PackageReferences:
    kind: ClassVar[ReferenceKind] = ReferenceKind.PACKAGE
    settings: ReferenceSettings = field(default_factory=ReferenceSettings)

    def _store(self, services: ConfiguredProjectServices) -> PackageReferenceStore:
        if (store := services.package_references) is None:
            raise PreconditionFailedError("services.package_references")
        return store

    async def unresolved_references(
        self, services: ConfiguredProjectServices
    ) -> Sequence[ProjectItem]:
        return await self._store(services).get_unresolved_references()

    async def add(
        self, services: ConfiguredProjectServices, item_specification: str
    ) -> None:
        version = self.settings.default_package_version
        await self._store(services).add(item_specification, version)

    async def remove(
        self, services: ConfiguredProjectServices, item_specification: str
    ) -> None:
        await self._store(services).remove(item_specification)


@dataclass
class ProjectReferences:
    kind: ClassVar[ReferenceKind] = ReferenceKind.PROJECT

    def _store(self, services: ConfiguredProjectServices) -> ProjectReferenceStore:
        if (store := services.project_references) is None:
            raise PreconditionFailedError("services.project_references")
        return store

    async def unresolved_references(
        self, services: ConfiguredProjectServices
    ) -> Sequence[ProjectItem]:
        return await self._store(services).get_unresolved_references()

    async def add(
        self, services: ConfiguredProjectServices, item_specification: str
    ) -> None:
        await self._store(services).add(item_specification)

    async def remove(
        self, services: ConfiguredProjectServices, item_specification: str
    ) -> None:
        await self._store(services).remove(item_specification)


@dataclass
class AssemblyReferences:
    """Assembly references are specified by their path."""

    kind: ClassVar[ReferenceKind] = ReferenceKind.ASSEMBLY

    def _store(self, services: ConfiguredProjectServices) -> AssemblyReferenceStore:
        if (store := services.assembly_references) is None:
            raise PreconditionFailedError("services.assembly_references")
        return store

    async def unresolved_references(
        self, services: ConfiguredProjectServices
    ) -> Sequence[ProjectItem]:
        return await self._store(services).get_unresolved_references()

    async def add(
        self, services: ConfiguredProjectServices, item_specification: str
    ) -> None:
        await self._store(services).add(
            assembly_name=None, assembly_path=item_specification
        )

    async def remove(
        self, services: ConfiguredProjectServices, item_specification: str
    ) -> None:
        await self._store(services).remove(
            assembly_name=None, assembly_path=item_specification
        )


def kind_strategy(
    kind: ReferenceKind, settings: ReferenceSettings | None = None
) -> ReferenceKindStrategy:
    match ReferenceKind(kind):
        case ReferenceKind.PACKAGE:
            return PackageReferences(settings=settings or ReferenceSettings())
        case ReferenceKind.PROJECT:
            return ProjectReferences()
        case ReferenceKind.ASSEMBLY:
            return AssemblyReferences()
    raise PreconditionFailedError(f"strategy for kind {kind}")
