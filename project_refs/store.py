"""Contracts of the project model this package works against.

The project model owns the reference items; everything here is accessed through
these protocols and never stored.
"""

from __future__ import annotations

from typing import Protocol, Sequence


class ItemMetadata(Protocol):
    async def get_property_names(self) -> Sequence[str]: ...

    async def get_evaluated_property_value(self, name: str) -> str | None: ...

    async def set_property_value(self, name: str, value: str) -> None: ...


class ProjectItem(Protocol):
    @property
    def evaluated_include(self) -> str: ...

    @property
    def metadata(self) -> ItemMetadata: ...


class PackageReferenceStore(Protocol):
    async def get_unresolved_references(self) -> Sequence[ProjectItem]: ...

    async def add(self, package_name: str, version: str) -> None: ...

    async def remove(self, package_name: str) -> None: ...


class ProjectReferenceStore(Protocol):
    async def get_unresolved_references(self) -> Sequence[ProjectItem]: ...

    async def add(self, project_path: str) -> None: ...

    async def remove(self, project_path: str) -> None: ...


class AssemblyReferenceStore(Protocol):
    async def get_unresolved_references(self) -> Sequence[ProjectItem]: ...

    async def add(
        self, assembly_name: str | None = None, assembly_path: str | None = None
    ) -> None: ...

    async def remove(
        self, assembly_name: str | None = None, assembly_path: str | None = None
    ) -> None: ...


class ConfiguredProjectServices(Protocol):
    @property
    def package_references(self) -> PackageReferenceStore | None: ...

    @property
    def project_references(self) -> ProjectReferenceStore | None: ...

    @property
    def assembly_references(self) -> AssemblyReferenceStore | None: ...


class ConfiguredProject(Protocol):
    @property
    def services(self) -> ConfiguredProjectServices | None: ...
