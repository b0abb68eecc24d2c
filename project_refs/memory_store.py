from __future__ import annotations

import logging
from dataclasses import dataclass, field

from project_refs.errors import StoreFailureError

logger = logging.getLogger(__name__)
VERSION_PROPERTY = "Version"
ASSEMBLY_NAME_PROPERTY = "AssemblyName"


@dataclass
class InMemoryMetadata:
    properties: dict[str, str] = field(default_factory=dict)
    read_only_names: set[str] = field(default_factory=set)  # writes raise

    async def get_property_names(self) -> list[str]:
        return list(self.properties)

    async def get_evaluated_property_value(self, name: str) -> str | None:
        return self.properties.get(name)

    async def set_property_value(self, name: str, value: str) -> None:
        if name in self.read_only_names:
            raise StoreFailureError(f"property {name} is read-only")
        self.properties[name] = value


@dataclass
class InMemoryItem:
    evaluated_include: str
    metadata: InMemoryMetadata = field(default_factory=InMemoryMetadata)


@dataclass
class InMemoryReferenceStore:
    items: list[InMemoryItem] = field(default_factory=list)

    async def get_unresolved_references(self) -> list[InMemoryItem]:
        return list(self.items)

    def _index(self, item_specification: str) -> int | None:
        return next(
            (
                i
                for i, item in enumerate(self.items)
                if item.evaluated_include == item_specification
            ),
            None,
        )

    def _add_item(
        self, item_specification: str, properties: dict[str, str] | None = None
    ) -> None:
        if self._index(item_specification) is not None:
            logger.info(f"reference {item_specification} already exists")
            return
        metadata = InMemoryMetadata(properties=dict(properties or {}))
        self.items.append(InMemoryItem(item_specification, metadata))

    def _remove_item(self, item_specification: str) -> None:
        index = self._index(item_specification)
        if index is None:
            logger.info(f"reference {item_specification} already removed")
            return
        del self.items[index]


class InMemoryPackageReferences(InMemoryReferenceStore):
    async def add(self, package_name: str, version: str) -> None:
        properties = {VERSION_PROPERTY: version} if version else None
        self._add_item(package_name, properties)

    async def remove(self, package_name: str) -> None:
        self._remove_item(package_name)


class InMemoryProjectReferences(InMemoryReferenceStore):
    async def add(self, project_path: str) -> None:
        self._add_item(project_path)

    async def remove(self, project_path: str) -> None:
        self._remove_item(project_path)


def _assembly_specification(
    assembly_name: str | None, assembly_path: str | None
) -> str:
    if item_specification := assembly_path or assembly_name:
        return item_specification
    raise StoreFailureError("assembly_name or assembly_path is required")


class InMemoryAssemblyReferences(InMemoryReferenceStore):
    """Items are keyed by assembly path, falling back to the assembly name."""

    async def add(
        self, assembly_name: str | None = None, assembly_path: str | None = None
    ) -> None:
        item_specification = _assembly_specification(assembly_name, assembly_path)
        properties = {ASSEMBLY_NAME_PROPERTY: assembly_name} if assembly_name else None
        self._add_item(item_specification, properties)

    async def remove(
        self, assembly_name: str | None = None, assembly_path: str | None = None
    ) -> None:
        item_specification = _assembly_specification(assembly_name, assembly_path)
        self._remove_item(item_specification)


@dataclass
class InMemoryProjectServices:
    package_references: InMemoryPackageReferences | None = field(
        default_factory=InMemoryPackageReferences
    )
    project_references: InMemoryProjectReferences | None = field(
        default_factory=InMemoryProjectReferences
    )
    assembly_references: InMemoryAssemblyReferences | None = field(
        default_factory=InMemoryAssemblyReferences
    )


@dataclass
class InMemoryConfiguredProject:
    name: str = "Debug|AnyCPU"
    services: InMemoryProjectServices | None = field(
        default_factory=InMemoryProjectServices
    )
