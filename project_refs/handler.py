from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from project_refs.cancellation import CancellationToken, ensure_token
from project_refs.commands import ReferenceCommand, ReferenceCommandType
from project_refs.errors import ItemNotFoundError, PreconditionFailedError
from project_refs.kinds import ReferenceKindStrategy, kind_strategy
from project_refs.metadata import (
    get_treat_as_used,
    read_attributes,
    set_treat_as_used,
    write_attributes,
)
from project_refs.models import (
    AttributeMap,
    ReferenceInfo,
    ReferenceKind,
    ReferenceUpdate,
    UpdateAction,
)
from project_refs.settings import ReferenceSettings
from project_refs.store import ConfiguredProject, ConfiguredProjectServices, ProjectItem

logger = logging.getLogger(__name__)


def require_services(
    configuration: ConfiguredProject | None,
) -> ConfiguredProjectServices:
    if configuration is None:
        raise PreconditionFailedError("configuration")
    if (services := configuration.services) is None:
        raise PreconditionFailedError("configuration.services")
    return services


@dataclass
class ReferenceHandler:
    """Reads and mutates the declared references of one kind in a configured project.

    Item lookups use the first item whose evaluated include equals the item
    specification, later duplicates are never touched.
    """

    strategy: ReferenceKindStrategy
    settings: ReferenceSettings = field(default_factory=ReferenceSettings)

    @property
    def kind(self) -> ReferenceKind:
        return self.strategy.kind

    @property
    def treat_as_used_property(self) -> str:
        return self.settings.treat_as_used_property

    async def get_unresolved_references(
        self, configuration: ConfiguredProject
    ) -> Sequence[ProjectItem]:
        services = require_services(configuration)
        return await self.strategy.unresolved_references(services)

    async def add_reference(
        self, configuration: ConfiguredProject, item_specification: str
    ) -> None:
        services = require_services(configuration)
        logger.info(f"adding {self.kind} reference {item_specification}")
        await self.strategy.add(services, item_specification)

    async def remove_reference(
        self, configuration: ConfiguredProject, item_specification: str
    ) -> None:
        services = require_services(configuration)
        logger.info(f"removing {self.kind} reference {item_specification}")
        await self.strategy.remove(services, item_specification)

    async def get_references(
        self,
        configuration: ConfiguredProject,
        cancellation: CancellationToken | None = None,
    ) -> list[ReferenceInfo]:
        ensure_token(cancellation).throw_if_cancellation_requested()
        references: list[ReferenceInfo] = []
        for item in await self.get_unresolved_references(configuration):
            treat_as_used = await get_treat_as_used(
                item.metadata, self.treat_as_used_property
            )
            references.append(
                ReferenceInfo(
                    kind=self.kind,
                    item_specification=item.evaluated_include,
                    treat_as_used=treat_as_used,
                )
            )
        return references

    async def find_item(
        self, configuration: ConfiguredProject, item_specification: str
    ) -> ProjectItem | None:
        items = await self.get_unresolved_references(configuration)
        return next(
            (item for item in items if item.evaluated_include == item_specification),
            None,
        )

    async def update_reference(
        self,
        configuration: ConfiguredProject,
        update: ReferenceUpdate,
        cancellation: CancellationToken | None = None,
    ) -> bool:
        ensure_token(cancellation).throw_if_cancellation_requested()
        item_specification = update.item_specification
        item = await self.find_item(configuration, item_specification)
        if item is None:
            logger.warning(
                f"no {self.kind} reference {item_specification} to update, skipping {update.action}"
            )
            return False
        treat_as_used = update.action == UpdateAction.SET_TREAT_AS_USED
        await set_treat_as_used(
            item.metadata, treat_as_used, self.treat_as_used_property
        )
        logger.info(
            f"{self.kind} reference {item_specification} {self.treat_as_used_property}={treat_as_used}"
        )
        return True

    def create_update_reference_command(
        self, configuration: ConfiguredProject, update: ReferenceUpdate
    ) -> ReferenceCommand:
        if update.action == UpdateAction.SET_TREAT_AS_USED:
            command_type = ReferenceCommandType.SET_ATTRIBUTE
        else:
            command_type = ReferenceCommandType.UNSET_ATTRIBUTE
        return ReferenceCommand(command_type, self, configuration, update)

    def create_remove_reference_command(
        self, configuration: ConfiguredProject, update: ReferenceUpdate
    ) -> ReferenceCommand:
        return ReferenceCommand(
            ReferenceCommandType.REMOVE_REFERENCE, self, configuration, update
        )

    async def get_attributes(
        self, configuration: ConfiguredProject, item_specification: str
    ) -> AttributeMap:
        item = await self.find_item(configuration, item_specification)
        if item is None:
            raise ItemNotFoundError(item_specification)
        return await read_attributes(item.metadata)

    async def set_attributes(
        self,
        configuration: ConfiguredProject,
        item_specification: str,
        attributes: AttributeMap,
    ) -> None:
        item = await self.find_item(configuration, item_specification)
        if item is None:
            logger.warning(
                f"no {self.kind} reference {item_specification}, attributes not set"
            )
            return
        await write_attributes(item.metadata, attributes)


def reference_handler(
    kind: ReferenceKind, settings: ReferenceSettings | None = None
) -> ReferenceHandler:
    settings = settings or ReferenceSettings()
    return ReferenceHandler(kind_strategy(kind, settings), settings)
