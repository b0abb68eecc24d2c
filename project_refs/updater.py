from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from project_refs.cancellation import CancellationToken, ensure_token
from project_refs.commands import ReferenceCommand
from project_refs.errors import ItemNotFoundError, PreconditionFailedError
from project_refs.handler import ReferenceHandler, reference_handler
from project_refs.models import (
    AttributeMap,
    ReferenceInfo,
    ReferenceKind,
    ReferenceUpdate,
    UpdateAction,
)
from project_refs.settings import ReferenceSettings
from project_refs.store import ConfiguredProject

logger = logging.getLogger(__name__)


def default_handlers(
    settings: ReferenceSettings | None = None,
) -> dict[ReferenceKind, ReferenceHandler]:
    settings = settings or ReferenceSettings()
    return {kind: reference_handler(kind, settings) for kind in ReferenceKind}


@dataclass
class ReferenceUpdater:
    """Routes reference requests to the handler of the reference kind."""

    handlers: dict[ReferenceKind, ReferenceHandler] = field(
        default_factory=default_handlers
    )

    def handler(self, kind: ReferenceKind) -> ReferenceHandler:
        try:
            return self.handlers[ReferenceKind(kind)]
        except KeyError as e:
            raise PreconditionFailedError(f"handler for {kind}") from e

    async def get_references(
        self,
        configuration: ConfiguredProject,
        cancellation: CancellationToken | None = None,
        kinds: Iterable[ReferenceKind] | None = None,
    ) -> list[ReferenceInfo]:
        ensure_token(cancellation).throw_if_cancellation_requested()
        references: list[ReferenceInfo] = []
        for kind in self.handlers if kinds is None else kinds:
            references.extend(
                await self.handler(kind).get_references(configuration, None)
            )
        return references

    async def try_update_reference(
        self,
        configuration: ConfiguredProject,
        update: ReferenceUpdate,
        cancellation: CancellationToken | None = None,
    ) -> bool:
        handler = self.handler(update.kind)
        if update.action != UpdateAction.REMOVE:
            return await handler.update_reference(configuration, update, cancellation)
        ensure_token(cancellation).throw_if_cancellation_requested()
        item_specification = update.item_specification
        if await handler.find_item(configuration, item_specification) is None:
            logger.warning(f"no {update.kind} reference {item_specification} to remove")
            return False
        await handler.remove_reference(configuration, item_specification)
        return True

    def get_update_command(
        self, configuration: ConfiguredProject, update: ReferenceUpdate
    ) -> ReferenceCommand:
        handler = self.handler(update.kind)
        if update.action == UpdateAction.REMOVE:
            return handler.create_remove_reference_command(configuration, update)
        return handler.create_update_reference_command(configuration, update)

    async def get_attributes(
        self,
        configuration: ConfiguredProject,
        kind: ReferenceKind,
        item_specification: str,
    ) -> AttributeMap | None:
        try:
            return await self.handler(kind).get_attributes(
                configuration, item_specification
            )
        except ItemNotFoundError:
            return None

    async def set_attributes(
        self,
        configuration: ConfiguredProject,
        kind: ReferenceKind,
        item_specification: str,
        attributes: AttributeMap,
    ) -> None:
        await self.handler(kind).set_attributes(
            configuration, item_specification, attributes
        )

    async def copy_attributes(
        self,
        configuration: ConfiguredProject,
        kind: ReferenceKind,
        source_specification: str,
        target_specification: str,
    ) -> bool:
        attributes = await self.get_attributes(
            configuration, kind, source_specification
        )
        if attributes is None:
            return False
        await self.set_attributes(
            configuration, kind, target_specification, attributes
        )
        return True
