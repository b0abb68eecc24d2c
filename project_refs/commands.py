from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from zero_3rdparty.enum_utils import StrEnum

from project_refs.cancellation import CancellationToken, ensure_token
from project_refs.errors import ItemNotFoundError
from project_refs.metadata import serialize_bool
from project_refs.models import AttributeMap, ReferenceUpdate, UpdateAction
from project_refs.store import ConfiguredProject

if TYPE_CHECKING:
    from project_refs.handler import ReferenceHandler

logger = logging.getLogger(__name__)


class ReferenceCommandType(StrEnum):
    SET_ATTRIBUTE = "set_attribute"
    UNSET_ATTRIBUTE = "unset_attribute"
    REMOVE_REFERENCE = "remove_reference"


@dataclass
class ReferenceCommand:
    """A staged reference mutation, applied with `execute` and reverted with `undo`.

    The remove variant removes `update.reference_info.item_specification`
    whatever `update.action` is. `undo` is a no-op returning False until
    `execute` has changed the item.
    """

    type: ReferenceCommandType
    handler: ReferenceHandler
    configuration: ConfiguredProject
    update: ReferenceUpdate
    _applied: bool = False
    _previous_value: str | None = None
    _removed_attributes: AttributeMap | None = None

    @property
    def item_specification(self) -> str:
        return self.update.item_specification

    async def execute(self, cancellation: CancellationToken | None = None) -> bool:
        match self.type:
            case ReferenceCommandType.SET_ATTRIBUTE:
                return await self._update(UpdateAction.SET_TREAT_AS_USED, cancellation)
            case ReferenceCommandType.UNSET_ATTRIBUTE:
                return await self._update(
                    UpdateAction.UNSET_TREAT_AS_USED, cancellation
                )
            case ReferenceCommandType.REMOVE_REFERENCE:
                return await self._remove()
        raise NotImplementedError(f"unknown command type: {self.type}")

    async def undo(self, cancellation: CancellationToken | None = None) -> bool:
        match self.type:
            case (
                ReferenceCommandType.SET_ATTRIBUTE
                | ReferenceCommandType.UNSET_ATTRIBUTE
            ):
                return await self._restore_value(cancellation)
            case ReferenceCommandType.REMOVE_REFERENCE:
                return await self._restore_reference()
        raise NotImplementedError(f"unknown command type: {self.type}")

    async def redo(self, cancellation: CancellationToken | None = None) -> bool:
        return await self.execute(cancellation)

    async def _update(
        self, action: UpdateAction, cancellation: CancellationToken | None
    ) -> bool:
        token = ensure_token(cancellation)
        token.throw_if_cancellation_requested()
        item = await self.handler.find_item(
            self.configuration, self.item_specification
        )
        previous_value = None
        if item is not None:
            previous_value = await item.metadata.get_evaluated_property_value(
                self.handler.treat_as_used_property
            )
        update = self.update.with_action(action)
        updated = await self.handler.update_reference(
            self.configuration, update, token
        )
        if updated:
            self._applied = True
            self._previous_value = previous_value
        return updated

    async def _restore_value(self, cancellation: CancellationToken | None) -> bool:
        ensure_token(cancellation).throw_if_cancellation_requested()
        if not self._applied:
            return False
        # no property delete in the store contract, an absent value restores as False
        value = self._previous_value
        if value is None:
            value = serialize_bool(False)
        await self.handler.set_attributes(
            self.configuration,
            self.item_specification,
            {self.handler.treat_as_used_property: value},
        )
        self._applied = False
        return True

    async def _remove(self) -> bool:
        try:
            self._removed_attributes = await self.handler.get_attributes(
                self.configuration, self.item_specification
            )
            self._applied = True
        except ItemNotFoundError:
            logger.info(f"reference {self.item_specification} not found before remove")
            self._removed_attributes = None
            self._applied = False
        await self.handler.remove_reference(
            self.configuration, self.item_specification
        )
        return True

    async def _restore_reference(self) -> bool:
        if not self._applied:
            logger.info(f"reference {self.item_specification} was not removed")
            return False
        await self.handler.add_reference(self.configuration, self.item_specification)
        if attributes := self._removed_attributes:
            await self.handler.set_attributes(
                self.configuration, self.item_specification, attributes
            )
        self._applied = False
        return True


async def apply_commands(
    commands: Iterable[ReferenceCommand],
    cancellation: CancellationToken | None = None,
) -> list[bool]:
    """Executes the commands in order, the first failure stops the batch."""
    return [await command.execute(cancellation) for command in commands]
