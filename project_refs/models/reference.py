from __future__ import annotations

from model_lib.model_base import Event
from pydantic import Field

from .types import ReferenceKind, UpdateAction


class ReferenceInfo(Event):
    kind: ReferenceKind
    item_specification: str = Field(
        description="Caller visible identifier, e.g. a package name or project path, unique per kind in a configuration"
    )
    treat_as_used: bool = False


class ReferenceUpdate(Event):
    reference_info: ReferenceInfo
    action: UpdateAction

    @property
    def item_specification(self) -> str:
        return self.reference_info.item_specification

    @property
    def kind(self) -> ReferenceKind:
        return ReferenceKind(self.reference_info.kind)

    def with_action(self, action: UpdateAction) -> ReferenceUpdate:
        return ReferenceUpdate(reference_info=self.reference_info, action=action)
