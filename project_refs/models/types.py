from __future__ import annotations

from typing import TypeAlias

from zero_3rdparty.enum_utils import StrEnum


class ReferenceKind(StrEnum):
    PACKAGE = "package"
    PROJECT = "project"
    ASSEMBLY = "assembly"


class UpdateAction(StrEnum):
    SET_TREAT_AS_USED = "set_treat_as_used"
    UNSET_TREAT_AS_USED = "unset_treat_as_used"
    REMOVE = "remove"


AttributeMap: TypeAlias = dict[str, str]
