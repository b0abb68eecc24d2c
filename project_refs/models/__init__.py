from .reference import ReferenceInfo, ReferenceUpdate
from .types import AttributeMap, ReferenceKind, UpdateAction

__all__ = [
    "AttributeMap",
    "ReferenceInfo",
    "ReferenceKind",
    "ReferenceUpdate",
    "UpdateAction",
]
