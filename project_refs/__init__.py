from project_refs.cancellation import CancellationToken
from project_refs.commands import ReferenceCommand, ReferenceCommandType, apply_commands
from project_refs.errors import (
    ItemNotFoundError,
    OperationCancelledError,
    PreconditionFailedError,
    StoreFailureError,
)
from project_refs.handler import ReferenceHandler, reference_handler
from project_refs.models import (
    AttributeMap,
    ReferenceInfo,
    ReferenceKind,
    ReferenceUpdate,
    UpdateAction,
)
from project_refs.settings import ReferenceSettings
from project_refs.updater import ReferenceUpdater

VERSION = "0.1.0"
__all__ = (
    "AttributeMap",
    "CancellationToken",
    "ItemNotFoundError",
    "OperationCancelledError",
    "PreconditionFailedError",
    "ReferenceCommand",
    "ReferenceCommandType",
    "ReferenceHandler",
    "ReferenceInfo",
    "ReferenceKind",
    "ReferenceSettings",
    "ReferenceUpdate",
    "ReferenceUpdater",
    "StoreFailureError",
    "UpdateAction",
    "apply_commands",
    "reference_handler",
)
