"""Metadata access on a single reference item.

Only the treat-as-used property is interpreted, every other property is copied
as an opaque string.

>>> serialize_bool(True)
'True'
>>> parse_bool(serialize_bool(False))
False
"""

from __future__ import annotations

from zero_3rdparty.str_utils import want_bool

from project_refs.models import AttributeMap
from project_refs.settings import DEFAULT_TREAT_AS_USED_PROPERTY
from project_refs.store import ItemMetadata

TRUE_STRING = "True"
FALSE_STRING = "False"


def serialize_bool(value: bool) -> str:
    return TRUE_STRING if value else FALSE_STRING


def parse_bool(value: str) -> bool:
    return want_bool(value)


async def get_treat_as_used(
    metadata: ItemMetadata, property_name: str = DEFAULT_TREAT_AS_USED_PROPERTY
) -> bool:
    value = await metadata.get_evaluated_property_value(property_name)
    return value is not None and parse_bool(value)


async def set_treat_as_used(
    metadata: ItemMetadata,
    value: bool,
    property_name: str = DEFAULT_TREAT_AS_USED_PROPERTY,
) -> None:
    await metadata.set_property_value(property_name, serialize_bool(value))


async def read_attributes(metadata: ItemMetadata) -> AttributeMap:
    attributes: AttributeMap = {}
    for name in await metadata.get_property_names():
        value = await metadata.get_evaluated_property_value(name)
        attributes[str(name)] = "" if value is None else str(value)
    return attributes


async def write_attributes(metadata: ItemMetadata, attributes: AttributeMap) -> None:
    # no rollback, a failing write leaves the earlier ones applied
    for name, value in attributes.items():
        await metadata.set_property_value(name, value)
