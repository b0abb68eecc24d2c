from typing import ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "PROJECT_REFS_"
DEFAULT_TREAT_AS_USED_PROPERTY = "TreatAsUsed"


class ReferenceSettings(BaseSettings):
    model_config = SettingsConfigDict(populate_by_name=True)

    ENV_NAME_TREAT_AS_USED_PROPERTY: ClassVar[str] = (
        f"{ENV_PREFIX}TREAT_AS_USED_PROPERTY"
    )
    treat_as_used_property: str = Field(
        default=DEFAULT_TREAT_AS_USED_PROPERTY,
        alias=ENV_NAME_TREAT_AS_USED_PROPERTY,
        description="Metadata property storing the treat-as-used flag, must match the name the project store persists.",
    )
    ENV_NAME_DEFAULT_PACKAGE_VERSION: ClassVar[str] = (
        f"{ENV_PREFIX}DEFAULT_PACKAGE_VERSION"
    )
    default_package_version: str = Field(
        default="",
        alias=ENV_NAME_DEFAULT_PACKAGE_VERSION,
        description="Version passed to the package store when adding a package reference, empty lets the store decide.",
    )
