"""Value objects exchanged between the upstream client and the handlers.

All models are immutable and request-scoped; nothing here is cached or
shared across calls.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..foundation.errors import UnparseableIdentifierError


class Framework(StrEnum):
    """Target integration method for a generated snippet."""
    RAW_SVG = "raw-svg"
    UNPLUGIN_ICONS = "unplugin-icons"
    WEB_COMPONENT = "iconify-icon-webcomponent"
    REACT = "react"
    VUE = "vue"
    SVELTE = "svelte"
    LIT = "lit"
    EMBER = "ember"


class IconReference(BaseModel):
    """An icon addressed by collection prefix and name (`mdi:home`)."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    icon_set: Annotated[str, Field(min_length=1)]
    icon_name: Annotated[str, Field(min_length=1)]

    @field_validator("icon_set")
    @classmethod
    def _no_separator(cls, v: str) -> str:
        if ":" in v:
            raise ValueError("icon set must not contain ':'")
        return v

    @property
    def identifier(self) -> str:
        return f"{self.icon_set}:{self.icon_name}"

    @classmethod
    def parse(cls, identifier: str) -> Self:
        """Split an upstream `set:name` identifier.

        Raises:
            UnparseableIdentifierError: not exactly two non-empty parts
        """
        parts = identifier.split(":")
        if len(parts) != 2:
            raise UnparseableIdentifierError(identifier)
        try:
            return cls(icon_set=parts[0], icon_name=parts[1])
        except ValidationError as e:
            raise UnparseableIdentifierError(identifier) from e

    def __str__(self) -> str:
        return self.identifier


class SearchResult(BaseModel):
    """Search response from the icon directory; unknown keys are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    icons: list[str] = Field(default_factory=list)
    total: int = 0
    limit: int = 0
    start: int = 0
    collections: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.icons


class CollectionInfo(BaseModel):
    """Summary of one icon collection; unknown keys are preserved."""

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str
    total: int | None = None
