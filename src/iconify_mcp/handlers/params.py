"""Parameter schemas for the tools (the validation layer).

Field names are snake_case; wire names are the camelCase aliases clients
send (`iconSet`, `setId`, `buildTool`...). Both are accepted on input.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..domain import Framework
from ..snippets import BuildTool, UnpluginFramework

_CONFIG = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)


class SearchIconsParams(BaseModel):
    model_config = _CONFIG

    query: str = Field(..., description="The search term for icons (e.g., 'home', 'user').")
    limit: int = Field(default=10, ge=1, le=100, description="Maximum number of results to return (1-100).")
    framework: Framework | None = Field(
        default=None,
        description="If provided, returns code snippets for this framework.",
    )
    set_id: str | None = Field(
        default=None,
        alias="setId",
        description="Optional: Icon set ID (prefix) to search within (e.g., 'mdi', 'lucide').",
    )


class IconSnippetParams(BaseModel):
    model_config = _CONFIG

    icon_set: str = Field(..., min_length=1, alias="iconSet", description="The icon set ID (prefix) (e.g., 'mdi', 'lucide').")
    icon_name: str = Field(
        ...,
        min_length=1,
        alias="iconName",
        description="The name of the icon within the set (e.g., 'home', 'account').",
    )
    framework: Framework = Field(..., description="The target framework for the snippet.")


class CustomizationGuideParams(BaseModel):
    model_config = _CONFIG

    framework: Framework = Field(..., description="The framework you want customization guidance for.")


class UnpluginConfigParams(BaseModel):
    model_config = _CONFIG

    build_tool: BuildTool = Field(..., alias="buildTool", description="The build tool you're using")
    framework: UnpluginFramework = Field(..., description="The framework you're using")
    custom_collections: bool = Field(
        default=False,
        alias="customCollections",
        description="Include custom collections configuration",
    )
    auto_import: bool = Field(default=True, alias="autoImport", description="Include auto-import configuration")
