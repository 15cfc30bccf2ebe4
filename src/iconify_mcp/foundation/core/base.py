"""Core handler abstractions: BaseTool, BaseResource, metadata and responses.

Tools are defined by subclassing BaseTool with a typed parameter schema;
resources by subclassing BaseResource with a URI (or URI template). Both
convert failures into in-band payloads at their boundary.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, Literal, Self, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ToolError

logger = logging.getLogger("iconify_mcp.core")

_URI_PARAM = re.compile(r"\{(\w+)\}")


class ToolMetadata(BaseModel):
    """Metadata describing a tool.

    Attributes:
        name: Unique identifier on the wire (kebab-case, e.g. "search-icons")
        description: What the tool does (shown to the client for selection)
        category: Grouping category (e.g. "search", "snippets")
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=r"^[a-z][a-z0-9-]*$")
    description: str = Field(..., min_length=10)
    category: str = Field(default="general")


class ResourceMetadata(BaseModel):
    """Metadata describing a readable resource.

    `uri` may be a template with `{param}` placeholders, e.g.
    `iconify://collection/{setId}`.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=r"^[a-z][a-z0-9-]*$")
    uri: str = Field(..., min_length=1)
    description: str = ""
    mime_type: str = "text/plain"

    @property
    def uri_params(self) -> list[str]:
        return _URI_PARAM.findall(self.uri)

    def expand(self, **params: str) -> str:
        """Substitute template placeholders; unknown placeholders stay as-is."""
        return _URI_PARAM.sub(lambda m: params.get(m.group(1), m.group(0)), self.uri)


# ─────────────────────────────────────────────────────────────────────────────
# Responses
# ─────────────────────────────────────────────────────────────────────────────


class ContentBlock(BaseModel):
    """One text block of a tool response."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    """Ordered content blocks plus the in-band error flag."""

    model_config = ConfigDict(frozen=True)

    blocks: tuple[ContentBlock, ...] = ()
    is_error: bool = False

    @classmethod
    def of(cls, *texts: str) -> Self:
        return cls(blocks=tuple(ContentBlock(text=t) for t in texts))

    @classmethod
    def from_error(cls, error: ToolError) -> Self:
        return cls(blocks=(ContentBlock(text=error.render()),), is_error=True)

    @property
    def text(self) -> str:
        """All blocks joined by blank lines."""
        return "\n\n".join(b.text for b in self.blocks)

    @property
    def texts(self) -> list[str]:
        return [b.text for b in self.blocks]


class ResourceContent(BaseModel):
    """Content returned by a resource read."""

    model_config = ConfigDict(frozen=True)

    uri: str
    text: str
    mime_type: str | None = None


# ─────────────────────────────────────────────────────────────────────────────
# Base classes
# ─────────────────────────────────────────────────────────────────────────────

TParams = TypeVar("TParams", bound=BaseModel)


class BaseTool(ABC, Generic[TParams]):
    """Abstract base class for all tools.

    Subclasses must:
    - Define `metadata` class variable with ToolMetadata
    - Define `params_schema` class variable with the Pydantic model type
    - Implement async `_run(params)` returning a ToolResponse or plain string

    `error_context` prefixes the message of any exception escaping `_run`.

    Example:
        >>> class GuideParams(BaseModel):
        ...     framework: Framework
        ...
        >>> class GuideTool(BaseTool[GuideParams]):
        ...     metadata = ToolMetadata(
        ...         name="icon-customization-guide",
        ...         description="Customization options per framework",
        ...     )
        ...     params_schema = GuideParams
        ...
        ...     async def _run(self, params: GuideParams) -> str:
        ...         return get_customization_guide(params.framework)
    """

    metadata: ClassVar[ToolMetadata]
    params_schema: ClassVar[type[BaseModel]]
    error_context: ClassVar[str] = ""

    def validate(self, raw: dict[str, object]) -> TParams:
        """Validate raw wire arguments (aliases or field names)."""
        return self.params_schema.model_validate(raw)  # type: ignore[return-value]

    @abstractmethod
    async def _run(self, params: TParams) -> ToolResponse | str:
        """Execute the tool. May raise; `arun` converts exceptions."""
        ...

    async def arun(self, params: TParams) -> ToolResponse:
        """Execute, converting any exception into an in-band error response."""
        try:
            result = await self._run(params)
        except Exception as e:
            logger.warning("[%s] failed: %s", self.metadata.name, e)
            return ToolResponse.from_error(ToolError.from_exception(self.metadata.name, e, self.error_context))
        return ToolResponse.of(result) if isinstance(result, str) else result


class BaseResource(ABC):
    """Abstract base class for readable resources.

    Subclasses define `metadata` and implement `_read(**uri_params)`.
    Override `_error_text` to customize the in-band failure message.
    """

    metadata: ClassVar[ResourceMetadata]

    @abstractmethod
    async def _read(self, **params: str) -> str:
        ...

    def _error_text(self, exc: Exception, **params: str) -> str:
        return f"Error reading {self.metadata.name}: {exc}"

    async def read(self, **params: str) -> list[ResourceContent]:
        """Read the resource; failures come back as `text/plain` error content."""
        uri = self.metadata.expand(**params)
        try:
            text = await self._read(**params)
        except Exception as e:
            logger.warning("[%s] read of %s failed: %s", self.metadata.name, uri, e)
            return [ResourceContent(uri=uri, text=self._error_text(e, **params), mime_type="text/plain")]
        return [ResourceContent(uri=uri, text=text, mime_type=self.metadata.mime_type)]
