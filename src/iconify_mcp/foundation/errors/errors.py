"""Standardized error handling for the Iconify adapter.

Provides error codes, the upstream failure exception, and the structured
in-band error payload returned to MCP clients instead of protocol faults.
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class ErrorCode(StrEnum):
    """Standard error codes for handler failures."""
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INVALID_PARAMS = "INVALID_PARAMS"
    PARSE_ERROR = "PARSE_ERROR"
    UNKNOWN = "UNKNOWN"


# ─────────────────────────────────────────────────────────────────────────────
# Exceptions raised by the core
# ─────────────────────────────────────────────────────────────────────────────


class UpstreamError(Exception):
    """Non-success HTTP status or transport failure talking to the icon directory.

    Never retried. `status_code` is None when the request never produced a
    response (DNS, connection reset, malformed payload...).
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        status_text: str = "",
        url: str | None = None,
        body: str | None = None,
        set_id: str | None = None,
        code: ErrorCode | None = None,
    ) -> None:
        super().__init__(message)
        self._code = code
        self.message = message
        self.status_code = status_code
        self.status_text = status_text
        self.url = url
        self.body = body
        self.set_id = set_id

    @property
    def code(self) -> ErrorCode:
        if self._code is not None:
            return self._code
        if self.status_code is None:
            return ErrorCode.NETWORK_ERROR
        if self.status_code == 404:
            return ErrorCode.NOT_FOUND
        return ErrorCode.UPSTREAM_ERROR

    @property
    def recoverable(self) -> bool:
        """Server-side and network failures may succeed later; 4xx will not."""
        if self.status_code is None:
            return self.code is ErrorCode.NETWORK_ERROR
        return self.status_code >= 500

    def __repr__(self) -> str:
        return f"UpstreamError({self.message!r}, status_code={self.status_code!r})"


class UnparseableIdentifierError(ValueError):
    """An icon identifier that does not split into exactly `set:name`."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Could not parse icon set/name from {identifier}")
        self.identifier = identifier


# ─────────────────────────────────────────────────────────────────────────────
# Classification
# ─────────────────────────────────────────────────────────────────────────────

_PATTERN_CODES: dict[str, ErrorCode] = {
    "timeout": ErrorCode.NETWORK_ERROR,
    "connect": ErrorCode.NETWORK_ERROR,
    "network": ErrorCode.NETWORK_ERROR,
    "notfound": ErrorCode.NOT_FOUND,
    "validation": ErrorCode.INVALID_PARAMS,
    "value": ErrorCode.INVALID_PARAMS,
    "json": ErrorCode.PARSE_ERROR,
    "decode": ErrorCode.PARSE_ERROR,
}
_PATTERN_KEYS = tuple(_PATTERN_CODES)


@lru_cache(maxsize=256)
def _classify_cached(exc_key: str) -> ErrorCode:
    haystack = exc_key.lower()
    for pattern in _PATTERN_KEYS:
        if pattern in haystack:
            return _PATTERN_CODES[pattern]
    return ErrorCode.UNKNOWN


def classify_exception(exc: Exception) -> ErrorCode:
    """Map exception to error code; upstream errors carry their own."""
    if isinstance(exc, UpstreamError):
        return exc.code
    return _classify_cached(type(exc).__name__)


def format_validation_error(exc: ValidationError, *, tool_name: str | None = None) -> str:
    """Flatten pydantic errors to `field: message` pairs on one line."""
    issues = "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'params'}: {err['msg']}" for err in exc.errors()
    )
    prefix = f"Invalid parameters for {tool_name}" if tool_name else "Invalid parameters"
    return f"{prefix}: {issues}"


# ─────────────────────────────────────────────────────────────────────────────
# In-band error payload
# ─────────────────────────────────────────────────────────────────────────────


class ToolError(BaseModel):
    """Structured error response for handler failures.

    Attributes:
        tool_name: Name of the operation that failed
        message: Human-readable error message
        code: Machine-readable error code
        recoverable: Whether the same call might succeed later
        details: Optional detailed information (e.g., upstream response body)
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, validate_default=True)

    tool_name: Annotated[str, Field(min_length=1)]
    message: Annotated[str, Field(min_length=1)]
    code: ErrorCode = ErrorCode.UNKNOWN
    recoverable: bool = False
    details: str | None = None

    @field_validator("message", mode="before")
    @classmethod
    def _ensure_message(cls, v: str | Exception) -> str:
        """Accept Exception objects and extract message."""
        return str(v) if isinstance(v, Exception) else v

    @classmethod
    def create(
        cls,
        tool_name: str,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        *,
        recoverable: bool = False,
        details: str | None = None,
    ) -> Self:
        return cls(tool_name=tool_name, message=message, code=code, recoverable=recoverable, details=details)

    @classmethod
    def from_exception(
        cls,
        tool_name: str,
        exc: Exception,
        context: str = "",
    ) -> Self:
        """Create from exception with auto-classification."""
        recoverable = exc.recoverable if isinstance(exc, UpstreamError) else False
        return cls(
            tool_name=tool_name,
            message=f"{context}: {exc}" if context else str(exc),
            code=classify_exception(exc),
            recoverable=recoverable,
        )

    def render(self) -> str:
        """Format error as the text block sent back to the client."""
        parts = [f"**Tool Error ({self.tool_name}):** {self.message} [{self.code}]"]
        if self.recoverable:
            parts.append("\n_This error may be recoverable - the icon directory may succeed on a later call._")
        if self.details:
            parts.append(f"\n\nDetails:\n```\n{self.details}\n```")
        return "".join(parts)

    __str__ = render
