"""Unified error handling for iconify_mcp.

- ErrorCode: Standard error codes for handler failures
- UpstreamError: Icon directory call failed (status or transport)
- UnparseableIdentifierError: Search result not of the form `set:name`
- ToolError: Structured in-band error payload
"""

from .errors import (
    ErrorCode,
    ToolError,
    UnparseableIdentifierError,
    UpstreamError,
    classify_exception,
    format_validation_error,
)

__all__ = [
    "ErrorCode",
    "ToolError",
    "UnparseableIdentifierError",
    "UpstreamError",
    "classify_exception",
    "format_validation_error",
]
