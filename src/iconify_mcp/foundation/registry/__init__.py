"""Handler registry: tool/resource lookup, validation and invocation."""

from .registry import HandlerRegistry

__all__ = ["HandlerRegistry"]
