"""HTTP access to the Iconify icon directory."""

from .client import IconifyClient

__all__ = ["IconifyClient"]
