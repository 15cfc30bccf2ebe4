"""Domain value objects: frameworks, icon references, upstream payloads."""

from .models import CollectionInfo, Framework, IconReference, SearchResult
from .naming import to_pascal_case

__all__ = [
    "CollectionInfo",
    "Framework",
    "IconReference",
    "SearchResult",
    "to_pascal_case",
]
