"""Service layer — search orchestration for the weather dashboard."""

from .search import (
    SearchResult,
    SearchService,
    SearchState,
    SearchStatus,
    classify_error,
    normalize_query,
)

__all__ = [
    "SearchResult",
    "SearchService",
    "SearchState",
    "SearchStatus",
    "classify_error",
    "normalize_query",
]
