from __future__ import annotations

from enum import Enum
from typing import Any

from searchgate.core import DataModel


class RefreshPolicy(str, Enum):
    """Refresh behavior after a write."""

    TRUE = "true"
    """Refresh the affected shards immediately."""

    FALSE = "false"
    """Do not refresh."""

    WAIT_FOR = "wait_for"
    """Wait for the next scheduled refresh before returning."""


class FacetTerm(DataModel):
    """Facet term."""

    id: Any
    """Term value."""

    label: Any
    """Term label, same as the term value."""

    count: int
    """Number of matching documents."""


class SearchResult(DataModel):
    """Paged search result.

    Only the fields that apply to the response are set:
    an error result carries page, page_size and error only.
    """

    page: int
    """Requested page."""

    page_size: int
    """Requested page size."""

    error: Any | None = None
    """Engine error payload."""

    timetaken: int | float | None = None
    """Time taken by the engine."""

    total_results: int | None = None
    """Total matched documents."""

    total_result_relation: str | None = None
    """Whether total_results is exact (eq) or a lower bound (gte)."""

    results: list[dict[str, Any]] | None = None
    """Flattened documents with type, score and highlights."""

    facets: dict[str, list[FacetTerm]] | None = None
    """Facet terms by facet name."""

    aggregations: dict[str, Any] | None = None
    """Aggregations, as returned by the engine."""

    suggestions: dict[str, Any] | None = None
    """Suggestions, as returned by the engine."""

    def to_dict(self, exclude_unset: bool = True) -> dict[str, Any]:
        return super().to_dict(exclude_unset=exclude_unset)
