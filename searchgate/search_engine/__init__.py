from searchgate.core.exceptions import (
    BadRequestError,
    ConflictError,
    InvalidResponseError,
    NotFoundError,
    NotSupportedError,
    PreconditionFailedError,
)

from ._models import FacetTerm, RefreshPolicy, SearchResult
from ._result_builder import SearchResultBuilder
from .component import SearchEngine

__all__ = [
    "FacetTerm",
    "RefreshPolicy",
    "SearchEngine",
    "SearchResult",
    "SearchResultBuilder",
    "BadRequestError",
    "ConflictError",
    "InvalidResponseError",
    "NotFoundError",
    "NotSupportedError",
    "PreconditionFailedError",
]
