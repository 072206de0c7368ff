from typing import Any, Mapping

from searchgate.core.exceptions import InvalidResponseError

from ._constants import HIGHLIGHT_SEPARATOR, HIGHLIGHT_SUFFIX, MAX_HIGHLIGHTS
from ._helper import Helper
from ._models import FacetTerm, SearchResult


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict)):
        return len(value) == 0
    return False


class SearchResultBuilder:
    """Shape a raw search response into a paged search result."""

    @staticmethod
    def build(
        raw_result: Mapping[str, Any] | Any,
        page: int = 0,
        page_size: int = 10,
        highlight_fields: str = "",
        q: str = "",
    ) -> SearchResult:
        """Build search result.

        Args:
            raw_result:
                Search response from the engine.
            page:
                Requested page, echoed back.
            page_size:
                Requested page size, echoed back.
            highlight_fields:
                Comma separated fields to flatten highlights for.
            q:
                Free text query the search was issued with. Not used.

        Returns:
            Search result. When the response carries an error,
            only page, page_size and error are set.

        Raises:
            InvalidResponseError:
                Response has no error and is missing hits or totals.
        """
        raw_result = Helper.get_body(raw_result)
        error = raw_result.get("error")
        if not _is_empty(error):
            return SearchResult(page=page, page_size=page_size, error=error)

        try:
            took = raw_result["took"]
            hits_block = raw_result["hits"]
            total = hits_block["total"]
            total_value = total["value"]
            total_relation = total["relation"]
            hits = hits_block["hits"]
        except (KeyError, TypeError) as e:
            raise InvalidResponseError(
                f"Search response is missing {e} and carries no error"
            ) from e

        args: dict[str, Any] = {
            "page": page,
            "page_size": page_size,
            "timetaken": took,
            "total_results": total_value,
            "total_result_relation": total_relation,
            "results": SearchResultBuilder._convert_hits(
                hits, highlight_fields
            ),
        }
        facets = raw_result.get("facets")
        if not _is_empty(facets):
            args["facets"] = SearchResultBuilder._convert_facets(facets)
        aggregations = raw_result.get("aggregations")
        if not _is_empty(aggregations):
            args["aggregations"] = aggregations
        suggest = raw_result.get("suggest")
        if not _is_empty(suggest):
            args["suggestions"] = suggest
        return SearchResult(**args)

    @staticmethod
    def _convert_hits(
        hits: list[Mapping[str, Any]],
        highlight_fields: str,
    ) -> list[dict[str, Any]]:
        # "" splits into [""], which yields a bare "_highlight" key.
        fields = highlight_fields.split(",")
        results: list[dict[str, Any]] = []
        for hit in hits:
            data = dict(hit.get("_source") or {})
            type = hit.get("_type")
            data["type"] = "" if type is None else type
            data["score"] = SearchResultBuilder._convert_score(
                hit.get("_score")
            )
            highlight = hit.get("highlight") or {}
            for field in fields:
                data[f"{field}{HIGHLIGHT_SUFFIX}"] = (
                    SearchResultBuilder._format_highlight(highlight, field)
                )
            results.append(data)
        return results

    @staticmethod
    def _convert_score(score: Any) -> Any:
        # Missing, null, empty and zero scores all collapse to 0.
        if score is None or score == "" or score == 0:
            return 0
        return score

    @staticmethod
    def _format_highlight(
        highlight: Mapping[str, list[str]],
        field: str,
    ) -> str:
        snippets = highlight.get(field)
        if not snippets:
            return ""
        return HIGHLIGHT_SEPARATOR.join(snippets[:MAX_HIGHLIGHTS])

    @staticmethod
    def _convert_facets(
        facets: Mapping[str, Any],
    ) -> dict[str, list[FacetTerm]]:
        transformed: dict[str, list[FacetTerm]] = {}
        for name, facet in facets.items():
            transformed[name] = [
                FacetTerm(
                    id=term["term"],
                    label=term["term"],
                    count=term["count"],
                )
                for term in facet["terms"]
            ]
        return transformed
