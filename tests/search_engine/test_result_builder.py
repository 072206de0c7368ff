# type: ignore
import copy

import pytest

from searchgate.search_engine import (
    FacetTerm,
    InvalidResponseError,
    SearchResultBuilder,
)

from ._data import (
    error_response,
    facets_response,
    minimal_response,
    search_response,
)


def test_minimal_response():
    result = SearchResultBuilder.build(minimal_response)
    assert result.to_dict() == {
        "page": 0,
        "page_size": 10,
        "timetaken": 5,
        "total_results": 1,
        "total_result_relation": "eq",
        "results": [{"id": 1, "type": "", "score": 2.0, "_highlight": ""}],
    }


@pytest.mark.parametrize("page,page_size", [(0, 10), (3, 25)])
def test_error_response(page: int, page_size: int):
    result = SearchResultBuilder.build(
        error_response,
        page=page,
        page_size=page_size,
        highlight_fields="title",
        q="red",
    )
    assert result.to_dict() == {
        "page": page,
        "page_size": page_size,
        "error": "index_not_found",
    }


@pytest.mark.parametrize("error", [None, "", {}, []])
def test_empty_error_is_ignored(error):
    raw = dict(minimal_response, error=error)
    result = SearchResultBuilder.build(raw)
    assert result.error is None
    assert result.total_results == 1


def test_results_follow_hit_order():
    result = SearchResultBuilder.build(search_response, page=1, page_size=3)
    assert result.page == 1
    assert result.page_size == 3
    assert len(result.results) == len(search_response["hits"]["hits"])
    assert [r["id"] for r in result.results] == [1, 2, 3]


def test_type_and_score():
    result = SearchResultBuilder.build(search_response)
    assert [r["type"] for r in result.results] == ["", "_doc", ""]
    assert [r["score"] for r in result.results] == [2.5, 0, 0]


@pytest.mark.parametrize("score", [None, "", 0, 0.0])
def test_falsy_score_collapses_to_zero(score):
    raw = copy.deepcopy(minimal_response)
    raw["hits"]["hits"][0]["_score"] = score
    result = SearchResultBuilder.build(raw)
    assert result.results[0]["score"] == 0


def test_missing_score_and_source():
    raw = copy.deepcopy(minimal_response)
    raw["hits"]["hits"] = [{"_id": "x"}]
    result = SearchResultBuilder.build(raw, highlight_fields="title")
    assert result.results == [{"type": "", "score": 0, "title_highlight": ""}]


def test_highlights():
    result = SearchResultBuilder.build(
        search_response, highlight_fields="title,body"
    )
    first, second, third = result.results
    assert first["title_highlight"] == "<em>red</em> shoes"
    assert first["body_highlight"] == (
        "one <em>red</em> … two <em>red</em> … three <em>red</em>"
    )
    assert second["title_highlight"] == ""
    assert second["body_highlight"] == ""
    assert third["title_highlight"] == ""
    assert "_highlight" not in first


def test_empty_highlight_fields_yield_bare_key():
    result = SearchResultBuilder.build(search_response)
    for r in result.results:
        assert r["_highlight"] == ""


def test_source_is_copied():
    raw = copy.deepcopy(search_response)
    result = SearchResultBuilder.build(raw, highlight_fields="title")
    result.results[0]["color"] = "purple"
    assert raw["hits"]["hits"][0]["_source"] == {
        "id": 1,
        "title": "red shoes",
        "color": "red",
    }
    assert raw == search_response


def test_facets_aggregations_suggestions():
    result = SearchResultBuilder.build(facets_response)
    assert result.total_results == 10000
    assert result.total_result_relation == "gte"
    assert result.results == []
    assert list(result.facets.keys()) == ["color", "size"]
    assert result.facets["color"] == [
        FacetTerm(id="red", label="red", count=5),
        FacetTerm(id="blue", label="blue", count=3),
    ]
    assert result.to_dict()["facets"]["size"] == [
        {"id": 42, "label": 42, "count": 1}
    ]
    assert result.aggregations == facets_response["aggregations"]
    assert result.suggestions == facets_response["suggest"]


def test_facet_reshaping():
    raw = dict(
        minimal_response,
        facets={"color": {"terms": [{"term": "red", "count": 5}]}},
    )
    result = SearchResultBuilder.build(raw)
    assert result.to_dict()["facets"] == {
        "color": [{"id": "red", "label": "red", "count": 5}]
    }


def test_empty_optional_blocks_are_omitted():
    raw = dict(minimal_response, facets={}, aggregations={}, suggest=None)
    data = SearchResultBuilder.build(raw).to_dict()
    assert "facets" not in data
    assert "aggregations" not in data
    assert "suggestions" not in data


def test_build_is_idempotent():
    first = SearchResultBuilder.build(
        search_response, page=2, highlight_fields="title"
    )
    second = SearchResultBuilder.build(
        search_response, page=2, highlight_fields="title"
    )
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_object_api_response_body():
    class Wrapped:
        body = minimal_response

    result = SearchResultBuilder.build(Wrapped())
    assert result.total_results == 1


@pytest.mark.parametrize(
    "raw",
    [
        {"took": 1},
        {"took": 1, "hits": {"hits": []}},
        {"took": 1, "hits": {"total": 5, "hits": []}},
        {"hits": {"total": {"value": 0, "relation": "eq"}, "hits": []}},
    ],
)
def test_malformed_response(raw):
    with pytest.raises(InvalidResponseError):
        SearchResultBuilder.build(raw)
