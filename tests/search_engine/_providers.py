import os
from typing import Any
from unittest.mock import AsyncMock, MagicMock

from searchgate.search_engine import SearchEngine
from searchgate.search_engine.providers.elasticsearch import Elasticsearch

TEST_HOST_ENV = "SEARCHGATE_TEST_HOST"


class SearchEngineProvider:
    ELASTICSEARCH = "elasticsearch"


provider_parameters: dict[str, dict[str, Any]] = {
    SearchEngineProvider.ELASTICSEARCH: {
        "hosts": os.environ.get(TEST_HOST_ENV, "http://localhost:9200"),
        "retry": 1,
    },
}


def get_component(
    provider_type: str,
    index: str | None = "test",
    **kwargs: Any,
) -> SearchEngine:
    parameters = dict(provider_parameters[provider_type])
    parameters.update(kwargs)
    return SearchEngine(
        index=index,
        __provider__={"type": provider_type, "parameters": parameters},
    )


def get_mocked_component(
    index: str | None = "test",
    provider_index: str | None = None,
    **kwargs: Any,
) -> tuple[SearchEngine, MagicMock, AsyncMock]:
    """Component bound to an Elasticsearch provider with mocked clients."""
    provider = Elasticsearch(
        hosts="http://localhost:9200", index=provider_index, **kwargs
    )
    client = MagicMock()
    aclient = AsyncMock()
    provider._client = client
    provider._init = True
    provider._aclient = aclient
    provider._ainit = True
    component = SearchEngine(index=index, __provider__=provider)
    return component, client, aclient
