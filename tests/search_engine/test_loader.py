# type: ignore
import logging

import pytest

from searchgate.core import Loader
from searchgate.core.exceptions import LoadError
from searchgate.search_engine import SearchEngine
from searchgate.search_engine.providers.elasticsearch import Elasticsearch

manifest = """
variables:
  retry: 2
  index: orders
components:
  search:
    type: searchgate.search_engine
    parameters:
      index: ${variables.index}
    providers:
      primary:
        type: elasticsearch
        parameters:
          hosts: ["${env.SEARCHGATE_LOADER_HOST}"]
          retry: ${variables.retry}
          request_timeout: "2.5"
          verify_certs: "false"
      secondary:
        type: searchgate.search_engine.providers.elasticsearch:Elasticsearch
        parameters:
          hosts: http://replica:9200
          index: replica
"""


@pytest.fixture
def loader(tmp_path, monkeypatch) -> Loader:
    (tmp_path / "searchgate.yaml").write_text(manifest)
    monkeypatch.setenv("SEARCHGATE_LOADER_HOST", "http://primary:9200")
    return Loader(path=str(tmp_path))


def test_load_component(loader: Loader, caplog):
    with caplog.at_level(logging.WARNING, logger="searchgate"):
        component = loader.load_component("search")
    assert "Using provider primary" in caplog.text

    assert isinstance(component, SearchEngine)
    assert component.__handle__ == "search"
    assert component.index == "orders"
    provider = component.__provider__
    assert isinstance(provider, Elasticsearch)
    assert provider.__handle__ == "primary"
    assert provider.__component__ is component
    assert provider.hosts == ["http://primary:9200"]
    assert provider.retry == 2
    assert provider.request_timeout == 2.5
    assert provider.verify_certs is False
    assert provider._init is False


def test_load_named_provider(loader: Loader):
    component = loader.load_component("search", provider="secondary")
    provider = component.__provider__
    assert isinstance(provider, Elasticsearch)
    assert provider.hosts == "http://replica:9200"
    assert provider._get_index_name(None) == "replica"


def test_missing_environment_variable(loader: Loader, monkeypatch):
    monkeypatch.delenv("SEARCHGATE_LOADER_HOST")
    with pytest.raises(LoadError):
        loader.load_component("search")


def test_unknown_handle_and_provider(loader: Loader):
    with pytest.raises(LoadError):
        loader.load_component("missing")
    with pytest.raises(LoadError):
        loader.load_component("search", provider="missing")


def test_unknown_provider_type():
    with pytest.raises(LoadError):
        SearchEngine(__provider__="solr")


def test_provider_path():
    assert (
        Loader.get_provider_path("searchgate.search_engine", "elasticsearch")
        == "searchgate.search_engine.providers.elasticsearch"
    )
    assert Loader.get_provider_path("x", "a.b:C") == "a.b:C"
    assert (
        Loader.get_component_path("searchgate.search_engine")
        == "searchgate.search_engine.component"
    )


def test_missing_manifest(tmp_path):
    with pytest.raises(LoadError):
        Loader(path=str(tmp_path))


def test_invalid_manifest(tmp_path):
    (tmp_path / "searchgate.yaml").write_text("components: [unclosed")
    with pytest.raises(LoadError):
        Loader(path=str(tmp_path))
