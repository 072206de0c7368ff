"""
Elastic Search.
"""

from __future__ import annotations

__all__ = ["Elasticsearch"]

import copy
from typing import Any

from elasticsearch import ApiError, AsyncElasticsearch, TransportError
from elasticsearch import Elasticsearch as SyncElasticsearch
from elasticsearch.exceptions import NotFoundError as ESNotFoundError

from searchgate.core import Context, DataModel, Provider, Response, get_logger
from searchgate.core.exceptions import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    PreconditionFailedError,
)

from .._constants import (
    DEFAULT_ID_FIELD,
    DEFAULT_INDEX_SETTINGS,
    DEFAULT_SORT,
    STATIC_SETTINGS,
)
from .._helper import Helper
from .._models import RefreshPolicy

logger = get_logger(__name__)


class Elasticsearch(Provider):
    hosts: str | list[str] | list[dict[str, Any]]
    retry: int
    cloud_id: str | None
    api_key: str | list[str] | None
    basic_auth: str | list[str] | None
    bearer_auth: str | None
    headers: dict[str, str] | None
    verify_certs: bool | None
    ca_certs: str | None
    request_timeout: float | None

    index: str | None
    id_field: str
    nparams: dict[str, Any]

    _client: SyncElasticsearch
    _aclient: AsyncElasticsearch

    _init: bool
    _ainit: bool

    def __init__(
        self,
        hosts: str | list[str] | list[dict[str, Any]],
        retry: int = 3,
        cloud_id: str | None = None,
        api_key: str | list[str] | None = None,
        basic_auth: str | list[str] | None = None,
        bearer_auth: str | None = None,
        headers: dict[str, str] | None = None,
        verify_certs: bool | None = None,
        ca_certs: str | None = None,
        request_timeout: float | None = None,
        index: str | None = None,
        id_field: str = DEFAULT_ID_FIELD,
        nparams: dict[str, Any] | None = None,
        **kwargs,
    ):
        """Initialize.

        Args:
            hosts:
                Elasticsearch hosts.
            retry:
                Number of retries before a request fails.
            cloud_id:
                Elasticsearch cloud id.
            api_key:
                Elasticsearch api key.
            basic_auth:
                Elasticsearch basic auth.
            bearer_auth:
                Elasticsearch bearer auth.
            headers:
                Elasticsearch http headers.
            verify_certs:
                Elasticsearch verify certs.
            ca_certs:
                Elasticsearch ca certs.
            request_timeout:
                Request timeout in seconds.
            index:
                Default index name.
            id_field:
                Field in the document holding its id.
            nparams:
                Native parameters to Elasticsearch client.
        """
        self.hosts = hosts
        self.retry = retry
        self.cloud_id = cloud_id
        self.api_key = api_key
        self.basic_auth = basic_auth
        self.bearer_auth = bearer_auth
        self.headers = headers
        self.verify_certs = verify_certs
        self.ca_certs = ca_certs
        self.request_timeout = request_timeout

        self.index = index
        self.id_field = id_field
        self.nparams = nparams or dict()

        self._init = False
        self._ainit = False
        super().__init__(**kwargs)

    @property
    def client(self) -> SyncElasticsearch:
        if not self._init:
            self._client = SyncElasticsearch(**self._get_client_params())
            self._init = True
        return self._client

    @property
    def aclient(self) -> AsyncElasticsearch:
        if not self._ainit:
            self._aclient = AsyncElasticsearch(**self._get_client_params())
            self._ainit = True
        return self._aclient

    def __setup__(self, context: Context | None = None) -> None:
        _ = self.client

    async def __asetup__(self, context: Context | None = None) -> None:
        _ = self.aclient

    def _get_client_params(self) -> dict:
        def _add_if_not_none(key, value):
            return {key: value} if value is not None else {}

        def _convert_if_list(value):
            return tuple(value) if isinstance(value, list) else value

        args = {
            "hosts": self.hosts,
            "max_retries": self.retry,
            **_add_if_not_none("cloud_id", self.cloud_id),
            **_add_if_not_none("api_key", _convert_if_list(self.api_key)),
            **_add_if_not_none(
                "basic_auth", _convert_if_list(self.basic_auth)
            ),
            **_add_if_not_none("bearer_auth", self.bearer_auth),
            **_add_if_not_none("headers", self.headers),
            **_add_if_not_none("verify_certs", self.verify_certs),
            **_add_if_not_none("ca_certs", self.ca_certs),
            **_add_if_not_none("request_timeout", self.request_timeout),
        }
        args.update(self.nparams)
        return args

    def _get_index_name(self, index: str | None) -> str:
        component = getattr(self, "__component__", None)
        index = index or self.index or getattr(component, "index", None)
        if not index:
            raise BadRequestError("Index name must be specified")
        return index

    def list_indices(
        self,
        index: str = "*",
        **kwargs: Any,
    ) -> Response[list[dict[str, Any]]]:
        args = OperationConverter.convert_list_indices(index=index)
        args.update(kwargs.get("nargs", {}))
        resp = self.client.cat.indices(**args)
        return _response(resp)

    async def alist_indices(
        self,
        index: str = "*",
        **kwargs: Any,
    ) -> Response[list[dict[str, Any]]]:
        args = OperationConverter.convert_list_indices(index=index)
        args.update(kwargs.get("nargs", {}))
        resp = await self.aclient.cat.indices(**args)
        return _response(resp)

    def create_index(
        self,
        settings: dict[str, Any] | None = None,
        mappings: dict[str, Any] | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args = OperationConverter.convert_create_index(
            index=self._get_index_name(index),
            settings=settings,
            mappings=mappings,
        )
        args.update(kwargs.get("nargs", {}))
        try:
            resp = self.client.indices.create(**args)
        except ApiError as e:
            if e.error == "resource_already_exists_exception":
                raise ConflictError("Index already exists.") from e
            raise e
        return _response(resp)

    async def acreate_index(
        self,
        settings: dict[str, Any] | None = None,
        mappings: dict[str, Any] | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args = OperationConverter.convert_create_index(
            index=self._get_index_name(index),
            settings=settings,
            mappings=mappings,
        )
        args.update(kwargs.get("nargs", {}))
        try:
            resp = await self.aclient.indices.create(**args)
        except ApiError as e:
            if e.error == "resource_already_exists_exception":
                raise ConflictError("Index already exists.") from e
            raise e
        return _response(resp)

    def delete_index(
        self,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args: dict = {"index": self._get_index_name(index)}
        args.update(kwargs.get("nargs", {}))
        try:
            resp = self.client.indices.delete(**args)
        except ESNotFoundError as e:
            raise NotFoundError("Index does not exist.") from e
        return _response(resp)

    async def adelete_index(
        self,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args: dict = {"index": self._get_index_name(index)}
        args.update(kwargs.get("nargs", {}))
        try:
            resp = await self.aclient.indices.delete(**args)
        except ESNotFoundError as e:
            raise NotFoundError("Index does not exist.") from e
        return _response(resp)

    def get_alias(
        self,
        alias: str,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args: dict = {"name": alias}
        args.update(kwargs.get("nargs", {}))
        try:
            resp = self.client.indices.get_alias(**args)
        except ApiError as e:
            if e.status_code == 404:
                return Response(result={})
            raise e
        return _response(resp)

    async def aget_alias(
        self,
        alias: str,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args: dict = {"name": alias}
        args.update(kwargs.get("nargs", {}))
        try:
            resp = await self.aclient.indices.get_alias(**args)
        except ApiError as e:
            if e.status_code == 404:
                return Response(result={})
            raise e
        return _response(resp)

    def add_alias(
        self,
        alias: str,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args = OperationConverter.convert_update_alias(
            action="add", index=self._get_index_name(index), alias=alias
        )
        args.update(kwargs.get("nargs", {}))
        resp = self.client.indices.update_aliases(**args)
        return _response(resp)

    async def aadd_alias(
        self,
        alias: str,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args = OperationConverter.convert_update_alias(
            action="add", index=self._get_index_name(index), alias=alias
        )
        args.update(kwargs.get("nargs", {}))
        resp = await self.aclient.indices.update_aliases(**args)
        return _response(resp)

    def remove_alias(
        self,
        alias: str,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args = OperationConverter.convert_update_alias(
            action="remove", index=self._get_index_name(index), alias=alias
        )
        args.update(kwargs.get("nargs", {}))
        resp = self.client.indices.update_aliases(**args)
        return _response(resp)

    async def aremove_alias(
        self,
        alias: str,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args = OperationConverter.convert_update_alias(
            action="remove", index=self._get_index_name(index), alias=alias
        )
        args.update(kwargs.get("nargs", {}))
        resp = await self.aclient.indices.update_aliases(**args)
        return _response(resp)

    def exists_alias(
        self,
        alias: str,
        **kwargs: Any,
    ) -> Response[bool]:
        args: dict = {"name": alias}
        args.update(kwargs.get("nargs", {}))
        exists = bool(self.client.indices.exists_alias(**args))
        return Response(result=exists)

    async def aexists_alias(
        self,
        alias: str,
        **kwargs: Any,
    ) -> Response[bool]:
        args: dict = {"name": alias}
        args.update(kwargs.get("nargs", {}))
        exists = bool(await self.aclient.indices.exists_alias(**args))
        return Response(result=exists)

    def get_mapping(
        self,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args: dict = {"index": self._get_index_name(index)}
        args.update(kwargs.get("nargs", {}))
        resp = self.client.indices.get_mapping(**args)
        return _response(resp)

    async def aget_mapping(
        self,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args: dict = {"index": self._get_index_name(index)}
        args.update(kwargs.get("nargs", {}))
        resp = await self.aclient.indices.get_mapping(**args)
        return _response(resp)

    def put_mapping(
        self,
        mapping: dict[str, Any],
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args: dict = {"index": self._get_index_name(index), "body": mapping}
        args.update(kwargs.get("nargs", {}))
        resp = self.client.indices.put_mapping(**args)
        return _response(resp)

    async def aput_mapping(
        self,
        mapping: dict[str, Any],
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args: dict = {"index": self._get_index_name(index), "body": mapping}
        args.update(kwargs.get("nargs", {}))
        resp = await self.aclient.indices.put_mapping(**args)
        return _response(resp)

    def get_settings(
        self,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args: dict = {"index": self._get_index_name(index)}
        args.update(kwargs.get("nargs", {}))
        resp = self.client.indices.get_settings(**args)
        return _response(resp)

    async def aget_settings(
        self,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args: dict = {"index": self._get_index_name(index)}
        args.update(kwargs.get("nargs", {}))
        resp = await self.aclient.indices.get_settings(**args)
        return _response(resp)

    def put_settings(
        self,
        settings: dict[str, Any],
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        index = self._get_index_name(index)
        args = OperationConverter.convert_put_settings(
            index=index, settings=settings
        )
        args.update(kwargs.get("nargs", {}))
        self.client.indices.close(index=index)
        try:
            resp = self.client.indices.put_settings(**args)
        finally:
            self.client.indices.open(index=index)
        return _response(resp)

    async def aput_settings(
        self,
        settings: dict[str, Any],
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        index = self._get_index_name(index)
        args = OperationConverter.convert_put_settings(
            index=index, settings=settings
        )
        args.update(kwargs.get("nargs", {}))
        await self.aclient.indices.close(index=index)
        try:
            resp = await self.aclient.indices.put_settings(**args)
        finally:
            await self.aclient.indices.open(index=index)
        return _response(resp)

    def add_document(
        self,
        document: dict[str, Any] | DataModel,
        id: str | None = None,
        id_field: str | None = None,
        refresh: RefreshPolicy | bool | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        action, args = OperationConverter.convert_add_document(
            index=self._get_index_name(index),
            document=document,
            id=id,
            id_field=id_field or self.id_field,
            refresh=refresh,
        )
        args.update(kwargs.get("nargs", {}))
        if action == "update":
            resp = self.client.update(**args)
        else:
            resp = self.client.index(**args)
        return _response(resp)

    async def aadd_document(
        self,
        document: dict[str, Any] | DataModel,
        id: str | None = None,
        id_field: str | None = None,
        refresh: RefreshPolicy | bool | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        action, args = OperationConverter.convert_add_document(
            index=self._get_index_name(index),
            document=document,
            id=id,
            id_field=id_field or self.id_field,
            refresh=refresh,
        )
        args.update(kwargs.get("nargs", {}))
        if action == "update":
            resp = await self.aclient.update(**args)
        else:
            resp = await self.aclient.index(**args)
        return _response(resp)

    def add_documents(
        self,
        documents: list[dict[str, Any] | DataModel],
        id_field: str | None = None,
        refresh: RefreshPolicy | bool | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args = OperationConverter.convert_add_documents(
            index=self._get_index_name(index),
            documents=documents,
            id_field=id_field or self.id_field,
            refresh=refresh,
        )
        args.update(kwargs.get("nargs", {}))
        resp = self.client.bulk(**args)
        return _response(resp)

    async def aadd_documents(
        self,
        documents: list[dict[str, Any] | DataModel],
        id_field: str | None = None,
        refresh: RefreshPolicy | bool | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args = OperationConverter.convert_add_documents(
            index=self._get_index_name(index),
            documents=documents,
            id_field=id_field or self.id_field,
            refresh=refresh,
        )
        args.update(kwargs.get("nargs", {}))
        resp = await self.aclient.bulk(**args)
        return _response(resp)

    def delete_document(
        self,
        id: str,
        refresh: RefreshPolicy | bool | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args = OperationConverter.convert_delete_document(
            index=self._get_index_name(index), id=id, refresh=refresh
        )
        args.update(kwargs.get("nargs", {}))
        try:
            resp = self.client.delete(**args)
        except ESNotFoundError as e:
            raise NotFoundError("Document not found.") from e
        return _response(resp)

    async def adelete_document(
        self,
        id: str,
        refresh: RefreshPolicy | bool | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args = OperationConverter.convert_delete_document(
            index=self._get_index_name(index), id=id, refresh=refresh
        )
        args.update(kwargs.get("nargs", {}))
        try:
            resp = await self.aclient.delete(**args)
        except ESNotFoundError as e:
            raise NotFoundError("Document not found.") from e
        return _response(resp)

    def delete_by_query(
        self,
        query: dict[str, Any],
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args: dict = {"index": self._get_index_name(index), "body": query}
        args.update(kwargs.get("nargs", {}))
        resp = self.client.delete_by_query(**args)
        return _response(resp)

    async def adelete_by_query(
        self,
        query: dict[str, Any],
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args: dict = {"index": self._get_index_name(index), "body": query}
        args.update(kwargs.get("nargs", {}))
        resp = await self.aclient.delete_by_query(**args)
        return _response(resp)

    def search(
        self,
        query: dict[str, Any] | None = None,
        source: list[str] | None = None,
        from_: int = 0,
        size: int = 10,
        sort: list[Any] | None = None,
        aggs: dict[str, Any] | None = None,
        scroll: str | None = None,
        search_after: list[Any] | None = None,
        pit: dict[str, Any] | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args = OperationConverter.convert_search(
            index=None if pit else self._get_index_name(index),
            query=query,
            source=source,
            from_=from_,
            size=size,
            sort=sort,
            aggs=aggs,
            scroll=scroll,
            search_after=search_after,
            pit=pit,
        )
        args.update(kwargs.get("nargs", {}))
        resp = self.client.search(**args)
        return _response(resp)

    async def asearch(
        self,
        query: dict[str, Any] | None = None,
        source: list[str] | None = None,
        from_: int = 0,
        size: int = 10,
        sort: list[Any] | None = None,
        aggs: dict[str, Any] | None = None,
        scroll: str | None = None,
        search_after: list[Any] | None = None,
        pit: dict[str, Any] | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args = OperationConverter.convert_search(
            index=None if pit else self._get_index_name(index),
            query=query,
            source=source,
            from_=from_,
            size=size,
            sort=sort,
            aggs=aggs,
            scroll=scroll,
            search_after=search_after,
            pit=pit,
        )
        args.update(kwargs.get("nargs", {}))
        resp = await self.aclient.search(**args)
        return _response(resp)

    def open_point_in_time(
        self,
        keep_alive: str,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args: dict = {
            "index": self._get_index_name(index),
            "keep_alive": keep_alive,
        }
        args.update(kwargs.get("nargs", {}))
        resp = self.client.open_point_in_time(**args)
        return _response(resp)

    async def aopen_point_in_time(
        self,
        keep_alive: str,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args: dict = {
            "index": self._get_index_name(index),
            "keep_alive": keep_alive,
        }
        args.update(kwargs.get("nargs", {}))
        resp = await self.aclient.open_point_in_time(**args)
        return _response(resp)

    def close_point_in_time(
        self,
        id: str,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args: dict = {"id": id}
        args.update(kwargs.get("nargs", {}))
        resp = self.client.close_point_in_time(**args)
        return _response(resp)

    async def aclose_point_in_time(
        self,
        id: str,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args: dict = {"id": id}
        args.update(kwargs.get("nargs", {}))
        resp = await self.aclient.close_point_in_time(**args)
        return _response(resp)

    def scroll(
        self,
        scroll_id: str,
        scroll: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args = OperationConverter.convert_scroll(
            scroll_id=scroll_id, scroll=scroll
        )
        args.update(kwargs.get("nargs", {}))
        resp = self.client.scroll(**args)
        return _response(resp)

    async def ascroll(
        self,
        scroll_id: str,
        scroll: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args = OperationConverter.convert_scroll(
            scroll_id=scroll_id, scroll=scroll
        )
        args.update(kwargs.get("nargs", {}))
        resp = await self.aclient.scroll(**args)
        return _response(resp)

    def clear_scroll(
        self,
        scroll_id: str,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args: dict = {"scroll_id": scroll_id}
        args.update(kwargs.get("nargs", {}))
        resp = self.client.clear_scroll(**args)
        return _response(resp)

    async def aclear_scroll(
        self,
        scroll_id: str,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        args: dict = {"scroll_id": scroll_id}
        args.update(kwargs.get("nargs", {}))
        resp = await self.aclient.clear_scroll(**args)
        return _response(resp)

    def ping(
        self,
        **kwargs: Any,
    ) -> Response[bool]:
        try:
            available = bool(self.client.ping())
        except (ApiError, TransportError) as e:
            logger.warning("Elasticsearch ping failed: %s", e)
            available = False
        return Response(result=available)

    async def aping(
        self,
        **kwargs: Any,
    ) -> Response[bool]:
        try:
            available = bool(await self.aclient.ping())
        except (ApiError, TransportError) as e:
            logger.warning("Elasticsearch ping failed: %s", e)
            available = False
        return Response(result=available)

    def close(
        self,
        **kwargs: Any,
    ) -> Response[None]:
        if self._init:
            self.client.close()
            self._init = False
        return Response(result=None)

    async def aclose(
        self,
        **kwargs: Any,
    ) -> Response[None]:
        if self._ainit:
            await self.aclient.close()
            self._ainit = False
        return Response(result=None)


def _response(resp: Any) -> Response:
    body = Helper.get_body(resp)
    return Response(result=body, native=dict(result=body))


class OperationConverter:
    @staticmethod
    def convert_list_indices(index: str) -> dict:
        return {"index": index, "format": "json"}

    @staticmethod
    def convert_create_index(
        index: str,
        settings: dict[str, Any] | None,
        mappings: dict[str, Any] | None,
    ) -> dict:
        body: dict = {
            "settings": (
                settings if settings else copy.deepcopy(DEFAULT_INDEX_SETTINGS)
            )
        }
        if mappings:
            body["mappings"] = mappings
        return {"index": index, "body": body}

    @staticmethod
    def convert_update_alias(action: str, index: str, alias: str) -> dict:
        return {"actions": [{action: {"index": index, "alias": alias}}]}

    @staticmethod
    def convert_put_settings(
        index: str,
        settings: dict[str, Any],
    ) -> dict:
        body = copy.deepcopy(settings)
        stripped = False
        for key in STATIC_SETTINGS:
            for container in (body, body.get("index")):
                if isinstance(container, dict) and key in container:
                    del container[key]
                    stripped = True
            if f"index.{key}" in body:
                del body[f"index.{key}"]
                stripped = True
        if stripped:
            logger.warning(
                "Static settings %s removed from settings update of %s",
                STATIC_SETTINGS,
                index,
            )
        return {"index": index, "body": body}

    @staticmethod
    def convert_add_document(
        index: str,
        document: dict[str, Any] | DataModel,
        id: str | None,
        id_field: str,
        refresh: RefreshPolicy | bool | None,
    ) -> tuple[str, dict]:
        value = Helper.get_value(document)
        args: dict
        if id:
            action = "update"
            args = {"index": index, "id": id, "doc": value}
        else:
            action = "index"
            args = {
                "index": index,
                "id": Helper.get_id(value, id_field),
                "document": value,
            }
        refresh_value = Helper.get_refresh(refresh)
        if refresh_value is not None:
            args["refresh"] = refresh_value
        return action, args

    @staticmethod
    def convert_add_documents(
        index: str,
        documents: list[dict[str, Any] | DataModel],
        id_field: str,
        refresh: RefreshPolicy | bool | None,
    ) -> dict:
        if not documents:
            raise PreconditionFailedError(
                "An empty documents list was passed to add_documents."
            )
        operations: list[dict] = []
        for document in documents:
            value = Helper.get_value(document)
            operations.append(
                {
                    "index": {
                        "_index": index,
                        "_id": Helper.get_id(value, id_field),
                    }
                }
            )
            operations.append(value)
        args: dict = {"operations": operations}
        refresh_value = Helper.get_refresh(refresh)
        if refresh_value is not None:
            args["refresh"] = refresh_value
        return args

    @staticmethod
    def convert_delete_document(
        index: str,
        id: str,
        refresh: RefreshPolicy | bool | None,
    ) -> dict:
        args: dict = {"index": index, "id": id}
        refresh_value = Helper.get_refresh(refresh)
        if refresh_value is not None:
            args["refresh"] = refresh_value
        return args

    @staticmethod
    def convert_search(
        index: str | None,
        query: dict[str, Any] | None,
        source: list[str] | None,
        from_: int,
        size: int,
        sort: list[Any] | None,
        aggs: dict[str, Any] | None,
        scroll: str | None,
        search_after: list[Any] | None,
        pit: dict[str, Any] | None,
    ) -> dict:
        body: dict = {
            "size": size,
            "sort": sort if sort is not None else list(DEFAULT_SORT),
            "track_total_hits": True,
        }
        if from_:
            body["from"] = from_
        if query:
            body["query"] = query
        if aggs:
            body["aggs"] = aggs
        if source:
            body["_source"] = source
        if search_after:
            body["search_after"] = search_after
        args: dict = {"body": body}
        # A point in time already pins its indices.
        if index is not None:
            args["index"] = index
        if scroll:
            args["scroll"] = scroll
        if pit:
            args["pit"] = pit
        return args

    @staticmethod
    def convert_scroll(scroll_id: str, scroll: str | None) -> dict:
        args: dict = {"scroll_id": scroll_id}
        if scroll:
            args["scroll"] = scroll
        return args
