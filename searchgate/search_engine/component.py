from __future__ import annotations

from typing import Any

from searchgate.core import Component, DataModel, Response, operation

from ._models import RefreshPolicy


class SearchEngine(Component):
    index: str | None

    def __init__(
        self,
        index: str | None = None,
        **kwargs,
    ):
        """Initialize.

        Args:
            index:
                Default index name.
        """
        self.index = index
        super().__init__(**kwargs)

    @operation()
    def list_indices(
        self,
        index: str = "*",
        **kwargs: Any,
    ) -> Response[list[dict[str, Any]]]:
        """List indices.

        Args:
            index:
                Index name or pattern.

        Returns:
            One row per index with health, status and counts.
        """
        raise NotImplementedError

    @operation()
    def create_index(
        self,
        settings: dict[str, Any] | None = None,
        mappings: dict[str, Any] | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Create index.

        Args:
            settings:
                Index settings. Defaults to a single shard
                without replicas.
            mappings:
                Index mappings.
            index:
                Index name.

        Returns:
            Acknowledgement.

        Raises:
            ConflictError:
                Index already exists.
        """
        raise NotImplementedError

    @operation()
    def delete_index(
        self,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Delete index.

        Args:
            index:
                Index name.

        Returns:
            Acknowledgement.

        Raises:
            NotFoundError:
                Index not found.
        """
        raise NotImplementedError

    @operation()
    def get_alias(
        self,
        alias: str,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Get alias.

        Args:
            alias:
                Alias name.

        Returns:
            Aliases by index name, empty if the alias does not exist.
        """
        raise NotImplementedError

    @operation()
    def add_alias(
        self,
        alias: str,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Add alias to index.

        Args:
            alias:
                Alias name.
            index:
                Index name.

        Returns:
            Acknowledgement.
        """
        raise NotImplementedError

    @operation()
    def remove_alias(
        self,
        alias: str,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Remove alias from index.

        Args:
            alias:
                Alias name.
            index:
                Index name.

        Returns:
            Acknowledgement.
        """
        raise NotImplementedError

    @operation()
    def exists_alias(
        self,
        alias: str,
        **kwargs: Any,
    ) -> Response[bool]:
        """Check if alias exists.

        Args:
            alias:
                Alias name.

        Returns:
            A value indicating whether the alias exists.
        """
        raise NotImplementedError

    @operation()
    def get_mapping(
        self,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Get mapping.

        Args:
            index:
                Index name.

        Returns:
            Mappings by index name.
        """
        raise NotImplementedError

    @operation()
    def put_mapping(
        self,
        mapping: dict[str, Any],
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Put mapping.

        Args:
            mapping:
                Mapping body, for example {"properties": {...}}.
            index:
                Index name.

        Returns:
            Acknowledgement.
        """
        raise NotImplementedError

    @operation()
    def get_settings(
        self,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Get settings.

        Args:
            index:
                Index name.

        Returns:
            Settings by index name.
        """
        raise NotImplementedError

    @operation()
    def put_settings(
        self,
        settings: dict[str, Any],
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Put settings.

        The index is closed for the update and reopened afterwards.
        number_of_shards is never sent.

        Args:
            settings:
                Settings to update.
            index:
                Index name.

        Returns:
            Acknowledgement.
        """
        raise NotImplementedError

    @operation()
    def add_document(
        self,
        document: dict[str, Any] | DataModel,
        id: str | None = None,
        id_field: str | None = None,
        refresh: RefreshPolicy | bool | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Add or update document.

        Without id, the document is indexed under the value
        of its id field. With id, the document is merged into
        the existing document with that id.

        Args:
            document:
                Document.
            id:
                Id of the document to update.
            id_field:
                Field holding the document id. Defaults to "id".
            refresh:
                Refresh policy.
            index:
                Index name.

        Returns:
            Index or update response.

        Raises:
            BadRequestError:
                Document has no id.
        """
        raise NotImplementedError

    @operation()
    def add_documents(
        self,
        documents: list[dict[str, Any] | DataModel],
        id_field: str | None = None,
        refresh: RefreshPolicy | bool | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Add documents in bulk.

        Args:
            documents:
                Documents.
            id_field:
                Field holding the document id. Defaults to "id".
            refresh:
                Refresh policy.
            index:
                Index name.

        Returns:
            Bulk response with per item results.

        Raises:
            PreconditionFailedError:
                No documents were passed.
        """
        raise NotImplementedError

    @operation()
    def delete_document(
        self,
        id: str,
        refresh: RefreshPolicy | bool | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Delete document.

        Args:
            id:
                Document id.
            refresh:
                Refresh policy.
            index:
                Index name.

        Returns:
            Delete response.

        Raises:
            NotFoundError:
                Document not found.
        """
        raise NotImplementedError

    @operation()
    def delete_by_query(
        self,
        query: dict[str, Any],
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Delete documents matching a query.

        Args:
            query:
                Request body, for example {"query": {...}}.
            index:
                Index name.

        Returns:
            Delete by query response.
        """
        raise NotImplementedError

    @operation()
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
        """Search documents.

        Args:
            query:
                Query DSL.
            source:
                Source fields to return.
            from_:
                Offset of the first hit.
            size:
                Number of hits.
            sort:
                Sort. Defaults to relevance score.
            aggs:
                Aggregations.
            scroll:
                Scroll context keep alive, for example "1m".
            search_after:
                Sort values of the last hit of the previous page.
            pit:
                Point in time, for example {"id": ..., "keep_alive": "1m"}.
            index:
                Index name.

        Returns:
            Search response.
        """
        raise NotImplementedError

    @operation()
    def open_point_in_time(
        self,
        keep_alive: str,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Open point in time.

        Args:
            keep_alive:
                Keep alive, for example "1m".
            index:
                Index name.

        Returns:
            Point in time with its id.
        """
        raise NotImplementedError

    @operation()
    def close_point_in_time(
        self,
        id: str,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Close point in time.

        Args:
            id:
                Point in time id.

        Returns:
            Close response.
        """
        raise NotImplementedError

    @operation()
    def scroll(
        self,
        scroll_id: str,
        scroll: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Continue scroll.

        Args:
            scroll_id:
                Scroll id from the previous response.
            scroll:
                New keep alive for the scroll context.

        Returns:
            Search response with the next batch.
        """
        raise NotImplementedError

    @operation()
    def clear_scroll(
        self,
        scroll_id: str,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Clear scroll context.

        Args:
            scroll_id:
                Scroll id.

        Returns:
            Clear scroll response.
        """
        raise NotImplementedError

    @operation()
    def ping(
        self,
        **kwargs: Any,
    ) -> Response[bool]:
        """Check if the engine is reachable.

        Returns:
            A value indicating whether the engine answered.
        """
        raise NotImplementedError

    @operation()
    def close(
        self,
        **kwargs: Any,
    ) -> Response[None]:
        """Close client.

        Returns:
            None.
        """
        raise NotImplementedError

    @operation()
    async def alist_indices(
        self,
        index: str = "*",
        **kwargs: Any,
    ) -> Response[list[dict[str, Any]]]:
        """List indices.

        Args:
            index:
                Index name or pattern.
        """
        raise NotImplementedError

    @operation()
    async def acreate_index(
        self,
        settings: dict[str, Any] | None = None,
        mappings: dict[str, Any] | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Create index.

        Args:
            settings:
                Index settings.
            mappings:
                Index mappings.
            index:
                Index name.

        Returns:
            Acknowledgement.

        Raises:
            ConflictError:
                Index already exists.
        """
        raise NotImplementedError

    @operation()
    async def adelete_index(
        self,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Delete index.

        Args:
            index:
                Index name.

        Raises:
            NotFoundError:
                Index not found.
        """
        raise NotImplementedError

    @operation()
    async def aget_alias(
        self,
        alias: str,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Get alias.

        Args:
            alias:
                Alias name.
        """
        raise NotImplementedError

    @operation()
    async def aadd_alias(
        self,
        alias: str,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Add alias to index.

        Args:
            alias:
                Alias name.
            index:
                Index name.
        """
        raise NotImplementedError

    @operation()
    async def aremove_alias(
        self,
        alias: str,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Remove alias from index.

        Args:
            alias:
                Alias name.
            index:
                Index name.
        """
        raise NotImplementedError

    @operation()
    async def aexists_alias(
        self,
        alias: str,
        **kwargs: Any,
    ) -> Response[bool]:
        """Check if alias exists.

        Args:
            alias:
                Alias name.
        """
        raise NotImplementedError

    @operation()
    async def aget_mapping(
        self,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Get mapping.

        Args:
            index:
                Index name.
        """
        raise NotImplementedError

    @operation()
    async def aput_mapping(
        self,
        mapping: dict[str, Any],
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Put mapping.

        Args:
            mapping:
                Mapping body.
            index:
                Index name.
        """
        raise NotImplementedError

    @operation()
    async def aget_settings(
        self,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Get settings.

        Args:
            index:
                Index name.
        """
        raise NotImplementedError

    @operation()
    async def aput_settings(
        self,
        settings: dict[str, Any],
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Put settings.

        Args:
            settings:
                Settings to update.
            index:
                Index name.
        """
        raise NotImplementedError

    @operation()
    async def aadd_document(
        self,
        document: dict[str, Any] | DataModel,
        id: str | None = None,
        id_field: str | None = None,
        refresh: RefreshPolicy | bool | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Add or update document.

        Args:
            document:
                Document.
            id:
                Id of the document to update.
            id_field:
                Field holding the document id.
            refresh:
                Refresh policy.
            index:
                Index name.

        Raises:
            BadRequestError:
                Document has no id.
        """
        raise NotImplementedError

    @operation()
    async def aadd_documents(
        self,
        documents: list[dict[str, Any] | DataModel],
        id_field: str | None = None,
        refresh: RefreshPolicy | bool | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Add documents in bulk.

        Args:
            documents:
                Documents.
            id_field:
                Field holding the document id.
            refresh:
                Refresh policy.
            index:
                Index name.

        Raises:
            PreconditionFailedError:
                No documents were passed.
        """
        raise NotImplementedError

    @operation()
    async def adelete_document(
        self,
        id: str,
        refresh: RefreshPolicy | bool | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Delete document.

        Args:
            id:
                Document id.
            refresh:
                Refresh policy.
            index:
                Index name.

        Raises:
            NotFoundError:
                Document not found.
        """
        raise NotImplementedError

    @operation()
    async def adelete_by_query(
        self,
        query: dict[str, Any],
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Delete documents matching a query.

        Args:
            query:
                Request body.
            index:
                Index name.
        """
        raise NotImplementedError

    @operation()
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
        """Search documents.

        Args:
            query:
                Query DSL.
            source:
                Source fields to return.
            from_:
                Offset of the first hit.
            size:
                Number of hits.
            sort:
                Sort. Defaults to relevance score.
            aggs:
                Aggregations.
            scroll:
                Scroll context keep alive.
            search_after:
                Sort values of the last hit of the previous page.
            pit:
                Point in time.
            index:
                Index name.
        """
        raise NotImplementedError

    @operation()
    async def aopen_point_in_time(
        self,
        keep_alive: str,
        index: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Open point in time.

        Args:
            keep_alive:
                Keep alive.
            index:
                Index name.
        """
        raise NotImplementedError

    @operation()
    async def aclose_point_in_time(
        self,
        id: str,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Close point in time.

        Args:
            id:
                Point in time id.
        """
        raise NotImplementedError

    @operation()
    async def ascroll(
        self,
        scroll_id: str,
        scroll: str | None = None,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Continue scroll.

        Args:
            scroll_id:
                Scroll id from the previous response.
            scroll:
                New keep alive for the scroll context.
        """
        raise NotImplementedError

    @operation()
    async def aclear_scroll(
        self,
        scroll_id: str,
        **kwargs: Any,
    ) -> Response[dict[str, Any]]:
        """Clear scroll context.

        Args:
            scroll_id:
                Scroll id.
        """
        raise NotImplementedError

    @operation()
    async def aping(
        self,
        **kwargs: Any,
    ) -> Response[bool]:
        """Check if the engine is reachable."""
        raise NotImplementedError

    @operation()
    async def aclose(
        self,
        **kwargs: Any,
    ) -> Response[None]:
        """Close async client.

        Returns:
            None.
        """
        raise NotImplementedError
