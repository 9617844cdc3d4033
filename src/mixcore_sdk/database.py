"""MixcoreDatabase — CRUD and export against dynamically named databases."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .callbacks import ActionCallback, run_with_callback
from .models import ExportDataResponse, PaginationResult

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from .config import Endpoints
    from .ports import ITransport
    from .query import QueryBuilder

logger = logging.getLogger(__name__)

DataId = int | str


class MixcoreDatabase:
    """
    Row-level access to Mixcore databases ("mix-db").

    Each method addresses a database by its system name.  Query methods
    take a :class:`~mixcore_sdk.query.QueryBuilder`; the database name is
    stamped onto it as ``mixDatabaseName`` just before the request is sent.

    Example:
        ```python
        query = QueryBuilder().default(10).equal("status", "Published")
        page = await client.database.get_data("blog_posts", query)
        for row in page.items:
            ...
        ```
    """

    def __init__(self, transport: ITransport, endpoints: Endpoints) -> None:
        self._transport = transport
        self._endpoints = endpoints

    def _path(self, database_name: str, *parts: object) -> str:
        segments = [self._endpoints.content.mix_db, database_name]
        segments.extend(str(p) for p in parts)
        return "/".join(segments)

    async def get_data(
        self,
        database_name: str,
        query: QueryBuilder,
        callback: ActionCallback[Any] | None = None,
    ) -> PaginationResult[dict[str, Any]]:
        """Return one page of rows matching *query*."""
        query.mix_database_name = database_name
        logger.debug(
            "Filtering %s (%d filters, page %s)",
            database_name,
            len(query.queries),
            query.page_index,
        )
        body = await run_with_callback(
            self._transport.post(self._path(database_name, "filter"), query.to_dict()),
            callback,
            notify_success=False,
        )
        return PaginationResult[dict[str, Any]].model_validate(body or {})

    async def post_data(
        self,
        database_name: str,
        data: Mapping[str, Any],
        data_id: DataId | None = None,
        callback: ActionCallback[Any] | None = None,
    ) -> Any:
        """Create a row, or replace it when *data_id* is given."""
        if data_id is None:
            call = self._transport.post(self._path(database_name), dict(data))
        else:
            call = self._transport.put(
                self._path(database_name), {**data, "id": data_id}
            )
        return await run_with_callback(call, callback)

    async def patch_data(
        self,
        database_name: str,
        data_id: DataId,
        data: Mapping[str, Any],
        callback: ActionCallback[Any] | None = None,
    ) -> Any:
        """Update only the given fields of one row."""
        return await run_with_callback(
            self._transport.patch(self._path(database_name), {**data, "id": data_id}),
            callback,
        )

    async def patch_many_data(
        self,
        database_name: str,
        data: Sequence[Mapping[str, Any]],
        callback: ActionCallback[Any] | None = None,
    ) -> Any:
        """Partially update several rows; each item must carry its ``id``."""
        return await run_with_callback(
            self._transport.patch(
                self._path(database_name, "patch-many"), [dict(d) for d in data]
            ),
            callback,
        )

    async def delete_data(
        self,
        database_name: str,
        data_id: DataId,
        callback: ActionCallback[Any] | None = None,
    ) -> Any:
        return await run_with_callback(
            self._transport.delete(self._path(database_name, data_id)),
            callback,
        )

    async def export_data(
        self,
        database_name: str,
        query: QueryBuilder,
        callback: ActionCallback[Any] | None = None,
    ) -> ExportDataResponse:
        """Export the rows matching *query* as a file."""
        query.mix_database_name = database_name
        body = await run_with_callback(
            self._transport.post(self._path(database_name, "export"), query.to_dict()),
            callback,
            notify_success=False,
        )
        return ExportDataResponse.model_validate(body or {})


__all__: list[str] = ["MixcoreDatabase"]
