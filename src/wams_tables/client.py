# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

import requests

from .core.config import ServiceConfig
from .core.results import DeleteResult, InsertResult, ListResult, UpdateResult
from .odata import ODataClient, QueryOptions


class TableClient:
    """
    High-level client for mobile service tables.

    Each method issues exactly one HTTP request and returns an immutable
    result. A request the service rejects (any status other than the
    operation's success status) comes back as a result with
    ``success=False`` and the body's ``error`` field; it does not raise.

    Only two kinds of failure raise:

    - :class:`~wams_tables.core.errors.TransportError` when no response was received.
    - :class:`~wams_tables.core.errors.DecodeError` when the body cannot be decoded.

    :param config: Connection settings shared by every call.
    :type config: ~wams_tables.core.config.ServiceConfig
    :param session: Optional ``requests.Session`` owned by the caller. The
        client routes requests through it and closes it on :meth:`close`.
    :type session: requests.Session or None

    Example::

        from wams_tables import ServiceConfig, TableClient

        config = ServiceConfig(
            service_url="https://myapp.azure-mobile.net/tables/",
            app_key="<app key>",
            master_key="<master key>",
        )
        with TableClient(config) as client:
            created = client.insert_record("todoitem", {"text": "milk", "complete": False})
            client.update_record("todoitem", created.id, {"complete": True})
            page = client.get_records("todoitem", filter="complete eq true", top=10, include_count=True)
            print(page.count, page.records)
            client.delete_record("todoitem", created.id)
    """

    def __init__(self, config: ServiceConfig, session: Optional[requests.Session] = None) -> None:
        self._config = config
        self._odata = ODataClient(config, session=session)

    @property
    def config(self) -> ServiceConfig:
        return self._config

    def __enter__(self) -> "TableClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the caller-supplied session, if any. Safe to call multiple times."""
        self._odata.close()

    def get_records(
        self,
        table: str,
        filter: Optional[str] = None,
        skip: Optional[int] = None,
        top: Optional[int] = None,
        include_count: bool = False,
        *,
        order_by: Optional[str] = None,
        select: Optional[Union[str, List[str]]] = None,
    ) -> ListResult:
        """
        Get one page of records from a table.

        :param table: Table name, appended to the service URL.
        :type table: str
        :param filter: Optional OData filter, e.g. ``"complete eq false"``. Sent unmodified.
        :type filter: str or None
        :param skip: Number of records to skip.
        :type skip: int or None
        :param top: Number of records to return, or None for the service default.
        :type top: int or None
        :param include_count: Also return the total count of records matching the query.
        :type include_count: bool
        :param order_by: Optional ``$orderby`` expression.
        :type order_by: str or None
        :param select: Optional columns to return.
        :type select: str or list[str] or None

        :return: On 200, the records and the total count (None unless
            ``include_count`` was set and the service returned one). Otherwise
            ``records`` is None, ``count`` is 0 and ``error`` holds the body's
            ``error`` field.
        :rtype: ~wams_tables.core.results.ListResult

        :raises ~wams_tables.core.errors.ValidationError: If ``skip`` or ``top`` is negative.
        """
        options = QueryOptions(
            filter=filter,
            skip=skip,
            top=top,
            include_count=include_count,
            order_by=order_by,
            select=select,
        )
        return self._odata._get_records(table, options)

    def insert_record(self, table: str, record: Any) -> InsertResult:
        """
        Insert a record into a table.

        :param table: Table name.
        :type table: str
        :param record: JSON-serializable record to store.
        :return: ``id`` of the stored record on 201; otherwise ``id`` is None and
            ``error`` holds the body's ``error`` field.
        :rtype: ~wams_tables.core.results.InsertResult

        :raises TypeError: If ``record`` is not JSON-serializable.
        """
        return self._odata._insert(table, record)

    def update_record(self, table: str, record_id: Any, record: Mapping[str, Any]) -> UpdateResult:
        """
        Update a record in a table.

        The outgoing body is a copy of ``record`` with its ``id`` set to
        ``record_id``, so the body always names the record in the URL. The
        caller's mapping is left untouched.

        :param table: Table name.
        :type table: str
        :param record_id: Id of the record to update.
        :param record: Fields to store.
        :type record: dict
        :return: The echoed ``id`` on 200; otherwise ``id`` is None and ``error``
            holds the body's ``error`` field.
        :rtype: ~wams_tables.core.results.UpdateResult
        """
        return self._odata._update(table, record_id, record)

    def delete_record(self, table: str, record_id: Any) -> DeleteResult:
        """
        Delete a record from a table.

        :param table: Table name.
        :type table: str
        :param record_id: Id of the record to delete.
        :return: Success on 204. Otherwise ``error`` holds the body's ``error``
            field, or None when the body is empty.
        :rtype: ~wams_tables.core.results.DeleteResult
        """
        return self._odata._delete(table, record_id)


def initialize(
    url: str,
    app_key: str,
    auth_key: Optional[str] = None,
    master_key: Optional[str] = None,
) -> TableClient:
    """Create a client for the service at ``url``.

    Either ``auth_key`` or ``master_key`` is needed for authenticated tables;
    neither is required here. Each call returns an independent client.
    """
    return TableClient(ServiceConfig(service_url=url, app_key=app_key, auth_key=auth_key, master_key=master_key))
