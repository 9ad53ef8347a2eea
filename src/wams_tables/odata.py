# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Low-level table client: URL shaping, headers, and response mapping.

:class:`ODataClient` turns each table operation into exactly one HTTP request
and maps the response onto a result object from
:mod:`wams_tables.core.results`. Statuses other than the operation's success
status are returned as results with ``success=False``; only transport
failures and undecodable bodies raise.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

import requests

from .core import error_codes
from .core.config import ServiceConfig
from .core.constants import (
    HEADER_APPLICATION,
    HEADER_AUTH,
    HEADER_MASTER,
    INLINE_COUNT_ALL_PAGES,
    JSON_CONTENT_TYPE,
    QUERY_FILTER,
    QUERY_INLINE_COUNT,
    QUERY_ORDER_BY,
    QUERY_SELECT,
    QUERY_SKIP,
    QUERY_TOP,
    HttpStatus,
)
from .core.errors import DecodeError, ValidationError
from .core.http import HttpClient
from .core.results import DeleteResult, InsertResult, ListResult, UpdateResult

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def add_query_param(url: str, name: str, value: Any) -> str:
    """Return ``url`` with ``name=value`` appended as a query parameter.

    The separator is ``?`` when the URL has no query string yet and ``&``
    otherwise. ``value`` is converted with ``str()`` and percent-encoded;
    ``name`` is appended as given.

    >>> add_query_param("https://x/tables/todo", "$top", 5)
    'https://x/tables/todo?$top=5'
    >>> add_query_param("https://x/tables/todo?$top=5", "$filter", "a eq 1")
    'https://x/tables/todo?$top=5&$filter=a%20eq%201'
    """
    sep = "&" if "?" in url else "?"
    return f"{url}{sep}{name}={quote(str(value), safe=_URI_COMPONENT_SAFE)}"


def build_headers(config: ServiceConfig) -> Dict[str, str]:
    """Build the header set sent with every request.

    Credential headers are only added for keys that are set and non-empty. The
    auth token and master key may both be sent; the service decides which one
    applies.
    """
    headers = {
        "Accept": JSON_CONTENT_TYPE,
        "Content-Type": JSON_CONTENT_TYPE,
        HEADER_APPLICATION: config.app_key,
    }
    if config.auth_key:
        headers[HEADER_AUTH] = config.auth_key
    if config.master_key:
        headers[HEADER_MASTER] = config.master_key
    return headers


@dataclass(frozen=True)
class QueryOptions:
    """
    System query options for a list request.

    ``None`` means the option is left out; ``0`` is a real value and is sent.

    :param filter: OData filter expression, passed through unmodified.
    :type filter: str or None
    :param skip: Number of records to skip.
    :type skip: int or None
    :param top: Maximum number of records to return; None for the service default.
    :type top: int or None
    :param include_count: Ask the service for the total count of matching records.
    :type include_count: bool
    :param order_by: OData ``$orderby`` expression, e.g. ``"createdAt desc"``.
    :type order_by: str or None
    :param select: Columns to return, as a comma separated string or a list.
    :type select: str or list[str] or None
    """

    filter: Optional[str] = None
    skip: Optional[int] = None
    top: Optional[int] = None
    include_count: bool = False
    order_by: Optional[str] = None
    select: Any = None

    def validate(self) -> None:
        for name, value, subcode in (
            ("skip", self.skip, error_codes.VALIDATION_NEGATIVE_SKIP),
            ("top", self.top, error_codes.VALIDATION_NEGATIVE_TOP),
        ):
            if value is None:
                continue
            # bool is an int subclass but would be sent as "True"/"False"
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValidationError(
                    f"{name} must be an int, got {type(value).__name__}", subcode=error_codes.VALIDATION_NOT_INT
                )
            if value < 0:
                raise ValidationError(f"{name} must be non-negative, got {value}", subcode=subcode)

    def apply(self, url: str) -> str:
        """Append the present options to ``url``: filter, skip, top, inline count, order, select."""
        self.validate()
        if self.filter is not None:
            url = add_query_param(url, QUERY_FILTER, self.filter)
        if self.skip is not None:
            url = add_query_param(url, QUERY_SKIP, self.skip)
        if self.top is not None:
            url = add_query_param(url, QUERY_TOP, self.top)
        if self.include_count:
            url = add_query_param(url, QUERY_INLINE_COUNT, INLINE_COUNT_ALL_PAGES)
        if self.order_by is not None:
            url = add_query_param(url, QUERY_ORDER_BY, self.order_by)
        if self.select is not None:
            select = self.select if isinstance(self.select, str) else ",".join(self.select)
            url = add_query_param(url, QUERY_SELECT, select)
        return url


class ODataClient:
    """Mobile service table API client: one request per CRUD operation."""

    def __init__(self, config: ServiceConfig, session: Optional[requests.Session] = None) -> None:
        self.config = config
        self._http = HttpClient(timeout=config.http_timeout, session=session)

    def _headers(self) -> Dict[str, str]:
        return build_headers(self.config)

    def _request(self, method: str, url: str, **kwargs):
        return self._http.request(method, url, headers=self._headers(), **kwargs)

    def close(self) -> None:
        self._http.close()

    # ----------------------------- URLs ---------------------------------
    def _table_url(self, table: str) -> str:
        if not isinstance(table, str) or not table:
            raise ValidationError("table is required", subcode=error_codes.VALIDATION_TABLE_EMPTY)
        return f"{self.config.service_url}{table}"

    def _record_url(self, table: str, record_id: Any) -> str:
        return f"{self._table_url(table)}/{record_id}"

    # ---------------------------- Bodies --------------------------------
    @staticmethod
    def _parse_json(response) -> Any:
        """Decode the response body, raising DecodeError when it is not JSON."""
        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(
                f"Response body is not valid JSON (status={response.status_code})",
                status_code=response.status_code,
                subcode=error_codes.DECODE_NOT_JSON,
                body=response.text,
            ) from exc

    @staticmethod
    def _error_field(response, body: Any) -> Any:
        """Return the ``error`` member of an error response body."""
        if not isinstance(body, dict):
            raise DecodeError(
                f"Expected a JSON object in error response (status={response.status_code})",
                status_code=response.status_code,
                subcode=error_codes.DECODE_UNEXPECTED_SHAPE,
                body=response.text,
            )
        return body.get("error")

    @staticmethod
    def _id_field(response, body: Any) -> Any:
        if not isinstance(body, dict):
            raise DecodeError(
                f"Expected a JSON object with an id (status={response.status_code})",
                status_code=response.status_code,
                subcode=error_codes.DECODE_UNEXPECTED_SHAPE,
                body=response.text,
            )
        return body.get("id")

    @staticmethod
    def _log_failure(method: str, url: str, status: int) -> None:
        logger.warning("%s %s returned status %s", method, url, status)

    # ----------------------------- CRUD ---------------------------------
    def _get_records(self, table: str, options: Optional[QueryOptions] = None) -> ListResult:
        """Query a table and return one page of records.

        A 200 response is decoded as the counted envelope ``{"results": [...],
        "count": N}`` first; when the body is not such an envelope it must be a
        bare JSON array, and count is left absent.
        """
        url = (options or QueryOptions()).apply(self._table_url(table))
        r = self._request("get", url)
        body = self._parse_json(r)
        status = r.status_code

        if status != HttpStatus.OK:
            self._log_failure("GET", url, status)
            return ListResult(
                success=False, status=status, error=self._error_field(r, body), records=None, count=0
            )

        if isinstance(body, dict) and "count" in body:
            return ListResult(success=True, status=status, records=body.get("results"), count=body["count"])
        if isinstance(body, list):
            return ListResult(success=True, status=status, records=body, count=None)
        raise DecodeError(
            "Expected a JSON array or a counted envelope in list response",
            status_code=status,
            subcode=error_codes.DECODE_UNEXPECTED_SHAPE,
            body=r.text,
        )

    def _insert(self, table: str, record: Any) -> InsertResult:
        """POST a record; the service answers 201 with the stored record."""
        url = self._table_url(table)
        payload = json.dumps(record)
        r = self._request("post", url, data=payload)
        body = self._parse_json(r)
        status = r.status_code

        if status == HttpStatus.CREATED:
            return InsertResult(success=True, status=status, id=self._id_field(r, body))
        self._log_failure("POST", url, status)
        return InsertResult(success=False, status=status, error=self._error_field(r, body), id=None)

    def _update(self, table: str, record_id: Any, record: Mapping[str, Any]) -> UpdateResult:
        """PATCH a record. The body's ``id`` is forced to ``record_id``."""
        if not isinstance(record, Mapping):
            raise ValidationError(
                "record must be a mapping for update", subcode=error_codes.VALIDATION_RECORD_NOT_DICT
            )
        url = self._record_url(table, record_id)
        changes = dict(record)
        changes["id"] = record_id
        r = self._request("patch", url, data=json.dumps(changes))
        body = self._parse_json(r)
        status = r.status_code

        if status == HttpStatus.OK:
            return UpdateResult(success=True, status=status, id=self._id_field(r, body))
        self._log_failure("PATCH", url, status)
        return UpdateResult(success=False, status=status, error=self._error_field(r, body), id=None)

    def _delete(self, table: str, record_id: Any) -> DeleteResult:
        url = self._record_url(table, record_id)
        r = self._request("delete", url)
        status = r.status_code

        if status == HttpStatus.NOCONTENT:
            return DeleteResult(success=True, status=status)
        self._log_failure("DELETE", url, status)
        # Empty error bodies are common on DELETE; only parse when there is something to parse.
        error = None
        if r.text:
            error = self._error_field(r, self._parse_json(r))
        return DeleteResult(success=False, status=status, error=error)
