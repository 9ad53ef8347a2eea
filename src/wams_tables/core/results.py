# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Result types for table operations.

Every operation returns one of these immutable values, whether or not the
service accepted the request:

- :class:`ListResult`: records returned by a query, with an optional total count
- :class:`InsertResult`: id of an inserted record
- :class:`UpdateResult`: id of an updated record
- :class:`DeleteResult`: outcome of a delete

Absent values (no count requested, no id returned) are ``None``. Call
``to_dict()`` for the legacy dict shape, which encodes them as ``-1``.

Example::

    result = client.insert_record("todoitem", {"text": "milk"})
    if result.success:
        print(result.id)
    else:
        print(result.status, result.error)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional

from .constants import NO_VALUE

if TYPE_CHECKING:
    import pandas as pd


def _or_sentinel(value: Any) -> Any:
    return NO_VALUE if value is None else value


@dataclass(frozen=True)
class OperationResult:
    """
    Fields shared by every result.

    :param success: Whether the service answered with the operation's success status.
    :type success: bool
    :param status: HTTP status code of the response.
    :type status: int
    :param error: The ``error`` field of the response body on failure, if any.
    :type error: Any
    """

    success: bool
    status: int
    error: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {"success": self.success, "status": self.status, "error": self.error}


@dataclass(frozen=True)
class ListResult(OperationResult):
    """
    Result of a list query.

    :param records: Records of the page, or None when the query failed.
    :type records: list or None
    :param count: Total count when requested and returned; None when it was
        not requested; 0 when the query failed.
    :type count: int or None

    The result iterates over its records (nothing when the query failed)::

        for record in client.get_records("todoitem", top=10):
            print(record["text"])
    """

    records: Optional[List[Any]] = None
    count: Optional[int] = None

    def __iter__(self) -> Iterator[Any]:
        return iter(self.records or [])

    def __len__(self) -> int:
        return len(self.records or [])

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["records"] = self.records
        d["count"] = _or_sentinel(self.count)
        return d

    def to_dataframe(self) -> "pd.DataFrame":
        """Return the records as a pandas DataFrame (empty when the query failed)."""
        from ..utils._pandas import records_to_dataframe

        return records_to_dataframe(self.records or [])


@dataclass(frozen=True)
class InsertResult(OperationResult):
    """
    Result of an insert.

    :param id: Id assigned by the service, or None when the insert failed.
    """

    id: Any = None

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["id"] = _or_sentinel(self.id)
        return d


@dataclass(frozen=True)
class UpdateResult(OperationResult):
    """
    Result of an update.

    :param id: Id echoed back by the service, or None when the update failed.
    """

    id: Any = None

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["id"] = _or_sentinel(self.id)
        return d


@dataclass(frozen=True)
class DeleteResult(OperationResult):
    """Result of a delete. Carries only the shared fields."""


__all__ = ["OperationResult", "ListResult", "InsertResult", "UpdateResult", "DeleteResult"]
