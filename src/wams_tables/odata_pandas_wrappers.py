# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Pandas-friendly wrappers around :class:`~wams_tables.client.TableClient`.

These helpers allow using pandas DataFrames / Series / Indexes as inputs and
outputs for the table operations.

Design notes:
* All methods are thin convenience wrappers that iterate row-by-row; every
  row is its own request.
* get_df: runs one list query and returns its records as a DataFrame. The
  outcome of the query is kept in ``DataFrame.attrs``.
* insert_df: inserts one record per row, returning a summary DataFrame with
  per-row success, status, id and error.
* update_df: updates records based on an id column; returns a summary
  DataFrame like insert_df.
* delete_ids: deletes a collection of ids (Series, list, or Index) returning
  a DataFrame summarizing success/failure.

Edge cases & behaviors:
* Empty inputs return empty DataFrames without calling the API.
* Rejected rows are reported in the summary; they never abort the batch.
* Missing (NaN) cells are not sent.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from .client import TableClient
from .utils._pandas import dataframe_to_records, records_to_dataframe

_SUMMARY_COLUMNS = ["success", "status", "id", "error"]


def _normalize_id(value: Any) -> Any:
    """Map a DataFrame id cell back to a record id: NaN/None to None, 1.0 to 1."""
    if value is None or (not isinstance(value, (list, dict)) and pd.isna(value)):
        return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class PandasTableClient:
    """High-level convenience wrapper exposing pandas-friendly methods.

    Parameters
    ----------
    table_client : TableClient
        A configured table client.
    """

    def __init__(self, table_client: TableClient) -> None:
        self._c = table_client

    # ----------------------------- Query ---------------------------------
    def get_df(self, table: str, **query: Any) -> pd.DataFrame:
        """Run a list query and return the page as a DataFrame.

        Parameters
        ----------
        table : str
            Table name.
        **query
            Keyword arguments accepted by :meth:`TableClient.get_records`
            (``filter``, ``skip``, ``top``, ``include_count``, ``order_by``, ``select``).

        Returns
        -------
        pandas.DataFrame
            One row per record; empty when the query failed. ``df.attrs`` holds
            ``success``, ``status``, ``error`` and ``count``.
        """
        result = self._c.get_records(table, **query)
        df = records_to_dataframe(result.records or [])
        df.attrs.update(success=result.success, status=result.status, error=result.error, count=result.count)
        return df

    # ---------------------------- Insert ---------------------------------
    def insert_df(self, table: str, df: pd.DataFrame) -> pd.DataFrame:
        """Insert one record per row and return a per-row summary.

        Parameters
        ----------
        table : str
            Table name.
        df : pandas.DataFrame
            Columns are field names.

        Returns
        -------
        pandas.DataFrame
            Indexed like ``df`` with columns ``success``, ``status``, ``id``, ``error``.
        """
        if not isinstance(df, pd.DataFrame):
            raise TypeError("df must be a pandas DataFrame")
        if df.empty:
            return pd.DataFrame(columns=_SUMMARY_COLUMNS)
        rows: List[Dict[str, Any]] = []
        for record in dataframe_to_records(df):
            result = self._c.insert_record(table, record)
            rows.append({"success": result.success, "status": result.status, "id": result.id, "error": result.error})
        return self._summary(rows, df.index)

    # ---------------------------- Update ---------------------------------
    def update_df(self, table: str, df: pd.DataFrame, id_column: str = "id") -> pd.DataFrame:
        """Update one record per row, taking the record id from ``id_column``.

        Parameters
        ----------
        table : str
            Table name.
        df : pandas.DataFrame
            Must contain ``id_column``; every other non-null cell is sent.
        id_column : str
            Name of the column holding record ids (default ``"id"``).

        Returns
        -------
        pandas.DataFrame
            Indexed like ``df`` with columns ``success``, ``status``, ``id``, ``error``.
            Rows with a missing id are not sent and are reported as failed.

        Raises
        ------
        ValueError
            If ``id_column`` is missing from ``df``.
        """
        if not isinstance(df, pd.DataFrame):
            raise TypeError("df must be a pandas DataFrame")
        if id_column not in df.columns:
            raise ValueError(f"id column '{id_column}' not found in DataFrame")
        if df.empty:
            return pd.DataFrame(columns=_SUMMARY_COLUMNS)
        ids = [_normalize_id(v) for v in df[id_column].tolist()]
        # A frame holding only the id column yields no records; send empty bodies then.
        records = dataframe_to_records(df.drop(columns=[id_column])) or [{} for _ in ids]
        rows: List[Dict[str, Any]] = []
        for record_id, record in zip(ids, records):
            if record_id is None:
                rows.append({"success": False, "status": None, "id": None, "error": f"missing value in '{id_column}'"})
                continue
            result = self._c.update_record(table, record_id, record)
            rows.append({"success": result.success, "status": result.status, "id": result.id, "error": result.error})
        return self._summary(rows, df.index)

    # ---------------------------- Delete ---------------------------------
    def delete_ids(self, table: str, ids: Sequence[Any] | pd.Series | pd.Index) -> pd.DataFrame:
        """Delete a collection of record ids and return a summary DataFrame.

        Parameters
        ----------
        table : str
            Table name.
        ids : sequence | pandas.Series | pandas.Index
            Record ids to delete.

        Returns
        -------
        pandas.DataFrame
            Columns ``id``, ``success``, ``status``, ``error``; one row per id.
        """
        if isinstance(ids, (pd.Series, pd.Index)):
            id_list = list(ids)
        else:
            id_list = list(ids or [])
        if not id_list:
            return pd.DataFrame(columns=["id", "success", "status", "error"])
        rows = []
        for rid in id_list:
            rid = _normalize_id(rid)
            if rid is None:
                rows.append({"id": None, "success": False, "status": None, "error": "missing id"})
                continue
            result = self._c.delete_record(table, rid)
            rows.append({"id": rid, "success": result.success, "status": result.status, "error": result.error})
        return pd.DataFrame(rows, columns=["id", "success", "status", "error"])

    @staticmethod
    def _summary(rows: List[Dict[str, Any]], index: Optional[pd.Index]) -> pd.DataFrame:
        return pd.DataFrame(rows, columns=_SUMMARY_COLUMNS, index=index)
