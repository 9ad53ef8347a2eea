# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import json

import pandas as pd

from wams_tables import ServiceConfig, TableClient
from wams_tables.odata_pandas_wrappers import PandasTableClient
from tests.unit.test_helpers import BASE_URL, DummyHTTPClient


def _pandas_client(responses):
    client = TableClient(ServiceConfig(service_url=BASE_URL, app_key="app-key"))
    http = DummyHTTPClient(responses)
    client._odata._http = http
    return PandasTableClient(client), http


def test_get_df_success():
    pc, _ = _pandas_client([(200, {}, {"results": [{"id": 1, "text": "a"}, {"id": 2, "text": "b"}], "count": 9})])
    df = pc.get_df("todoitem", include_count=True)
    assert list(df["text"]) == ["a", "b"]
    assert df.attrs["success"] is True
    assert df.attrs["count"] == 9


def test_get_df_failure_is_empty_frame():
    pc, _ = _pandas_client([(400, {}, {"error": "bad filter"})])
    df = pc.get_df("todoitem", filter="???")
    assert df.empty
    assert df.attrs["success"] is False
    assert df.attrs["status"] == 400
    assert df.attrs["error"] == "bad filter"


def test_insert_df_summary_and_nan_dropped():
    pc, http = _pandas_client([(201, {}, {"id": 10}), (409, {}, {"error": "dup"})])
    df = pd.DataFrame({"text": ["a", "b"], "priority": [1.0, float("nan")]}, index=["r1", "r2"])
    summary = pc.insert_df("todoitem", df)
    assert list(summary.index) == ["r1", "r2"]
    assert list(summary["success"]) == [True, False]
    assert summary.loc["r1", "id"] == 10
    assert summary.loc["r2", "error"] == "dup"
    assert json.loads(http.calls[1][2]["data"]) == {"text": "b"}


def test_insert_df_empty_makes_no_calls():
    pc, http = _pandas_client([])
    summary = pc.insert_df("todoitem", pd.DataFrame())
    assert summary.empty
    assert http.calls == []


def test_update_df_uses_id_column():
    pc, http = _pandas_client([(200, {}, {"id": 3})])
    df = pd.DataFrame({"id": [3], "complete": [True]})
    summary = pc.update_df("todoitem", df)
    assert bool(summary.loc[0, "success"]) is True
    method, url, kwargs = http.calls[0]
    assert method == "patch"
    assert url == BASE_URL + "todoitem/3"
    assert json.loads(kwargs["data"]) == {"complete": True, "id": 3}


def test_update_df_missing_id_column():
    pc, _ = _pandas_client([])
    try:
        pc.update_df("todoitem", pd.DataFrame({"text": ["a"]}))
    except ValueError as exc:
        assert "id" in str(exc)
    else:
        raise AssertionError("expected ValueError")


def test_delete_ids_summary():
    pc, http = _pandas_client([(204, {}, None), (404, {}, None)])
    summary = pc.delete_ids("todoitem", pd.Series([1, 2]))
    assert list(summary["id"]) == [1, 2]
    assert list(summary["success"]) == [True, False]
    assert summary.loc[1, "error"] is None
    assert [c[1] for c in http.calls] == [BASE_URL + "todoitem/1", BASE_URL + "todoitem/2"]


def test_delete_ids_empty():
    pc, http = _pandas_client([])
    assert pc.delete_ids("todoitem", []).empty
    assert http.calls == []


def test_update_df_missing_id_reported_and_batch_continues():
    pc, http = _pandas_client([(200, {}, {"id": 1}), (200, {}, {"id": 3})])
    df = pd.DataFrame({"id": [1, None, 3], "complete": [True, False, True]})
    summary = pc.update_df("todoitem", df)
    assert list(summary["success"]) == [True, False, True]
    assert pd.isna(summary.loc[1, "status"])
    assert "id" in summary.loc[1, "error"]
    # float-typed id column still produces integer ids on the wire
    assert [c[1] for c in http.calls] == [BASE_URL + "todoitem/1", BASE_URL + "todoitem/3"]
    assert json.loads(http.calls[0][2]["data"]) == {"complete": True, "id": 1}


def test_update_df_id_only_frame_sends_id_body():
    pc, http = _pandas_client([(200, {}, {"id": "a"})])
    summary = pc.update_df("todoitem", pd.DataFrame({"id": ["a"]}))
    assert bool(summary.loc[0, "success"]) is True
    assert json.loads(http.calls[0][2]["data"]) == {"id": "a"}


def test_delete_ids_missing_id_not_sent():
    pc, http = _pandas_client([(204, {}, None)])
    summary = pc.delete_ids("todoitem", pd.Series([2.0, float("nan")]))
    assert list(summary["success"]) == [True, False]
    assert [c[1] for c in http.calls] == [BASE_URL + "todoitem/2"]
