# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared test utilities for unit tests.

Provides a scripted HTTP client and a table client wired to it so tests can
run without network access.
"""

import json
import types

from wams_tables.core.config import ServiceConfig
from wams_tables.odata import ODataClient

BASE_URL = "https://myapp.azure-mobile.net/tables/"


class DummyHTTPClient:
    """Mock HTTP client that returns pre-configured responses.

    Args:
        responses: List of (status_code, headers, body) tuples to return in sequence.
            A dict or list body is JSON encoded; a str body is returned verbatim;
            None means an empty body.

    Attributes:
        calls: List of (method, url, kwargs) tuples recording all requests made.
    """

    def __init__(self, responses):
        self._responses = list(responses)  # Make a copy
        self.calls = []

    def request(self, method, url, **kwargs):
        """Mock HTTP request that returns the next pre-configured response."""
        self.calls.append((method, url, kwargs))
        if not self._responses:
            raise AssertionError("No more dummy responses configured")

        status, headers, body = self._responses.pop(0)
        resp = types.SimpleNamespace()
        resp.status_code = status
        resp.headers = headers
        if body is None:
            resp.text = ""
        elif isinstance(body, str):
            resp.text = body
        else:
            resp.text = json.dumps(body)

        def json_func():
            return json.loads(resp.text)

        resp.json = json_func
        return resp

    def close(self):
        pass


class ScriptedClient(ODataClient):
    """ODataClient with mocked HTTP for testing.

    Args:
        responses: List of (status_code, headers, body) tuples for the mock HTTP client.
        config: Optional config (default: app key and master key against BASE_URL).
    """

    def __init__(self, responses, config=None):
        super().__init__(config or ServiceConfig(service_url=BASE_URL, app_key="app-key", master_key="master-key"))
        self._http = DummyHTTPClient(responses)

    @property
    def calls(self):
        return self._http.calls

    def sent_body(self, index=-1):
        """Decode the JSON body of a recorded request."""
        return json.loads(self._http.calls[index][2]["data"])
