# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
HTTP client issuing a single request per call.

This module provides :class:`HttpClient`, a thin wrapper around the requests
library. It applies the configured timeout, optionally routes calls through a
caller-supplied session, and converts network failures into
:class:`~wams_tables.core.errors.TransportError`. Failed requests are never
retried.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from . import error_codes
from .errors import TransportError

logger = logging.getLogger(__name__)


class HttpClient:
    """
    HTTP client with optional timeout and session support.

    :param timeout: Request timeout in seconds. If None, no timeout is passed
        and the transport's own behaviour applies.
    :type timeout: float or None
    :param session: Optional ``requests.Session`` owned by the caller. When
        provided, every request goes through it.
    :type session: requests.Session or None
    """

    def __init__(
        self,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.default_timeout: Optional[float] = timeout
        self._session = session

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Execute one HTTP request.

        :param method: HTTP method (GET, POST, PATCH, DELETE).
        :type method: str
        :param url: Target URL for the request.
        :type url: str
        :param kwargs: Additional arguments passed to ``requests.request()``,
            including headers and json.
        :return: HTTP response object, whatever its status.
        :rtype: requests.Response
        :raises ~wams_tables.core.errors.TransportError: If the request fails
            before a response is received.
        """
        if "timeout" not in kwargs and self.default_timeout is not None:
            kwargs["timeout"] = self.default_timeout

        logger.debug("%s %s", method.upper(), url)
        try:
            if self._session is not None:
                response = self._session.request(method, url, **kwargs)
            else:
                response = requests.request(method, url, **kwargs)
        except requests.exceptions.Timeout as exc:
            raise TransportError(
                f"{method.upper()} {url} timed out", subcode=error_codes.TRANSPORT_TIMEOUT, method=method, url=url
            ) from exc
        except requests.exceptions.ConnectionError as exc:
            raise TransportError(
                f"{method.upper()} {url} failed to connect: {exc}",
                subcode=error_codes.TRANSPORT_CONNECTION,
                method=method,
                url=url,
            ) from exc
        except requests.exceptions.RequestException as exc:
            raise TransportError(
                f"{method.upper()} {url} failed: {exc}", subcode=error_codes.TRANSPORT_OTHER, method=method, url=url
            ) from exc
        logger.debug("%s %s -> %s", method.upper(), url, response.status_code)
        return response

    def close(self) -> None:
        """
        Close the session, if one was supplied. Safe to call multiple times.
        """
        if self._session is not None:
            self._session.close()
            self._session = None
