# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ServiceConfig:
    """
    Connection settings for a mobile service.

    Construct one instance at startup and hand it to every client that talks to
    the service. Values are not validated; malformed ones surface later as
    failed requests.

    :param service_url: Base URL of the table endpoint, including the trailing
        slash (e.g. ``"https://myapp.azure-mobile.net/tables/"``). Table names
        are appended to it verbatim.
    :type service_url: str
    :param app_key: Application key sent with every request.
    :type app_key: str
    :param auth_key: Authentication token of a signed-in user, if any.
    :type auth_key: str or None
    :param master_key: Service master key, if any.
    :type master_key: str or None
    :param http_timeout: Request timeout in seconds handed to the transport.
        ``None`` leaves timeouts to the transport.
    :type http_timeout: float or None
    """

    service_url: str
    app_key: str
    auth_key: Optional[str] = None
    master_key: Optional[str] = None

    http_timeout: Optional[float] = None

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        """
        Create a configuration from ``WAMS_*`` environment variables.

        ``WAMS_SERVICE_URL`` and ``WAMS_APP_KEY`` default to empty strings.
        ``WAMS_AUTH_KEY``, ``WAMS_MASTER_KEY`` and ``WAMS_HTTP_TIMEOUT`` are
        treated as absent when unset or empty.

        :return: Configuration instance.
        :rtype: ~wams_tables.core.config.ServiceConfig
        :raises ValueError: If ``WAMS_HTTP_TIMEOUT`` is not a number.
        """
        timeout = os.environ.get("WAMS_HTTP_TIMEOUT") or None
        return cls(
            service_url=os.environ.get("WAMS_SERVICE_URL", ""),
            app_key=os.environ.get("WAMS_APP_KEY", ""),
            auth_key=os.environ.get("WAMS_AUTH_KEY") or None,
            master_key=os.environ.get("WAMS_MASTER_KEY") or None,
            http_timeout=float(timeout) if timeout is not None else None,
        )
