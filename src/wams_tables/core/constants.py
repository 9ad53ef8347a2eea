# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Constants for the mobile service table endpoints.

These constants define the HTTP statuses, header names and OData system query
options understood by the service.
"""

from enum import IntEnum


class HttpStatus(IntEnum):
    """HTTP statuses the service returns on success."""

    OK = 200
    CREATED = 201
    NOCONTENT = 204


JSON_CONTENT_TYPE = "application/json"

# Credential headers
HEADER_APPLICATION = "X-ZUMO-APPLICATION"
HEADER_AUTH = "X-ZUMO-AUTH"
HEADER_MASTER = "X-ZUMO-MASTER"

# OData system query options
QUERY_FILTER = "$filter"
QUERY_SKIP = "$skip"
QUERY_TOP = "$top"
QUERY_INLINE_COUNT = "$inlinecount"
QUERY_ORDER_BY = "$orderby"
QUERY_SELECT = "$select"

INLINE_COUNT_ALL_PAGES = "allpages"
"""Value of ``$inlinecount`` that asks the service for a total count."""

NO_VALUE = -1
"""Sentinel used by the legacy dict shape for an absent count or id."""
