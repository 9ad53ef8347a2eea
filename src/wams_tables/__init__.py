# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Client for Azure Mobile Services tables.

Translates list, insert, update and delete calls against named tables into
single HTTP requests and normalizes the responses into result objects.
"""

import logging

from .__version__ import __version__
from .client import TableClient, initialize
from .core.config import ServiceConfig
from .core.errors import DecodeError, TransportError, ValidationError, WamsError
from .core.results import DeleteResult, InsertResult, ListResult, UpdateResult
from .odata import QueryOptions, add_query_param, build_headers

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "TableClient",
    "initialize",
    "ServiceConfig",
    "QueryOptions",
    "add_query_param",
    "build_headers",
    "WamsError",
    "TransportError",
    "DecodeError",
    "ValidationError",
    "ListResult",
    "InsertResult",
    "UpdateResult",
    "DeleteResult",
]
