# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the table client.

This module contains the foundational components including configuration,
HTTP client, result types, and error handling.
"""

from .config import ServiceConfig
from .constants import HttpStatus
from .errors import DecodeError, TransportError, ValidationError, WamsError
from .http import HttpClient
from .results import DeleteResult, InsertResult, ListResult, OperationResult, UpdateResult

__all__ = [
    "ServiceConfig",
    "HttpStatus",
    "WamsError",
    "TransportError",
    "DecodeError",
    "ValidationError",
    "HttpClient",
    "OperationResult",
    "ListResult",
    "InsertResult",
    "UpdateResult",
    "DeleteResult",
]
