# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured exceptions for the mobile service table client.

Only problems that prevent a response from being understood are raised:
transport failures and undecodable bodies. A completed request whose status
signals failure is reported through the ``success`` flag of the returned
result, never as an exception.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Optional

_BODY_EXCERPT_LIMIT = 200


class WamsError(Exception):
    """Base structured error for the table client."""

    is_transient = False

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat().replace("+00:00", "Z")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "is_transient": self.is_transient,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class ValidationError(WamsError):
    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="validation_error", subcode=subcode, details=details)


class TransportError(WamsError):
    """The request could not be sent or no response was received."""

    is_transient = True

    def __init__(
        self,
        message: str,
        *,
        subcode: Optional[str] = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        d = details or {}
        if method is not None:
            d["method"] = method
        if url is not None:
            d["url"] = url
        super().__init__(
            message,
            code="transport_error",
            subcode=subcode,
            details=d,
        )


class DecodeError(WamsError):
    """The response body is not JSON or does not have the expected shape."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        subcode: Optional[str] = None,
        body: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        d = details or {}
        if body is not None:
            d["body_excerpt"] = body[:_BODY_EXCERPT_LIMIT]
        super().__init__(
            message,
            code="decode_error",
            subcode=subcode,
            status_code=status_code,
            details=d,
        )


__all__ = ["WamsError", "ValidationError", "TransportError", "DecodeError"]
