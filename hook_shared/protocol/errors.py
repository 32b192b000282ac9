from __future__ import annotations

from enum import IntEnum
from typing import Optional


class ErrorCode(IntEnum):
    """Hook protocol error codes."""

    ENCODING_TOO_LONG = 2001
    IDENTITY_MISMATCH = 2002
    INVALID_ENCODING = 2003
    MALFORMED_PAYLOAD = 2004
    VERSION_MISMATCH = 2005
    TRANSPORT_ERROR = 2006
    FRAME_TOO_LARGE = 2007


class ProtocolError(Exception):
    """Structured hook exception carrying an error code + message."""

    code: ErrorCode

    def __init__(self, message: str = "", code: Optional[ErrorCode] = None) -> None:
        if code is not None:
            self.code = code
        self.message = message
        super().__init__(f"{self.code.name} ({int(self.code)}): {message}")

    def to_payload(self) -> dict:
        """Map error into a dict suitable for logs and reports."""
        return {
            "error_code": int(self.code),
            "error_name": self.code.name,
            "error_message": self.message,
        }


class EncodingTooLong(ProtocolError):
    """A header value does not fit its fixed-width field."""

    code = ErrorCode.ENCODING_TOO_LONG

    def __init__(self, field: str, width: int, size: int) -> None:
        self.field = field
        self.width = width
        self.size = size
        super().__init__(f"{field} is {size} bytes, field width is {width}")


class IdentityMismatch(ProtocolError):
    """Buffer does not start with the hook identity marker."""

    code = ErrorCode.IDENTITY_MISMATCH


class InvalidEncoding(ProtocolError):
    """Field bytes are not valid UTF-8."""

    code = ErrorCode.INVALID_ENCODING


class MalformedPayload(ProtocolError):
    """Payload could not be serialized to, or parsed from, JSON."""

    code = ErrorCode.MALFORMED_PAYLOAD


class VersionMismatch(ProtocolError):
    code = ErrorCode.VERSION_MISMATCH


class FrameTooLarge(ProtocolError):
    """Peer sent more bytes than the receiver accepts for one frame."""

    code = ErrorCode.FRAME_TOO_LARGE


class TransportError(ProtocolError):
    """Connect or write failure; the underlying OSError is chained as __cause__."""

    code = ErrorCode.TRANSPORT_ERROR


__all__ = [
    "ErrorCode",
    "ProtocolError",
    "EncodingTooLong",
    "IdentityMismatch",
    "InvalidEncoding",
    "MalformedPayload",
    "VersionMismatch",
    "FrameTooLarge",
    "TransportError",
]
