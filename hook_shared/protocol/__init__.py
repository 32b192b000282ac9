"""
Hook wire protocol: header layout constants, payload types, frame encoding and
decoding, and the error taxonomy shared by senders and receivers.
"""

from .constants import (
    DATA_OFFSET,
    DEFAULT_HOOK_TYPE,
    DEFAULT_VERSION,
    ENCODING,
    HOOK_PORT,
    HOOK_TYPE_WIDTH,
    IDENTITY,
    IDENTITY_WIDTH,
    MAX_FRAME_SIZE,
    VERSION_WIDTH,
)
from .errors import (
    EncodingTooLong,
    ErrorCode,
    FrameTooLarge,
    IdentityMismatch,
    InvalidEncoding,
    MalformedPayload,
    ProtocolError,
    TransportError,
    VersionMismatch,
)
from .framing import async_decode_frame, decode_frame, decode_json_frame, encode_frame, is_hook_frame
from .messages import HookFrame, HookPacket
from .payloads import JsonPayload, Payload, TextPayload, as_payload
from .validator import validate_version

__all__ = [
    "IDENTITY",
    "IDENTITY_WIDTH",
    "VERSION_WIDTH",
    "HOOK_TYPE_WIDTH",
    "DATA_OFFSET",
    "ENCODING",
    "DEFAULT_VERSION",
    "DEFAULT_HOOK_TYPE",
    "HOOK_PORT",
    "MAX_FRAME_SIZE",
    "ErrorCode",
    "ProtocolError",
    "EncodingTooLong",
    "IdentityMismatch",
    "InvalidEncoding",
    "MalformedPayload",
    "VersionMismatch",
    "FrameTooLarge",
    "TransportError",
    "encode_frame",
    "is_hook_frame",
    "decode_frame",
    "decode_json_frame",
    "async_decode_frame",
    "HookFrame",
    "HookPacket",
    "Payload",
    "TextPayload",
    "JsonPayload",
    "as_payload",
    "validate_version",
]
