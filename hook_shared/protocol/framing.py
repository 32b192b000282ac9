"""
TCP hook frame layout:

    0  - 4   identity bytes (99 99 99 99)
    4  - 8   version, UTF-8, zero padded
    8  - 16  hook type, UTF-8, zero padded
    16 - *   payload (UTF-8 text or JSON text)
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from .constants import (
    DATA_OFFSET,
    ENCODING,
    HOOK_TYPE_OFFSET,
    HOOK_TYPE_WIDTH,
    IDENTITY,
    IDENTITY_WIDTH,
    MAX_FRAME_SIZE,
    PADDING,
    READ_CHUNK_SIZE,
    VERSION_OFFSET,
    VERSION_WIDTH,
)
from .errors import EncodingTooLong, FrameTooLarge, IdentityMismatch, InvalidEncoding
from .messages import HookFrame
from .payloads import as_payload

logger = logging.getLogger(__name__)


def _pad_field(name: str, value: str, width: int) -> bytes:
    raw = value.encode(ENCODING)
    if len(raw) > width:
        raise EncodingTooLong(name, width, len(raw))
    return raw.ljust(width, PADDING)


def _strip_padding(raw: bytes, strip_all_nul: bool) -> bytes:
    if strip_all_nul:
        return raw.replace(PADDING, b"")
    return raw.rstrip(PADDING)


def _text_field(name: str, raw: bytes) -> str:
    try:
        return raw.decode(ENCODING)
    except UnicodeDecodeError as exc:
        raise InvalidEncoding(f"{name} is not valid UTF-8: {exc}") from exc


def encode_frame(version: str, hook_type: str, payload: Any) -> bytes:
    """
    Build the wire bytes for one hook.

    `payload` may be a Payload, a str (sent as UTF-8 text) or any JSON value.
    Header values longer than their field raise EncodingTooLong; nothing is
    truncated.
    """
    version_bytes = _pad_field("version", version, VERSION_WIDTH)
    hook_type_bytes = _pad_field("hook_type", hook_type, HOOK_TYPE_WIDTH)
    return IDENTITY + version_bytes + hook_type_bytes + as_payload(payload).to_bytes()


def is_hook_frame(data: bytes) -> bool:
    """Check if `data` starts with the identity marker."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        return False
    return bytes(data[:IDENTITY_WIDTH]) == IDENTITY


def decode_frame(data: bytes, strip_all_nul: bool = False) -> HookFrame:
    """
    Decode raw bytes into a HookFrame.

    Missing bytes are not an error: a buffer holding only the identity marker
    decodes to empty version, hook type and payload. Trailing zero padding is
    removed from every field; `strip_all_nul=True` instead drops every zero
    byte, matching legacy receivers (payloads then cannot carry NUL).
    """
    if not is_hook_frame(data):
        logger.debug("Rejected buffer without identity marker")
        raise IdentityMismatch(f"Buffer does not start with identity bytes {IDENTITY.hex(' ')}")

    data = bytes(data)
    version_raw = data[VERSION_OFFSET : VERSION_OFFSET + VERSION_WIDTH]
    hook_type_raw = data[HOOK_TYPE_OFFSET : HOOK_TYPE_OFFSET + HOOK_TYPE_WIDTH]
    payload_raw = data[DATA_OFFSET:]

    return HookFrame(
        version=_text_field("version", _strip_padding(version_raw, strip_all_nul)),
        hook_type=_text_field("hook_type", _strip_padding(hook_type_raw, strip_all_nul)),
        payload=_strip_padding(payload_raw, strip_all_nul),
    )


def decode_json_frame(data: bytes, strip_all_nul: bool = False) -> HookFrame:
    """Decode a frame whose payload must be a JSON value; stored on `frame.data`."""
    frame = decode_frame(data, strip_all_nul=strip_all_nul)
    return frame.model_copy(update={"data": frame.as_json()})


async def async_decode_frame(
    reader: asyncio.StreamReader,
    json_payload: bool = False,
    strip_all_nul: bool = False,
    max_size: Optional[int] = MAX_FRAME_SIZE,
) -> HookFrame:
    """
    Read one connection's buffer until EOF and decode it.

    More than `max_size` bytes raises FrameTooLarge; pass None to lift the cap.
    """
    chunks = []
    size = 0
    while True:
        chunk = await reader.read(READ_CHUNK_SIZE)
        if not chunk:
            break
        size += len(chunk)
        if max_size is not None and size > max_size:
            logger.debug("Rejected oversized frame (more than %s bytes)", max_size)
            raise FrameTooLarge(f"Frame exceeds {max_size} bytes")
        chunks.append(chunk)
    data = b"".join(chunks)
    if json_payload:
        return decode_json_frame(data, strip_all_nul=strip_all_nul)
    return decode_frame(data, strip_all_nul=strip_all_nul)


__all__ = [
    "encode_frame",
    "is_hook_frame",
    "decode_frame",
    "decode_json_frame",
    "async_decode_frame",
]
