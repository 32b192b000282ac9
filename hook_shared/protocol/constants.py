"""Protocol-wide constants describing the hook frame header."""

IDENTITY = b"\x99\x99\x99\x99"
IDENTITY_WIDTH = len(IDENTITY)
VERSION_WIDTH = 1 << 2
HOOK_TYPE_WIDTH = 1 << 3

VERSION_OFFSET = IDENTITY_WIDTH
HOOK_TYPE_OFFSET = VERSION_OFFSET + VERSION_WIDTH
DATA_OFFSET = HOOK_TYPE_OFFSET + HOOK_TYPE_WIDTH  # 16

PADDING = b"\x00"
ENCODING = "utf-8"
MAX_FRAME_SIZE = 1024 * 1024  # upper bound for one received connection
READ_CHUNK_SIZE = 64 * 1024

DEFAULT_VERSION = "v1"
DEFAULT_HOOK_TYPE = "v1"
HOOK_PORT = 7070

__all__ = [
    "IDENTITY",
    "IDENTITY_WIDTH",
    "VERSION_WIDTH",
    "HOOK_TYPE_WIDTH",
    "VERSION_OFFSET",
    "HOOK_TYPE_OFFSET",
    "DATA_OFFSET",
    "PADDING",
    "ENCODING",
    "MAX_FRAME_SIZE",
    "READ_CHUNK_SIZE",
    "DEFAULT_VERSION",
    "DEFAULT_HOOK_TYPE",
    "HOOK_PORT",
]
