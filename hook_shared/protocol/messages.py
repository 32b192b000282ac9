from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_HOOK_TYPE, DEFAULT_VERSION, ENCODING
from .errors import InvalidEncoding, MalformedPayload
from .payloads import JsonPayload, TextPayload


class HookFrame(BaseModel):
    """Decoded hook transmission."""

    model_config = ConfigDict(frozen=True)

    version: str = Field(default="", description="Version tag, padding removed")
    hook_type: str = Field(default="", description="Opaque hook type tag, padding removed")
    payload: bytes = Field(default=b"", description="Raw payload bytes")
    data: Any = Field(default=None, description="Parsed JSON payload when decoded as JSON")

    def as_text(self) -> str:
        try:
            return self.payload.decode(ENCODING)
        except UnicodeDecodeError as exc:
            raise InvalidEncoding(f"payload is not valid UTF-8: {exc}") from exc

    def as_json(self) -> Any:
        try:
            return json.loads(self.payload.decode(ENCODING))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise MalformedPayload(f"Decode failed: {exc}") from exc


class HookPacket(BaseModel):
    """Outgoing hook: header tags plus the payload value (text or JSON)."""

    model_config = ConfigDict(frozen=True)

    version: str = DEFAULT_VERSION
    hook_type: str = DEFAULT_HOOK_TYPE
    data: Any = None

    @classmethod
    def from_text(
        cls, text: str, version: str = DEFAULT_VERSION, hook_type: str = DEFAULT_HOOK_TYPE
    ) -> "HookPacket":
        return cls(version=version, hook_type=hook_type, data=TextPayload(text))

    @classmethod
    def from_json(
        cls, value: Any, version: str = DEFAULT_VERSION, hook_type: str = DEFAULT_HOOK_TYPE
    ) -> "HookPacket":
        return cls(version=version, hook_type=hook_type, data=JsonPayload(value))

    def to_bytes(self) -> bytes:
        # framing imports this module for HookFrame
        from .framing import encode_frame

        return encode_frame(self.version, self.hook_type, self.data)


__all__ = ["HookFrame", "HookPacket"]
