from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from .constants import ENCODING
from .errors import MalformedPayload


class Payload(ABC):
    """Anything that knows its own wire form."""

    @abstractmethod
    def to_bytes(self) -> bytes:
        ...


@dataclass(frozen=True)
class TextPayload(Payload):
    text: str

    def to_bytes(self) -> bytes:
        return self.text.encode(ENCODING)


@dataclass(frozen=True)
class JsonPayload(Payload):
    value: Any

    def to_bytes(self) -> bytes:
        """Canonical compact JSON text, UTF-8 encoded."""
        try:
            json_str = json.dumps(
                self.value,
                ensure_ascii=False,
                allow_nan=False,
                sort_keys=True,
                separators=(",", ":"),
            )
        except (TypeError, ValueError) as exc:
            raise MalformedPayload(f"Encode failed: {exc}") from exc
        return json_str.encode(ENCODING)


def as_payload(value: Any) -> Payload:
    """Wrap a raw value: str becomes text, anything else a JSON value."""
    if isinstance(value, Payload):
        return value
    if isinstance(value, str):
        return TextPayload(value)
    return JsonPayload(value)


__all__ = ["Payload", "TextPayload", "JsonPayload", "as_payload"]
