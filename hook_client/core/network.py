from __future__ import annotations

import logging
import socket
from typing import Any, Dict, Optional, Tuple, Union

from hook_client.config import CLIENT_CONFIG
from hook_shared.protocol.errors import TransportError
from hook_shared.protocol.messages import HookPacket

logger = logging.getLogger(__name__)

Sendable = Union[HookPacket, bytes, bytearray, memoryview]


class HookClient:
    """
    Fire-and-forget TCP sender: one connection, one frame, one close per send.

    Holds nothing but the destination and default header tags, so a single
    instance may be shared between threads.
    """

    def __init__(
        self,
        host: str,
        port: int,
        timeout: Optional[float] = 5.0,
        version: Optional[str] = None,
        hook_type: Optional[str] = None,
    ) -> None:
        self.host = host
        self.port = int(port)
        self.timeout = timeout
        self.version = version if version is not None else CLIENT_CONFIG["version"]
        self.hook_type = hook_type if hook_type is not None else CLIENT_CONFIG["hook_type"]

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None) -> "HookClient":
        config = config or CLIENT_CONFIG
        return cls(
            config["server_host"],
            int(config["server_port"]),
            float(config["connect_timeout"]),
            version=config.get("version"),
            hook_type=config.get("hook_type"),
        )

    @property
    def dest(self) -> Tuple[str, int]:
        return self.host, self.port

    def send(self, packet: Sendable) -> int:
        """
        Open a connection, write the whole frame, close.

        Returns the number of bytes written. Connect/write failures raise
        TransportError chained to the OSError; nothing is retried.
        """
        data = packet.to_bytes() if isinstance(packet, HookPacket) else bytes(packet)
        try:
            with socket.create_connection(self.dest, timeout=self.timeout) as sock:
                written = _write_all(sock, data)
        except OSError as exc:
            logger.warning("Hook send to %s:%s failed: %s", self.host, self.port, exc)
            raise TransportError(f"Send to {self.host}:{self.port} failed: {exc}") from exc
        logger.debug("Sent hook frame to %s:%s (%s bytes)", self.host, self.port, written)
        return written

    def send_text(self, text: str, version: Optional[str] = None, hook_type: Optional[str] = None) -> int:
        return self.send(HookPacket.from_text(text, **self._headers(version, hook_type)))

    def send_json(self, value: Any, version: Optional[str] = None, hook_type: Optional[str] = None) -> int:
        return self.send(HookPacket.from_json(value, **self._headers(version, hook_type)))

    def _headers(self, version: Optional[str], hook_type: Optional[str]) -> Dict[str, str]:
        # "" is a legitimate tag; only None falls back to the client's own
        return {
            "version": version if version is not None else self.version,
            "hook_type": hook_type if hook_type is not None else self.hook_type,
        }


def _write_all(sock: socket.socket, data: bytes) -> int:
    view = memoryview(data)
    written = 0
    while written < len(view):
        sent = sock.send(view[written:])
        if sent == 0:
            raise ConnectionError("socket connection broken")
        written += sent
    return written
