from __future__ import annotations

import socket
import threading

import pytest

from hook_client.core import HookClient
from hook_shared.protocol import EncodingTooLong, TransportError, decode_frame, decode_json_frame, encode_frame


class _Listener:
    """Accepts one connection and collects everything until the peer closes."""

    def __init__(self) -> None:
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.sock.bind(("127.0.0.1", 0))
        self.sock.listen(1)
        self.sock.settimeout(5.0)
        self.port = self.sock.getsockname()[1]
        self.received = b""
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    def _serve(self) -> None:
        conn, _ = self.sock.accept()
        with conn:
            chunks = []
            while True:
                chunk = conn.recv(4096)
                if not chunk:
                    break
                chunks.append(chunk)
        self.received = b"".join(chunks)

    def join(self) -> bytes:
        self._thread.join(timeout=5.0)
        self.sock.close()
        return self.received


def _closed_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_send_writes_whole_frame():
    listener = _Listener()
    client = HookClient("127.0.0.1", listener.port, timeout=2.0)
    data = encode_frame("v1", "v1", "x" * 200_000)

    written = client.send(data)

    assert written == len(data)
    assert listener.join() == data


def test_send_json_uses_configured_headers():
    listener = _Listener()
    client = HookClient("127.0.0.1", listener.port, timeout=2.0)

    client.send_json({"status": "done"}, hook_type="build")

    frame = decode_json_frame(listener.join())
    assert frame.version == "v1"
    assert frame.hook_type == "build"
    assert frame.data == {"status": "done"}


def test_send_text():
    listener = _Listener()
    HookClient("127.0.0.1", listener.port, timeout=2.0).send_text("ping")
    assert decode_frame(listener.join()).as_text() == "ping"


def test_send_to_closed_port_raises_transport_error():
    client = HookClient("127.0.0.1", _closed_port(), timeout=1.0)
    with pytest.raises(TransportError) as excinfo:
        client.send(encode_frame("v1", "v1", "lost"))
    assert isinstance(excinfo.value.__cause__, OSError)


def test_encoding_errors_are_not_transport_errors():
    client = HookClient("127.0.0.1", _closed_port(), timeout=1.0)
    with pytest.raises(EncodingTooLong):
        client.send_text("payload", hook_type="far-too-long")


def test_from_config():
    client = HookClient.from_config(
        {"server_host": "10.0.0.5", "server_port": "7171", "connect_timeout": 0.5}
    )
    assert client.dest == ("10.0.0.5", 7171)
    assert client.timeout == 0.5


def test_from_config_headers_used_by_send_text():
    listener = _Listener()
    client = HookClient.from_config(
        {
            "server_host": "127.0.0.1",
            "server_port": listener.port,
            "connect_timeout": 2.0,
            "version": "v2",
            "hook_type": "deploy",
        }
    )

    client.send_text("x")

    frame = decode_frame(listener.join())
    assert (frame.version, frame.hook_type) == ("v2", "deploy")


def test_constructor_headers_used_by_send_json():
    listener = _Listener()
    HookClient("127.0.0.1", listener.port, timeout=2.0, version="v3", hook_type="alert").send_json([1])

    frame = decode_json_frame(listener.join())
    assert (frame.version, frame.hook_type, frame.data) == ("v3", "alert", [1])


def test_empty_header_overrides_are_sent_as_empty():
    listener = _Listener()
    client = HookClient("127.0.0.1", listener.port, timeout=2.0, version="v2", hook_type="deploy")

    client.send_text("x", version="", hook_type="")

    frame = decode_frame(listener.join())
    assert (frame.version, frame.hook_type) == ("", "")
