from __future__ import annotations

import logging
import os

import pytest

from hook_client import config


@pytest.fixture(autouse=True)
def _restore_config():
    saved = config.CLIENT_CONFIG.copy()
    root_level = logging.getLogger().level
    yield
    config.CLIENT_CONFIG.clear()
    config.CLIENT_CONFIG.update(saved)
    logging.getLogger().setLevel(root_level)


def test_defaults(tmp_path):
    loaded = config.load_config(str(tmp_path / "missing.env"))
    assert loaded["server_host"] == "127.0.0.1"
    assert loaded["server_port"] == 7070
    assert loaded["version"] == "v1"


def test_env_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("HOOK_CLIENT_SERVER_PORT", "9000")
    monkeypatch.setenv("HOOK_CLIENT_CONNECT_TIMEOUT", "1.5")
    monkeypatch.setenv("HOOK_CLIENT_LOG_LEVEL", "debug")
    loaded = config.load_config(str(tmp_path / "missing.env"))
    assert loaded["server_port"] == 9000
    assert loaded["connect_timeout"] == 1.5
    assert loaded["log_level"] == "DEBUG"
    assert config.get("server_port") == 9000


def test_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("HOOK_CLIENT_HOOK_TYPE", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("HOOK_CLIENT_HOOK_TYPE=deploy\n", encoding="utf-8")
    try:
        assert config.load_config(str(env_file))["hook_type"] == "deploy"
    finally:
        os.environ.pop("HOOK_CLIENT_HOOK_TYPE", None)


@pytest.mark.parametrize(
    "key, value",
    [
        ("HOOK_CLIENT_SERVER_PORT", "70000"),
        ("HOOK_CLIENT_SERVER_PORT", "not-a-port"),
        ("HOOK_CLIENT_CONNECT_TIMEOUT", "0"),
        ("HOOK_CLIENT_VERSION", "v1.0.0"),
        ("HOOK_CLIENT_HOOK_TYPE", "123456789"),
        ("HOOK_CLIENT_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values(tmp_path, monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(config.ConfigError):
        config.load_config(str(tmp_path / "missing.env"))
