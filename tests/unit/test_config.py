from __future__ import annotations

import pytest

from ownable.config import OwnableConfig


def test_defaults(monkeypatch, fresh_config):
    for var in (
        "OWNABLE_STRICT",
        "OWNABLE_ADDRESS_LEN",
        "OWNABLE_OWNER_KEY",
        "OWNABLE_MAX_STORAGE_KEY_BYTES",
        "OWNABLE_MAX_STORAGE_VAL_BYTES",
        "OWNABLE_MAX_EVENTS",
    ):
        monkeypatch.delenv(var, raising=False)
    fresh_config.cache_clear()

    cfg = fresh_config()
    assert isinstance(cfg, OwnableConfig)
    assert cfg.as_dict() == {
        "strict_mode": True,
        "address_len": 32,
        "owner_key": "access:owner",
        "max_storage_key_bytes": 64,
        "max_storage_value_bytes": 131_072,
        "max_events": 1024,
    }
    assert cfg.zero_address == b"\x00" * 32
    assert fresh_config() is cfg


@pytest.mark.parametrize(
    "raw,expected",
    [("20", 20), ("0x14", 20), ("0", 1), ("1000", 64), ("junk", 32)],
)
def test_address_len_parsing_and_clamping(monkeypatch, fresh_config, raw, expected):
    monkeypatch.setenv("OWNABLE_ADDRESS_LEN", raw)
    fresh_config.cache_clear()
    assert fresh_config().address_len == expected


@pytest.mark.parametrize("raw,expected", [("yes", True), ("ON", True), ("0", False), ("off", False)])
def test_strict_flag(monkeypatch, fresh_config, raw, expected):
    monkeypatch.setenv("OWNABLE_STRICT", raw)
    fresh_config.cache_clear()
    assert fresh_config().strict_mode is expected


def test_owner_key_override(monkeypatch, fresh_config, accounts):
    from ownable.access import Ownable
    from ownable.runtime import EventSink, MemoryBackend

    monkeypatch.setenv("OWNABLE_OWNER_KEY", " app:admin ")
    fresh_config.cache_clear()
    assert fresh_config().owner_key == b"app:admin"

    backend = MemoryBackend()
    o = Ownable(backend, EventSink())
    o.initializer(accounts["alice"])
    assert backend.get(b"app:admin") == accounts["alice"]


def test_narrow_addresses(monkeypatch, fresh_config):
    from ownable.host import LocalHost

    monkeypatch.setenv("OWNABLE_ADDRESS_LEN", "20")
    fresh_config.cache_clear()

    alice, bob = b"\xaa" * 20, b"\xbb" * 20
    host = LocalHost()
    host.deploy(alice)
    host.call(alice, "renounceOwnership")
    assert host.ownable.owner() == b"\x00" * 20
    assert host.events[-1].args == {"previousOwner": alice, "newOwner": b"\x00" * 20}
    assert host.call(bob, "owner") == b"\x00" * 20
