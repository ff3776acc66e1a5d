# -*- coding: utf-8 -*-
"""
tests.conftest
==============

Pytest fixtures for the ownership primitive and its reference host.

Goals:
- Provide **stable addresses** derived from tags via SHA3 so failures are
  reproducible and readable ("alice", "bob", ...).
- Hand out a fresh backend / sink / Ownable / LocalHost per test; nothing is
  shared across tests.
- Keep the cached configuration honest: any test that changes OWNABLE_* env
  vars uses ``fresh_config`` so the cache is rebuilt before and after.

Usage (inside a test file):
    def test_transfer(ownable, accounts, env_for):
        ownable.initializer(accounts["alice"])
        ownable.transfer_ownership(env_for("alice"), accounts["bob"])
        assert ownable.owner() == accounts["bob"]
"""
from __future__ import annotations

import hashlib
import os
from typing import Callable, Dict

import pytest

from ownable.config import load_config
from ownable.host import LocalHost
from ownable.access import Ownable
from ownable.runtime import CallEnv, EventSink, MemoryBackend

# Keep dict/set hash-iteration stable. (CI may override but local runs benefit.)
os.environ.setdefault("PYTHONHASHSEED", "0")
os.environ.setdefault("TZ", "UTC")

ADDRESS_LEN = 32
ZERO = b"\x00" * ADDRESS_LEN


def det_address(tag: str) -> bytes:
    """Produce a stable 32-byte address from a tag."""
    return hashlib.sha3_256(b"tests-addr-v1|" + tag.encode("utf-8")).digest()


@pytest.fixture
def accounts() -> Dict[str, bytes]:
    return {name: det_address(name) for name in ("alice", "bob", "carol", "dave", "mallory")}


@pytest.fixture
def env_for(accounts) -> Callable[[str], CallEnv]:
    def _make(name: str) -> CallEnv:
        if name == "zero":
            return CallEnv(caller=ZERO)
        return CallEnv(caller=accounts[name])

    return _make


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def sink() -> EventSink:
    return EventSink()


@pytest.fixture
def ownable(backend, sink) -> Ownable:
    return Ownable(backend, sink)


@pytest.fixture
def owned(ownable, accounts) -> Ownable:
    """An Ownable already initialized with alice as owner."""
    ownable.initializer(accounts["alice"])
    return ownable


@pytest.fixture
def host() -> LocalHost:
    return LocalHost()


@pytest.fixture
def fresh_config():
    load_config.cache_clear()
    yield load_config
    load_config.cache_clear()
