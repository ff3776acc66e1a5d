"""
ownable.config — address width, storage caps and strictness flags.

This module centralizes configuration for the ownership primitive and its
reference host. It has NO third-party deps and is safe to import very early.

Configuration precedence:
  1) Environment variables (OWNABLE_*)
  2) Hardcoded safe defaults below

Key env vars (case-insensitive where boolean):
  - OWNABLE_STRICT                    (bool)   default: true
  - OWNABLE_ADDRESS_LEN               (int)    default: 32
  - OWNABLE_OWNER_KEY                 (str)    default: access:owner
  - OWNABLE_MAX_STORAGE_KEY_BYTES     (int)    default: 64
  - OWNABLE_MAX_STORAGE_VAL_BYTES     (int)    default: 131_072   (128 KiB)
  - OWNABLE_MAX_EVENTS                (int)    default: 1024

Out-of-range integers are clamped; unparsable values fall back to the default.

Usage:
    from ownable.config import load_config
    CFG = load_config()
    if CFG.strict_mode: ...
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict

# ----------------------------- helpers ---------------------------------------


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    return val in ("1", "true", "t", "yes", "y", "on")


def _env_int(name: str, default: int, *, min_v: int, max_v: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        v = int(raw, 0)
    except ValueError:
        return default
    if v < min_v:
        return min_v
    if v > max_v:
        return max_v
    return v


def _env_key(name: str, default: bytes) -> bytes:
    raw = os.getenv(name)
    if not raw or not raw.strip():
        return default
    return raw.strip().encode("utf-8")


# ------------------------------- config --------------------------------------


@dataclass(frozen=True)
class OwnableConfig:
    # Feature flags
    strict_mode: bool

    # Identifier layout
    address_len: int
    owner_key: bytes

    # Numeric caps enforced by the runtime
    max_storage_key_bytes: int
    max_storage_value_bytes: int
    max_events: int

    @property
    def zero_address(self) -> bytes:
        return b"\x00" * self.address_len

    def as_dict(self) -> Dict[str, Any]:
        return {
            "strict_mode": self.strict_mode,
            "address_len": self.address_len,
            "owner_key": self.owner_key.decode("utf-8", errors="replace"),
            "max_storage_key_bytes": self.max_storage_key_bytes,
            "max_storage_value_bytes": self.max_storage_value_bytes,
            "max_events": self.max_events,
        }


@lru_cache(maxsize=1)
def load_config() -> OwnableConfig:
    """
    Build and cache an OwnableConfig from environment + safe defaults.
    Call ``load_config.cache_clear()`` to re-read the environment.
    """
    return OwnableConfig(
        strict_mode=_env_bool("OWNABLE_STRICT", True),
        address_len=_env_int("OWNABLE_ADDRESS_LEN", 32, min_v=1, max_v=64),
        owner_key=_env_key("OWNABLE_OWNER_KEY", b"access:owner"),
        max_storage_key_bytes=_env_int("OWNABLE_MAX_STORAGE_KEY_BYTES", 64, min_v=1, max_v=256),
        max_storage_value_bytes=_env_int("OWNABLE_MAX_STORAGE_VAL_BYTES", 131_072, min_v=32, max_v=1_048_576),
        max_events=_env_int("OWNABLE_MAX_EVENTS", 1024, min_v=1, max_v=10_000),
    )


__all__ = ["OwnableConfig", "load_config"]
