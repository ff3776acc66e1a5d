"""
ownable.runtime.context — CallEnv handed to every guarded operation.

The host resolves *who* is calling (signature check, session, tx sender...)
and hands the result to the access layer as a plain ``CallEnv``. Nothing in
this package looks the caller up from ambient state; tests construct a
``CallEnv`` directly.

Design notes
------------
- Addresses are raw bytes. Hex strings (with or without "0x") are accepted
  by helpers and normalized to bytes.
- The null identifier is the all-zero address of the configured width; the
  empty byte string is treated the same way by ``is_zero_address``.
- In strict mode the caller must be either empty or exactly
  ``address_len`` bytes long. An empty caller is normalized to the zero
  address so it compares equal to a renounced owner.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from ownable.config import OwnableConfig, load_config

BytesLike = Union[bytes, bytearray, memoryview, str]


# ----------------------------- helpers ----------------------------- #

class ContextError(Exception):
    """Validation or coercion failure for CallEnv / address helpers."""


def _strip_0x(s: str) -> str:
    return s[2:] if s.startswith(("0x", "0X")) else s


def to_bytes(value: BytesLike) -> bytes:
    """
    Coerce `value` to bytes.
    - If str, interpret as hex (with or without '0x'); odd-length hex is rejected.
    - If a bytes-like object, copy to immutable bytes.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        h = _strip_0x(value.strip())
        if len(h) % 2 != 0:
            raise ContextError(f"hex string must have even length, got {len(h)}")
        try:
            return bytes.fromhex(h)
        except ValueError as e:
            raise ContextError(f"invalid hex string: {value!r}") from e
    raise ContextError(f"cannot convert type {type(value).__name__} to bytes")


def to_hex(b: Union[bytes, bytearray, memoryview]) -> str:
    """Encode bytes as 0x-prefixed lowercase hex."""
    return "0x" + bytes(b).hex()


def zero_address(cfg: Optional[OwnableConfig] = None) -> bytes:
    """The null sentinel for the configured address width."""
    return (cfg or load_config()).zero_address


def is_zero_address(addr: Union[bytes, bytearray, memoryview]) -> bool:
    """True for b"" and for any all-zero byte string."""
    return not any(bytes(addr))


# ----------------------------- models ------------------------------ #

@dataclass(frozen=True)
class CallEnv:
    """
    Per-call environment passed to guarded operations.

    Fields
    ------
    caller:  Identifier of whoever invoked the current operation (bytes).
    config:  Width/strictness rules to validate against; the cached
             environment config when omitted.
    """
    caller: bytes
    config: Optional[OwnableConfig] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        caller = to_bytes(self.caller)
        cfg = self.config or load_config()
        object.__setattr__(self, "config", cfg)
        if cfg.strict_mode and len(caller) not in (0, cfg.address_len):
            raise ContextError(
                f"caller must be {cfg.address_len} bytes, got {len(caller)}"
            )
        if len(caller) == 0:
            # unauthenticated / default caller
            caller = cfg.zero_address
        object.__setattr__(self, "caller", caller)

    # ---- constructors ---- #

    @classmethod
    def from_dict(cls, d: Dict[str, Any], config: Optional[OwnableConfig] = None) -> "CallEnv":
        return cls(caller=to_bytes(d.get("caller", b"")), config=config)

    @classmethod
    def from_execution_context(cls, ctx: Any, config: Optional[OwnableConfig] = None) -> "CallEnv":
        """
        Adapter from host transaction/request objects: reads ``caller`` and
        falls back to ``sender``.
        """
        caller = getattr(ctx, "caller", None)
        if caller is None:
            caller = getattr(ctx, "sender")
        return cls(caller=to_bytes(caller), config=config)

    # ---- views ---- #

    def current_caller(self) -> bytes:
        return self.caller

    def to_dict(self) -> Dict[str, Any]:
        return {"caller": to_hex(self.caller)}


__all__ = [
    "BytesLike",
    "ContextError",
    "to_bytes",
    "to_hex",
    "zero_address",
    "is_zero_address",
    "CallEnv",
]
