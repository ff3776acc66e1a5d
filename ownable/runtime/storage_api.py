"""
ownable.runtime.storage_api — host storage for the owner field.

Design goals
------------
- Deterministic: pure functions over (key, value) with no wall-clock or I/O.
- Simple default: in-process memory backend for local runs & tests.
- Pluggable: a tiny backend interface so the host can swap in a real state DB.
- Explicit: no module-level store; every ``OwnerSlot`` is bound to the
  backend it was constructed with.

Public API
----------
- StorageBackend                 (protocol: get/set/delete/exists)
- MemoryBackend                  (thread-safe dict-backed implementation)
- OwnerSlot(backend, key=None)   (the single owner cell: read()/write())

Length caps are read from ownable.config.
"""

from __future__ import annotations

import threading
from typing import Dict, Optional, Protocol, runtime_checkable

from ownable.config import OwnableConfig, load_config

from .error import VmError

# ---------------------------- Backend API ---------------------------- #


@runtime_checkable
class StorageBackend(Protocol):
    """Minimal backend interface for host storage."""

    def get(self, key: bytes) -> Optional[bytes]: ...
    def set(self, key: bytes, value: bytes) -> None: ...
    def delete(self, key: bytes) -> None: ...
    def exists(self, key: bytes) -> bool: ...


class MemoryBackend:
    """Thread-safe in-memory backend for local runs and tests."""

    def __init__(self) -> None:
        self._store: Dict[bytes, bytes] = {}
        self._lock = threading.RLock()

    def get(self, key: bytes) -> Optional[bytes]:
        with self._lock:
            return self._store.get(key)

    def set(self, key: bytes, value: bytes) -> None:
        with self._lock:
            self._store[key] = value

    def delete(self, key: bytes) -> None:
        with self._lock:
            self._store.pop(key, None)

    def exists(self, key: bytes) -> bool:
        with self._lock:
            return key in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)


def check_backend(backend: object) -> StorageBackend:
    """Reject objects that do not provide the StorageBackend methods."""
    for attr in ("get", "set", "delete", "exists"):
        if not callable(getattr(backend, attr, None)):
            raise VmError(
                f"backend missing method: {attr}",
                code="storage_invalid",
                context={"where": "backend", "method": attr},
            )
    return backend  # type: ignore[return-value]


# --------------------------- Validation helpers --------------------------- #


def _check_key(key: bytes, cfg: OwnableConfig) -> bytes:
    if not isinstance(key, (bytes, bytearray)):
        raise VmError("storage key must be bytes", code="storage_invalid", context={"where": "key_type"})
    if len(key) == 0:
        raise VmError("storage key must be non-empty", code="storage_invalid", context={"where": "key_empty"})
    if len(key) > cfg.max_storage_key_bytes:
        raise VmError(
            f"storage key too long (>{cfg.max_storage_key_bytes} bytes)",
            code="storage_invalid",
            context={"where": "key_length", "len": len(key)},
        )
    return bytes(key)


def _check_value(value: bytes, cfg: OwnableConfig) -> bytes:
    if not isinstance(value, (bytes, bytearray)):
        raise VmError("storage value must be bytes", code="storage_invalid", context={"where": "value_type"})
    if len(value) > cfg.max_storage_value_bytes:
        raise VmError(
            f"storage value too large (>{cfg.max_storage_value_bytes} bytes)",
            code="storage_invalid",
            context={"where": "value_length", "len": len(value)},
        )
    return bytes(value)


# ------------------------------ Owner cell ------------------------------ #


class OwnerSlot:
    """
    The single persistent owner field.

    Unset storage reads as the zero address, so a freshly constructed host
    starts in the uninitialized ``Owned(null)`` state.
    """

    def __init__(
        self,
        backend: StorageBackend,
        key: Optional[bytes] = None,
        *,
        config: Optional[OwnableConfig] = None,
    ) -> None:
        self._cfg = config or load_config()
        self._backend = check_backend(backend)
        self._key = _check_key(key if key is not None else self._cfg.owner_key, self._cfg)

    @property
    def key(self) -> bytes:
        return self._key

    @property
    def backend(self) -> StorageBackend:
        return self._backend

    def read(self) -> bytes:
        raw = self._backend.get(self._key)
        if raw is None or len(raw) == 0:
            return self._cfg.zero_address
        return bytes(raw)

    def write(self, owner: bytes) -> None:
        self._backend.set(self._key, _check_value(owner, self._cfg))

    def is_set(self) -> bool:
        return self._backend.exists(self._key)

    def clear(self) -> None:
        """Host rollback helper: forget the stored value entirely."""
        self._backend.delete(self._key)


__all__ = [
    "StorageBackend",
    "MemoryBackend",
    "check_backend",
    "OwnerSlot",
]
